import logging
import random

from pingis.simulation import generate_sample_names, simulate_elimination, simulate_round
from pingis import Tournament, TournamentConfig


def simulate_tournament():
    rng = random.Random(2023)
    tournament = Tournament(TournamentConfig(name="Sommarturneringen 2023", num_players=12, seed=2023))
    tournament.setup(12, generate_sample_names(12, rng))

    for _ in range(4):
        round = tournament.current_round
        simulate_round(tournament, round, rng)
        print(f"\n{round.name}:")
        for match in round.matches:
            print(f"  {match}")
        tournament.create_next_round()

    print("\nStandings:")
    print(tournament.standings_df())

    print("\nElimination phase:")
    for bracket in tournament.build_elimination_phase():
        simulate_elimination(tournament, bracket, rng)
        print(f"\n{bracket.name} Bracket:")
        for stage in bracket.rounds:
            for match in stage:
                print(f"  {match}")
        winner = bracket.champion
        print(f"Winner: {winner.name if winner else '-'}")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    simulate_tournament()
