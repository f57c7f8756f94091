import logging
import random
from typing import List, Optional

from ..config import TournamentConfig
from ..models.knockout import EliminationBracket, decided_winner
from ..models.round import Round
from ..models.tournament import Tournament


def generate_sample_names(n: int = 14, rng: Optional[random.Random] = None) -> List[str]:
    """Generate n distinct sample player names."""
    rng = rng or random.Random()
    first_names = ["Anna", "Bo", "Cecilia", "David", "Elsa", "Filip", "Greta", "Hugo",
                   "Ida", "Johan", "Karin", "Lars", "Maja", "Nils", "Olivia", "Per"]
    last_names = ["Andersson", "Berg", "Carlsson", "Dahl", "Ek", "Forsberg", "Gustafsson",
                  "Holm", "Lind", "Nilsson", "Persson", "Svensson"]
    names = []
    while len(names) < n:
        name = f"{rng.choice(first_names)} {rng.choice(last_names)}"
        if name not in names:
            names.append(name)
    return names


def simulate_round(tournament: Tournament, round: Round, rng: random.Random):
    for match in round.matches:
        if match.has_bye:
            continue
        tournament.set_match_score(match, 0, rng.randint(0, 3))
        tournament.set_match_score(match, 1, rng.randint(0, 3))


def simulate_elimination(tournament: Tournament, bracket: EliminationBracket, rng: random.Random):
    # Stage by stage so every match sees its propagated players.
    for stage in bracket.rounds:
        for match in stage:
            if decided_winner(match) is not None:
                continue
            open_slots = [slot for slot in (0, 1) if match.get_player(slot).is_placeholder]
            if len(open_slots) == 2:
                continue
            # An unfilled slot (both feeders were BYEs) forfeits.
            winner_slot = 1 - open_slots[0] if open_slots else rng.randint(0, 1)
            tournament.set_match_score(match, winner_slot, 3)
            tournament.set_match_score(match, 1 - winner_slot, rng.randint(0, 2))


def simulate_tournament(n_players: int = 14, n_rounds: int = 5, seed: Optional[int] = None) -> Tournament:
    """Play a full session with random results and return it."""
    rng = random.Random(seed)
    tournament = Tournament(TournamentConfig(num_players=n_players, seed=seed))
    tournament.setup(n_players, generate_sample_names(n_players, rng))

    for _ in range(n_rounds):
        simulate_round(tournament, tournament.current_round, rng)
        tournament.create_next_round()

    for bracket in tournament.build_elimination_phase():
        simulate_elimination(tournament, bracket, rng)
    return tournament


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    simulate_tournament()
