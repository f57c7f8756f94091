import random
from typing import List, Optional, Set

import polars as pl

from ..constants import BRACKET_NAMES, BRACKET_SIZE, ELIMINATION_FIELD_SIZE, MAX_PAIRING_ATTEMPTS
from ..utils import pair_consecutively, setup_logger, shuffle
from .match import Match, pair_key
from .player import IdAllocator, Player
from .round import Round

logger = setup_logger(__name__)


def standings(players: List[Player]) -> List[Player]:
    """Players by accumulated points, highest first, ties broken by name."""
    return sorted(players, key=lambda p: (-p.total_points, p.name))


def standings_df(players: List[Player], cut: int = ELIMINATION_FIELD_SIZE) -> pl.DataFrame:
    rows = []
    for rank, player in enumerate(standings(players), start=1):
        bracket = None
        if rank <= cut:
            bracket = BRACKET_NAMES[min((rank - 1) // BRACKET_SIZE, len(BRACKET_NAMES) - 1)]
        rows.append(
            {
                "rank": rank,
                "id": player.id,
                "name": player.name,
                "total_points": player.total_points,
                "qualified": rank <= cut,
                "bracket": bracket,
            }
        )
    return pl.DataFrame(
        rows,
        schema={
            "rank": pl.Int64,
            "id": pl.Int64,
            "name": pl.Utf8,
            "total_points": pl.Int64,
            "qualified": pl.Boolean,
            "bracket": pl.Utf8,
        },
    )


class RoundRobinGroup:
    """Round-robin phase: random pairings that avoid rematches.

    ``rounds[0]`` is always the current round; new rounds are inserted at
    the front and older ones are kept for rematch tracking.
    """

    def __init__(
        self,
        players: List[Player],
        allocator: IdAllocator,
        rng: Optional[random.Random] = None,
        max_attempts: int = MAX_PAIRING_ATTEMPTS,
    ):
        self.players = players
        self.allocator = allocator
        self.rng = rng or random.Random()
        self.max_attempts = max_attempts
        self.rounds: List[Round] = []

    @property
    def current_round(self) -> Optional[Round]:
        return self.rounds[0] if self.rounds else None

    @property
    def current_round_number(self) -> int:
        return len(self.rounds)

    @property
    def matches(self) -> List[Match]:
        return [m for r in self.rounds for m in r.matches]

    @property
    def played_pairs(self) -> Set[frozenset]:
        return {key for r in self.rounds for key in r.pairs}

    @property
    def matches_df(self) -> pl.DataFrame:
        if not self.matches:
            return pl.DataFrame()
        rows = []
        for r in self.rounds:
            for m in r.matches:
                rows.append(
                    {
                        "round": r.number,
                        "player1_id": m.player1.id if m.player1 else None,
                        "player1": m.player1.name if m.player1 else None,
                        "points1": m.points1,
                        "player2_id": m.player2.id if m.player2 else None,
                        "player2": m.player2.name if m.player2 else None,
                        "points2": m.points2,
                    }
                )
        return pl.DataFrame(rows)

    def _participants(self, players: List[Player]) -> List[Player]:
        participants = players[:]
        if len(participants) % 2 == 1:
            participants.append(Player.bye(self.allocator))
        return participants

    def _add_round(self, pairs: List[tuple[Player, Player]]) -> Round:
        new_round = Round.from_pairs(self.current_round_number + 1, pairs)
        self.rounds.insert(0, new_round)
        return new_round

    def create_start_round(self) -> Round:
        players = shuffle(self.players[:], self.rng)
        participants = self._participants(players)
        new_round = self._add_round(pair_consecutively(participants))
        logger.info(f"{new_round.name}: {len(new_round.matches)} matches")
        return new_round

    def _try_pairing(
        self, working: List[Player], played: Set[frozenset]
    ) -> Optional[List[tuple[Player, Player]]]:
        shuffle(working, self.rng)
        pairs = []
        for i in range(0, len(working), 2):
            p1 = working[i]
            if pair_key(p1, working[i + 1]) in played:
                for k in range(i + 2, len(working)):
                    if pair_key(p1, working[k]) not in played:
                        working[i + 1], working[k] = working[k], working[i + 1]
                        break
                else:
                    return None
            pairs.append((p1, working[i + 1]))
        return pairs

    def generate_pairings(
        self, participants: List[Player], played: Set[frozenset]
    ) -> List[tuple[Player, Player]]:
        """Randomised pairing that avoids ``played``, with a plain fallback."""
        working = participants[:]
        for attempt in range(self.max_attempts):
            pairs = self._try_pairing(working, played)
            if pairs is not None:
                logger.debug(f"Rematch-free pairing found on attempt {attempt + 1}")
                return pairs

        logger.warning(
            f"No rematch-free pairing after {self.max_attempts} attempts, pairing in roster order"
        )
        return pair_consecutively(participants)

    def create_next_round(self) -> Optional[Round]:
        """Settle the current round and pair the next one.

        Call once per transition; calling again settles the new round too.
        """
        current = self.current_round
        if current is None:
            logger.info("No current round, nothing to advance")
            return None

        current.settle()

        participants = self._participants(self.players)
        pairs = self.generate_pairings(participants, self.played_pairs)
        new_round = self._add_round(pairs)
        logger.info(f"{new_round.name}: {len(new_round.matches)} matches")
        return new_round
