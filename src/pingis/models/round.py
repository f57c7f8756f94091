from dataclasses import dataclass
from typing import Iterator, List, Optional

import pyarrow as pa

from .match import Match
from .player import Player


@dataclass
class Round:
    number: int
    matches: List[Match]
    name: Optional[str] = None

    def __post_init__(self):
        if self.name is None:
            self.name = f"Round {self.number}"

    @classmethod
    def from_pairs(cls, number: int, pairs: List[tuple[Player, Player]]) -> "Round":
        return cls(number, [Match(p1, p2) for p1, p2 in pairs])

    @property
    def pairs(self) -> Iterator[frozenset]:
        for match in self.matches:
            if match.pair_key is not None:
                yield match.pair_key

    @property
    def players(self) -> List[Player]:
        return [p for m in self.matches for p in (m.player1, m.player2) if p is not None]

    def settle(self):
        """Add every recorded score to the matching player's total."""
        for match in self.matches:
            if match.player1 is not None:
                match.player1.total_points += match.points1
            if match.player2 is not None:
                match.player2.total_points += match.points2

    def as_dict(self):
        return {
            "number": self.number,
            "name": self.name,
            "matches": [m.as_dict() for m in self.matches],
        }

    @property
    def df(self):
        return pa.Table.from_pylist([m.as_dict() | {"round": self.number} for m in self.matches])
