from dataclasses import dataclass
from typing import Optional

import pyarrow as pa

from ..exceptions import InvalidSlotError
from .player import Player


def pair_key(player1: Player, player2: Player) -> frozenset:
    """Unordered id pair used for rematch avoidance."""
    return frozenset((player1.id, player2.id))


@dataclass(eq=False)
class Match:
    player1: Optional[Player]
    player2: Optional[Player]
    points1: int = 0
    points2: int = 0

    def _check_slot(self, slot: int):
        if slot not in (0, 1):
            raise InvalidSlotError(f"Match slot must be 0 or 1, got {slot!r}")

    def set_score(self, slot: int, value: int):
        self._check_slot(slot)
        if slot == 0:
            self.points1 = int(value)
        else:
            self.points2 = int(value)

    def get_player(self, slot: int) -> Optional[Player]:
        self._check_slot(slot)
        return self.player1 if slot == 0 else self.player2

    def set_player(self, slot: int, player: Optional[Player]):
        self._check_slot(slot)
        if slot == 0:
            self.player1 = player
        else:
            self.player2 = player

    def get_winner(self) -> Optional[Player]:
        """The player with the strictly higher score, None on a tie."""
        if self.points1 > self.points2:
            return self.player1
        if self.points2 > self.points1:
            return self.player2
        return None

    @property
    def pair_key(self) -> Optional[frozenset]:
        if self.player1 is None or self.player2 is None:
            return None
        return pair_key(self.player1, self.player2)

    @property
    def has_bye(self) -> bool:
        return any(p is not None and p.is_bye for p in (self.player1, self.player2))

    def __str__(self):
        name1 = self.player1.name if self.player1 else ""
        name2 = self.player2.name if self.player2 else ""
        return f"{name1} vs {name2} ({self.points1}:{self.points2})"

    def as_dict(self) -> dict[str, any]:
        winner = self.get_winner()
        return {
            "player1": self.player1.as_dict() if self.player1 else None,
            "player2": self.player2.as_dict() if self.player2 else None,
            "points1": self.points1,
            "points2": self.points2,
            "winner": winner.id if winner else None,
        }

    @property
    def df(self):
        return pa.Table.from_pylist([self.as_dict()])
