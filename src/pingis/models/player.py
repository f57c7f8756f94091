from dataclasses import dataclass

from munch import munchify

from ..constants import BYE_NAME, PLACEHOLDER_NAME


class IdAllocator:
    """Hands out strictly increasing player ids for one tournament session."""

    def __init__(self, start: int = 1):
        self._next_id = start

    def next_id(self) -> int:
        player_id = self._next_id
        self._next_id += 1
        return player_id


@dataclass
class Player:
    id: int
    name: str
    rating: int = 0
    total_points: int = 0

    @classmethod
    def create(cls, allocator: IdAllocator, name: str, rating: int = 0) -> "Player":
        return cls(allocator.next_id(), name, rating)

    @classmethod
    def bye(cls, allocator: IdAllocator) -> "Player":
        return cls.create(allocator, BYE_NAME)

    @classmethod
    def placeholder(cls, allocator: IdAllocator) -> "Player":
        return cls.create(allocator, PLACEHOLDER_NAME)

    @property
    def is_bye(self) -> bool:
        return self.name == BYE_NAME

    @property
    def is_placeholder(self) -> bool:
        return self.name == PLACEHOLDER_NAME

    def __str__(self):
        return f"{self.name} (Points: {self.total_points})"

    def as_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "rating": self.rating,
            "total points": self.total_points,
        }

    def munchify(self):
        return munchify(self.as_dict())

    @classmethod
    def from_dict(cls, data):
        return cls(
            data["id"],
            data["name"],
            data.get("rating", 0),
            data.get("total points", 0),
        )
