from typing import Iterable, List, Optional

from ..constants import MAX_PLAYERS, MIN_PLAYERS
from ..exceptions import PlayerSetupError
from ..utils import setup_logger
from .player import IdAllocator, Player

logger = setup_logger(__name__)


def clean_names(lines: Optional[Iterable[str]]) -> List[str]:
    """Trim every line and drop the blank ones."""
    if not lines:
        return []
    return [name for name in ((line or "").strip() for line in lines) if name]


def default_player_names(count: int) -> List[str]:
    return [str(i + 1) for i in range(count)]


def clamp_player_count(count: int) -> int:
    return max(MIN_PLAYERS, min(MAX_PLAYERS, count))


def validate_player_setup(count: int, lines: Optional[Iterable[str]]) -> List[str]:
    """Check a setup request and return the cleaned names.

    Raises:
        PlayerSetupError: if the count is out of range or the number of
            non-blank names differs from the requested count.
    """
    if not MIN_PLAYERS <= count <= MAX_PLAYERS:
        raise PlayerSetupError(
            f"The number of players must be between {MIN_PLAYERS} and {MAX_PLAYERS}, got {count}.",
            players_count=count,
        )
    names = clean_names(lines)
    if len(names) != count:
        raise PlayerSetupError(
            f"The number of names entered ({len(names)}) must match the number of players ({count}).\n"
            "Adjust the player count or the list of names before continuing.",
            names_count=len(names),
            players_count=count,
        )
    return names


class PlayerRegistry:
    """Owns the roster and the id allocator shared by every player of a session."""

    def __init__(self, allocator: IdAllocator | None = None):
        self.allocator = allocator or IdAllocator()
        self.players: List[Player] = []

    def __len__(self):
        return len(self.players)

    def __iter__(self):
        return iter(self.players)

    def create_players(
        self, count: int, names: Optional[Iterable[str]] = None
    ) -> List[Player]:
        """Replace the roster with ``count`` fresh players.

        Supplied names are trimmed, blanks dropped, and the first ``count``
        used verbatim; the shortfall is filled with 1-based positions.
        """
        cleaned = clean_names(names)[:count]
        self.players = [
            Player.create(self.allocator, cleaned[i] if i < len(cleaned) else str(i + 1))
            for i in range(count)
        ]
        logger.info(
            f"Created roster of {count} players ({len(cleaned)} named, {count - len(cleaned)} positional)"
        )
        return self.players

    def find(self, player_id: int) -> Optional[Player]:
        for player in self.players:
            if player.id == player_id:
                return player
        return None
