from dataclasses import dataclass
from typing import Any, Dict, Optional

from .constants import DEFAULT_NUM_PLAYERS, MAX_PAIRING_ATTEMPTS


@dataclass
class TournamentConfig:
    """Tournament configuration settings.

    Attributes
    ----------
    name : str
        Tournament name.
    num_players : int
        Number of players requested at setup.
    max_pairing_attempts : int
        Randomised pairing attempts before falling back to a plain
        consecutive pairing.
    seed : int, optional
        Seed for the pairing random source. ``None`` draws from the OS.
    """

    name: str = "Pingisturnering"
    num_players: int = DEFAULT_NUM_PLAYERS
    max_pairing_attempts: int = MAX_PAIRING_ATTEMPTS
    seed: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "num_players": self.num_players,
            "max_pairing_attempts": self.max_pairing_attempts,
            "seed": self.seed,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TournamentConfig":
        return cls(
            name=data.get("name", "Pingisturnering"),
            num_players=data.get("num_players", DEFAULT_NUM_PLAYERS),
            max_pairing_attempts=data.get(
                "max_pairing_attempts", MAX_PAIRING_ATTEMPTS
            ),
            seed=data.get("seed"),
        )
