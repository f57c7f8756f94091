from .config import TournamentConfig
from .models.tournament import Tournament

__all__ = ["Tournament", "TournamentConfig"]
