import random
from dataclasses import replace
from typing import Iterable, List, Optional

import polars as pl

from ..config import TournamentConfig
from ..constants import PHASE_ELIMINATION, PHASE_ROUND_ROBIN
from ..exceptions import UnknownMatchError
from ..utils import setup_logger
from .group import RoundRobinGroup, standings, standings_df
from .knockout import EliminationBracket, build_elimination_phase, update_advancements
from .match import Match
from .player import Player
from .roster import PlayerRegistry, validate_player_setup
from .round import Round

logger = setup_logger(__name__)


class Tournament:
    """One running tournament session: roster, round history and playoff."""

    def __init__(
        self, config: Optional[TournamentConfig] = None, rng: Optional[random.Random] = None
    ):
        self.config = replace(config) if config else TournamentConfig()
        self.name = self.config.name
        self.rng = rng or random.Random(self.config.seed)
        self.registry = PlayerRegistry()
        self.group = self._new_group()
        self.brackets: List[EliminationBracket] = []
        self.phase = PHASE_ROUND_ROBIN

    def _new_group(self) -> RoundRobinGroup:
        return RoundRobinGroup(
            self.registry.players,
            self.registry.allocator,
            self.rng,
            self.config.max_pairing_attempts,
        )

    @property
    def players(self) -> List[Player]:
        return self.registry.players

    @property
    def rounds(self) -> List[Round]:
        return self.group.rounds

    @property
    def current_round(self) -> Optional[Round]:
        return self.group.current_round

    def setup(self, count: int, lines: Optional[Iterable[str]]) -> List[Player]:
        """Validate a setup request, then start a fresh tournament with it.

        On a :class:`PlayerSetupError` nothing is changed.
        """
        names = validate_player_setup(count, lines)
        self.config.num_players = count
        return self.start(names)

    def start(self, names: Optional[Iterable[str]] = None) -> Round:
        self.create_players(self.config.num_players, names)
        return self.create_start_round()

    def create_players(self, count: int, names: Optional[Iterable[str]] = None) -> List[Player]:
        players = self.registry.create_players(count, names)
        self.group = self._new_group()
        self.brackets = []
        self.phase = PHASE_ROUND_ROBIN
        return players

    def rename_player(self, player: Player, name: str):
        player.name = name

    def create_start_round(self) -> Round:
        return self.group.create_start_round()

    def create_next_round(self) -> Optional[Round]:
        return self.group.create_next_round()

    def standings(self) -> List[Player]:
        return standings(self.players)

    def standings_df(self) -> pl.DataFrame:
        return standings_df(self.players)

    def build_elimination_phase(self) -> List[EliminationBracket]:
        if not self.players:
            logger.info("No roster, elimination phase not built")
            return self.brackets
        self.brackets = build_elimination_phase(self.players, self.registry.allocator)
        self.phase = PHASE_ELIMINATION
        return self.brackets

    def show_round_robin(self):
        """Leave the playoff view; brackets stay as they are."""
        self.phase = PHASE_ROUND_ROBIN

    def bracket_of(self, match: Match) -> Optional[EliminationBracket]:
        for bracket in self.brackets:
            if match in bracket:
                return bracket
        return None

    def _owns_round_robin_match(self, match: Match) -> bool:
        return any(m is match for m in self.group.matches)

    def set_match_score(self, match: Match, slot: int, value: int):
        """Record a score; playoff matches re-run their bracket's advancement."""
        bracket = self.bracket_of(match)
        if bracket is None and not self._owns_round_robin_match(match):
            raise UnknownMatchError(f"Match {match} is not part of this tournament")

        match.set_score(slot, value)
        if bracket is not None:
            update_advancements(bracket)
