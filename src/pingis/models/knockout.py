"""Two-tree single-elimination playoff seeded from the standings.

Each bracket is a fixed quarter/semi/final tree. The advancement map holds
match positions rather than match objects::

    (stage, index) -> (target_stage, target_index, slot)

and is stored in construction order, quarterfinals first, so a single pass
of :func:`update_advancements` already reaches the final.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Tuple

import pyarrow as pa

from ..constants import (
    BRACKET_NAMES,
    BRACKET_SIZE,
    ELIMINATION_FIELD_SIZE,
    FINAL,
    QUARTER_FINALS,
    SEMI_FINALS,
    STAGE_NAMES,
)
from ..utils import pair_consecutively, setup_logger
from .group import standings
from .match import Match
from .player import IdAllocator, Player

logger = setup_logger(__name__)

Position = Tuple[int, int]
Target = Tuple[int, int, int]

ADVANCEMENT: Dict[Position, Target] = {
    (QUARTER_FINALS, 0): (SEMI_FINALS, 0, 0),
    (QUARTER_FINALS, 1): (SEMI_FINALS, 0, 1),
    (QUARTER_FINALS, 2): (SEMI_FINALS, 1, 0),
    (QUARTER_FINALS, 3): (SEMI_FINALS, 1, 1),
    (SEMI_FINALS, 0): (FINAL, 0, 0),
    (SEMI_FINALS, 1): (FINAL, 0, 1),
}


@dataclass
class EliminationBracket:
    name: str
    players: List[Player]
    rounds: List[List[Match]]
    advancement: Dict[Position, Target] = field(default_factory=lambda: dict(ADVANCEMENT))

    @property
    def quarter_finals(self) -> List[Match]:
        return self.rounds[QUARTER_FINALS]

    @property
    def semi_finals(self) -> List[Match]:
        return self.rounds[SEMI_FINALS]

    @property
    def final(self) -> Match:
        return self.rounds[FINAL][0]

    @property
    def matches(self) -> List[Match]:
        return [m for stage in self.rounds for m in stage]

    def match_at(self, stage: int, index: int) -> Match:
        return self.rounds[stage][index]

    def position_of(self, match: Match) -> Optional[Position]:
        for stage, matches in enumerate(self.rounds):
            for index, candidate in enumerate(matches):
                if candidate is match:
                    return stage, index
        return None

    def __contains__(self, match: Match) -> bool:
        return self.position_of(match) is not None

    def links(self) -> Iterator[Tuple[Match, Match, int]]:
        for (stage, index), (target_stage, target_index, slot) in self.advancement.items():
            yield (
                self.match_at(stage, index),
                self.match_at(target_stage, target_index),
                slot,
            )

    @property
    def champion(self) -> Optional[Player]:
        return decided_winner(self.final)

    def as_dict(self):
        return {
            "name": self.name,
            "players": [p.as_dict() for p in self.players],
            "rounds": [
                {"stage": STAGE_NAMES[stage], "matches": [m.as_dict() for m in matches]}
                for stage, matches in enumerate(self.rounds)
            ],
        }

    @property
    def df(self):
        return pa.Table.from_pylist(
            [
                m.as_dict() | {"bracket": self.name, "stage": STAGE_NAMES[stage], "match": index + 1}
                for stage, matches in enumerate(self.rounds)
                for index, m in enumerate(matches)
            ]
        )


def decided_winner(match: Match) -> Optional[Player]:
    """Winner of an elimination match, or None while it is undecided.

    A lone BYE always loses. Otherwise both slots must be filled and the
    scores must differ.
    """
    p1, p2 = match.player1, match.player2
    p1_bye = p1 is not None and p1.is_bye
    p2_bye = p2 is not None and p2.is_bye
    if p1_bye and not p2_bye:
        return p2
    if p2_bye and not p1_bye:
        return p1
    if p1 is None or p2 is None:
        return None
    if match.points1 == match.points2:
        return None
    return match.get_winner()


def _propagate_once(bracket: EliminationBracket) -> int:
    changed = 0
    for source, target, slot in bracket.links():
        winner = decided_winner(source)
        if winner is None:
            continue
        if target.get_player(slot) is not winner:
            target.set_player(slot, winner)
            changed += 1
    return changed


def update_advancements(bracket: EliminationBracket) -> int:
    """Copy every decided winner into its downstream slot until nothing changes.

    Returns the number of slot writes that changed a slot.
    """
    total = 0
    while True:
        changed = _propagate_once(bracket)
        if not changed:
            break
        total += changed
    if total:
        logger.debug(f"Bracket {bracket.name}: {total} slot(s) advanced")
    return total


def auto_advance_byes(bracket: EliminationBracket):
    """Score 1-0 every match with exactly one BYE slot, in favour of the real player."""
    for stage in bracket.rounds:
        for match in stage:
            p1_bye = match.player1 is not None and match.player1.is_bye
            p2_bye = match.player2 is not None and match.player2.is_bye
            if p1_bye != p2_bye:
                match.points1, match.points2 = (0, 1) if p1_bye else (1, 0)


def build_bracket(players: List[Player], name: str, allocator: IdAllocator) -> EliminationBracket:
    """Quarterfinals pair the group consecutively (seed 1 vs 2, 3 vs 4, ...)."""
    quarter_finals = [Match(p1, p2) for p1, p2 in pair_consecutively(players[:BRACKET_SIZE])]
    semi_finals = [
        Match(Player.placeholder(allocator), Player.placeholder(allocator)) for _ in range(2)
    ]
    final = [Match(Player.placeholder(allocator), Player.placeholder(allocator))]
    return EliminationBracket(name, players[:BRACKET_SIZE], [quarter_finals, semi_finals, final])


def build_elimination_phase(players: List[Player], allocator: IdAllocator) -> List[EliminationBracket]:
    if not players:
        logger.info("No players, elimination phase not built")
        return []

    ordered = standings(players)
    while len(ordered) < ELIMINATION_FIELD_SIZE:
        ordered.append(Player.bye(allocator))

    brackets = []
    for i, name in enumerate(BRACKET_NAMES):
        group = ordered[i * BRACKET_SIZE:(i + 1) * BRACKET_SIZE]
        bracket = build_bracket(group, name, allocator)
        auto_advance_byes(bracket)
        update_advancements(bracket)
        brackets.append(bracket)

    excluded = len(players) - min(len(players), ELIMINATION_FIELD_SIZE)
    logger.info(
        f"Elimination phase built: brackets {', '.join(BRACKET_NAMES)}, {excluded} player(s) excluded"
    )
    return brackets
