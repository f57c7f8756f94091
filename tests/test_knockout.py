import pytest

from pingis.constants import FINAL, QUARTER_FINALS, SEMI_FINALS
from pingis.models.group import standings
from pingis.models.knockout import (
    build_elimination_phase,
    decided_winner,
    update_advancements,
)
from pingis.models.match import Match
from pingis.models.player import Player


def snapshot(bracket):
    return [
        (m.player1.id if m.player1 else None, m.player2.id if m.player2 else None, m.points1, m.points2)
        for m in bracket.matches
    ]


@pytest.fixture
def full_field(make_players, allocator):
    players = make_players(16, points=list(range(16, 0, -1)))
    return players, build_elimination_phase(players, allocator)


def test_seeding_splits_top_sixteen(make_players, allocator):
    players = make_players(20, points=[100 - 3 * i for i in range(20)])
    ranked = standings(players)

    bracket_a, bracket_b = build_elimination_phase(players, allocator)

    assert bracket_a.name == "A" and bracket_b.name == "B"
    assert bracket_a.players == ranked[:8]
    assert bracket_b.players == ranked[8:16]
    seeded = {p.id for b in (bracket_a, bracket_b) for m in b.quarter_finals for p in (m.player1, m.player2)}
    assert not seeded & {p.id for p in ranked[16:]}


def test_quarter_finals_pair_consecutive_seeds(full_field):
    players, (bracket_a, _) = full_field
    ranked = standings(players)
    assert [(m.player1, m.player2) for m in bracket_a.quarter_finals] == [
        (ranked[0], ranked[1]),
        (ranked[2], ranked[3]),
        (ranked[4], ranked[5]),
        (ranked[6], ranked[7]),
    ]


def test_stage_shapes_and_placeholders(full_field):
    _, brackets = full_field
    for bracket in brackets:
        assert [len(stage) for stage in bracket.rounds] == [4, 2, 1]
        for match in bracket.semi_finals + [bracket.final]:
            assert match.player1.is_placeholder and match.player2.is_placeholder
            assert match.player1 is not match.player2


def test_advancement_map_is_total_and_flows_downstream(full_field):
    _, (bracket, _) = full_field
    non_final = {(s, i) for s, stage in enumerate(bracket.rounds) for i in range(len(stage)) if s != FINAL}
    assert set(bracket.advancement) == non_final
    for (stage, _), (target_stage, _, slot) in bracket.advancement.items():
        assert target_stage == stage + 1
        assert slot in (0, 1)
    assert bracket.advancement[(QUARTER_FINALS, 2)] == (SEMI_FINALS, 1, 0)
    assert bracket.advancement[(SEMI_FINALS, 1)] == (FINAL, 0, 1)


def test_byes_are_resolved_and_advanced(make_players, allocator):
    players = make_players(7, points=[70, 60, 50, 40, 30, 20, 10])
    bracket_a, bracket_b = build_elimination_phase(players, allocator)

    qf4 = bracket_a.quarter_finals[3]
    assert qf4.player1 is players[6]
    assert qf4.player2.is_bye
    assert (qf4.points1, qf4.points2) == (1, 0)
    assert bracket_a.semi_finals[1].player2 is players[6]

    # Both slots BYE: nothing is decided and the semifinal keeps its placeholder.
    for match in bracket_b.quarter_finals:
        assert match.player1.is_bye and match.player2.is_bye
        assert (match.points1, match.points2) == (0, 0)
    assert all(m.player1.is_placeholder for m in bracket_b.semi_finals)


def test_bye_cascades_to_final(allocator):
    real = Player.create(allocator, "Solo")
    bracket_a, _ = build_elimination_phase([real], allocator)
    assert bracket_a.semi_finals[0].player1 is real
    # SF1 is Solo vs an empty slot, so the final is still open.
    assert bracket_a.final.player1.is_placeholder


def test_lone_bye_loses_regardless_of_score(allocator):
    real = Player.create(allocator, "Ann")
    match = Match(Player.bye(allocator), real, 5, 0)
    assert decided_winner(match) is real


def test_missing_player_is_undecided(allocator):
    assert decided_winner(Match(Player.create(allocator, "Ann"), None, 3, 0)) is None


def test_tie_is_not_advanced(full_field):
    _, (bracket, _) = full_field
    qf1 = bracket.quarter_finals[0]
    qf1.points1, qf1.points2 = 2, 2
    update_advancements(bracket)
    assert bracket.semi_finals[0].player1.is_placeholder


def test_score_change_overwrites_downstream_slot(full_field):
    _, (bracket, _) = full_field
    qf1 = bracket.quarter_finals[0]
    qf1.points1, qf1.points2 = 3, 1
    update_advancements(bracket)
    assert bracket.semi_finals[0].player1 is qf1.player1

    qf1.points1, qf1.points2 = 1, 3
    update_advancements(bracket)
    assert bracket.semi_finals[0].player1 is qf1.player2


def test_propagation_reaches_final_in_one_call(full_field):
    _, (bracket, _) = full_field
    for match in bracket.quarter_finals:
        match.points1 = 3
    for match in bracket.semi_finals + [bracket.final]:
        match.points2 = 3

    update_advancements(bracket)

    qf = bracket.quarter_finals
    assert bracket.semi_finals[0].player2 is qf[1].player1
    assert bracket.final.player1 is qf[1].player1
    assert bracket.final.player2 is qf[3].player1
    assert bracket.champion is qf[3].player1


def test_propagation_is_idempotent(full_field):
    _, (bracket, _) = full_field
    bracket.quarter_finals[0].points1 = 3
    bracket.quarter_finals[1].points2 = 3
    update_advancements(bracket)
    before = snapshot(bracket)

    assert update_advancements(bracket) == 0
    assert snapshot(bracket) == before


def test_empty_roster_builds_nothing(allocator):
    assert build_elimination_phase([], allocator) == []


def test_bracket_export(full_field):
    _, (bracket, _) = full_field
    assert bracket.df.num_rows == 7
    data = bracket.as_dict()
    assert [r["stage"] for r in data["rounds"]] == ["Quarter Finals", "Semi Finals", "Final"]
