import random
from collections import Counter

import pytest

from padelpairing.constants import MODE_BALANCED, MODE_CAPTAIN, TEAM_ONE, TEAM_TWO
from padelpairing.controllers.tournament import (
    MatchGraph,
    OutcomeCalculator,
    build_elimination_bracket,
    build_matches,
    build_round_robin,
    get_bracket_size,
)
from padelpairing.exceptions import BracketException, InvalidModeException
from padelpairing.models.pairing import Pair
from padelpairing.models.player import Player
from padelpairing.models.tournament import Score


def _pairs(count, seeded=(1, 2), team_id=None, start=1):
    return [
        Pair(
            id=f"P{i}",
            player1=Player(id=f"a{i}", name=f"A{i}"),
            player2=Player(id=f"b{i}", name=f"B{i}"),
            is_captain_pair=i in seeded,
            team_id=team_id,
        )
        for i in range(start, start + count)
    ]


def _first_round(matches):
    return [m for m in matches if m.round == 0]


def _play_out(graph):
    """Declare slot 1 the winner of every playable match until none is left."""
    while True:
        pending = [m for m in graph.matches if m.is_playable and m.winner is None]
        if not pending:
            return
        assert graph.declare_winner(pending[0].id, pending[0].pair1.id)


@pytest.mark.parametrize(
    "pair_count, expected",
    [(1, 2), (2, 2), (3, 4), (4, 4), (5, 8), (8, 8), (9, 16), (16, 16)],
)
def test_bracket_size_is_next_power_of_two(pair_count, expected):
    assert get_bracket_size(pair_count) == expected


@pytest.mark.parametrize("pair_count", range(2, 13))
def test_bracket_shape(pair_count):
    pairs = _pairs(pair_count)
    size = get_bracket_size(pair_count)

    matches = build_elimination_bracket(pairs, rng=random.Random(pair_count))
    by_id = {m.id: m for m in matches}

    assert len(matches) == size - 1
    roots = [m for m in matches if m.next_match_id is None]
    assert roots == [matches[-1]]

    feeds = Counter()
    for match in matches[:-1]:
        target = by_id[match.next_match_id]
        assert target.round == match.round + 1
        feeds[(target.id, match.next_match_slot)] += 1
    assert all(count == 1 for count in feeds.values())
    assert set(feeds) == {(m.id, s) for m in matches if m.round > 0 for s in (1, 2)}

    first_round = _first_round(matches)
    assert len(first_round) == size // 2
    placed = [p.id for m in first_round for p in m.pairs if p is not None]
    assert sorted(placed) == sorted(p.id for p in pairs)
    assert sum(len(m.bye_slots) for m in first_round) == size - pair_count


@pytest.mark.parametrize("pair_count", range(3, 13))
def test_two_seeds_start_at_opposite_ends(pair_count):
    matches = build_elimination_bracket(_pairs(pair_count), rng=random.Random(7))
    first_round = _first_round(matches)

    assert first_round[0].pair1.id == "P1"
    assert first_round[-1].pair2.id == "P2"


def test_five_pairs_place_byes_and_advance_them():
    pairs = _pairs(5)
    matches = build_elimination_bracket(pairs, rng=random.Random(3))

    assert [m.id for m in matches] == ["m1", "m2", "m3", "m4", "m5", "m6", "m7"]
    m1, m2, m3, m4, m5, m6, m7 = matches

    assert m1.is_bye and m1.winner.id == "P1"
    assert m2.is_bye and m2.winner is m2.pair2
    assert m3.is_playable and m3.winner is None
    assert m4.is_bye and m4.winner.id == "P2"

    assert m5.pair1.id == "P1"
    assert m5.pair2 == m2.winner
    assert m5.is_playable
    assert m6.pair1 is None and m6.pair2.id == "P2"
    assert m7.pair1 is None and m7.pair2 is None

    graph = MatchGraph(matches)
    assert graph.declare_winner("m3", m3.pair2.id)
    assert graph.get_match("m6").pair1 == m3.pair2
    assert graph.get_match("m6").is_playable


def test_void_matches_become_byes_in_the_next_round():
    matches = build_elimination_bracket(_pairs(10), rng=random.Random(10))
    first_round, second_round = matches[:8], matches[8:12]
    third_round = matches[12:14]

    assert first_round[1].is_void and first_round[2].is_void
    assert second_round[0].is_bye
    assert second_round[0].winner.id == "P1"
    assert second_round[1].is_bye and second_round[1].winner is None
    assert third_round[0].pair1.id == "P1"
    assert not any(m.is_void for m in matches[8:])


def test_winner_passes_through_a_bye_at_declare_time():
    matches = build_elimination_bracket(_pairs(10), rng=random.Random(4))
    graph = MatchGraph(matches)
    feeder = matches[3]
    bye_match_id = matches[9].id
    semi_id = matches[12].id

    assert graph.declare_winner(feeder.id, feeder.pair1.id)

    assert graph.get_match(bye_match_id).winner == feeder.pair1
    assert graph.get_match(semi_id).pair2 == feeder.pair1
    assert graph.get_match(semi_id).is_playable

    assert graph.undo_match_winner(feeder.id)

    assert graph.get_match(bye_match_id).winner is None
    assert graph.get_match(bye_match_id).pair2 is None
    assert graph.get_match(semi_id).pair2 is None
    assert graph.get_match(semi_id).pair1.id == "P1"


@pytest.mark.parametrize("pair_count", [2, 3, 5, 6, 7, 9, 10, 12])
def test_every_bracket_can_be_played_to_a_champion(pair_count):
    graph = MatchGraph(build_elimination_bracket(_pairs(pair_count), rng=random.Random(1)))

    _play_out(graph)

    assert OutcomeCalculator().champion(graph.matches) is not None


def test_bracket_needs_two_pairs():
    with pytest.raises(BracketException):
        build_elimination_bracket(_pairs(1))


def test_round_robin_meets_every_opponent_once():
    team_one = _pairs(2, seeded=(), team_id=TEAM_ONE)
    team_two = _pairs(3, seeded=(), team_id=TEAM_TWO, start=3)

    matches = build_round_robin(team_one + team_two)

    assert [m.id for m in matches] == [f"m{i}" for i in range(1, 7)]
    assert [(m.pair1.id, m.pair2.id) for m in matches] == [
        ("P1", "P3"),
        ("P2", "P4"),
        ("P1", "P4"),
        ("P2", "P5"),
        ("P1", "P5"),
        ("P2", "P3"),
    ]
    for match in matches:
        assert match.round == 0
        assert match.next_match_id is None
        assert match.score == Score(0, 0)
        assert match.pair1.team_id == TEAM_ONE
        assert match.pair2.team_id == TEAM_TWO


def test_round_robin_needs_both_teams():
    with pytest.raises(BracketException):
        build_round_robin(_pairs(2, seeded=(), team_id=TEAM_ONE))


def test_build_matches_dispatches_on_mode():
    pairs = _pairs(4, seeded=())
    assert len(build_matches(pairs, MODE_BALANCED, random.Random(0))) == 3

    teams = _pairs(1, team_id=TEAM_ONE) + _pairs(1, team_id=TEAM_TWO, start=2)
    assert len(build_matches(teams, MODE_CAPTAIN)) == 1

    with pytest.raises(InvalidModeException):
        build_matches(pairs, "swiss")


def test_three_against_three_spreads_appearances():
    team_one = _pairs(3, seeded=(), team_id=TEAM_ONE)
    team_two = _pairs(3, seeded=(), team_id=TEAM_TWO, start=4)

    matches = build_round_robin(team_one + team_two)

    assert len(matches) == 9
    appearances = Counter(p.id for m in matches for p in m.pairs)
    assert all(count == 3 for count in appearances.values())
    assert len({(m.pair1.id, m.pair2.id) for m in matches}) == 9
    for previous, current in zip(matches, matches[1:]):
        assert not {p.id for p in previous.pairs} & {p.id for p in current.pairs}
