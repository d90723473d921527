import random

import pytest

from padelpairing.exceptions import (
    InsufficientPlayersException,
    InvalidSelectionException,
)
from padelpairing.models.player import Player
from padelpairing.pairing import (
    create_balanced_pairs,
    required_top_count,
    split_top_bottom,
)


def _roster(count):
    return [Player(id=f"p{i}", name=f"Player {i}") for i in range(1, count + 1)]


def _member_ids(pairs):
    return [player.id for pair in pairs for player in pair.players]


def test_required_top_count_rounds_up():
    assert required_top_count(_roster(8)) == 4
    assert required_top_count(_roster(7)) == 4
    assert required_top_count(_roster(4)) == 2


def test_even_roster_pairs_each_top_player_with_a_bottom_player():
    players = _roster(8)
    top = players[:4]
    top_ids = {p.id for p in top}

    result = create_balanced_pairs(players, top, rng=random.Random(11))

    assert len(result.pairs) == 4
    assert result.sitting_out is None
    assert sorted(_member_ids(result.pairs)) == sorted(p.id for p in players)
    for pair in result.pairs:
        in_top = [player.id in top_ids for player in pair.players]
        assert in_top.count(True) == 1
    assert [pair.id for pair in result.pairs] == ["P1", "P2", "P3", "P4"]


@pytest.mark.parametrize("count", [5, 7, 9])
def test_odd_roster_leaves_one_top_player_sitting_out(count):
    players = _roster(count)
    top = players[: required_top_count(players)]

    result = create_balanced_pairs(players, top, rng=random.Random(count))

    assert len(result.pairs) == count // 2
    assert result.sitting_out is not None
    assert result.sitting_out in top
    assert result.sitting_out.id not in _member_ids(result.pairs)


def test_pairs_are_reproducible_with_the_same_seed():
    players = _roster(10)
    top = players[:5]

    first = create_balanced_pairs(players, top, rng=random.Random(42))
    second = create_balanced_pairs(players, top, rng=random.Random(42))

    assert _member_ids(first.pairs) == _member_ids(second.pairs)


def test_seeded_players_mark_their_pair():
    players = _roster(8)
    seeds = [players[0], players[1]]

    result = create_balanced_pairs(
        players, players[:4], seeded_players=seeds, rng=random.Random(5)
    )

    seeded_pairs = [pair for pair in result.pairs if pair.is_captain_pair]
    assert len(seeded_pairs) == 2
    assert all(pair.contains("p1") or pair.contains("p2") for pair in seeded_pairs)


def test_no_seeds_means_no_seeded_pairs():
    players = _roster(6)
    result = create_balanced_pairs(players, players[:3], rng=random.Random(0))
    assert not any(pair.is_captain_pair for pair in result.pairs)


def test_roster_below_minimum_is_rejected():
    players = _roster(3)
    with pytest.raises(InsufficientPlayersException):
        create_balanced_pairs(players, players[:2])


def test_top_group_of_wrong_size_is_rejected():
    players = _roster(8)
    with pytest.raises(InvalidSelectionException):
        create_balanced_pairs(players, players[:3])


def test_top_group_with_repeated_player_is_rejected():
    players = _roster(8)
    with pytest.raises(InvalidSelectionException):
        split_top_bottom(players, [players[0], players[0], players[1], players[2]])


def test_top_group_with_stranger_is_rejected():
    players = _roster(8)
    stranger = Player(id="zz", name="Stranger")
    with pytest.raises(InvalidSelectionException):
        split_top_bottom(players, players[:3] + [stranger])


def test_split_keeps_roster_order():
    players = _roster(6)
    top, bottom = split_top_bottom(players, [players[4], players[0], players[2]])
    assert [p.id for p in top] == ["p1", "p3", "p5"]
    assert [p.id for p in bottom] == ["p2", "p4", "p6"]
