import pytest

from padelpairing.constants import TEAM_ONE, TEAM_TWO
from padelpairing.exceptions import (
    CrossTeamPairingException,
    DraftStateException,
    InsufficientPlayersException,
    InvalidSelectionException,
    PlayerAlreadyPairedException,
    PlayerNotFoundException,
    UnbalancedTeamsException,
)
from padelpairing.models.player import Player
from padelpairing.pairing import CaptainDraft


def _roster(count):
    return [Player(id=f"p{i}", name=f"Player {i}") for i in range(1, count + 1)]


def _drafted(count=8):
    """Draft where p1 and p2 captain and the rest are picked in roster order."""
    draft = CaptainDraft(_roster(count), "p1", "p2")
    for i in range(3, count + 1):
        draft.pick(f"p{i}")
    return draft


def _ids(players):
    return [p.id for p in players]


def test_captains_start_their_teams_and_team_one_picks_first():
    draft = CaptainDraft(_roster(8), "p1", "p2")

    assert _ids(draft.team(TEAM_ONE)) == ["p1"]
    assert _ids(draft.team(TEAM_TWO)) == ["p2"]
    assert draft.current_team == TEAM_ONE
    assert len(draft.available_players) == 6


def test_picks_alternate_between_captains():
    draft = CaptainDraft(_roster(8), "p1", "p2")

    assert draft.pick("p3") == TEAM_ONE
    assert draft.current_team == TEAM_TWO
    assert draft.pick("p4") == TEAM_TWO
    assert draft.pick("p5") == TEAM_ONE
    assert draft.team_of("p4") == TEAM_TWO
    assert draft.team_of("p6") is None


def test_full_draft_splits_roster_evenly():
    draft = _drafted()

    assert draft.is_draft_complete
    assert _ids(draft.team(TEAM_ONE)) == ["p1", "p3", "p5", "p7"]
    assert _ids(draft.team(TEAM_TWO)) == ["p2", "p4", "p6", "p8"]


def test_identical_captains_are_rejected():
    with pytest.raises(InvalidSelectionException):
        CaptainDraft(_roster(6), "p1", "p1")


def test_unknown_captain_is_rejected():
    with pytest.raises(InvalidSelectionException):
        CaptainDraft(_roster(6), "p1", "nobody")


def test_small_roster_is_rejected():
    with pytest.raises(InsufficientPlayersException):
        CaptainDraft(_roster(3), "p1", "p2")


def test_picking_a_drafted_player_is_rejected():
    draft = CaptainDraft(_roster(6), "p1", "p2")
    with pytest.raises(PlayerNotFoundException):
        draft.pick("p2")


def test_picking_after_draft_is_complete_is_rejected():
    draft = _drafted(6)
    with pytest.raises(DraftStateException):
        draft.pick("p3")


def test_pairing_before_draft_is_complete_is_rejected():
    draft = CaptainDraft(_roster(6), "p1", "p2")
    draft.pick("p3")
    with pytest.raises(DraftStateException):
        draft.pair_players("p1", "p3")


def test_pairs_must_stay_within_a_team():
    draft = _drafted()
    with pytest.raises(CrossTeamPairingException):
        draft.pair_players("p1", "p2")
    assert draft.pairs == []


def test_player_cannot_join_two_pairs():
    draft = _drafted()
    draft.pair_players("p1", "p3")
    with pytest.raises(PlayerAlreadyPairedException):
        draft.pair_players("p3", "p5")


def test_player_cannot_pair_with_themselves():
    draft = _drafted()
    with pytest.raises(InvalidSelectionException):
        draft.pair_players("p3", "p3")


def test_captain_pair_is_marked_and_carries_its_team():
    draft = _drafted()

    captain_pair = draft.pair_players("p1", "p3")
    other_pair = draft.pair_players("p5", "p7")

    assert captain_pair.is_captain_pair
    assert captain_pair.team_id == TEAM_ONE
    assert not other_pair.is_captain_pair
    assert other_pair.team_id == TEAM_ONE
    assert [captain_pair.id, other_pair.id] == ["P1", "P2"]


def test_finalize_requires_everyone_paired():
    draft = _drafted()
    draft.pair_players("p1", "p3")
    draft.pair_players("p2", "p4")

    assert not draft.can_finalize
    with pytest.raises(UnbalancedTeamsException):
        draft.finalize()

    draft.pair_players("p5", "p7")
    draft.pair_players("p6", "p8")

    assert draft.can_finalize
    pairs = draft.finalize()
    assert len(pairs) == 4
    assert sorted(p.team_id for p in pairs) == [1, 1, 2, 2]


def test_odd_sized_teams_block_finalization():
    draft = _drafted(6)
    draft.pair_players("p1", "p3")
    draft.pair_players("p2", "p4")

    reasons = draft.blocking_reasons()

    assert any("odd number" in reason for reason in reasons)
    with pytest.raises(UnbalancedTeamsException):
        draft.finalize()


def test_removed_pair_frees_its_players():
    draft = _drafted()
    pair = draft.pair_players("p1", "p3")

    removed = draft.remove_pair(pair.id)

    assert removed == pair
    assert _ids(draft.unpaired_players(TEAM_ONE)) == ["p1", "p3", "p5", "p7"]
    assert draft.pair_players("p1", "p5").team_id == TEAM_ONE


def test_removing_unknown_pair_is_rejected():
    draft = _drafted()
    with pytest.raises(InvalidSelectionException):
        draft.remove_pair("P9")
