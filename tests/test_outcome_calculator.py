from padelpairing.constants import TEAM_ONE, TEAM_TWO
from padelpairing.controllers.tournament import (
    MatchGraph,
    OutcomeCalculator,
    build_round_robin,
)
from padelpairing.models.pairing import Pair
from padelpairing.models.player import Player
from padelpairing.models.tournament import Match


def _pair(number, team_id=None):
    return Pair(
        id=f"P{number}",
        player1=Player(id=f"a{number}", name=f"A{number}"),
        player2=Player(id=f"b{number}", name=f"B{number}"),
        team_id=team_id,
    )


def _captain_graph():
    """A1=P1, A2=P2 for team one; B1=P3, B2=P4 for team two.

    Schedule: m1 P1-P3, m2 P2-P4, m3 P1-P4, m4 P2-P3.
    """
    pairs = [
        _pair(1, TEAM_ONE),
        _pair(2, TEAM_ONE),
        _pair(3, TEAM_TWO),
        _pair(4, TEAM_TWO),
    ]
    return MatchGraph(build_round_robin(pairs))


def _play(graph, results):
    for match_id, team1, team2 in results:
        graph.update_match_score(match_id, team1, team2)
        match = graph.get_match(match_id)
        winner = match.pair1 if team1 > team2 else match.pair2
        graph.declare_winner(match_id, winner.id)


def test_champion_is_winner_of_the_final():
    p1, p2 = _pair(1), _pair(2)
    graph = MatchGraph([Match(id="m1", round=0, pair1=p1, pair2=p2)])
    calculator = OutcomeCalculator()

    assert calculator.champion(graph.matches) is None
    graph.declare_winner("m1", "P2")
    assert calculator.champion(graph.matches) == p2


def test_champion_of_empty_tournament_is_none():
    assert OutcomeCalculator().champion([]) is None


def test_team_tallies_and_mvp():
    graph = _captain_graph()
    _play(graph, [("m1", 6, 3), ("m2", 2, 6), ("m3", 6, 4), ("m4", 3, 6)])
    calculator = OutcomeCalculator()
    matches = graph.matches

    assert calculator.team_match_wins(matches) == {TEAM_ONE: 2, TEAM_TWO: 2}
    assert calculator.team_game_totals(matches) == {TEAM_ONE: 17, TEAM_TWO: 19}
    assert calculator.winning_team(matches) == TEAM_TWO
    assert calculator.pair_game_totals(matches) == {"P1": 12, "P3": 9, "P2": 5, "P4": 10}
    assert calculator.mvp(matches).id == "P1"
    assert [p.id for p in calculator.ranked_pairs(matches)] == ["P1", "P4", "P3", "P2"]
    assert calculator.is_complete(matches)


def test_match_wins_decide_before_games():
    graph = _captain_graph()
    _play(graph, [("m1", 6, 0), ("m2", 6, 5), ("m3", 0, 6), ("m4", 6, 5)])

    assert OutcomeCalculator().winning_team(graph.matches) == TEAM_ONE


def test_level_teams_are_a_draw():
    graph = _captain_graph()
    _play(graph, [("m1", 6, 4), ("m2", 4, 6), ("m3", 6, 4), ("m4", 4, 6)])

    assert OutcomeCalculator().winning_team(graph.matches) is None


def test_mvp_tie_goes_to_first_pair_encountered():
    graph = _captain_graph()
    calculator = OutcomeCalculator()

    assert calculator.mvp(graph.matches).id == "P1"

    graph.update_match_score("m2", 0, 3)
    graph.update_match_score("m1", 3, 0)
    assert calculator.mvp(graph.matches).id == "P1"


def test_standings_bundle():
    graph = _captain_graph()
    _play(graph, [("m1", 6, 3), ("m2", 6, 2)])

    standings = OutcomeCalculator().standings(graph.matches)

    assert standings.match_wins == {TEAM_ONE: 2, TEAM_TWO: 0}
    assert standings.game_totals == {TEAM_ONE: 12, TEAM_TWO: 5}
    assert standings.winning_team == TEAM_ONE
    assert standings.mvp.id == "P1"
    assert standings.mvp_games == 6
    assert not standings.is_complete


def test_standings_without_matches():
    standings = OutcomeCalculator().standings([])

    assert standings.mvp is None
    assert standings.mvp_games == 0
    assert standings.winning_team is None
    assert not standings.is_complete
