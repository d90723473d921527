from padelpairing.controllers.tournament.bracket_builder import (
    build_elimination_bracket,
    build_matches,
    build_round_robin,
    get_bracket_size,
)
from padelpairing.controllers.tournament.match_graph import MatchGraph
from padelpairing.controllers.tournament.outcome_calculator import (
    CaptainStandings,
    OutcomeCalculator,
)

__all__ = [
    "CaptainStandings",
    "MatchGraph",
    "OutcomeCalculator",
    "build_elimination_bracket",
    "build_matches",
    "build_round_robin",
    "get_bracket_size",
]
