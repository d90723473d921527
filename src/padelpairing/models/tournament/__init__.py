from padelpairing.models.tournament.match import Match, Score
from padelpairing.models.tournament.tournament_config import TournamentConfig

__all__ = [
    "Match",
    "Score",
    "TournamentConfig",
]
