"""Tournament management for Padel Pairing.

This package exposes the Tournament coordinator together with the helpers it
is built from, so callers need a single import.
"""

# Padel Pairing
# Copyright (C) 2025  Padel Pairing developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

from padelpairing.controllers.tournament import (
    CaptainStandings,
    MatchGraph,
    OutcomeCalculator,
)
from padelpairing.models.tournament import Match, Score, TournamentConfig
from padelpairing.tournament.tournament import Tournament

__all__ = [
    "CaptainStandings",
    "Match",
    "MatchGraph",
    "OutcomeCalculator",
    "Score",
    "Tournament",
    "TournamentConfig",
]
