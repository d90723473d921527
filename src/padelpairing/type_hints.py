"""Type hints used in Padel Pairing."""

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

from typing import Dict, Literal, Optional

# Tournament mode literals
TournamentMode = Literal["balanced", "captain"]
MaybeMode = Optional[TournamentMode]

# 1 is pair1, 2 is pair2
Slot = Literal[1, 2]
# Captain mode side
TeamId = Literal[1, 2]

# List of players
MaybePair = Optional["Pair"]

# Arena of matches keyed by match id
MatchArena = Dict[str, "Match"]
# Where a winner feeds forward: (next match id, slot)

#  LocalWords:  MatchArena MatchLink
