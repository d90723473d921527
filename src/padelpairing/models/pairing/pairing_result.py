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

from dataclasses import dataclass
from typing import List, Optional

from padelpairing.models.pairing.pair import Pair
from padelpairing.models.player import Player


@dataclass(slots=True)
class BalancedPairingResult:
    """Result of a balanced pairing computation.

    ``sitting_out`` is the single player left over when the roster is odd.
    """

    pairs: List[Pair]
    sitting_out: Optional[Player] = None


#  LocalWords:  BalancedPairingResult
