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

import uuid
from dataclasses import dataclass
from typing import Any, Dict

from padelpairing.utils.validation import validate_player_name_strict


@dataclass(frozen=True, slots=True)
class Player:
    """
    A registered participant.

    Players are owned by the roster and never change once created; pairs and
    matches only hold references to them.

    Attributes
    ----------
    id : str
        Unique identifier for the player.
    name : str
        Display name.
    """

    id: str
    name: str

    def __str__(self) -> str:
        return self.name

    def to_dict(self) -> Dict[str, Any]:
        """Serialize player to dictionary."""
        return {"id": self.id, "name": self.name}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Player":
        """Deserialize player from dictionary."""
        return cls(id=data["id"], name=data["name"])


def create_player(name: str) -> Player:
    """Create a player with a validated name and a fresh short id.

    Raises:
        InvalidPlayerDataException: If the name is empty or too long
    """
    return Player(id=uuid.uuid4().hex[:7], name=validate_player_name_strict(name))
