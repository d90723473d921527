"""Pair data class."""

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
from typing import Any, Dict, Optional, Tuple

from padelpairing.models.player import Player
from padelpairing.type_hints import TeamId


@dataclass(frozen=True, slots=True)
class Pair:
    """Two players competing as one unit.

    Attributes
    ----------
    id : str
        Pair identifier, unique within a tournament.
    player1, player2 : Player
        The two members.
    is_captain_pair : bool
        Whether the pair holds a seed (balanced mode) or a team captain
        (captain mode).
    team_id : int or None
        Side the pair plays for in captain mode, ``None`` otherwise.
    """

    id: str
    player1: Player
    player2: Player
    is_captain_pair: bool = False
    team_id: Optional[TeamId] = None

    @property
    def players(self) -> Tuple[Player, Player]:
        return (self.player1, self.player2)

    @property
    def display_name(self) -> str:
        return f"{self.player1.name}/{self.player2.name}"

    def contains(self, player_id: str) -> bool:
        """Check if a player is a member of this pair."""
        return player_id in (self.player1.id, self.player2.id)

    def __str__(self) -> str:
        return self.display_name

    def to_dict(self) -> Dict[str, Any]:
        """Serialize pair to dictionary."""
        return {
            "id": self.id,
            "player1": self.player1.to_dict(),
            "player2": self.player2.to_dict(),
            "is_captain_pair": self.is_captain_pair,
            "team_id": self.team_id,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Pair":
        """Deserialize pair from dictionary."""
        return cls(
            id=data["id"],
            player1=Player.from_dict(data["player1"]),
            player2=Player.from_dict(data["player2"]),
            is_captain_pair=data.get("is_captain_pair", False),
            team_id=data.get("team_id"),
        )
