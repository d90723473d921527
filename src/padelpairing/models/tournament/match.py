"""Match and score data classes."""

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

from dataclasses import dataclass, replace
from typing import Any, Dict, Mapping, Optional, Tuple

from padelpairing.constants import SLOT_ONE, SLOT_TWO
from padelpairing.models.pairing import Pair
from padelpairing.type_hints import Slot


@dataclass(frozen=True, slots=True)
class Score:
    """Games won by each side of a captain-mode match.

    Attributes:
        team1: Games won by the pair in slot 1 (team 1)
        team2: Games won by the pair in slot 2 (team 2)
    """

    team1: int = 0
    team2: int = 0

    def for_slot(self, slot: Slot) -> int:
        return self.team1 if slot == SLOT_ONE else self.team2

    def to_dict(self) -> Dict[str, Any]:
        """Serialize score to dictionary."""
        return {"team1": self.team1, "team2": self.team2}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Score":
        """Deserialize score from dictionary."""
        return cls(team1=data.get("team1", 0), team2=data.get("team2", 0))


@dataclass(frozen=True, slots=True)
class Match:
    """A single match in the tournament graph.

    Matches are immutable snapshots; the match graph replaces them with
    updated copies instead of editing them.

    Attributes:
        id: Match identifier, unique within a tournament
        round: 0 for the earliest round, increasing toward the final
        pair1: Pair in slot 1, or None while unresolved
        pair2: Pair in slot 2, or None while unresolved
        winner: Winning pair, or None while undecided
        next_match_id: Match the winner feeds into (None for the final and
            for every captain-mode match)
        next_match_slot: Slot of ``next_match_id`` the winner occupies
        score: Games per side (captain mode only)
        bye_slots: Slots that stay empty for the whole tournament
    """

    id: str
    round: int
    pair1: Optional[Pair] = None
    pair2: Optional[Pair] = None
    winner: Optional[Pair] = None
    next_match_id: Optional[str] = None
    next_match_slot: Optional[Slot] = None
    score: Optional[Score] = None
    bye_slots: Tuple[Slot, ...] = ()

    # ========== Derived state ==========

    @property
    def is_bye(self) -> bool:
        """Exactly one slot is permanently empty; the other occupant advances."""
        return len(self.bye_slots) == 1

    @property
    def is_void(self) -> bool:
        """Both slots are permanently empty; the match never produces a winner."""
        return len(self.bye_slots) == 2

    @property
    def is_playable(self) -> bool:
        """Both slots are occupied, so a winner can be declared manually."""
        return not self.bye_slots and self.pair1 is not None and self.pair2 is not None

    @property
    def pairs(self) -> Tuple[Optional[Pair], Optional[Pair]]:
        return (self.pair1, self.pair2)

    def pair_in_slot(self, slot: Slot) -> Optional[Pair]:
        return self.pair1 if slot == SLOT_ONE else self.pair2

    def slot_of(self, pair_id: str) -> Optional[Slot]:
        """Return the slot holding ``pair_id``, or None if it is not in this match."""
        if self.pair1 is not None and self.pair1.id == pair_id:
            return SLOT_ONE
        if self.pair2 is not None and self.pair2.id == pair_id:
            return SLOT_TWO
        return None

    def has_pair(self, pair_id: str) -> bool:
        return self.slot_of(pair_id) is not None

    # ========== Copy helpers ==========

    def with_slot(self, slot: Slot, pair: Optional[Pair]) -> "Match":
        """Return a copy with ``slot`` set to ``pair``."""
        if slot == SLOT_ONE:
            return replace(self, pair1=pair)
        return replace(self, pair2=pair)

    def without_pair(self, pair_id: str) -> "Match":
        """Return a copy with the slot holding ``pair_id`` emptied.

        The other slot is left untouched.
        """
        slot = self.slot_of(pair_id)
        if slot is None:
            return self
        return self.with_slot(slot, None)

    # ========== Serialization ==========

    def to_dict(self) -> Dict[str, Any]:
        """Serialize match to dictionary, referencing pairs by id."""
        return {
            "id": self.id,
            "round": self.round,
            "pair1_id": self.pair1.id if self.pair1 else None,
            "pair2_id": self.pair2.id if self.pair2 else None,
            "winner_id": self.winner.id if self.winner else None,
            "next_match_id": self.next_match_id,
            "next_match_slot": self.next_match_slot,
            "score": self.score.to_dict() if self.score else None,
            "bye_slots": list(self.bye_slots),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any], pairs: Mapping[str, Pair]) -> "Match":
        """Deserialize match from dictionary.

        Args:
            data: Serialized match
            pairs: Pairs of the tournament keyed by id

        Raises:
            KeyError: If the match references an unknown pair
        """

        def lookup(pair_id: Optional[str]) -> Optional[Pair]:
            return pairs[pair_id] if pair_id is not None else None

        score = data.get("score")
        return cls(
            id=data["id"],
            round=data["round"],
            pair1=lookup(data.get("pair1_id")),
            pair2=lookup(data.get("pair2_id")),
            winner=lookup(data.get("winner_id")),
            next_match_id=data.get("next_match_id"),
            next_match_slot=data.get("next_match_slot"),
            score=Score.from_dict(score) if score is not None else None,
            bye_slots=tuple(data.get("bye_slots", ())),
        )
