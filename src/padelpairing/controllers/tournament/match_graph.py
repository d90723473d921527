"""Winner advancement and undo over the tournament match graph.

This module handles every mutation of the match list once a tournament has
started: declaring winners, undoing them and recording captain-mode scores.
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

from dataclasses import replace
from typing import Iterable, List, Optional

from padelpairing.models.pairing import Pair
from padelpairing.models.tournament import Match, Score
from padelpairing.type_hints import MatchArena, Slot
from padelpairing.utils import setup_logger
from padelpairing.utils.validation import validate_game_count

logger = setup_logger(__name__)


class MatchGraph:
    """Holds all matches of a tournament and applies result changes.

    This class is responsible for:
    - Declaring winners and feeding them into the next match
    - Invalidating every downstream result that depended on a changed winner
    - Undoing winners, retracting them from downstream matches first
    - Recording captain-mode scores

    Matches live in an arena keyed by id; successors are looked up by id.
    Each operation works on a copy of the arena and swaps it in only once the
    whole recursive pass is done, so ``matches`` never exposes a partially
    propagated graph. Rejected operations log a warning, return False and
    leave the graph untouched.
    """

    def __init__(self, matches: Iterable[Match] = ()):
        self._arena: MatchArena = {match.id: match for match in matches}

    # ========== Read access ==========

    @property
    def matches(self) -> List[Match]:
        """Current snapshot of all matches in creation order."""
        return list(self._arena.values())

    def get_match(self, match_id: str) -> Optional[Match]:
        return self._arena.get(match_id)

    def __len__(self) -> int:
        return len(self._arena)

    def __contains__(self, match_id: object) -> bool:
        return match_id in self._arena

    @property
    def round_numbers(self) -> List[int]:
        return sorted({match.round for match in self._arena.values()})

    def matches_in_round(self, round_number: int) -> List[Match]:
        return [m for m in self._arena.values() if m.round == round_number]

    # ========== Declaring winners ==========

    def declare_winner(self, match_id: str, pair_id: str) -> bool:
        """Set the winner of a playable match and feed it forward.

        The next match receives the winner in its linked slot and always
        loses its own winner, even when the incoming pair is unchanged. If
        that next match had a winner, the pass continues forward, clearing
        the slot it had fed and that match's winner, until it reaches a match
        that had no winner.

        Args:
            match_id: Match to decide
            pair_id: Id of the winning pair (must be in the match)

        Returns:
            True if the winner was recorded, False if the request was rejected
        """
        match = self._arena.get(match_id)
        if match is None:
            logger.warning(f"Cannot declare winner: match {match_id} does not exist")
            return False
        if match.bye_slots:
            logger.warning(f"Cannot declare winner: match {match_id} is a bye")
            return False
        if match.pair1 is None or match.pair2 is None:
            logger.warning(
                f"Cannot declare winner: match {match_id} is still waiting for a pair"
            )
            return False

        slot = match.slot_of(pair_id)
        if slot is None:
            logger.warning(
                f"Cannot declare winner: pair {pair_id} is not in match {match_id}"
            )
            return False

        winner = match.pair_in_slot(slot)
        arena = dict(self._arena)
        arena[match_id] = replace(match, winner=winner)
        self._advance(arena, arena[match_id], winner)
        self._arena = arena

        logger.info(f"Match {match_id}: {winner.display_name} wins")
        return True

    def _advance(self, arena: MatchArena, source: Match, pair: Pair) -> None:
        """Write ``pair`` into the match fed by ``source``."""
        while source.next_match_id is not None:
            target = arena[source.next_match_id]
            had_winner = target.winner is not None
            target = replace(
                target.with_slot(source.next_match_slot, pair), winner=None
            )

            if target.is_bye:
                # Nobody to play: the arriving pair advances again
                target = replace(target, winner=pair)
                arena[target.id] = target
                logger.debug(f"Match {target.id}: {pair.display_name} advances on a bye")
                source = target
                continue

            arena[target.id] = target
            logger.debug(f"Match {target.id}: slot {source.next_match_slot} <- {pair.id}")
            if had_winner and target.next_match_id is not None:
                self._clear_forward(arena, target.next_match_id, target.next_match_slot)
            return

    def _clear_forward(self, arena: MatchArena, match_id: str, slot: Slot) -> None:
        """Empty ``slot`` of a match and, if it had a winner, keep clearing forward."""
        while True:
            match = arena[match_id]
            had_winner = match.winner is not None
            arena[match_id] = replace(match.with_slot(slot, None), winner=None)
            logger.debug(f"Match {match_id}: cleared slot {slot}")

            if not had_winner or match.next_match_id is None:
                return
            match_id, slot = match.next_match_id, match.next_match_slot

    # ========== Undoing winners ==========

    def undo_match_winner(self, match_id: str) -> bool:
        """Clear a match's winner and retract it from the next match.

        A successor that has a winner is undone first, recursively, before
        the retracted pair is removed from its slot. The successor's other
        slot is left untouched.

        Returns:
            True if a winner was removed, False if there was nothing to undo
            or the request was rejected
        """
        match = self._arena.get(match_id)
        if match is None:
            logger.warning(f"Cannot undo: match {match_id} does not exist")
            return False
        if match.bye_slots:
            logger.warning(f"Cannot undo: match {match_id} was decided by a bye")
            return False
        if match.winner is None:
            logger.debug(f"Nothing to undo: match {match_id} has no winner")
            return False

        arena = dict(self._arena)
        self._undo(arena, match_id)
        self._arena = arena

        logger.info(f"Match {match_id}: winner {match.winner.display_name} undone")
        return True

    def _undo(self, arena: MatchArena, match_id: str) -> None:
        match = arena[match_id]
        if match.winner is None:
            return

        removed = match.winner
        arena[match_id] = replace(match, winner=None)

        if match.next_match_id is None:
            return
        if arena[match.next_match_id].winner is not None:
            self._undo(arena, match.next_match_id)

        # Re-read: the recursive undo may have replaced the successor
        successor = arena[match.next_match_id]
        arena[successor.id] = successor.without_pair(removed.id)
        logger.debug(f"Match {successor.id}: retracted {removed.id}")

    # ========== Scores ==========

    def update_match_score(self, match_id: str, team1: int, team2: int) -> bool:
        """Overwrite the games won by each side of a match.

        Scores never affect winners or advancement.

        Returns:
            True if the score was stored, False if the request was rejected
        """
        match = self._arena.get(match_id)
        if match is None:
            logger.warning(f"Cannot record score: match {match_id} does not exist")
            return False

        for value, field_name in ((team1, "Team 1 games"), (team2, "Team 2 games")):
            result = validate_game_count(value, field_name)
            if not result:
                logger.warning(
                    f"Cannot record score for match {match_id}: {result.error_message}"
                )
                return False

        arena = dict(self._arena)
        arena[match_id] = replace(match, score=Score(team1=int(team1), team2=int(team2)))
        self._arena = arena

        logger.info(f"Match {match_id}: score {team1}-{team2}")
        return True
