"""Main Tournament class - coordinates a padel tournament from start to result.

The tournament owns the pairs and the match graph of one run. Pairing happens
before ``start`` (see ``padelpairing.pairing``); everything after ``start`` goes
through this class.
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

import random
from typing import Any, Dict, List, Optional, Sequence

from padelpairing.constants import (
    DEFAULT_TOURNAMENT_NAME,
    LABEL_FINAL,
    LABEL_ROUND,
    LABEL_SEMIFINALS,
    MODE_BALANCED,
    MODE_CAPTAIN,
    TOURNAMENT_MODES,
)
from padelpairing.controllers.tournament import (
    CaptainStandings,
    MatchGraph,
    OutcomeCalculator,
    build_matches,
)
from padelpairing.exceptions import (
    InvalidModeException,
    MatchNotFoundException,
    TournamentStateException,
)
from padelpairing.models.pairing import Pair
from padelpairing.models.tournament import Match, TournamentConfig
from padelpairing.type_hints import MaybeMode, MaybePair
from padelpairing.utils import setup_logger

logger = setup_logger(__name__)


class Tournament:
    """Main tournament management class.

    This class coordinates all tournament operations through specialized helpers:
    - build_matches: creates the bracket or the round robin on start
    - MatchGraph: applies winners, undos and scores
    - OutcomeCalculator: derives champion, team tallies and MVP

    Result operations return False on a rejected request instead of raising,
    matching the match graph they delegate to.
    """

    def __init__(self, name: str = DEFAULT_TOURNAMENT_NAME) -> None:
        self.config = TournamentConfig(name=name)
        self._pairs: List[Pair] = []
        self._graph = MatchGraph()
        self._outcomes = OutcomeCalculator()

    # ========== Properties ==========

    @property
    def name(self) -> str:
        """Get tournament name."""
        return self.config.name

    @name.setter
    def name(self, value: str) -> None:
        """Set tournament name."""
        self.config.name = value

    @property
    def mode(self) -> MaybeMode:
        return self.config.mode

    @property
    def pairs(self) -> List[Pair]:
        return list(self._pairs)

    @property
    def matches(self) -> List[Match]:
        """Current match snapshot, first round first."""
        return self._graph.matches

    @property
    def is_started(self) -> bool:
        return len(self._graph) > 0

    # ========== Lifecycle ==========

    def start(
        self, mode: str, pairs: Sequence[Pair], rng: Optional[random.Random] = None
    ) -> List[Match]:
        """Build the initial matches for the given pairs.

        Args:
            mode: MODE_BALANCED or MODE_CAPTAIN
            pairs: Pairs produced by the pairing step
            rng: Source of randomness for bracket placement

        Returns:
            The created matches

        Raises:
            TournamentStateException: If the tournament is already running
            InvalidModeException: If the mode is not supported
            BracketException: If the pairs cannot form a schedule
        """
        if self.is_started:
            raise TournamentStateException(
                "Tournament already has matches, reset it before starting again"
            )
        if mode not in TOURNAMENT_MODES:
            raise InvalidModeException(f"Unknown tournament mode: {mode}")

        matches = build_matches(pairs, mode, rng)
        self._pairs = list(pairs)
        self._graph = MatchGraph(matches)
        self.config.mode = mode

        logger.info(
            f"Tournament '{self.name}' started in {mode} mode with "
            f"{len(self._pairs)} pairs and {len(matches)} matches"
        )
        return matches

    def reset_tournament(self) -> None:
        """Drop every pair and match and clear the mode."""
        self._pairs = []
        self._graph = MatchGraph()
        self.config.mode = None
        logger.info(f"Tournament '{self.name}' reset")

    # ========== Results ==========

    def declare_winner(self, match_id: str, pair_id: str) -> bool:
        return self._graph.declare_winner(match_id, pair_id)

    def undo_match_winner(self, match_id: str) -> bool:
        return self._graph.undo_match_winner(match_id)

    def update_match_score(self, match_id: str, team1: int, team2: int) -> bool:
        """Record games per side. Only captain-mode matches carry scores."""
        if self.mode != MODE_CAPTAIN:
            logger.warning(
                f"Cannot record score for match {match_id}: scores are only kept "
                "in captain mode"
            )
            return False
        return self._graph.update_match_score(match_id, team1, team2)

    # ========== Lookups ==========

    def get_match(self, match_id: str) -> Match:
        """Get a match by id.

        Raises:
            MatchNotFoundException: If no match has that id
        """
        match = self._graph.get_match(match_id)
        if match is None:
            raise MatchNotFoundException(f"No match with id {match_id}")
        return match

    def find_pair(self, pair_id: str) -> MaybePair:
        for pair in self._pairs:
            if pair.id == pair_id:
                return pair
        return None

    def rounds(self) -> Dict[int, List[Match]]:
        """Matches grouped by round number, earliest round first."""
        return {
            number: self._graph.matches_in_round(number)
            for number in self._graph.round_numbers
        }

    def round_label(self, round_number: int) -> str:
        """Display name of a round.

        In balanced mode the last round is the final and the one before it the
        semifinals; every other round is numbered from 1.
        """
        if self.mode == MODE_BALANCED:
            last = max(self._graph.round_numbers, default=0)
            if round_number == last:
                return LABEL_FINAL
            if round_number == last - 1:
                return LABEL_SEMIFINALS
        return LABEL_ROUND.format(number=round_number + 1)

    # ========== Outcomes ==========

    @property
    def champion(self) -> MaybePair:
        """Winner of the final (balanced mode), None while undecided."""
        if self.mode != MODE_BALANCED:
            return None
        return self._outcomes.champion(self.matches)

    def standings(self) -> CaptainStandings:
        """Team tallies, winning team and MVP for captain mode."""
        return self._outcomes.standings(self.matches)

    def ranked_pairs(self) -> List[Pair]:
        return self._outcomes.ranked_pairs(self.matches)

    # ========== Serialization ==========

    def to_dict(self) -> Dict[str, Any]:
        """Serialize tournament to dictionary.

        Returns:
            Dictionary containing all tournament data
        """
        return {
            "config": self.config.to_dict(),
            "pairs": [p.to_dict() for p in self._pairs],
            "matches": [m.to_dict() for m in self.matches],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Tournament":
        """Deserialize tournament from dictionary.

        Args:
            data: Dictionary containing tournament data

        Returns:
            Reconstructed Tournament object

        Raises:
            KeyError: If a match references a pair that is not in the record
        """
        config = TournamentConfig.from_dict(data.get("config", {}))
        tournament = cls(name=config.name)
        tournament.config.mode = config.mode

        tournament._pairs = [Pair.from_dict(p) for p in data.get("pairs", [])]
        by_id = {pair.id: pair for pair in tournament._pairs}
        tournament._graph = MatchGraph(
            Match.from_dict(m, by_id) for m in data.get("matches", [])
        )

        logger.info(
            f"Loaded tournament '{tournament.name}' with {len(tournament._graph)} matches"
        )
        return tournament
