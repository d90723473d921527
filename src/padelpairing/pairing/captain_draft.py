"""Captain draft and manual same-team pairing.

Two captains alternately pick players from the roster, captain one first.
Once everyone is drafted, each team's members are grouped into pairs by hand.
The resulting pairs carry their ``team_id`` and are scheduled as a
cross-team round robin.
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

import itertools
from typing import Dict, List, Optional, Sequence

from padelpairing.constants import PAIR_ID_PREFIX, TEAM_IDS, TEAM_ONE, TEAM_TWO
from padelpairing.exceptions import (
    CrossTeamPairingException,
    DraftStateException,
    InvalidSelectionException,
    PlayerAlreadyPairedException,
    PlayerNotFoundException,
    UnbalancedTeamsException,
)
from padelpairing.models.pairing import Pair
from padelpairing.models.player import Player
from padelpairing.type_hints import TeamId
from padelpairing.utils import setup_logger
from padelpairing.utils.validation import validate_roster_size_strict

logger = setup_logger(__name__)


class CaptainDraft:
    """Drives the captain draft from captain selection to finalized pairs.

    This class is responsible for:
    - Alternating picks between the two captains
    - Grouping drafted players into same-team pairs
    - Refusing cross-team pairs and players already paired
    - Gating finalization until every drafted player is paired

    Every rejected call raises and leaves the draft unchanged.
    """

    def __init__(
        self, players: Sequence[Player], captain_one_id: str, captain_two_id: str
    ):
        """Start a draft.

        Args:
            players: Full roster (at least MIN_PLAYERS)
            captain_one_id: Captain of team 1, who picks first
            captain_two_id: Captain of team 2

        Raises:
            InsufficientPlayersException: If the roster is too small
            InvalidSelectionException: If the captains are unknown or identical
        """
        validate_roster_size_strict(players)
        self._roster: Dict[str, Player] = {p.id: p for p in players}

        if captain_one_id == captain_two_id:
            raise InvalidSelectionException("Select two different captains")
        for captain_id in (captain_one_id, captain_two_id):
            if captain_id not in self._roster:
                raise InvalidSelectionException(f"Captain {captain_id} is not in roster")

        self.captains: Dict[TeamId, Player] = {
            TEAM_ONE: self._roster[captain_one_id],
            TEAM_TWO: self._roster[captain_two_id],
        }
        self._teams: Dict[TeamId, List[Player]] = {
            team_id: [captain] for team_id, captain in self.captains.items()
        }
        self._current_team: TeamId = TEAM_ONE
        self._pairs: List[Pair] = []
        self._pair_counter = itertools.count(1)

        logger.info(
            f"Draft started: {self.captains[TEAM_ONE].name} vs "
            f"{self.captains[TEAM_TWO].name}, {len(self._roster)} players"
        )

    # ========== Draft phase ==========

    @property
    def available_players(self) -> List[Player]:
        """Players not yet drafted, in roster order."""
        drafted = {p.id for team in self._teams.values() for p in team}
        return [p for p in self._roster.values() if p.id not in drafted]

    @property
    def is_draft_complete(self) -> bool:
        return not self.available_players

    @property
    def current_team(self) -> TeamId:
        """Team whose captain picks next."""
        return self._current_team

    def team(self, team_id: TeamId) -> List[Player]:
        """Members of a team in pick order, captain first."""
        if team_id not in TEAM_IDS:
            raise InvalidSelectionException(f"Unknown team: {team_id}")
        return list(self._teams[team_id])

    def team_of(self, player_id: str) -> Optional[TeamId]:
        for team_id, members in self._teams.items():
            if any(p.id == player_id for p in members):
                return team_id
        return None

    def pick(self, player_id: str) -> TeamId:
        """Add an available player to the team whose turn it is.

        Returns:
            The team the player joined

        Raises:
            DraftStateException: If every player is already drafted
            PlayerNotFoundException: If the player is not available
        """
        if self.is_draft_complete:
            raise DraftStateException("Draft is complete, no players left to pick")

        available = {p.id: p for p in self.available_players}
        player = available.get(player_id)
        if player is None:
            raise PlayerNotFoundException(f"Player {player_id} is not available")

        team_id = self._current_team
        self._teams[team_id].append(player)
        self._current_team = TEAM_TWO if team_id == TEAM_ONE else TEAM_ONE
        logger.info(f"{self.captains[team_id].name} picked {player.name}")
        return team_id

    # ========== Pairing phase ==========

    @property
    def pairs(self) -> List[Pair]:
        return list(self._pairs)

    def is_paired(self, player_id: str) -> bool:
        return any(pair.contains(player_id) for pair in self._pairs)

    def unpaired_players(self, team_id: TeamId) -> List[Player]:
        return [p for p in self.team(team_id) if not self.is_paired(p.id)]

    def pair_players(self, player1_id: str, player2_id: str) -> Pair:
        """Group two members of the same team into a pair.

        Raises:
            DraftStateException: If the draft is still running
            PlayerNotFoundException: If a player is not drafted
            InvalidSelectionException: If both ids are the same player
            CrossTeamPairingException: If the players are on different teams
            PlayerAlreadyPairedException: If either player is already paired
        """
        if not self.is_draft_complete:
            raise DraftStateException("Finish the draft before pairing players")
        if player1_id == player2_id:
            raise InvalidSelectionException("A player cannot be paired with themselves")

        team1 = self.team_of(player1_id)
        team2 = self.team_of(player2_id)
        if team1 is None or team2 is None:
            missing = player1_id if team1 is None else player2_id
            raise PlayerNotFoundException(f"Player {missing} is not drafted")
        if team1 != team2:
            raise CrossTeamPairingException(
                f"{self._roster[player1_id].name} and {self._roster[player2_id].name} "
                "play for different teams"
            )
        for player_id in (player1_id, player2_id):
            if self.is_paired(player_id):
                raise PlayerAlreadyPairedException(
                    f"{self._roster[player_id].name} is already in a pair"
                )

        captain_id = self.captains[team1].id
        pair = Pair(
            id=f"{PAIR_ID_PREFIX}{next(self._pair_counter)}",
            player1=self._roster[player1_id],
            player2=self._roster[player2_id],
            is_captain_pair=captain_id in (player1_id, player2_id),
            team_id=team1,
        )
        self._pairs.append(pair)
        logger.info(f"Team {team1} pair {pair.id}: {pair.display_name}")
        return pair

    def remove_pair(self, pair_id: str) -> Pair:
        """Split a pair so its players can be paired again.

        Raises:
            InvalidSelectionException: If no such pair exists
        """
        for index, pair in enumerate(self._pairs):
            if pair.id == pair_id:
                del self._pairs[index]
                logger.info(f"Removed pair {pair_id}: {pair.display_name}")
                return pair
        raise InvalidSelectionException(f"No pair with id {pair_id}")

    # ========== Finalization ==========

    def blocking_reasons(self) -> List[str]:
        """Human-readable reasons why the draft cannot be finalized yet."""
        reasons = []
        if not self.is_draft_complete:
            reasons.append(f"{len(self.available_players)} players still undrafted")
        for team_id in TEAM_IDS:
            size = len(self._teams[team_id])
            if size % 2:
                reasons.append(f"Team {team_id} has an odd number of players ({size})")
            unpaired = self.unpaired_players(team_id)
            if unpaired:
                names = ", ".join(p.name for p in unpaired)
                reasons.append(f"Team {team_id} has unpaired players: {names}")
        return reasons

    @property
    def can_finalize(self) -> bool:
        return not self.blocking_reasons()

    def finalize(self) -> List[Pair]:
        """Return the pairs once every drafted player is in exactly one pair.

        Raises:
            UnbalancedTeamsException: If any team is odd-sized, anyone is
                undrafted or anyone is unpaired
        """
        reasons = self.blocking_reasons()
        if reasons:
            raise UnbalancedTeamsException("; ".join(reasons))
        logger.info(f"Draft finalized with {len(self._pairs)} pairs")
        return self.pairs
