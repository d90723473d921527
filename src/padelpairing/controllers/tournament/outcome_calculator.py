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

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

from padelpairing.constants import MATCH_SLOTS, TEAM_IDS, TEAM_ONE, TEAM_TWO
from padelpairing.models.pairing import Pair
from padelpairing.models.tournament import Match
from padelpairing.type_hints import TeamId


@dataclass
class CaptainStandings:
    """Captain-mode summary derived from the current match list.

    Attributes:
        match_wins: Matches won per team
        game_totals: Games won per team, summed over all scores
        winning_team: Leading team, or None for a draw
        mvp: Pair with the most games won, or None without matches
        mvp_games: Games won by the MVP
        is_complete: Whether every match has a winner
    """

    match_wins: Dict[int, int] = field(default_factory=dict)
    game_totals: Dict[int, int] = field(default_factory=dict)
    winning_team: Optional[TeamId] = None
    mvp: Optional[Pair] = None
    mvp_games: int = 0
    is_complete: bool = False


class OutcomeCalculator:
    """Derives tournament outcomes from the current match list.

    Nothing is cached; every call recomputes from the matches it is given.

    Balanced mode:
    - Champion: winner of the one match with no successor

    Captain mode:
    - Team score: matches won by each team's pairs
    - Game tally: games won by each side across all scores
    - Winning team: more match wins, then more games, else a draw
    - MVP: pair with the most games won, first encountered on ties
    """

    def champion(self, matches: Sequence[Match]) -> Optional[Pair]:
        """Winner of the final, or None while it is undecided."""
        roots = [m for m in matches if m.next_match_id is None]
        if len(roots) != 1:
            return None
        return roots[0].winner

    def team_match_wins(self, matches: Sequence[Match]) -> Dict[int, int]:
        wins = {team_id: 0 for team_id in TEAM_IDS}
        for match in matches:
            if match.winner is not None and match.winner.team_id in wins:
                wins[match.winner.team_id] += 1
        return wins

    def team_game_totals(self, matches: Sequence[Match]) -> Dict[int, int]:
        totals = {team_id: 0 for team_id in TEAM_IDS}
        for match in matches:
            if match.score is None:
                continue
            totals[TEAM_ONE] += match.score.team1
            totals[TEAM_TWO] += match.score.team2
        return totals

    def winning_team(self, matches: Sequence[Match]) -> Optional[TeamId]:
        """Team ahead on match wins, then on games; None when level on both."""
        wins = self.team_match_wins(matches)
        if wins[TEAM_ONE] != wins[TEAM_TWO]:
            return TEAM_ONE if wins[TEAM_ONE] > wins[TEAM_TWO] else TEAM_TWO

        games = self.team_game_totals(matches)
        if games[TEAM_ONE] != games[TEAM_TWO]:
            return TEAM_ONE if games[TEAM_ONE] > games[TEAM_TWO] else TEAM_TWO
        return None

    def is_complete(self, matches: Sequence[Match]) -> bool:
        return bool(matches) and all(m.winner is not None for m in matches)

    def pair_game_totals(self, matches: Sequence[Match]) -> Dict[str, int]:
        """Games won by each pair, keyed by pair id in order of first appearance."""
        totals: Dict[str, int] = {}
        for match in matches:
            for slot in MATCH_SLOTS:
                pair = match.pair_in_slot(slot)
                if pair is None:
                    continue
                games = match.score.for_slot(slot) if match.score else 0
                totals[pair.id] = totals.get(pair.id, 0) + games
        return totals

    def mvp(self, matches: Sequence[Match]) -> Optional[Pair]:
        """Pair with the most games won; the first encountered wins ties."""
        ranked = self.ranked_pairs(matches)
        return ranked[0] if ranked else None

    def standings(self, matches: Sequence[Match]) -> CaptainStandings:
        """Bundle every captain-mode outcome into one view."""
        mvp = self.mvp(matches)
        pair_games = self.pair_game_totals(matches)
        return CaptainStandings(
            match_wins=self.team_match_wins(matches),
            game_totals=self.team_game_totals(matches),
            winning_team=self.winning_team(matches),
            mvp=mvp,
            mvp_games=pair_games.get(mvp.id, 0) if mvp else 0,
            is_complete=self.is_complete(matches),
        )

    def ranked_pairs(self, matches: Sequence[Match]) -> List[Pair]:
        """Pairs ordered by games won, ties kept in order of first appearance."""
        pairs: Dict[str, Pair] = {}
        for match in matches:
            for pair in match.pairs:
                if pair is not None:
                    pairs.setdefault(pair.id, pair)
        totals = self.pair_game_totals(matches)
        return sorted(pairs.values(), key=lambda p: -totals.get(p.id, 0))
