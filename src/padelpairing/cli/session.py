"""Command interpreter behind the interactive shell.

A ``TournamentSession`` keeps the roster, the pairing step in progress and the
tournament itself, and turns one line of input into one block of output. It
does no terminal I/O of its own so it can be driven from tests.
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

import json
import random
from pathlib import Path
from typing import Callable, Dict, List, Optional

from padelpairing.constants import (
    MODE_BALANCED,
    MODE_CAPTAIN,
    SAVE_FILE_EXTENSION,
    TEAM_IDS,
)
from padelpairing.exceptions import (
    CommandException,
    PlayerNotFoundException,
    TournamentStateException,
)
from padelpairing.models.pairing import Pair
from padelpairing.models.player import Player, create_player
from padelpairing.models.tournament import Match
from padelpairing.pairing import CaptainDraft, create_balanced_pairs
from padelpairing.tournament import Tournament
from padelpairing.utils import setup_logger
from padelpairing.utils.validation import validate_game_count_strict

logger = setup_logger(__name__)

# Command name -> (usage, description); the shell builds help and completion from it
COMMANDS: Dict[str, Dict[str, str]] = {
    "add": {"usage": "add <name>", "description": "Register a player"},
    "players": {"usage": "players", "description": "List the roster"},
    "seed": {
        "usage": "seed <player>...",
        "description": "Mark players whose pairs are kept apart in the bracket",
    },
    "balanced": {
        "usage": "balanced <player>...",
        "description": "Pair the listed top players with random bottom players",
    },
    "captains": {
        "usage": "captains <player> <player>",
        "description": "Start a captain draft",
    },
    "pick": {"usage": "pick <player>", "description": "Draft a player for the team on turn"},
    "pair": {
        "usage": "pair <player> <player>",
        "description": "Pair two drafted players of the same team",
    },
    "unpair": {"usage": "unpair <pair>", "description": "Split a drafted pair"},
    "start": {"usage": "start", "description": "Create matches from the current pairs"},
    "matches": {"usage": "matches", "description": "Show all matches by round"},
    "win": {"usage": "win <match> <pair>", "description": "Declare a match winner"},
    "undo": {"usage": "undo <match>", "description": "Undo a match winner"},
    "score": {
        "usage": "score <match> <team1> <team2>",
        "description": "Record games per side (captain mode)",
    },
    "standings": {"usage": "standings", "description": "Show champion or team standings"},
    "reset": {"usage": "reset", "description": "Clear pairs and matches, keep the roster"},
    "save": {"usage": "save <file>", "description": "Save the tournament as JSON"},
    "load": {"usage": "load <file>", "description": "Load a saved tournament"},
}


# ========== Rendering ==========


def format_match(match: Match) -> str:
    """One-line summary of a match."""

    def side(pair: Optional[Pair], slot: int) -> str:
        if pair is not None:
            return f"{pair.id} {pair.display_name}"
        return "(bye)" if slot in match.bye_slots else "(waiting)"

    line = f"{match.id}: {side(match.pair1, 1)} vs {side(match.pair2, 2)}"
    if match.score is not None:
        line += f"  [{match.score.team1}-{match.score.team2}]"
    if match.winner is not None:
        line += f"  -> {match.winner.display_name}"
    return line


def render_matches(tournament: Tournament) -> List[str]:
    if not tournament.matches:
        return ["No matches yet"]
    lines = []
    for number, matches in tournament.rounds().items():
        lines.append(f"== {tournament.round_label(number)} ==")
        lines.extend(f"  {format_match(m)}" for m in matches if not m.is_void)
    return lines


def render_standings(tournament: Tournament) -> List[str]:
    if not tournament.matches:
        return ["No matches yet"]

    if tournament.mode == MODE_BALANCED:
        champion = tournament.champion
        if champion is None:
            return ["Champion: undecided"]
        return [f"Champion: {champion.display_name}"]

    standings = tournament.standings()
    lines = []
    for team_id in TEAM_IDS:
        lines.append(
            f"Team {team_id}: {standings.match_wins[team_id]} wins, "
            f"{standings.game_totals[team_id]} games"
        )
    if standings.is_complete:
        if standings.winning_team is None:
            lines.append("Result: draw")
        else:
            lines.append(f"Result: team {standings.winning_team} wins")
    if standings.mvp is not None:
        lines.append(f"MVP: {standings.mvp.display_name} ({standings.mvp_games} games)")
    return lines


def save_tournament(tournament: Tournament, path: Path) -> Path:
    """Write the tournament record as JSON, adding the save extension if missing."""
    if path.suffix != SAVE_FILE_EXTENSION:
        path = path.with_suffix(SAVE_FILE_EXTENSION)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(tournament.to_dict(), f, indent=2)
    logger.info(f"Saved tournament to {path}")
    return path


def load_tournament(path: Path) -> Tournament:
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    logger.info(f"Loaded tournament from {path}")
    return Tournament.from_dict(data)


# ========== Session ==========


class TournamentSession:
    """Interactive state: roster, pairing in progress and the tournament."""

    def __init__(self, tournament: Optional[Tournament] = None, rng=None):
        self.tournament = tournament or Tournament()
        self.rng = rng or random.Random()
        self.roster: Dict[str, Player] = {}
        self.seeded: List[Player] = []
        self.draft: Optional[CaptainDraft] = None
        self.pending_pairs: List[Pair] = []
        self._handlers: Dict[str, Callable[[List[str]], List[str]]] = {
            "add": self._add,
            "players": self._players,
            "seed": self._seed,
            "balanced": self._balanced,
            "captains": self._captains,
            "pick": self._pick,
            "pair": self._pair,
            "unpair": self._unpair,
            "start": self._start,
            "matches": self._matches,
            "win": self._win,
            "undo": self._undo,
            "score": self._score,
            "standings": self._standings,
            "reset": self._reset,
            "save": self._save,
            "load": self._load,
        }

    def execute(self, line: str) -> str:
        """Run one command line and return its output.

        Raises:
            CommandException: If the command is unknown or malformed
            PadelPairingException: If the command is rejected by the engine
        """
        parts = line.split()
        if not parts:
            return ""
        command, args = parts[0].lstrip("/").lower(), parts[1:]
        handler = self._handlers.get(command)
        if handler is None:
            raise CommandException(f"Unknown command: {command}")
        return "\n".join(handler(args))

    # ========== Helpers ==========

    @staticmethod
    def _expect(args: List[str], count: int, command: str) -> None:
        if len(args) != count:
            raise CommandException(f"Usage: {COMMANDS[command]['usage']}")

    def _player(self, token: str) -> Player:
        """Find a roster player by id or, case-insensitively, by name."""
        if token in self.roster:
            return self.roster[token]
        for player in self.roster.values():
            if player.name.lower() == token.lower():
                return player
        raise PlayerNotFoundException(f"No player matches '{token}'")

    def _require_no_matches(self) -> None:
        if self.tournament.is_started:
            raise TournamentStateException("Tournament is running, reset it first")

    # ========== Roster ==========

    def _add(self, args: List[str]) -> List[str]:
        self._require_no_matches()
        player = create_player(" ".join(args))
        self.roster[player.id] = player
        return [f"Added {player.name} ({player.id})"]

    def _players(self, args: List[str]) -> List[str]:
        if not self.roster:
            return ["Roster is empty"]
        seeded = {p.id for p in self.seeded}
        return [
            f"{p.id}  {p.name}{' (seed)' if p.id in seeded else ''}"
            for p in self.roster.values()
        ]

    # ========== Balanced pairing ==========

    def _seed(self, args: List[str]) -> List[str]:
        self._require_no_matches()
        self.seeded = [self._player(token) for token in args]
        return [f"Seeded: {', '.join(p.name for p in self.seeded) or 'nobody'}"]

    def _balanced(self, args: List[str]) -> List[str]:
        self._require_no_matches()
        top = [self._player(token) for token in args]
        result = create_balanced_pairs(
            list(self.roster.values()), top, seeded_players=self.seeded, rng=self.rng
        )
        self.draft = None
        self.pending_pairs = result.pairs
        lines = [
            f"{pair.id}: {pair.display_name}{' (seed)' if pair.is_captain_pair else ''}"
            for pair in result.pairs
        ]
        if result.sitting_out is not None:
            lines.append(f"Sitting out: {result.sitting_out.name}")
        return lines

    # ========== Captain draft ==========

    def _captains(self, args: List[str]) -> List[str]:
        self._require_no_matches()
        self._expect(args, 2, "captains")
        first, second = (self._player(token) for token in args)
        self.draft = CaptainDraft(list(self.roster.values()), first.id, second.id)
        self.pending_pairs = []
        return [f"Draft started: {first.name} (team 1) vs {second.name} (team 2)"]

    def _active_draft(self) -> CaptainDraft:
        if self.draft is None:
            raise CommandException("No draft running, use 'captains' first")
        return self.draft

    def _pick(self, args: List[str]) -> List[str]:
        self._expect(args, 1, "pick")
        draft = self._active_draft()
        player = self._player(args[0])
        team_id = draft.pick(player.id)
        lines = [f"Team {team_id} picks {player.name}"]
        if draft.is_draft_complete:
            lines.append("Draft complete, pair each team's players with 'pair'")
        else:
            lines.append(f"Team {draft.current_team} to pick")
        return lines

    def _pair(self, args: List[str]) -> List[str]:
        self._expect(args, 2, "pair")
        draft = self._active_draft()
        first, second = (self._player(token) for token in args)
        pair = draft.pair_players(first.id, second.id)
        return [f"Team {pair.team_id} pair {pair.id}: {pair.display_name}"]

    def _unpair(self, args: List[str]) -> List[str]:
        self._expect(args, 1, "unpair")
        pair = self._active_draft().remove_pair(args[0])
        return [f"Split {pair.id}: {pair.display_name}"]

    # ========== Tournament ==========

    def _start(self, args: List[str]) -> List[str]:
        if self.draft is not None:
            mode, pairs = MODE_CAPTAIN, self.draft.finalize()
        elif self.pending_pairs:
            mode, pairs = MODE_BALANCED, self.pending_pairs
        else:
            raise CommandException("Create pairs with 'balanced' or 'captains' first")

        matches = self.tournament.start(mode, pairs, rng=self.rng)
        return [f"Started {mode} tournament with {len(matches)} matches"]

    def _matches(self, args: List[str]) -> List[str]:
        return render_matches(self.tournament)

    def _win(self, args: List[str]) -> List[str]:
        self._expect(args, 2, "win")
        match = self.tournament.get_match(args[0])
        if not self.tournament.declare_winner(match.id, args[1]):
            raise CommandException(f"Cannot declare {args[1]} winner of {match.id}")
        return [format_match(self.tournament.get_match(match.id))]

    def _undo(self, args: List[str]) -> List[str]:
        self._expect(args, 1, "undo")
        match = self.tournament.get_match(args[0])
        if not self.tournament.undo_match_winner(match.id):
            return [f"Nothing to undo for {match.id}"]
        return [format_match(self.tournament.get_match(match.id))]

    def _score(self, args: List[str]) -> List[str]:
        self._expect(args, 3, "score")
        match = self.tournament.get_match(args[0])
        team1 = validate_game_count_strict(args[1], "Team 1 games")
        team2 = validate_game_count_strict(args[2], "Team 2 games")
        if not self.tournament.update_match_score(match.id, team1, team2):
            raise CommandException(f"Cannot record a score for {match.id}")
        return [format_match(self.tournament.get_match(match.id))]

    def _standings(self, args: List[str]) -> List[str]:
        return render_standings(self.tournament)

    def _reset(self, args: List[str]) -> List[str]:
        self.tournament.reset_tournament()
        self.draft = None
        self.pending_pairs = []
        return ["Tournament reset, roster kept"]

    # ========== Storage ==========

    def _save(self, args: List[str]) -> List[str]:
        self._expect(args, 1, "save")
        path = save_tournament(self.tournament, Path(args[0]))
        return [f"Saved to {path}"]

    def _load(self, args: List[str]) -> List[str]:
        self._expect(args, 1, "load")
        self.tournament = load_tournament(Path(args[0]))
        self.draft = None
        self.pending_pairs = []
        self.roster = {
            player.id: player
            for pair in self.tournament.pairs
            for player in pair.players
        }
        return [
            f"Loaded '{self.tournament.name}' ({self.tournament.mode or 'not started'}, "
            f"{len(self.tournament.matches)} matches)"
        ]
