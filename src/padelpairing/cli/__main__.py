"""Command-line interface for Padel Pairing.

Without a subcommand this starts an interactive shell that runs a whole
tournament: roster, pairing, matches, results and standings. The ``demo`` and
``show`` subcommands run once and exit.
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

import argparse
import random
import sys
from pathlib import Path
from typing import List, Optional

from prompt_toolkit import PromptSession
from prompt_toolkit.completion import NestedCompleter, WordCompleter
from prompt_toolkit.history import InMemoryHistory
from prompt_toolkit.styles import Style

from padelpairing.cli.session import (
    COMMANDS,
    TournamentSession,
    load_tournament,
    render_matches,
    render_standings,
)
from padelpairing.constants import (
    APP_NAME,
    MIN_PLAYERS,
    MODE_BALANCED,
    MODE_CAPTAIN,
    TEAM_IDS,
    TOURNAMENT_MODES,
)
from padelpairing.exceptions import PadelPairingException
from padelpairing.models.player import create_player
from padelpairing.pairing import CaptainDraft, create_balanced_pairs, required_top_count
from padelpairing.tournament import Tournament
from padelpairing.utils import set_log_level, setup_logger

logger = setup_logger(__name__)

DEMO_NAMES = [
    "Ana", "Bruno", "Carla", "Diego", "Elena", "Fede", "Gala", "Hugo",
    "Irene", "Javi", "Kira", "Luis", "Marta", "Nico", "Olga", "Pablo",
]


# ANSI color codes for terminal output
class Colors:
    OKBLUE = "\033[94m"
    OKGREEN = "\033[92m"
    WARNING = "\033[93m"
    FAIL = "\033[91m"
    ENDC = "\033[0m"
    BOLD = "\033[1m"


def print_banner():
    """Print the application banner."""
    print(
        f"\n{Colors.OKBLUE}{Colors.BOLD}{APP_NAME}{Colors.ENDC}\n"
        f"Type {Colors.BOLD}help{Colors.ENDC} to see all available commands\n"
        f"Type {Colors.BOLD}exit{Colors.ENDC} or {Colors.BOLD}quit{Colors.ENDC} to leave\n"
    )


def print_commands_list():
    """Print list of all available commands."""
    print(f"\n{Colors.BOLD}Available Commands:{Colors.ENDC}\n")
    for info in COMMANDS.values():
        print(f"  {Colors.OKGREEN}{info['usage']:32}{Colors.ENDC} {info['description']}")
    print()


def create_completer(session: TournamentSession) -> NestedCompleter:
    """Complete command names, then player names for commands that take players."""
    player_words = WordCompleter(
        lambda: [p.name for p in session.roster.values()], ignore_case=True
    )
    completions = {}
    for cmd in COMMANDS:
        takes_players = "<player>" in COMMANDS[cmd]["usage"]
        completions[cmd] = player_words if takes_players else None
    completions["help"] = None
    completions["exit"] = None
    return NestedCompleter.from_nested_dict(completions)


def run_interactive_mode(args: argparse.Namespace) -> int:
    """Run the interactive shell with autocomplete."""
    print_banner()
    rng = random.Random(args.seed) if args.seed is not None else None
    tournament_session = TournamentSession(rng=rng)

    style = Style.from_dict({"prompt": "#00aa00 bold"})
    prompt_session = PromptSession(
        completer=create_completer(tournament_session),
        history=InMemoryHistory(),
        style=style,
    )

    while True:
        try:
            user_input = prompt_session.prompt("padel> ").strip()
            if not user_input:
                continue

            if user_input in ["exit", "quit", "q"]:
                print(f"\n{Colors.OKGREEN}Goodbye!{Colors.ENDC}\n")
                break

            if user_input in ["/help", "help", "?"]:
                print_commands_list()
                continue

            try:
                output = tournament_session.execute(user_input)
                if output:
                    print(output)
            except PadelPairingException as e:
                print(f"{Colors.FAIL}{e}{Colors.ENDC}")
            except Exception as e:
                print(f"{Colors.FAIL}Error: {e}{Colors.ENDC}")
                logger.exception("Command execution failed")

        except KeyboardInterrupt:
            print(f"\n{Colors.WARNING}Use 'exit' or 'quit' to leave{Colors.ENDC}")
        except EOFError:
            print(f"\n{Colors.OKGREEN}Goodbye!{Colors.ENDC}\n")
            break
    return 0


# ========== Demo ==========


def play_demo(mode: str, player_count: int, rng: random.Random) -> Tournament:
    """Pair a generated roster and play every match with random results."""
    players = [create_player(name) for name in DEMO_NAMES[:player_count]]
    tournament = Tournament(name=f"Demo ({mode})")

    if mode == MODE_BALANCED:
        top = players[: required_top_count(players)]
        result = create_balanced_pairs(
            players, top, seeded_players=players[:2], rng=rng
        )
        tournament.start(MODE_BALANCED, result.pairs, rng=rng)
        while tournament.champion is None:
            match = next(
                m for m in tournament.matches if m.is_playable and m.winner is None
            )
            tournament.declare_winner(match.id, rng.choice(match.pairs).id)
        return tournament

    draft = CaptainDraft(players, players[0].id, players[1].id)
    while not draft.is_draft_complete:
        draft.pick(rng.choice(draft.available_players).id)
    for team_id in TEAM_IDS:
        members = draft.team(team_id)
        for first, second in zip(members[::2], members[1::2]):
            draft.pair_players(first.id, second.id)
    tournament.start(MODE_CAPTAIN, draft.finalize(), rng=rng)

    for match in tournament.matches:
        team1, team2 = rng.sample(range(7), 2)
        tournament.update_match_score(match.id, team1, team2)
        winner = match.pair1 if team1 > team2 else match.pair2
        tournament.declare_winner(match.id, winner.id)
    return tournament


def run_demo_command(args: argparse.Namespace) -> int:
    rng = random.Random(args.seed)
    try:
        tournament = play_demo(args.mode, args.players, rng)
    except PadelPairingException as e:
        print(f"{Colors.FAIL}Error: {e}{Colors.ENDC}")
        return 1

    print(f"\n{Colors.BOLD}{tournament.name}{Colors.ENDC}")
    print_lines(render_matches(tournament))
    print_lines(render_standings(tournament))
    return 0


def run_show_command(args: argparse.Namespace) -> int:
    file_path = Path(args.file)
    if not file_path.exists():
        print(f"{Colors.FAIL}Error: File not found: {file_path}{Colors.ENDC}")
        return 1

    tournament = load_tournament(file_path)
    print(f"\n{Colors.BOLD}{tournament.name}{Colors.ENDC}")
    print_lines(render_matches(tournament))
    print_lines(render_standings(tournament))
    return 0


def print_lines(lines: List[str]) -> None:
    for line in lines:
        print(line)


# ========== Argument parsing ==========


def create_main_parser():
    """Create main argument parser."""
    parser = argparse.ArgumentParser(
        prog="padel-pairing",
        description=f"{APP_NAME} tournament shell",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Interactive mode
  padel-pairing

  # Play a random captain-mode tournament
  padel-pairing --seed 7 demo --mode captain --players 8

  # Print a saved tournament
  padel-pairing show --file club_night.json
        """,
    )
    parser.add_argument(
        "--interactive", "-i", action="store_true", help="Start in interactive mode"
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        type=str.upper,
        help="Override the log level",
    )
    parser.add_argument("--seed", type=int, help="Random seed for pairing and brackets")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    demo_parser = subparsers.add_parser("demo", help="Play a random tournament")
    demo_parser.add_argument("--mode", choices=TOURNAMENT_MODES, default=MODE_BALANCED)
    demo_parser.add_argument(
        "--players",
        type=int,
        default=8,
        choices=range(MIN_PLAYERS, len(DEMO_NAMES) + 1),
        metavar=f"{{{MIN_PLAYERS}..{len(DEMO_NAMES)}}}",
    )
    demo_parser.set_defaults(func=run_demo_command)

    show_parser = subparsers.add_parser("show", help="Print a saved tournament")
    show_parser.add_argument("--file", required=True, help="Tournament file (JSON)")
    show_parser.set_defaults(func=run_show_command)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the padel-pairing CLI."""
    parser = create_main_parser()
    args = parser.parse_args(argv)
    set_log_level(args.log_level)

    if args.interactive or not hasattr(args, "func"):
        return run_interactive_mode(args)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
