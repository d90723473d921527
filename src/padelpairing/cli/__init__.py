"""Interactive shell and one-shot commands for Padel Pairing."""

from padelpairing.cli.session import COMMANDS, TournamentSession

__all__ = ["COMMANDS", "TournamentSession"]
