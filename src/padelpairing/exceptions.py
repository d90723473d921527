"""Exceptions for use in Padel Pairing"""

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


# ========== Base Application Exception ==========


class PadelPairingException(Exception):
    """Base exception for all Padel Pairing errors.

    All custom exceptions in the application should inherit from this class.
    This enables catching all application-specific errors with a single except clause.
    """

    pass


# ========== Pairing Exceptions ==========


class PairingException(PadelPairingException):
    """Base exception for pairing-related errors."""

    pass


class InsufficientPlayersException(PairingException):
    """Raised when the roster is too small to generate pairs."""

    pass


class InvalidSelectionException(PairingException):
    """Raised when a top-group or captain selection is invalid."""

    pass


class DraftStateException(PairingException):
    """Raised when a draft operation is attempted in the wrong phase."""

    pass


class CrossTeamPairingException(PairingException):
    """Raised when attempting to pair players from different teams."""

    pass


class PlayerAlreadyPairedException(PairingException):
    """Raised when a player who is already in a pair is selected again."""

    pass


class UnbalancedTeamsException(PairingException):
    """Raised when teams cannot be finalized because a player is left unpaired."""

    pass


# ========== Tournament Exceptions ==========


class TournamentException(PadelPairingException):
    """Base exception for tournament-related errors."""

    pass


class TournamentStateException(TournamentException):
    """Raised when tournament is in an invalid state for the requested operation."""

    pass


class InvalidModeException(TournamentException):
    """Raised when an unknown tournament mode is requested."""

    pass


class BracketException(TournamentException):
    """Raised when a bracket or schedule cannot be built from the given pairs."""

    pass


class MatchNotFoundException(TournamentException):
    """Raised when a requested match does not exist."""

    pass


# ========== Player Exceptions ==========


class PlayerException(PadelPairingException):
    """Base exception for player-related errors."""

    pass


class PlayerNotFoundException(PlayerException):
    """Raised when a requested player cannot be found."""

    pass


class InvalidPlayerDataException(PlayerException):
    """Raised when player data is invalid or incomplete."""

    pass


# ========== Result Exceptions ==========


class ResultException(PadelPairingException):
    """Base exception for result recording errors."""

    pass


class InvalidScoreException(ResultException):
    """Raised when a score is invalid (e.g., negative game count)."""

    pass


# ========== Command Line Exceptions ==========


class CommandException(PadelPairingException):
    """Raised when a shell command is malformed or used out of order."""

    pass
