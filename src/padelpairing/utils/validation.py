"""Validation utilities for Padel Pairing.

This module provides reusable validation functions with consistent error handling.
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

from typing import Optional, Sized

from padelpairing.constants import MAX_NAME_LENGTH, MIN_PLAYERS
from padelpairing.exceptions import (
    InsufficientPlayersException,
    InvalidPlayerDataException,
    InvalidScoreException,
)


class ValidationResult:
    """Result of a validation operation.

    Attributes:
        is_valid: Whether the validation passed
        error_message: Human-readable error message if invalid
        sanitized_value: Cleaned/normalized value if valid
    """

    def __init__(
        self,
        is_valid: bool,
        error_message: Optional[str] = None,
        sanitized_value: Optional[str] = None,
    ):
        self.is_valid = is_valid
        self.error_message = error_message
        self.sanitized_value = sanitized_value

    def __bool__(self) -> bool:
        """Allow using result in boolean context: if result: ..."""
        return self.is_valid

    def __repr__(self) -> str:
        if self.is_valid:
            return f"ValidationResult(VALID, {self.sanitized_value!r})"
        return f"ValidationResult(INVALID, {self.error_message!r})"


# ========== Player Validation ==========


def validate_player_name(name: Optional[str]) -> ValidationResult:
    """Validate a player's display name.

    Args:
        name: Name to validate

    Returns:
        ValidationResult with the stripped name as sanitized value
    """
    if not name or not name.strip():
        return ValidationResult(
            is_valid=False,
            error_message="Name is required",
        )

    name = name.strip()

    if len(name) > MAX_NAME_LENGTH:
        return ValidationResult(
            is_valid=False,
            error_message=f"Name must be at most {MAX_NAME_LENGTH} characters",
        )

    return ValidationResult(is_valid=True, sanitized_value=name)


def validate_player_name_strict(name: Optional[str]) -> str:
    """Validate a player name and raise exception if invalid.

    Returns:
        The sanitized name

    Raises:
        InvalidPlayerDataException: If name is invalid
    """
    result = validate_player_name(name)
    if not result.is_valid:
        raise InvalidPlayerDataException(result.error_message)
    return result.sanitized_value


# ========== Roster Validation ==========


def validate_roster_size(players: Sized) -> ValidationResult:
    """Check that a roster is large enough to start pairing.

    Args:
        players: The roster

    Returns:
        ValidationResult with validation status
    """
    if len(players) < MIN_PLAYERS:
        return ValidationResult(
            is_valid=False,
            error_message=(
                f"You need at least {MIN_PLAYERS} players to start "
                f"({len(players)} registered)"
            ),
        )
    return ValidationResult(is_valid=True, sanitized_value=str(len(players)))


def validate_roster_size_strict(players: Sized) -> None:
    """Validate roster size and raise exception if too small.

    Raises:
        InsufficientPlayersException: If fewer than MIN_PLAYERS players
    """
    result = validate_roster_size(players)
    if not result.is_valid:
        raise InsufficientPlayersException(result.error_message)


# ========== Score Validation ==========


def validate_game_count(value: Optional[int], field_name: str = "Games") -> ValidationResult:
    """Validate a per-side game count (non-negative integer).

    Args:
        value: Value to validate
        field_name: Name of the field for error messages

    Returns:
        ValidationResult with validation status
    """
    if value is None:
        return ValidationResult(
            is_valid=False,
            error_message=f"{field_name} is required",
        )

    try:
        int_value = int(value)
    except (ValueError, TypeError):
        return ValidationResult(
            is_valid=False,
            error_message=f"{field_name} must be a number: {value}",
        )

    if int_value < 0:
        return ValidationResult(
            is_valid=False,
            error_message=f"{field_name} cannot be negative: {value}",
        )
    return ValidationResult(is_valid=True, sanitized_value=str(int_value))


def validate_game_count_strict(value: Optional[int], field_name: str = "Games") -> int:
    """Validate a game count and raise exception if invalid.

    Raises:
        InvalidScoreException: If the count is missing, not a number or negative
    """
    result = validate_game_count(value, field_name)
    if not result.is_valid:
        raise InvalidScoreException(result.error_message)
    return int(result.sanitized_value)
