"""Shared helpers for Padel Pairing."""

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

import logging
import os
from typing import Optional

from padelpairing.constants import DEFAULT_LOG_LEVEL, LOG_FORMAT, LOG_LEVEL_ENV_VAR

_ROOT_LOGGER_NAME = "padelpairing"


def _configure_root_logger() -> logging.Logger:
    root = logging.getLogger(_ROOT_LOGGER_NAME)
    # Only attach one handler, however many modules call setup_logger
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)
        root.setLevel(os.environ.get(LOG_LEVEL_ENV_VAR, DEFAULT_LOG_LEVEL).upper())
    return root


def setup_logger(name: str) -> logging.Logger:
    """Get a module logger that reports through the package root logger.

    Args:
        name: Usually ``__name__`` of the calling module

    Returns:
        Configured logger instance
    """
    _configure_root_logger()
    return logging.getLogger(name)


def set_log_level(level: Optional[str]) -> None:
    """Change the package log level at runtime (e.g. from a CLI flag)."""
    if not level:
        return
    _configure_root_logger().setLevel(level.upper())


__all__ = ["setup_logger", "set_log_level"]
