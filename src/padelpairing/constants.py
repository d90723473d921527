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

# --- Constants ---
APP_NAME = "Padel Pairing"
SAVE_FILE_EXTENSION = ".json"
DEFAULT_TOURNAMENT_NAME = "Padel Tournament"

# Logging
LOG_LEVEL_ENV_VAR = "PADELPAIRING_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"

# Roster limits
MIN_PLAYERS = 4
MIN_PAIRS = 2
MAX_NAME_LENGTH = 40

# Tournament modes
MODE_BALANCED = "balanced"  # Seeded single elimination
MODE_CAPTAIN = "captain"  # Cross-team round robin
TOURNAMENT_MODES = (MODE_BALANCED, MODE_CAPTAIN)

# Captain mode sides
TEAM_ONE = 1
TEAM_TWO = 2
TEAM_IDS = (TEAM_ONE, TEAM_TWO)

# Match slots
SLOT_ONE = 1
SLOT_TWO = 2
MATCH_SLOTS = (SLOT_ONE, SLOT_TWO)

# Id prefixes
PAIR_ID_PREFIX = "P"
MATCH_ID_PREFIX = "m"

# Round labels (balanced mode)
LABEL_FINAL = "Final"
LABEL_SEMIFINALS = "Semifinals"
LABEL_ROUND = "Round {number}"
