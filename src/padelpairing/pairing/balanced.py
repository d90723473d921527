"""Balanced top/bottom pairing.

The organiser picks the stronger half of the roster. Each stronger player is
randomly partnered with a player from the other half so every pair gets one
of each.
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

import math
import random
from typing import Iterable, List, Optional, Sequence, Set, Tuple

from padelpairing.constants import PAIR_ID_PREFIX
from padelpairing.exceptions import InvalidSelectionException
from padelpairing.models.pairing import BalancedPairingResult, Pair
from padelpairing.models.player import Player
from padelpairing.utils import setup_logger
from padelpairing.utils.validation import validate_roster_size_strict

logger = setup_logger(__name__)


def required_top_count(players: Sequence[Player]) -> int:
    """Number of players the organiser must place in the top group."""
    return math.ceil(len(players) / 2)


def split_top_bottom(
    players: Sequence[Player], top_players: Iterable[Player]
) -> Tuple[List[Player], List[Player]]:
    """Partition the roster into the selected top group and everyone else.

    Raises:
        InvalidSelectionException: If the top group has the wrong size, repeats
            a player or names someone outside the roster
    """
    roster_ids = {p.id for p in players}
    top_ids: List[str] = [p.id for p in top_players]
    required = required_top_count(players)

    if len(set(top_ids)) != len(top_ids):
        raise InvalidSelectionException("Top group lists the same player twice")
    unknown = [pid for pid in top_ids if pid not in roster_ids]
    if unknown:
        raise InvalidSelectionException(f"Top group players not in roster: {unknown}")
    if len(top_ids) != required:
        raise InvalidSelectionException(
            f"Select exactly {required} top players ({len(top_ids)} selected)"
        )

    selected = set(top_ids)
    top = [p for p in players if p.id in selected]
    bottom = [p for p in players if p.id not in selected]
    return top, bottom


def create_balanced_pairs(
    players: Sequence[Player],
    top_players: Iterable[Player],
    seeded_players: Optional[Iterable[Player]] = None,
    rng: Optional[random.Random] = None,
) -> BalancedPairingResult:
    """Pair every top player with a random bottom player.

    Both groups are shuffled independently, then one player is taken from
    each until one group runs out. Leftovers are paired among themselves two
    at a time; a final single leftover sits out.

    Args:
        players: Full roster (at least MIN_PLAYERS)
        top_players: The stronger half, exactly ceil(n/2) roster members
        seeded_players: Players whose pairs are seeded in the bracket
        rng: Source of randomness exposing ``shuffle`` (defaults to ``random``)

    Returns:
        BalancedPairingResult with the pairs and the player sitting out, if any

    Raises:
        InsufficientPlayersException: If the roster is too small
        InvalidSelectionException: If the top group is not a valid selection
    """
    validate_roster_size_strict(players)
    top, bottom = split_top_bottom(players, top_players)
    rng = rng or random
    seed_ids: Set[str] = {p.id for p in seeded_players or ()}

    rng.shuffle(top)
    rng.shuffle(bottom)

    members: List[Tuple[Player, Player]] = []
    while top and bottom:
        members.append((top.pop(), bottom.pop()))

    # Only reachable when the groups differ by more than one player
    remainders = top + bottom
    while len(remainders) >= 2:
        members.append((remainders.pop(), remainders.pop()))

    sitting_out = remainders[0] if remainders else None
    if sitting_out is not None:
        logger.warning(f"Odd roster: {sitting_out.name} sits out this tournament")

    pairs = [
        Pair(
            id=f"{PAIR_ID_PREFIX}{index}",
            player1=first,
            player2=second,
            is_captain_pair=first.id in seed_ids or second.id in seed_ids,
        )
        for index, (first, second) in enumerate(members, start=1)
    ]

    logger.info(
        f"Created {len(pairs)} balanced pairs from {len(players)} players "
        f"({sum(p.is_captain_pair for p in pairs)} seeded)"
    )
    return BalancedPairingResult(pairs=pairs, sitting_out=sitting_out)
