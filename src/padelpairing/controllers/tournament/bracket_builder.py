"""Initial match graph construction.

Balanced mode builds a seeded single-elimination bracket with byes. Captain
mode builds a cross-team round robin where every team 1 pair meets every
team 2 pair exactly once.
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
import random
from collections import deque
from dataclasses import replace
from typing import List, Optional, Sequence, Tuple

from padelpairing.constants import (
    MATCH_ID_PREFIX,
    MATCH_SLOTS,
    MIN_PAIRS,
    MODE_BALANCED,
    MODE_CAPTAIN,
    SLOT_ONE,
    SLOT_TWO,
    TEAM_ONE,
    TEAM_TWO,
)
from padelpairing.exceptions import BracketException, InvalidModeException
from padelpairing.models.pairing import Pair
from padelpairing.models.tournament import Match, Score
from padelpairing.type_hints import Slot
from padelpairing.utils import setup_logger

logger = setup_logger(__name__)

# (match index in the first round, slot)
SlotRef = Tuple[int, Slot]


def get_bracket_size(pair_count: int) -> int:
    """Smallest power of two that holds ``pair_count`` pairs (at least 2)."""
    if pair_count <= 2:
        return 2
    return 1 << (pair_count - 1).bit_length()


def seed_order(pairs: Sequence[Pair], rng=random) -> List[Pair]:
    """Order pairs for slot assignment.

    With two or more seeded pairs the first two seeds take the first and last
    positions and everyone else is shuffled between them, so the seeds can
    only meet in the final. Otherwise the whole field is shuffled.
    """
    seeds = [p for p in pairs if p.is_captain_pair]
    if len(seeds) < 2:
        ordered = list(pairs)
        rng.shuffle(ordered)
        return ordered

    first_seed, last_seed = seeds[0], seeds[1]
    others = [p for p in pairs if p.id not in (first_seed.id, last_seed.id)]
    rng.shuffle(others)
    return [first_seed, *others, last_seed]


def _fill_order(first_round_count: int) -> List[SlotRef]:
    """Order in which interior first-round slots receive byes, then pairs.

    The first match's slot 1 and the last match's slot 2 are reserved for the
    first and last pair of the seed order.
    """
    last = first_round_count - 1
    order: List[SlotRef] = [(0, SLOT_TWO), (last, SLOT_ONE)]
    for index in range(1, last):
        order.append((index, SLOT_ONE))
        order.append((index, SLOT_TWO))
    return order


def _resolve(
    match_id: str, round_: int, slots: List[Optional[Pair]], vacant: Tuple[Slot, ...]
) -> Match:
    """Create a match, auto-advancing the occupant when the other slot is a bye."""
    pair1, pair2 = slots
    winner = None
    if len(vacant) == 1:
        winner = pair2 if vacant[0] == SLOT_ONE else pair1
    return Match(
        id=match_id,
        round=round_,
        pair1=pair1,
        pair2=pair2,
        winner=winner,
        bye_slots=vacant,
    )


def build_elimination_bracket(
    pairs: Sequence[Pair], rng: Optional[random.Random] = None
) -> List[Match]:
    """Build a seeded single-elimination bracket.

    Args:
        pairs: Competing pairs (at least MIN_PAIRS)
        rng: Source of randomness exposing ``shuffle`` (defaults to ``random``)

    Returns:
        All matches, first round first, final last

    Raises:
        BracketException: If there are fewer than MIN_PAIRS pairs
    """
    if len(pairs) < MIN_PAIRS:
        raise BracketException(
            f"At least {MIN_PAIRS} pairs are needed for a bracket ({len(pairs)} given)"
        )

    ordered = seed_order(pairs, rng or random)
    size = get_bracket_size(len(ordered))
    byes = size - len(ordered)
    first_round_count = size // 2

    # Ids for every round up front so links can be set at construction
    counter = itertools.count(1)
    round_ids: List[List[str]] = []
    count = first_round_count
    while count >= 1:
        round_ids.append([f"{MATCH_ID_PREFIX}{next(counter)}" for _ in range(count)])
        count //= 2

    slots: List[List[Optional[Pair]]] = [[None, None] for _ in range(first_round_count)]
    slots[0][0] = ordered[0]
    slots[-1][1] = ordered[-1]

    interior = deque(ordered[1:-1])
    remaining_byes = byes
    for index, slot in _fill_order(first_round_count):
        if remaining_byes > 0:
            remaining_byes -= 1
        elif interior:
            slots[index][slot - 1] = interior.popleft()

    previous: List[Match] = []
    for index, (pair1, pair2) in enumerate(slots):
        vacant = tuple(
            slot for slot, pair in zip(MATCH_SLOTS, (pair1, pair2)) if pair is None
        )
        previous.append(_resolve(round_ids[0][index], 0, [pair1, pair2], vacant))

    matches: List[Match] = []
    for round_number in range(1, len(round_ids)):
        current: List[Match] = []
        for index, match_id in enumerate(round_ids[round_number]):
            sources = previous[2 * index], previous[2 * index + 1]
            vacant = tuple(
                slot for slot, source in zip(MATCH_SLOTS, sources) if source.is_void
            )
            current.append(
                _resolve(
                    match_id,
                    round_number,
                    [sources[0].winner, sources[1].winner],
                    vacant,
                )
            )
        matches.extend(_link(previous, current))
        previous = current
    matches.extend(previous)

    logger.info(
        f"Built elimination bracket: {len(pairs)} pairs, size {size}, "
        f"{byes} byes, {len(matches)} matches"
    )
    return matches


def _link(sources: List[Match], targets: List[Match]) -> List[Match]:
    """Point each source match at the target match its winner feeds."""
    linked = []
    for index, source in enumerate(sources):
        target = targets[index // 2]
        slot: Slot = SLOT_ONE if index % 2 == 0 else SLOT_TWO
        linked.append(replace(source, next_match_id=target.id, next_match_slot=slot))
    return linked


def build_round_robin(pairs: Sequence[Pair]) -> List[Match]:
    """Schedule every team 1 pair against every team 2 pair once.

    Matches are generated by rotating offset: for each offset, team 1 pair
    ``i`` meets team 2 pair ``(i + offset) % n2``. This spreads each pair's
    appearances over the schedule instead of clustering them.

    Raises:
        BracketException: If either team has no pairs
    """
    team_one = [p for p in pairs if p.team_id == TEAM_ONE]
    team_two = [p for p in pairs if p.team_id == TEAM_TWO]
    if not team_one or not team_two:
        raise BracketException(
            f"Both teams need pairs ({len(team_one)} vs {len(team_two)})"
        )

    counter = itertools.count(1)
    matches = []
    for offset in range(len(team_two)):
        for index, pair in enumerate(team_one):
            matches.append(
                Match(
                    id=f"{MATCH_ID_PREFIX}{next(counter)}",
                    round=0,
                    pair1=pair,
                    pair2=team_two[(index + offset) % len(team_two)],
                    score=Score(),
                )
            )

    logger.info(
        f"Built round robin: {len(team_one)} vs {len(team_two)} pairs, "
        f"{len(matches)} matches"
    )
    return matches


def build_matches(
    pairs: Sequence[Pair], mode: str, rng: Optional[random.Random] = None
) -> List[Match]:
    """Build the initial match list for a tournament mode.

    Raises:
        InvalidModeException: If the mode is not supported
        BracketException: If the pairs cannot form a schedule
    """
    if mode == MODE_BALANCED:
        return build_elimination_bracket(pairs, rng)
    elif mode == MODE_CAPTAIN:
        return build_round_robin(pairs)
    raise InvalidModeException(f"Tournament mode '{mode}' is not implemented")
