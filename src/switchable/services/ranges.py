"""
Split range calculation: maps percentage weights onto contiguous sub-ranges of [0, 100].
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass, replace
from typing import Iterator, Optional, Sequence, Tuple

from switchable.constants import (
    HIGH_SNAP_FROM,
    LOW_SNAP_FROM,
    PERCENT_MAX,
    PERCENT_MIN,
    RANGE_GAP,
    SNAP_TOLERANCE,
)
from switchable.models.item import Item

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SplitRanges:
    """Immutable result of one range calculation.

    ``items`` holds ranged copies sorted by descending weight, ``order[i]`` is the
    insertion index of ``items[i]`` in the collection the ranges were computed from.
    """

    items: Tuple[Item, ...] = ()
    order: Tuple[int, ...] = ()

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[Item]:
        return iter(self.items)

    def find(self, value: float) -> Optional[Item]:
        """Return the first item (in range order) whose range contains value."""
        for item in self.items:
            if item.contains(value):
                return item
        return None

    def by_insertion_index(self, index: int) -> Item:
        """Return the ranged copy of the item that was inserted at position index."""
        return self.items[self.order.index(index)]

    @property
    def upper_bound(self) -> float:
        return self.items[-1].high_range if self.items else PERCENT_MIN


def _matches(value: float, target: float) -> bool:
    # absorbs binary noise only, e.g. 33.33 * 3 == 99.99000000000001
    return math.isclose(value, target, rel_tol=0.0, abs_tol=SNAP_TOLERANCE)


def calculate_split_ranges(items: Sequence[Item]) -> SplitRanges:
    """
    Calculate low/high ranges for each item based on its weight.

    Items are ordered by descending weight; equal weights keep insertion order.
    Every range after the first starts 0.01 above the previous high bound so no
    drawn value can fall into two ranges. A high bound of 99.99 is snapped to 100
    and a low bound of 0.01 is snapped to 0.

    Args:
        items: Items in insertion order. They are not modified.

    Returns:
        SplitRanges snapshot with ranged copies of the items.
    """
    order = sorted(range(len(items)), key=lambda i: (-items[i].weight, i))

    ranged = []
    prev = PERCENT_MIN
    for index in order:
        item = items[index]
        low_range = prev + (RANGE_GAP if prev > PERCENT_MIN else PERCENT_MIN)
        high_range = item.weight + prev

        if _matches(high_range, HIGH_SNAP_FROM):
            high_range = PERCENT_MAX
        if _matches(low_range, LOW_SNAP_FROM):
            low_range = PERCENT_MIN

        ranged.append(replace(item, low_range=low_range, high_range=high_range))
        prev = high_range

    result = SplitRanges(items=tuple(ranged), order=tuple(order))
    logger.debug(
        "Calculated split ranges: %s",
        [(item.payload, item.low_range, item.high_range) for item in result],
    )
    return result
