from __future__ import annotations

import logging
import random
from collections.abc import Mapping
from typing import Any, Iterable, List, Optional

from switchable.constants import DRAW_DECIMALS, PERCENT_MAX, PERCENT_MIN
from switchable.models.config_models import ItemConfig
from switchable.models.item import Item
from switchable.services.ranges import SplitRanges, calculate_split_ranges

logger = logging.getLogger(__name__)


class NoItemsError(LookupError):
    """Raised when a pick is requested from a splitter without items."""


class Splitter:
    """
    Percentage based splitter: picks one item per call, proportionally to item weights.

    Ranges are recomputed from the current items on every pick, so items added
    between picks take effect immediately.
    """

    def __init__(self, records: Optional[Iterable[Any]] = None, rng: Optional[random.Random] = None):
        self._items: List[Item] = []
        self._rng = rng or random.Random()
        self.last_selected: Optional[Item] = None

        for record in records or ():
            config = self._to_item_config(record)
            self.add_item(config.payload, config.weight, config.params)

    @staticmethod
    def _to_item_config(record: Any) -> ItemConfig:
        if isinstance(record, ItemConfig):
            return record
        if isinstance(record, Mapping):
            return ItemConfig.model_validate(dict(record))
        if isinstance(record, (tuple, list)):
            # (payload, weight[, params])
            return ItemConfig.model_validate(dict(zip(("payload", "weight", "params"), record)))
        # anything else carries no fields, so every field takes its default
        return ItemConfig.model_validate({})

    @property
    def items(self) -> tuple[Item, ...]:
        return tuple(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def add_item(self, payload: Any, weight: float, params: Any = None) -> None:
        """Add item to the split. Weight is taken as-is."""
        self._items.append(Item(payload=payload, weight=weight, params=params))

    def has_items(self) -> bool:
        return len(self._items) > 0

    def calculate_split_ranges(self) -> SplitRanges:
        return calculate_split_ranges(tuple(self._items))

    def generate_float(self, min_value: float, max_value: float, decimals: int) -> float:
        """Random float in [min_value, max_value] with the given number of decimal places."""
        power_ten = 10**decimals
        return self._rng.randint(round(min_value * power_ten), round(max_value * power_ten)) / power_ten

    def pick(self) -> Item:
        """
        Pick a random item based on split percentages.

        Returns:
            Ranged copy of the selected item.
        Raises:
            NoItemsError: if the splitter has no items.
        """
        items = tuple(self._items)
        if not items:
            raise NoItemsError("Splitter has no items to pick from")

        rand = self.generate_float(PERCENT_MIN, PERCENT_MAX, DRAW_DECIMALS)
        ranges = calculate_split_ranges(items)

        selected = ranges.find(rand)
        if selected is None:
            # Nothing matched (weights don't cover the draw), fall back to a uniform pick
            index = self._rng.randint(0, len(items) - 1)
            selected = ranges.by_insertion_index(index)
            logger.warning(
                "Draw %.2f outside all split ranges (upper bound %s), fell back to item #%d (%r)",
                rand,
                ranges.upper_bound,
                index,
                selected.payload,
            )
        else:
            logger.debug("Draw %.2f resolved to %r", rand, selected.payload)

        self.last_selected = selected
        return selected
