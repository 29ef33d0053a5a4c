from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class Item:
    """One weighted alternative of a split test."""

    payload: Any
    weight: float
    params: Any = None
    # Filled in only on the ranged copies produced by range calculation
    low_range: Optional[float] = None
    high_range: Optional[float] = None

    def contains(self, value: float) -> bool:
        """Check whether value falls inside [low_range, high_range] (inclusive)."""
        if self.low_range is None or self.high_range is None:
            return False
        return self.low_range <= value <= self.high_range
