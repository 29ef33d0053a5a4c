import re
from typing import Any, List

from pydantic import AliasChoices, BaseModel, Field, field_validator

# Leading number of a string, so "12abc" reads as 12.0
_LEADING_NUMBER = re.compile(r"\s*[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")


class ItemConfig(BaseModel):
    """One split item as read from configuration. Parsing never fails on bad values."""

    payload: str = Field(default="", validation_alias=AliasChoices("payload", "object"))
    weight: float = Field(default=0.0, validation_alias=AliasChoices("weight", "split"))
    params: Any = None

    @field_validator("payload", mode="before")
    @classmethod
    def _payload_or_empty(cls, value):
        if not isinstance(value, str):
            return ""
        return value.strip()

    @field_validator("weight", mode="before")
    @classmethod
    def _weight_or_zero(cls, value):
        if isinstance(value, str):
            match = _LEADING_NUMBER.match(value)
            return float(match.group()) if match else 0.0
        try:
            return float(value)
        except (TypeError, ValueError):
            return 0.0


class SplitConfig(BaseModel):
    name: str
    items: List[ItemConfig] = []
