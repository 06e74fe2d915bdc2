"""Base models shared by wire and domain models."""

from dataclasses import dataclass, field
from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class GoogleAdsWireModel(BaseModel):
    """Base for models parsed from Google Ads REST JSON.

    The REST API uses camelCase keys, encodes int64 values as strings and
    omits fields that are unset, so every field needs a default.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        coerce_numbers_to_str=True,
        frozen=True,
    )


class RecordModel(BaseModel):
    """Base for normalized, immutable report records."""

    model_config = ConfigDict(frozen=True, use_enum_values=True)


@dataclass(frozen=True)
class SearchResult(Generic[T]):
    """Records from one search call plus pagination metadata."""

    rows: list[T] = field(default_factory=list)
    next_page_token: str = ""
    total_results_count: int = 0


def strip_enum_prefix(value: str | None, prefix: str) -> str:
    """Render an API enum as a lowercase string without its type prefix.

    >>> strip_enum_prefix("CAMPAIGN_STATUS_ENABLED", "CAMPAIGN_STATUS_")
    'enabled'
    >>> strip_enum_prefix("ENABLED", "CAMPAIGN_STATUS_")
    'enabled'
    """
    if not value:
        return ""
    return value.removeprefix(prefix).lower()


MICROS_PER_CURRENCY_UNIT = 1_000_000


def to_micros(amount: float) -> int:
    """Convert a fractional currency amount to integer micros, truncating."""
    return int(amount * MICROS_PER_CURRENCY_UNIT)


def conversion_rate(conversions: float, clicks: int) -> float:
    """Conversions per 100 clicks; zero when there were no clicks."""
    if clicks > 0:
        return conversions / clicks * 100
    return 0.0
