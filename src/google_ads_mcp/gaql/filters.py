"""Normalization rules shared by the QueryBuilder filter methods.

ID, name and enum filters follow the same algorithm for every resource;
only the field, resource path infix, literal style and vocabulary differ.
Each rule is described once here by a small frozen dataclass and applied by a
function that returns a predicate, ``None`` when the filter is empty, or
raises ``ValidationError``.
"""

import logging
import re
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from datetime import datetime

from google_ads_mcp.core.exceptions import ValidationError
from google_ads_mcp.gaql.predicates import (
    AnyOf,
    Between,
    Comparison,
    ContainsPattern,
    EnumLiteral,
    InList,
    Like,
    NumberLiteral,
    Predicate,
    StringLiteral,
)

logger = logging.getLogger(__name__)

_DIGITS = re.compile(r"^[0-9]+$")
_DATE = re.compile(r"^[0-9]{4}-[0-9]{2}-[0-9]{2}$")


@dataclass(frozen=True)
class IDFilter:
    """How IDs for one resource are recognized and rendered.

    Attributes:
        field: Field the predicate targets
        label: Human name used in error messages, e.g. "campaign ID"
        path_infix: Resource path separator, e.g. "/campaigns/"
        strip_prefix: Plain prefix removed before validation, e.g. "customers/"
        resource_name_prefix: When set, IDs render as quoted resource names
            (``'customers/<id>'``) and always as an IN list
    """

    field: str
    label: str
    path_infix: str | None = None
    strip_prefix: str | None = None
    resource_name_prefix: str | None = None

    @property
    def expected_format(self) -> str:
        if self.path_infix:
            return f"customers/XXX{self.path_infix}YYY"
        return "numeric ID"


@dataclass(frozen=True)
class EnumFilter:
    """Vocabulary and rendering for a status-like filter.

    ``allowed`` of ``None`` means any token is accepted; ``known`` is then a
    reference list used only for logging.
    """

    field: str
    label: str
    allowed: tuple[str, ...] | None = None
    known: tuple[str, ...] = ()
    quoted: bool = False


def _unique(values: Iterable[str]) -> list[str]:
    seen: set[str] = set()
    unique = []
    for value in values:
        if value not in seen:
            seen.add(value)
            unique.append(value)
    return unique


def normalize_id(raw: str, rule: IDFilter) -> str:
    """Reduce a raw ID or resource path to its numeric part."""
    candidate = raw.strip()

    if rule.path_infix and rule.path_infix in candidate:
        parts = candidate.split(rule.path_infix)
        if len(parts) != 2:
            raise ValidationError(
                f"{rule.label} \"{raw}\" is invalid: expected format "
                f"'{rule.expected_format}' or numeric ID"
            )
        candidate = parts[1].strip()
    elif rule.strip_prefix:
        candidate = candidate.removeprefix(rule.strip_prefix)

    candidate = candidate.replace("-", "")
    if not _DIGITS.match(candidate):
        raise ValidationError(f"{rule.label} \"{raw}\" is invalid: must be numeric")
    return candidate


def id_predicate(raw_ids: Sequence[str] | None, rule: IDFilter) -> Predicate | None:
    ids = _unique(
        normalize_id(raw, rule) for raw in raw_ids or () if raw and raw.strip()
    )
    if not ids:
        return None

    if rule.resource_name_prefix:
        return InList(
            rule.field,
            tuple(StringLiteral(f"{rule.resource_name_prefix}{i}") for i in ids),
        )
    if len(ids) == 1:
        return Comparison(rule.field, "=", NumberLiteral(ids[0]))
    return InList(rule.field, tuple(NumberLiteral(i) for i in ids))


def name_predicate(names: Sequence[str] | None, field: str) -> Predicate | None:
    """Case-insensitive substring match on any of the given names."""
    patterns = tuple(
        Like(field, ContainsPattern(name.strip().lower()))
        for name in names or ()
        if name and name.strip()
    )
    if not patterns:
        return None
    return AnyOf(patterns)


def enum_predicate(values: Sequence[str] | None, rule: EnumFilter) -> Predicate | None:
    tokens = []
    for value in values or ():
        token = (value or "").strip().upper()
        if not token:
            continue
        if rule.allowed is not None and token not in rule.allowed:
            raise ValidationError(
                f"invalid {rule.label} \"{value}\": must be one of "
                f"{', '.join(rule.allowed)}"
            )
        if rule.allowed is None and rule.known and token not in rule.known:
            logger.debug(f"Passing unrecognized {rule.label} {token} to the API")
        tokens.append(token)

    tokens = _unique(tokens)
    if not tokens:
        return None

    try:
        literals = tuple(
            StringLiteral(t) if rule.quoted else EnumLiteral(t) for t in tokens
        )
    except ValueError as e:
        raise ValidationError(f"invalid {rule.label}: {e}") from e
    return InList(rule.field, literals)


def validate_date(value: str, bound: str) -> str:
    """Return the date unchanged if it is a real ``YYYY-MM-DD`` date."""
    try:
        if not _DATE.match(value):
            raise ValueError(value)
        datetime.strptime(value, "%Y-%m-%d")
    except ValueError:
        raise ValidationError(
            f"invalid date format for {bound} date \"{value}\": expected YYYY-MM-DD"
        ) from None
    return value


def date_range_predicate(
    start: str | None, end: str | None, field: str = "segments.date"
) -> Predicate | None:
    start = (start or "").strip()
    end = (end or "").strip()

    if start:
        validate_date(start, "start")
    if end:
        validate_date(end, "end")

    if start and end:
        return Between(field, StringLiteral(start), StringLiteral(end))
    if start:
        return Comparison(field, ">=", StringLiteral(start))
    if end:
        return Comparison(field, "<=", StringLiteral(end))
    return None
