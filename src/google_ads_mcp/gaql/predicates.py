"""Typed GAQL literals and predicates.

Every value that ends up in a WHERE clause is wrapped in a literal type that
knows how to render itself, so quoting and escaping never depend on the
caller. Predicates combine a field path with literals and render to the
text that ``QueryBuilder.build`` joins with ``AND``.
"""

import re
from dataclasses import dataclass
from typing import Union

_NUMBER = re.compile(r"^[0-9]+$")
_ENUM_TOKEN = re.compile(r"^[A-Z][A-Z0-9_]*$")
_FIELD_PATH = re.compile(r"^[a-z][a-z0-9_]*(\.[a-z][a-z0-9_]*)*$")

COMPARISON_OPERATORS = frozenset({"=", "!=", ">", ">=", "<", "<=", "DURING"})


def escape_string(value: str) -> str:
    """Escape text for use inside a single-quoted GAQL string."""
    return value.replace("\\", "\\\\").replace("'", "''")


def escape_like(value: str) -> str:
    """Escape text for use inside a LIKE pattern.

    Order matters: backslashes are doubled first so the escapes added for
    ``%`` and ``_`` are not escaped again.
    """
    return escape_string(value).replace("%", "\\%").replace("_", "\\_")


@dataclass(frozen=True)
class NumberLiteral:
    """A bare non-negative integer, e.g. a campaign ID."""

    value: str

    def __post_init__(self) -> None:
        if not _NUMBER.match(self.value):
            raise ValueError(f"not a numeric literal: {self.value!r}")

    def render(self) -> str:
        return self.value


@dataclass(frozen=True)
class EnumLiteral:
    """An unquoted enum token such as ``ENABLED`` or ``LAST_7_DAYS``."""

    value: str

    def __post_init__(self) -> None:
        if not _ENUM_TOKEN.match(self.value):
            raise ValueError(f"not an enum token: {self.value!r}")

    def render(self) -> str:
        return self.value


@dataclass(frozen=True)
class BooleanLiteral:
    value: bool

    def render(self) -> str:
        return "true" if self.value else "false"


@dataclass(frozen=True)
class StringLiteral:
    """A single-quoted string; quotes and backslashes are escaped on render."""

    value: str

    def render(self) -> str:
        return f"'{escape_string(self.value)}'"


@dataclass(frozen=True)
class ContainsPattern:
    """A ``'%text%'`` LIKE pattern with wildcard characters escaped."""

    text: str

    def render(self) -> str:
        return f"'%{escape_like(self.text)}%'"


GAQLLiteral = Union[NumberLiteral, EnumLiteral, BooleanLiteral, StringLiteral]


def _check_field(field: str) -> None:
    if not _FIELD_PATH.match(field):
        raise ValueError(f"invalid field path: {field!r}")


@dataclass(frozen=True)
class Comparison:
    field: str
    operator: str
    value: GAQLLiteral

    def __post_init__(self) -> None:
        _check_field(self.field)
        if self.operator not in COMPARISON_OPERATORS:
            raise ValueError(f"unsupported operator: {self.operator!r}")

    def render(self) -> str:
        return f"{self.field} {self.operator} {self.value.render()}"


@dataclass(frozen=True)
class InList:
    field: str
    values: tuple[GAQLLiteral, ...]

    def __post_init__(self) -> None:
        _check_field(self.field)
        if not self.values:
            raise ValueError("IN list requires at least one value")

    def render(self) -> str:
        return f"{self.field} IN ({','.join(v.render() for v in self.values)})"


@dataclass(frozen=True)
class Between:
    field: str
    low: GAQLLiteral
    high: GAQLLiteral

    def __post_init__(self) -> None:
        _check_field(self.field)

    def render(self) -> str:
        return f"{self.field} BETWEEN {self.low.render()} AND {self.high.render()}"


@dataclass(frozen=True)
class Like:
    field: str
    pattern: ContainsPattern

    def __post_init__(self) -> None:
        _check_field(self.field)

    def render(self) -> str:
        return f"{self.field} LIKE {self.pattern.render()}"


@dataclass(frozen=True)
class AnyOf:
    """Alternatives joined with ``OR``, parenthesized when there are several."""

    predicates: tuple["Predicate", ...]

    def __post_init__(self) -> None:
        if not self.predicates:
            raise ValueError("AnyOf requires at least one predicate")

    def render(self) -> str:
        if len(self.predicates) == 1:
            return self.predicates[0].render()
        return "(" + " OR ".join(p.render() for p in self.predicates) + ")"


@dataclass(frozen=True)
class RawPredicate:
    """Predicate text supplied verbatim by trusted internal code."""

    text: str

    def render(self) -> str:
        return self.text


Predicate = Union[Comparison, InList, Between, Like, AnyOf, RawPredicate]
