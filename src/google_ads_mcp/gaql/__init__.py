"""Google Ads Query Language construction."""

from .predicates import (
    AnyOf,
    Between,
    BooleanLiteral,
    Comparison,
    ContainsPattern,
    EnumLiteral,
    InList,
    Like,
    NumberLiteral,
    Predicate,
    RawPredicate,
    StringLiteral,
)
from .query_builder import QueryBuilder

__all__ = [
    "QueryBuilder",
    "Predicate",
    "Comparison",
    "InList",
    "Between",
    "Like",
    "AnyOf",
    "RawPredicate",
    "NumberLiteral",
    "EnumLiteral",
    "BooleanLiteral",
    "ContainsPattern",
    "StringLiteral",
]
