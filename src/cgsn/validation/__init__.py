"""
Validation — Parsing and classification predicates over the status vocabulary.
"""

from cgsn.validation.status_validator import (
    InvalidStatusError,
    ParseResult,
    parse,
    parse_or_raise,
    is_valid,
    is_inferable,
    is_explicit_only,
    classify,
)

__all__ = [
    "InvalidStatusError",
    "ParseResult",
    "parse",
    "parse_or_raise",
    "is_valid",
    "is_inferable",
    "is_explicit_only",
    "classify",
]
