"""
cgsn — Game status vocabulary for abstract strategy board games.

A closed set of 14 status identifiers, split into position-inferable and
explicit-only statuses, with parsing and classification predicates.
Deciding which status applies to an actual position is left to a rules
engine.

    >>> import cgsn
    >>> cgsn.is_valid("checkmate")
    True
    >>> cgsn.is_inferable("checkmate")
    True
    >>> cgsn.is_explicit_only("resignation")
    True
"""

__version__ = "1.0.1"

from cgsn.vocabulary import (
    GameStatus,
    StatusClass,
    ParseError,
    statuses,
    inferable_statuses,
    explicit_only_statuses,
    ordered_statuses,
)
from cgsn.validation import (
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
    "__version__",
    # Vocabulary
    "GameStatus",
    "StatusClass",
    "ParseError",
    "statuses",
    "inferable_statuses",
    "explicit_only_statuses",
    "ordered_statuses",
    # Validation
    "InvalidStatusError",
    "ParseResult",
    "parse",
    "parse_or_raise",
    "is_valid",
    "is_inferable",
    "is_explicit_only",
    "classify",
]
