"""
Vocabulary — The closed set of game status identifiers and their classification.
"""

from cgsn.vocabulary.enums import (
    GameStatus,
    StatusClass,
    ParseError,
)
from cgsn.vocabulary.tables import (
    STATUS_CLASSES,
    STATUSES,
    INFERABLE_STATUSES,
    EXPLICIT_ONLY_STATUSES,
    statuses,
    inferable_statuses,
    explicit_only_statuses,
    ordered_statuses,
)

__all__ = [
    # Enums
    "GameStatus",
    "StatusClass",
    "ParseError",
    # Tables
    "STATUS_CLASSES",
    "STATUSES",
    "INFERABLE_STATUSES",
    "EXPLICIT_ONLY_STATUSES",
    "statuses",
    "inferable_statuses",
    "explicit_only_statuses",
    "ordered_statuses",
]
