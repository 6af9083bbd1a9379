"""
Status Validator — Parsing and classification of status values.

Every function here is total over arbitrary input except ``parse_or_raise``,
which treats invalid input as a caller contract violation.

- ``parse`` / ``is_valid`` accept canonical strings only. A ``GameStatus``
  member is an identifier, not a string, and is rejected.
- ``is_inferable`` / ``is_explicit_only`` / ``classify`` accept either a
  canonical string or a ``GameStatus``.
"""

from dataclasses import dataclass
from typing import Any

from cgsn.observability import get_logger
from cgsn.vocabulary import (
    GameStatus,
    ParseError,
    StatusClass,
    STATUS_CLASSES,
    INFERABLE_STATUSES,
    EXPLICIT_ONLY_STATUSES,
)


logger = get_logger("validation")


# Canonical spelling -> identifier
_BY_VALUE: dict[str, GameStatus] = {status.value: status for status in GameStatus}


class InvalidStatusError(ValueError):
    """Raised when a call site that requires a valid status receives anything else."""
    
    def __init__(self) -> None:
        super().__init__("invalid status")


@dataclass(frozen=True)
class ParseResult:
    """Outcome of parsing a value as a GameStatus."""
    valid: bool
    status: GameStatus | None = None
    error: ParseError | None = None

    def __post_init__(self) -> None:
        if self.valid and (self.status is None or self.error is not None):
            raise ValueError("Valid ParseResult needs a status and no error")
        if not self.valid and (self.status is not None or self.error is None):
            raise ValueError("Failed ParseResult needs an error and no status")

    @classmethod
    def success(cls, status: GameStatus) -> "ParseResult":
        return cls(valid=True, status=status)
    
    @classmethod
    def failure(cls, error: ParseError = ParseError.INVALID_STATUS) -> "ParseResult":
        return cls(valid=False, error=error)
    
    def unwrap(self) -> GameStatus:
        """Return the parsed status, or raise InvalidStatusError."""
        if not self.valid or self.status is None:
            raise InvalidStatusError()
        return self.status


def parse(value: Any) -> ParseResult:
    """
    Parse a canonical status string.
    
    Matching is exact: case-sensitive, no trimming, no normalization.
    Never raises.
    """
    if isinstance(value, str):
        status = _BY_VALUE.get(value)
        if status is not None:
            return ParseResult.success(status)
    
    # Only str.__repr__ and the type name: a caller's __repr__ may raise
    if isinstance(value, str):
        logger.debug("Rejected status string %s", str.__repr__(value))
    else:
        logger.debug("Rejected status value of type %s", type(value).__name__)
    return ParseResult.failure(ParseError.INVALID_STATUS)


def parse_or_raise(value: Any) -> GameStatus:
    """
    Parse a canonical status string that the caller guarantees is valid.
    
    Raises:
        InvalidStatusError: with message "invalid status" for any other input.
    """
    return parse(value).unwrap()


def is_valid(value: Any) -> bool:
    """True iff ``value`` is exactly one of the 14 canonical status strings."""
    return parse(value).valid


def _resolve(value: Any) -> GameStatus | None:
    if isinstance(value, GameStatus):
        return value
    if isinstance(value, str):
        return _BY_VALUE.get(value)
    return None


def classify(value: Any) -> StatusClass | None:
    """Classification of a status string or identifier, None if it is not one."""
    status = _resolve(value)
    if status is None:
        return None
    return STATUS_CLASSES[status]


def is_inferable(value: Any) -> bool:
    """True iff ``value`` names a position-inferable status."""
    return _resolve(value) in INFERABLE_STATUSES


def is_explicit_only(value: Any) -> bool:
    """True iff ``value`` names an explicit-only status."""
    return _resolve(value) in EXPLICIT_ONLY_STATUSES
