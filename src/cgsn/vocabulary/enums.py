"""
Vocabulary enums — the closed set of game status identifiers.

Status values are rule-agnostic: the same identifier is used whether the
game is Western chess, shōgi or xiangqi. Each one is either
position-inferable or explicit-only.
"""

from enum import Enum


# =============================================================================
# GAME STATUS
# =============================================================================

class GameStatus(Enum):
    """
    Observable status of a game of an abstract strategy board game.

    Members are identifiers, not strings: ``GameStatus.CHECKMATE != "checkmate"``.
    Use ``.value`` or ``str()`` for the canonical spelling.
    """
    # Position-inferable
    CHECK = "check"
    STALE = "stale"
    CHECKMATE = "checkmate"
    STALEMATE = "stalemate"
    NOMOVE = "nomove"
    BAREKING = "bareking"
    MAREKING = "mareking"
    INSUFFICIENT = "insufficient"

    # Explicit-only
    RESIGNATION = "resignation"
    ILLEGALMOVE = "illegalmove"
    TIMELIMIT = "timelimit"
    MOVELIMIT = "movelimit"
    REPETITION = "repetition"
    AGREEMENT = "agreement"

    def __str__(self) -> str:
        return self.value


class StatusClass(str, Enum):
    """
    How a status can be established.

    INFERABLE statuses follow from the position once the rules are known.
    EXPLICIT_ONLY statuses need history, clocks or declarations.
    """
    INFERABLE = "inferable"
    EXPLICIT_ONLY = "explicit_only"


class ParseError(str, Enum):
    """Reasons a value fails to parse as a GameStatus."""
    INVALID_STATUS = "invalid_status"
