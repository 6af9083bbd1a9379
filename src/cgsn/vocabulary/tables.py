"""
Status tables — the classification of every GameStatus.

Built once at import and never mutated.
"""

from types import MappingProxyType

from cgsn.vocabulary.enums import GameStatus, StatusClass


STATUS_CLASSES: MappingProxyType[GameStatus, StatusClass] = MappingProxyType({
    GameStatus.CHECK: StatusClass.INFERABLE,
    GameStatus.STALE: StatusClass.INFERABLE,
    GameStatus.CHECKMATE: StatusClass.INFERABLE,
    GameStatus.STALEMATE: StatusClass.INFERABLE,
    GameStatus.NOMOVE: StatusClass.INFERABLE,
    GameStatus.BAREKING: StatusClass.INFERABLE,
    GameStatus.MAREKING: StatusClass.INFERABLE,
    GameStatus.INSUFFICIENT: StatusClass.INFERABLE,
    GameStatus.RESIGNATION: StatusClass.EXPLICIT_ONLY,
    GameStatus.ILLEGALMOVE: StatusClass.EXPLICIT_ONLY,
    GameStatus.TIMELIMIT: StatusClass.EXPLICIT_ONLY,
    GameStatus.MOVELIMIT: StatusClass.EXPLICIT_ONLY,
    GameStatus.REPETITION: StatusClass.EXPLICIT_ONLY,
    GameStatus.AGREEMENT: StatusClass.EXPLICIT_ONLY,
})

STATUSES: frozenset[GameStatus] = frozenset(STATUS_CLASSES)

INFERABLE_STATUSES: frozenset[GameStatus] = frozenset(
    status for status, status_class in STATUS_CLASSES.items() if status_class is StatusClass.INFERABLE
)

EXPLICIT_ONLY_STATUSES: frozenset[GameStatus] = frozenset(
    status for status, status_class in STATUS_CLASSES.items() if status_class is StatusClass.EXPLICIT_ONLY
)


def statuses() -> frozenset[GameStatus]:
    """All 14 status values."""
    return STATUSES


def inferable_statuses() -> frozenset[GameStatus]:
    """Statuses that can be determined from the position when the rules are known."""
    return INFERABLE_STATUSES


def explicit_only_statuses() -> frozenset[GameStatus]:
    """Statuses that need external information and cannot come from the position alone."""
    return EXPLICIT_ONLY_STATUSES


def ordered_statuses() -> tuple[GameStatus, ...]:
    """All statuses in declaration order, inferable first."""
    return tuple(GameStatus)
