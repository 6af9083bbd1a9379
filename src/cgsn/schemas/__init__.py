"""
Schemas — Pydantic types for carrying statuses inside larger records.
"""

from cgsn.schemas.status import (
    StatusField,
    StatusEntry,
    catalog,
)

__all__ = [
    "StatusField",
    "StatusEntry",
    "catalog",
]
