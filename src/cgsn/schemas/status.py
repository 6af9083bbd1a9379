"""
Status schemas — Pydantic types for embedding a status in game records.

A game-record or notation format owns its own models; it uses
``StatusField`` for the one field this package is responsible for.

Example:
    class GameRecord(BaseModel):
        moves: list[str]
        status: StatusField | None = None
"""

from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, Field, PlainSerializer, model_validator

from cgsn.vocabulary import GameStatus, StatusClass, STATUS_CLASSES, ordered_statuses
from cgsn.validation import parse_or_raise


def _coerce_status(value: Any) -> GameStatus:
    """Accept an identifier as-is, otherwise require a canonical string."""
    if isinstance(value, GameStatus):
        return value
    return parse_or_raise(value)


StatusField = Annotated[
    GameStatus,
    BeforeValidator(_coerce_status),
    PlainSerializer(lambda status: status.value, return_type=str),
]


class StatusEntry(BaseModel):
    """
    One row of the status table: an identifier and its classification.
    """
    status: StatusField = Field(
        ...,
        description="Canonical status identifier"
    )
    
    classification: StatusClass = Field(
        ...,
        description="Whether the status is position-inferable or explicit-only"
    )
    
    @model_validator(mode="after")
    def validate_classification(self) -> "StatusEntry":
        """Classification must agree with the vocabulary table."""
        expected = STATUS_CLASSES[self.status]
        if self.classification is not expected:
            raise ValueError(
                f"{self.status} is {expected.value}, not {self.classification.value}"
            )
        return self
    
    model_config = {
        "frozen": True,
        "json_schema_extra": {
            "examples": [
                {"status": "checkmate", "classification": "inferable"},
                {"status": "resignation", "classification": "explicit_only"},
            ]
        }
    }


def catalog() -> list[StatusEntry]:
    """The full status table, inferable statuses first."""
    return [
        StatusEntry(status=status, classification=STATUS_CLASSES[status])
        for status in ordered_statuses()
    ]
