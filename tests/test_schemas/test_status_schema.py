"""
Tests for pydantic status schemas.
"""

import pytest
from pydantic import BaseModel, ValidationError

from cgsn import GameStatus, StatusClass
from cgsn.schemas import StatusField, StatusEntry, catalog


# =============================================================================
# FIXTURES
# =============================================================================

class GameRecord(BaseModel):
    """Minimal stand-in for a notation format that embeds a status."""
    moves: list[str] = []
    status: StatusField | None = None


# =============================================================================
# STATUS FIELD
# =============================================================================

class TestStatusField:
    """Tests for StatusField inside a host model."""

    def test_accepts_canonical_string(self):
        """Canonical string becomes an identifier."""
        record = GameRecord(moves=["e4", "e5"], status="checkmate")
        assert record.status is GameStatus.CHECKMATE

    def test_accepts_identifier(self):
        """Identifiers pass through."""
        record = GameRecord(status=GameStatus.AGREEMENT)
        assert record.status is GameStatus.AGREEMENT

    def test_optional(self):
        """Host models may leave the status unset."""
        assert GameRecord().status is None

    @pytest.mark.parametrize("value", ["CHECKMATE", "check_mate", "", 42, ["check"]])
    def test_rejects_invalid(self, value):
        """Invalid values fail model validation."""
        with pytest.raises(ValidationError) as exc_info:
            GameRecord(status=value)
        assert "invalid status" in str(exc_info.value)

    def test_serializes_to_canonical_string(self):
        """Dumps carry the canonical spelling."""
        record = GameRecord(status="timelimit")
        assert record.model_dump()["status"] == "timelimit"
        assert record.model_dump(mode="json")["status"] == "timelimit"

    def test_json_round_trip(self):
        """JSON in, same JSON out."""
        record = GameRecord.model_validate_json('{"moves": ["P-7f"], "status": "repetition"}')
        assert record.status is GameStatus.REPETITION
        assert GameRecord.model_validate_json(record.model_dump_json()) == record


# =============================================================================
# STATUS ENTRY
# =============================================================================

class TestStatusEntry:
    """Tests for StatusEntry."""

    def test_valid_entry(self):
        """Matching classification validates."""
        entry = StatusEntry(status="stalemate", classification="inferable")
        assert entry.status is GameStatus.STALEMATE
        assert entry.classification is StatusClass.INFERABLE

    def test_mismatched_classification(self):
        """Classification must agree with the vocabulary."""
        with pytest.raises(ValidationError) as exc_info:
            StatusEntry(status="resignation", classification="inferable")
        assert "resignation is explicit_only, not inferable" in str(exc_info.value)

    def test_frozen(self):
        """Entries are immutable."""
        entry = StatusEntry(status="check", classification="inferable")
        with pytest.raises(ValidationError):
            entry.status = GameStatus.CHECKMATE

    def test_dump(self):
        """JSON dump uses plain strings."""
        entry = StatusEntry(status=GameStatus.MOVELIMIT, classification=StatusClass.EXPLICIT_ONLY)
        assert entry.model_dump(mode="json") == {
            "status": "movelimit",
            "classification": "explicit_only",
        }


class TestCatalog:
    """Tests for catalog()."""

    def test_covers_every_status(self):
        """One entry per status, in declaration order."""
        entries = catalog()
        assert [e.status for e in entries] == list(GameStatus)

    def test_classification_counts(self):
        """8 inferable and 6 explicit-only entries."""
        entries = catalog()
        inferable = [e for e in entries if e.classification is StatusClass.INFERABLE]
        explicit_only = [e for e in entries if e.classification is StatusClass.EXPLICIT_ONLY]
        assert len(inferable) == 8
        assert len(explicit_only) == 6
