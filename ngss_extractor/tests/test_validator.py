"""Tests for ngss_extractor.core.validator module.

Tests the two validation gates:
- shape: StandardSchema conformance with path-qualified errors
- completeness: all three dimension codes present
"""

import pytest

from ngss_extractor.core.structurer import structure_standard
from ngss_extractor.core.validator import (
    is_three_dimensionally_complete,
    missing_dimension_codes,
    partition_by_completeness,
    validate_shape,
    validate_shape_batch,
)


@pytest.fixture
def complete_record(mixed_corpus):
    return structure_standard(mixed_corpus, "MS-PS1-1")


@pytest.fixture
def incomplete_record(mixed_corpus):
    return structure_standard(mixed_corpus, "MS-LS1-2")


# =============================================================================
# Shape validation
# =============================================================================


class TestValidateShape:
    """Tests for validate_shape()."""

    def test_valid_record(self, complete_record):
        result = validate_shape(complete_record)
        assert result.is_valid
        assert result.record == complete_record
        assert result.errors == []

    def test_valid_dict(self, complete_record):
        """A plain dict is validated and returned as a record."""
        result = validate_shape(complete_record.model_dump())
        assert result.is_valid
        assert result.record.code == "MS-PS1-1"

    def test_missing_field_path(self, complete_record):
        """Missing nested fields are reported with their path."""
        data = complete_record.model_dump()
        del data["practice"]["name"]
        result = validate_shape(data)
        assert not result.is_valid
        assert result.record is None
        assert "practice.name: required" in result.errors

    def test_short_statement(self, scenario_text):
        record = structure_standard(scenario_text, "MS-PS1-1")
        result = validate_shape(record)
        assert not result.is_valid
        assert any(e.startswith("performance_statement:") for e in result.errors)
        assert any(e.startswith("synthesized_questions:") for e in result.errors)

    def test_bad_code_format(self, complete_record):
        data = complete_record.model_dump()
        data["code"] = "PS1-1"
        result = validate_shape(data)
        assert any(e.startswith("code:") for e in result.errors)

    def test_defaulted_dimensions_fail_shape(self, incomplete_record):
        """Empty dimension codes do not match the code formats."""
        errors = validate_shape(incomplete_record).errors
        assert any(e.startswith("practice.code:") for e in errors)
        assert any(e.startswith("idea.code:") for e in errors)
        assert any(e.startswith("concept.code:") for e in errors)


class TestValidateShapeBatch:
    """Tests for validate_shape_batch()."""

    def test_partial_batch(self, complete_record, incomplete_record):
        """Failures are excluded and their errors prefixed by code."""
        result = validate_shape_batch([complete_record, incomplete_record])
        assert result.validated == [complete_record]
        assert not result.success
        assert all(e.startswith("MS-LS1-2: ") for e in result.errors)

    def test_all_valid(self, complete_record):
        result = validate_shape_batch([complete_record])
        assert result.success

    def test_empty(self):
        result = validate_shape_batch([])
        assert result.validated == []
        assert result.success


# =============================================================================
# Completeness
# =============================================================================


class TestCompleteness:
    """Tests for the completeness predicate and partition."""

    def test_complete(self, complete_record):
        assert is_three_dimensionally_complete(complete_record)
        assert missing_dimension_codes(complete_record) == []

    def test_incomplete(self, incomplete_record):
        assert not is_three_dimensionally_complete(incomplete_record)
        assert missing_dimension_codes(incomplete_record) == ["practice", "idea", "concept"]

    def test_one_missing_code(self, complete_record):
        record = complete_record.model_copy(update={
            "concept": complete_record.concept.model_copy(update={"code": ""}),
        })
        assert not is_three_dimensionally_complete(record)
        assert missing_dimension_codes(record) == ["concept"]

    def test_partition_preserves_order(self, mixed_corpus):
        """Partition is disjoint, covers the input, and keeps order."""
        records = [structure_standard(mixed_corpus, c) for c in ("MS-PS1-1", "MS-LS1-2", "MS-PS1-3")]
        partition = partition_by_completeness(records)
        assert [r.code for r in partition.complete] == ["MS-PS1-1", "MS-PS1-3"]
        assert [r.code for r in partition.incomplete] == ["MS-LS1-2"]
        assert partition.total == 3

    def test_partition_empty(self):
        partition = partition_by_completeness([])
        assert partition.complete == []
        assert partition.incomplete == []
