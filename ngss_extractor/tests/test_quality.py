"""Tests for ngss_extractor.core.quality module.

Tests the data-quality audit:
- whitespace and truncation detectors
- near-miss suggestions against the canonical vocabularies
- record-set audit and its summary
"""

from ngss_extractor.core.quality import (
    audit_records,
    detect_truncation,
    detect_whitespace_anomalies,
    suggest_canonical,
)
from ngss_extractor.core.structurer import structure_standard
from ngss_extractor.core.vocabulary import CONCEPT_VALUES, IDEA_VALUES, PRACTICE_VALUES


class TestDetectors:
    """Tests for the per-value detectors."""

    def test_clean_value(self):
        assert detect_whitespace_anomalies("Develop a model to describe phenomena.") == []

    def test_double_space(self):
        assert "Multiple consecutive spaces" in detect_whitespace_anomalies("Develop a  model.")

    def test_space_before_punctuation(self):
        assert "Space before punctuation" in detect_whitespace_anomalies("Develop a model .")

    def test_space_after_parenthesis(self):
        assert "Space after opening parenthesis" in detect_whitespace_anomalies("ratio ( e.g. speed)")

    def test_truncated(self):
        assert detect_truncation("Proportional relationships (e.")
        assert detect_truncation("Patterns can be used")

    def test_not_truncated(self):
        assert not detect_truncation("Patterns can be used to identify cause and effect relationships.")


class TestSuggestCanonical:
    """Tests for suggest_canonical()."""

    def test_canonical_value(self):
        assert suggest_canonical(PRACTICE_VALUES[0], PRACTICE_VALUES) is None

    def test_split_word(self):
        """A value differing only in spacing maps to its canonical form."""
        value = "Develop a model to predict and/or des cribe phenomena."
        assert suggest_canonical(value, PRACTICE_VALUES) == "Develop a model to predict and/or describe phenomena."

    def test_unrelated_value(self):
        assert suggest_canonical("Completely different text", CONCEPT_VALUES) is None


class TestAuditRecords:
    """Tests for audit_records()."""

    def test_counts_unique_values(self, mixed_corpus):
        records = [structure_standard(mixed_corpus, c) for c in ("MS-PS1-1", "MS-PS1-3", "MS-LS1-1")]
        report = audit_records(records)
        assert report.record_count == 3
        assert len(report.practice_values) == 3
        assert report.concept_values == {"Scale, Proportion, and Quantity.", "Structure and Function."}
        assert not report.practice_count_ok
        assert not report.passed

    def test_flags_ocr_variant(self, scenario_text):
        record = structure_standard(scenario_text, "MS-PS1-1")
        damaged = record.model_copy(update={
            "practice": record.practice.model_copy(
                update={"name": "Develop a model to predict and/or des cribe phenomena."}
            ),
        })
        report = audit_records([record, damaged])
        practice_issues = [i for i in report.issues if i.dimension == "practice"]
        assert len(practice_issues) == 1
        issue = practice_issues[0]
        assert issue.suggestion == "Develop a model to predict and/or describe phenomena."

    def test_flags_idea_variant(self, scenario_text):
        """Core idea names are checked against the core idea vocabulary."""
        record = structure_standard(scenario_text, "MS-PS1-1")
        damaged = record.model_copy(update={
            "idea": record.idea.model_copy(update={"name": "Ada ptation"}),
        })
        report = audit_records([damaged])
        assert report.idea_values == {"Ada ptation"}
        issues = [i for i in report.issues if i.dimension == "idea"]
        assert len(issues) == 1
        assert issues[0].suggestion == IDEA_VALUES[0]

    def test_summary(self, scenario_text):
        report = audit_records([structure_standard(scenario_text, "MS-PS1-1")])
        summary = report.summary()
        assert summary["records"] == 1
        assert summary["unique_practices"] == 1
        assert summary["unique_ideas"] == 1
        assert summary["values_with_issues"] == 0

    def test_empty(self):
        report = audit_records([])
        assert report.record_count == 0
        assert report.issues == []
