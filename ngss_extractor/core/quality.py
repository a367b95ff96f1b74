"""Data-quality audit for extracted standard records.

Detects OCR damage in practice, core idea and concept names without changing them:
- unique value counts against the expected vocabulary sizes (practices
  and concepts; core ideas vary with the record set)
- whitespace anomalies (double spaces, stray spaces around punctuation)
- truncated values
- near misses of canonical values (likely OCR variants)
"""

import re
from collections.abc import Iterable
from dataclasses import dataclass, field

from rapidfuzz import fuzz, process

from ngss_extractor.core.config import QualityConfig
from ngss_extractor.core.vocabulary import CONCEPT_VALUES, IDEA_VALUES, PRACTICE_VALUES, squash
from ngss_extractor.pydantic_models.standard_models import StandardRecord


@dataclass
class ValueIssue:
    """A problem with one distinct dimension name."""

    dimension: str          # "practice", "idea" or "concept"
    value: str
    issues: list[str] = field(default_factory=list)
    suggestion: str | None = None  # Canonical value this is likely an OCR variant of


@dataclass
class QualityReport:
    """Result of auditing a record set."""

    record_count: int = 0
    practice_values: set[str] = field(default_factory=set)
    idea_values: set[str] = field(default_factory=set)
    concept_values: set[str] = field(default_factory=set)
    issues: list[ValueIssue] = field(default_factory=list)

    @property
    def practice_count_ok(self) -> bool:
        return len(self.practice_values) == QualityConfig.EXPECTED_PRACTICE_COUNT

    @property
    def concept_count_ok(self) -> bool:
        return len(self.concept_values) == QualityConfig.EXPECTED_CONCEPT_COUNT

    @property
    def passed(self) -> bool:
        return self.practice_count_ok and self.concept_count_ok and not self.issues

    def summary(self) -> dict:
        return {
            "records": self.record_count,
            "unique_practices": len(self.practice_values),
            "unique_ideas": len(self.idea_values),
            "unique_concepts": len(self.concept_values),
            "values_with_issues": len(self.issues),
            "passed": self.passed,
        }


def detect_whitespace_anomalies(value: str) -> list[str]:
    """List whitespace problems in a value."""
    issues = []
    if re.search(r"\s{2,}", value):
        issues.append("Multiple consecutive spaces")
    if value != value.strip():
        issues.append("Leading or trailing whitespace")
    if re.search(r"\s[.,;!?)]", value):
        issues.append("Space before punctuation")
    if re.search(r"\(\s", value):
        issues.append("Space after opening parenthesis")
    return issues


def detect_truncation(value: str) -> bool:
    """True if the value ends like an OCR-truncated string."""
    return any(re.search(p, value) for p in QualityConfig.TRUNCATION_PATTERNS)


def suggest_canonical(value: str, vocabulary: Iterable[str]) -> str | None:
    """Closest canonical value for an off-vocabulary value, if close enough."""
    vocabulary = tuple(vocabulary)
    if value in vocabulary:
        return None
    best = process.extractOne(
        value,
        vocabulary,
        scorer=fuzz.ratio,
        processor=squash,
        score_cutoff=QualityConfig.NEAR_MISS_CUTOFF,
    )
    return best[0] if best else None


def _audit_value(dimension: str, value: str, vocabulary: tuple[str, ...]) -> ValueIssue | None:
    issues = detect_whitespace_anomalies(value)
    if detect_truncation(value):
        issues.append("Truncated value")
    suggestion = suggest_canonical(value, vocabulary)
    if suggestion:
        issues.append("Near miss of canonical value")
    if not issues:
        return None
    return ValueIssue(dimension=dimension, value=value, issues=issues, suggestion=suggestion)


def audit_records(records: Iterable[StandardRecord]) -> QualityReport:
    """Audit practice, core idea and concept names across a record set."""
    report = QualityReport()
    for record in records:
        report.record_count += 1
        report.practice_values.add(record.practice.name)
        report.idea_values.add(record.idea.name)
        report.concept_values.add(record.concept.name)

    audits = (
        ("practice", report.practice_values, PRACTICE_VALUES),
        ("idea", report.idea_values, IDEA_VALUES),
        ("concept", report.concept_values, CONCEPT_VALUES),
    )
    for dimension, values, vocabulary in audits:
        for value in sorted(values):
            issue = _audit_value(dimension, value, vocabulary)
            if issue:
                report.issues.append(issue)
    return report
