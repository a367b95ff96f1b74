"""Centralized configuration for the standards extraction pipeline.

All magic numbers, patterns, and thresholds are documented here.
Each constant includes:
- What it controls
- Why this value was chosen
- Where it is used
"""

import os
from typing import Final


# =============================================================================
# Regex Patterns
# =============================================================================

class RegexPatterns:
    """Regex sources used by the scanner and structurer.

    Stored as strings; callers compile fresh patterns per call so no matcher
    state is shared between scans.
    """

    STANDARD_CODE: Final[str] = r"\b([A-Z]{2})-([A-Z]{2,3})(\d+)-(\d+)\b"
    """Standard code token: grade-domain<topic#>-<standard#>, e.g. MS-PS1-1.
    Used by: scanner.py:discover_codes()
    """

    CODE_PREFIX: Final[str] = r"[A-Z]{2}-[A-Z]{2,3}\d"
    """Start of a standard code. Topic headers stop before this.
    Used by: topics.py
    """

    PAGE_MARKER: Final[str] = r"Page (\d+):\s*([\s\S]*?)(?=Page \d+:|$)"
    """Page-marker delimited blob: "Page <n>: <content>" up to the next marker.
    Used by: pages.py:segment_pages()
    """

    IDEA_DETAIL: Final[str] = r"([A-Z]{2,3}\d+\.[A-Z]):\s+([^\n▪]+)"
    """Core idea detail line, e.g. "PS1.A: Structure and Properties of Matter".
    Used by: structurer.py
    """

    PRACTICE_DETAIL: Final[str] = r"▪\s+([^(▪]+)"
    """Practice bullet. The name runs to the first "(" or the end of its
    first sentence.
    Used by: structurer.py
    """

    CONCEPT_DETAIL: Final[str] = r"▪\s+([\s\S]+?\.)(?=\s|$)"
    """Concept bullet, captured across lines up to the first full stop.
    Used by: structurer.py
    """

    SENTENCE_END: Final[str] = r"\.(?=\s|$)"
    """Full stop followed by whitespace or end of text ("e.g.," does not match)."""


class SectionHeaders:
    """Reserved section header phrases.

    Section content always stops at the next of these (or end of page).
    Matching is case-insensitive.
    """

    PRACTICE: Final[str] = "Science and Engineering Practices"
    IDEA: Final[str] = "Disciplinary Core Ideas"
    CONCEPT: Final[str] = "Crosscutting Concepts"
    CONNECTIONS: Final[str] = "Connections to"

    RESERVED: Final[tuple[str, ...]] = (PRACTICE, IDEA, CONCEPT, CONNECTIONS)


# =============================================================================
# Scanning
# =============================================================================

class ScanConfig:
    """Settings for code discovery."""

    CONTEXT_CHARS: Final[int] = 50
    """Characters captured on each side of a code match.

    Enough to show the code's sentence without pulling in a whole section.
    Clamped to page bounds.
    """


class TopicMatching:
    """Settings for topic boundary detection."""

    HEADER_MARKER: Final[str] = "MS."
    """Page-header marker preceding a topic name, e.g. "MS.Chemical Reactions".
    Used by: topics.py, structurer.py
    """

    WORD_OVERLAP: Final[float] = 0.7
    """Fraction of pattern words that must appear on a page for a fuzzy match.

    Lower values match liberally and merge neighbouring topics; higher values
    miss pages where OCR split a word.
    """

    CANONICAL_CUTOFF: Final[float] = 90.0
    """Minimum rapidfuzz ratio (0-100) to snap a topic to the known vocabulary.

    Compared with whitespace removed, so letter-splitting artifacts score 100.
    Used by: topics.py:canonical_topic()
    """


# =============================================================================
# Record Structuring
# =============================================================================

DOMAIN_NAMES: Final[dict[str, str]] = {
    "PS": "Physical Science",
    "LS": "Life Science",
    "ESS": "Earth and Space Science",
}
"""Domain prefix (trailing digits stripped) to domain family name."""

UNKNOWN_DOMAIN: Final[str] = "Unknown"
"""Domain assigned when the prefix is not in DOMAIN_NAMES."""

DEFAULT_GRADE_LEVEL: Final[str] = "MS"
"""Grade level used when a code has no grade part."""


class RecordLimits:
    """Caps and vocabularies for synthesized record fields."""

    MAX_QUESTIONS: Final[int] = 2
    """Maximum synthesized questions per record."""

    MAX_KEYWORDS: Final[int] = 8
    """Maximum keywords per record."""

    MIN_KEYWORD_LENGTH: Final[int] = 4
    """Tokens shorter than this (length <= 3) are dropped."""

    DESCRIPTION_CHARS: Final[int] = 200
    """Dimension descriptions are the section text truncated to this length."""

    PLACEHOLDER_NAME: Final[str] = "Unknown"
    """Name used by a defaulted dimension."""

    STOP_WORDS: Final[frozenset[str]] = frozenset({
        "the", "a", "an", "and", "or", "but", "in", "on", "at", "to", "for",
        "of", "with", "by",
    })

    DANGLING_SUFFIXES: Final[tuple[str, ...]] = (" and", " or", " of")
    """A topic ending in one of these was truncated by the page layout."""

    HOW_VERBS: Final[frozenset[str]] = frozenset({
        "develop", "design", "construct", "plan", "analyze",
    })
    """Leading verbs phrased as "How can we <verb> <object>?"."""

    WHAT_VERBS: Final[frozenset[str]] = frozenset({"explain", "describe", "define"})
    """Leading verbs phrased as "What <object>?"."""


class DimensionCodes:
    """Fixed codes for extracted practice/concept dimensions."""

    PRACTICE: Final[str] = "SEP-1"
    CONCEPT: Final[str] = "CCC-1"
    PLACEHOLDER: Final[str] = ""
    """Code of a defaulted dimension. Empty, so it fails the completeness gate."""


# =============================================================================
# Batch Processing
# =============================================================================

def _env_int(name: str, default: int) -> int:
    """Read a positive int from the environment, falling back to default."""
    raw = os.environ.get(name)
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        return default
    return value if value > 0 else default


class BatchConfig:
    """Settings for batch extraction."""

    DEFAULT_CONCURRENCY: Final[int] = _env_int("NGSS_MAX_CONCURRENT", 5)
    """In-flight extractions for extract_concurrently(). Env: NGSS_MAX_CONCURRENT."""

    DEFAULT_DOMAINS: Final[tuple[str, ...]] = ("MS-PS", "MS-LS", "MS-ESS")
    """Domain filters run by Orchestrator.run(), in order."""


# =============================================================================
# Data Quality
# =============================================================================

class QualityConfig:
    """Thresholds for the data-quality audit."""

    EXPECTED_PRACTICE_COUNT: Final[int] = 10
    """Unique practice names expected in a clean middle-school dataset."""

    EXPECTED_CONCEPT_COUNT: Final[int] = 8
    """Unique concept names expected in a clean middle-school dataset."""

    TRUNCATION_PATTERNS: Final[tuple[str, ...]] = (
        r"\(e\.\s*$",
        r"\s\.$",
        r"\s-\s*$",
        r"[a-z]\s[a-z]+\s*$",
    )
    """Value endings that indicate an OCR-truncated value."""

    NEAR_MISS_CUTOFF: Final[float] = 90.0
    """rapidfuzz ratio above which an off-vocabulary value is reported as a
    likely OCR variant of a canonical one."""
