"""Topic boundary detection.

Groups pages into topic ranges using the "MS.<Topic>" page header, a
literal match, or word overlap, and resolves the codes inside each range.
"""

import logging
import re
from collections.abc import Sequence

from rapidfuzz import fuzz, process

from ngss_extractor.core.config import RegexPatterns, TopicMatching
from ngss_extractor.core.pages import PageText, ensure_pages
from ngss_extractor.core.scanner import discover_codes
from ngss_extractor.core.vocabulary import TOPIC_VALUES, squash
from ngss_extractor.pydantic_models.scan_models import TopicRange

logger = logging.getLogger(__name__)

_TOPIC_WORD = r"[A-Za-z&,'\-]+"


def topic_header_pattern(marker: str = TopicMatching.HEADER_MARKER) -> re.Pattern:
    """Pattern capturing the topic name after the header marker.

    The name is a capitalized run of words on one line and stops before a
    standard code token.
    """
    return re.compile(
        rf"{re.escape(marker)}[ \t]*"
        rf"([A-Z][A-Za-z&,'\-]*(?:[ \t]+(?!{RegexPatterns.CODE_PREFIX}){_TOPIC_WORD})*)"
    )


def read_topic_header(text: str) -> str:
    """Return the first topic header on a page, whitespace-collapsed, or ""."""
    m = topic_header_pattern().search(text)
    if not m:
        return ""
    return " ".join(m.group(1).split()).rstrip(",-&").strip()


def canonical_topic(name: str) -> str:
    """Canonicalize a topic key before grouping.

    Collapses whitespace, trims trailing punctuation, and snaps to the known
    topic vocabulary when the name is an OCR variant of a known topic.
    """
    cleaned = " ".join(name.split()).strip(" ,.-&")
    if not cleaned:
        return ""

    squashed = squash(cleaned)
    for known in TOPIC_VALUES:
        if squash(known) == squashed:
            return known

    # Header ran on into body text: longest known topic that prefixes it
    prefixed = [k for k in TOPIC_VALUES if squashed.startswith(squash(k))]
    if prefixed:
        return max(prefixed, key=len)

    best = process.extractOne(
        cleaned,
        TOPIC_VALUES,
        scorer=fuzz.ratio,
        processor=squash,
        score_cutoff=TopicMatching.CANONICAL_CUTOFF,
    )
    if best:
        logger.debug(f"Snapped topic {cleaned!r} to {best[0]!r} (score {best[1]:.1f})")
        return best[0]
    return cleaned


def matches_topic(content: str, pattern: str) -> bool:
    """True if a page matches the topic pattern.

    Checks, in order: literal substring (case-insensitive), the pattern
    right after the header marker, then word overlap of at least
    TopicMatching.WORD_OVERLAP.
    """
    content_lower = content.lower()
    pattern_lower = pattern.lower()

    if pattern_lower in content_lower:
        return True

    header = re.compile(re.escape(TopicMatching.HEADER_MARKER + pattern), re.IGNORECASE)
    if header.search(content):
        return True

    words = pattern_lower.split()
    hits = sum(1 for word in words if word in content_lower)
    return hits / len(words) >= TopicMatching.WORD_OVERLAP


def find_topic_range(
    source: "str | Sequence[PageText]",
    topic_pattern: str,
) -> TopicRange | None:
    """Find the page span of a topic and the codes inside it.

    Returns:
        TopicRange from the lowest to the highest matching page, or None if
        no page matches (or the pattern is blank).
    """
    if not topic_pattern or not topic_pattern.strip():
        return None

    pages = ensure_pages(source)
    matching = [p.number for p in pages if matches_topic(p.text, topic_pattern)]
    if not matching:
        return None

    start, end = min(matching), max(matching)
    codes = discover_codes(pages, page_range=(start, end))
    return TopicRange(
        topic=topic_pattern,
        start_page=start,
        end_page=end,
        standard_codes=[c.code for c in codes],
    )


def list_all_topics(source: "str | Sequence[PageText]") -> list[TopicRange]:
    """List every topic announced by a page header, sorted by start page."""
    pages = ensure_pages(source)

    grouped: dict[str, list[int]] = {}
    for page in pages:
        topic = canonical_topic(read_topic_header(page.text))
        if topic:
            grouped.setdefault(topic, []).append(page.number)

    results = []
    for topic, numbers in grouped.items():
        start, end = min(numbers), max(numbers)
        codes = discover_codes(pages, page_range=(start, end))
        results.append(TopicRange(
            topic=topic,
            start_page=start,
            end_page=end,
            standard_codes=[c.code for c in codes],
        ))

    logger.info(f"Found {len(results)} topics across {len(pages)} pages")
    return sorted(results, key=lambda r: r.start_page)
