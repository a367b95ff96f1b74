"""Code and section scanner.

Pattern-based scans over segmented page text:
- discover_codes: standard code tokens with surrounding context
- find_section: raw text of a framework section on each page

Both accept a raw page-marker blob or pre-segmented pages, and compile
their patterns per call.
"""

import re
from collections.abc import Sequence

from ngss_extractor.core.config import RegexPatterns, ScanConfig, SectionHeaders
from ngss_extractor.core.pages import PageRange, PageText, ensure_pages, select_pages
from ngss_extractor.pydantic_models.scan_models import (
    CodeMatch,
    DuplicatePolicy,
    SectionMatch,
    SectionType,
)

SECTION_HEADERS: dict[SectionType, str] = {
    SectionType.PRACTICE: SectionHeaders.PRACTICE,
    SectionType.IDEA: SectionHeaders.IDEA,
    SectionType.CONCEPT: SectionHeaders.CONCEPT,
}


def reserved_header_pattern() -> re.Pattern:
    """Pattern matching any of the four reserved section headers."""
    alternatives = "|".join(re.escape(h) for h in SectionHeaders.RESERVED)
    return re.compile(f"(?:{alternatives})", re.IGNORECASE)


def discover_codes(
    source: "str | Sequence[PageText]",
    page_range: PageRange | None = None,
    policy: DuplicatePolicy = DuplicatePolicy.FIRST_WINS,
) -> list[CodeMatch]:
    """Find every standard code token in the text.

    Args:
        source: Page-marker blob or segmented pages.
        page_range: Optional inclusive (start, end) page filter.
        policy: How repeated codes are handled. The default keeps the first
            occurrence, so the result has no duplicate codes.

    Returns:
        Code matches in document order.
    """
    pages = select_pages(ensure_pages(source), page_range)
    pattern = re.compile(RegexPatterns.STANDARD_CODE)
    window = ScanConfig.CONTEXT_CHARS

    matches: list[CodeMatch] = []
    for page in pages:
        for m in pattern.finditer(page.text):
            start = max(0, m.start() - window)
            end = min(len(page.text), m.end() + window)
            matches.append(CodeMatch(
                code=m.group(0),
                page=page.number,
                context=page.text[start:end].strip(),
            ))

    if policy == DuplicatePolicy.KEEP_ALL:
        return matches

    by_code: dict[str, CodeMatch] = {}
    for match in matches:
        if match.code not in by_code or policy == DuplicatePolicy.LAST_WINS:
            by_code[match.code] = match
    return list(by_code.values())


def find_section(
    source: "str | Sequence[PageText]",
    section_type: SectionType | str,
    page_range: PageRange | None = None,
) -> list[SectionMatch]:
    """Extract a framework section's raw text from each page that has it.

    Content runs from just after the section header to the next reserved
    header or the end of the page. Pages without the header are skipped.
    """
    section_type = SectionType(section_type)
    pages = select_pages(ensure_pages(source), page_range)
    header = re.compile(re.escape(SECTION_HEADERS[section_type]), re.IGNORECASE)
    next_header = reserved_header_pattern()

    results: list[SectionMatch] = []
    for page in pages:
        m = header.search(page.text)
        if not m:
            continue
        rest = page.text[m.end():]
        stop = next_header.search(rest)
        content = rest[:stop.start()] if stop else rest
        results.append(SectionMatch(
            section_type=section_type,
            page=page.number,
            content=content.strip(),
        ))
    return results
