"""Page segmentation for page-marker delimited text.

The collaborator returns one string of the form::

    Page 1: <content> Page 2: <content> ...

Everything downstream works on the immutable ``(number, text)`` sequence
produced here rather than on the raw blob.
"""

import re
from collections.abc import Sequence
from dataclasses import dataclass

from ngss_extractor.core.config import RegexPatterns


@dataclass(frozen=True)
class PageText:
    """One page of extracted text (page numbers are 1-indexed)."""

    number: int
    text: str


Pages = tuple[PageText, ...]
PageRange = tuple[int, int]


def segment_pages(text: str) -> Pages:
    """Split a page-marker blob into ordered (page, text) pairs.

    A blob without markers yields no pages. Pages keep their order of
    appearance, which need not be sorted by number.
    """
    pattern = re.compile(RegexPatterns.PAGE_MARKER)
    pages = []
    for match in pattern.finditer(text or ""):
        content = match.group(2).strip()
        if not content:
            continue
        pages.append(PageText(number=int(match.group(1)), text=content))
    return tuple(pages)


def ensure_pages(source: "str | Sequence[PageText]") -> Pages:
    """Accept either a raw blob or already-segmented pages."""
    if isinstance(source, str):
        return segment_pages(source)
    return tuple(source)


def select_pages(pages: Pages, page_range: PageRange | None) -> Pages:
    """Keep pages whose number falls inside the inclusive range."""
    if page_range is None:
        return pages
    start, end = page_range
    return tuple(p for p in pages if start <= p.number <= end)


def parse_page_spec(spec: str) -> list[int]:
    """Parse a page spec like "3", "1-5" or "1,3,5-7" into page numbers.

    Order is preserved as written; duplicates are dropped.

    Raises:
        ValueError: If the spec is empty or malformed.
    """
    if not spec or not spec.strip():
        raise ValueError("Empty page spec")

    numbers: list[int] = []
    for part in spec.split(","):
        part = part.strip()
        if not part:
            raise ValueError(f"Malformed page spec: {spec!r}")
        if "-" in part:
            left, _, right = part.partition("-")
            if not (left.strip().isdigit() and right.strip().isdigit()):
                raise ValueError(f"Malformed page range: {part!r}")
            start, end = int(left), int(right)
            if start < 1 or end < start:
                raise ValueError(f"Invalid page range: {part!r}")
            chunk = range(start, end + 1)
        else:
            if not part.isdigit() or int(part) < 1:
                raise ValueError(f"Invalid page number: {part!r}")
            chunk = [int(part)]
        for n in chunk:
            if n not in numbers:
                numbers.append(n)
    return numbers
