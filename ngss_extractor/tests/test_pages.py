"""Tests for ngss_extractor.core.pages module.

Tests page segmentation and page specs:
- segment_pages: page-marker blob to ordered (number, text) pairs
- select_pages: inclusive range filter
- parse_page_spec: "3", "1-5", "1,3,5-7"
"""

import pytest

from ngss_extractor.core.pages import (
    PageText,
    ensure_pages,
    parse_page_spec,
    segment_pages,
    select_pages,
)


# =============================================================================
# segment_pages tests
# =============================================================================


class TestSegmentPages:
    """Tests for segment_pages()."""

    def test_splits_on_markers(self):
        """Each marker starts a new page."""
        pages = segment_pages("Page 1: alpha Page 2: beta")
        assert pages == (PageText(1, "alpha"), PageText(2, "beta"))

    def test_keeps_document_order(self):
        """Pages keep the order they appear in, not numeric order."""
        pages = segment_pages("Page 9: late Page 3: early")
        assert [p.number for p in pages] == [9, 3]

    def test_skips_empty_pages(self):
        """Markers with no content produce no page."""
        pages = segment_pages("Page 1:   Page 2: text")
        assert [p.number for p in pages] == [2]

    def test_no_markers(self):
        """Text without markers yields no pages."""
        assert segment_pages("just some text") == ()
        assert segment_pages("") == ()

    def test_multiline_content(self):
        """Page content may span lines."""
        pages = segment_pages("Page 1: line one\nline two\n\nPage 2: next")
        assert pages[0].text == "line one\nline two"

    def test_repeatable(self):
        """Segmenting twice gives the same result."""
        text = "Page 1: a Page 2: b"
        assert segment_pages(text) == segment_pages(text)

    def test_pages_are_immutable(self):
        """PageText is frozen."""
        page = segment_pages("Page 1: a")[0]
        with pytest.raises(AttributeError):
            page.text = "b"


class TestEnsureAndSelect:
    """Tests for ensure_pages() and select_pages()."""

    def test_ensure_accepts_blob(self):
        assert ensure_pages("Page 1: a") == (PageText(1, "a"),)

    def test_ensure_accepts_pages(self):
        pages = [PageText(1, "a")]
        assert ensure_pages(pages) == (PageText(1, "a"),)

    def test_select_is_inclusive(self):
        """Both range ends are kept."""
        pages = segment_pages("Page 1: a Page 2: b Page 3: c Page 4: d")
        assert [p.number for p in select_pages(pages, (2, 3))] == [2, 3]

    def test_select_without_range(self):
        pages = segment_pages("Page 1: a Page 2: b")
        assert select_pages(pages, None) == pages


# =============================================================================
# parse_page_spec tests
# =============================================================================


class TestParsePageSpec:
    """Tests for parse_page_spec()."""

    def test_single_page(self):
        assert parse_page_spec("3") == [3]

    def test_range(self):
        assert parse_page_spec("1-5") == [1, 2, 3, 4, 5]

    def test_mixed(self):
        assert parse_page_spec("1,3,5-7") == [1, 3, 5, 6, 7]

    def test_whitespace_tolerated(self):
        assert parse_page_spec(" 2 , 4 - 5 ") == [2, 4, 5]

    def test_duplicates_dropped(self):
        """Order is kept as written, repeats removed."""
        assert parse_page_spec("5,1-3,2") == [5, 1, 2, 3]

    @pytest.mark.parametrize("spec", ["", "  ", "a", "1,,2", "0", "3-1", "1-b", "-2"])
    def test_invalid_specs(self, spec):
        """Malformed specs raise ValueError."""
        with pytest.raises(ValueError):
            parse_page_spec(spec)
