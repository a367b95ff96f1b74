"""Pytest configuration and shared fixtures.

Provides reusable test fixtures for:
- Sample page texts in the page-marker format
- Mixed-domain and multi-topic corpora
- A mock text-extraction reader
- Real PDF files built with PyMuPDF
"""

from unittest.mock import AsyncMock, MagicMock

import fitz
import pytest

from ngss_extractor.core.pipeline_logger import reset_logger


# =============================================================================
# Sample pages
# =============================================================================

# A short page with every section present
SCENARIO_PAGE = (
    "Page 5: MS-PS1-1. Develop models... [note] "
    "Science and Engineering Practices ▪ Develop a model to predict and/or describe phenomena. "
    "Disciplinary Core Ideas PS1.A: Structure and Properties of Matter. "
    "Crosscutting Concepts ▪ Patterns can be used to identify cause and effect relationships."
)

PS1_1_PAGE = (
    "Page 1: MS.Structure and Properties of Matter MS-PS1-1. Develop models to describe "
    "the atomic composition of simple molecules and extended structures. "
    "[Clarification Statement: Emphasis is on developing models of molecules.] "
    "Science and Engineering Practices ▪ Developing and Using Models. "
    "Disciplinary Core Ideas PS1.A: Structure and Properties of Matter. "
    "Crosscutting Concepts ▪ Scale, Proportion, and Quantity."
)

PS1_3_PAGE = (
    "Page 2: MS.Structure and Properties of Matter MS-PS1-3. Gather and make sense of "
    "information to describe that synthetic materials come from natural resources. "
    "Science and Engineering Practices ▪ Obtaining, Evaluating, and Communicating Information. "
    "Disciplinary Core Ideas PS1.A: Structure and Properties of Matter. "
    "Crosscutting Concepts ▪ Structure and Function."
)

LS1_1_PAGE = (
    "Page 3: MS.From Molecules to Organisms MS-LS1-1. Conduct an investigation to provide "
    "evidence that living things are made of cells; either one cell or many different "
    "numbers and types of cells. "
    "Science and Engineering Practices ▪ Planning and Carrying Out Investigations. "
    "Disciplinary Core Ideas LS1.A: Structure and Function. "
    "Crosscutting Concepts ▪ Scale, Proportion, and Quantity."
)

# No recognizable section headers
LS1_2_PAGE = (
    "Page 4: MS-LS1-2. Develop and use a model to describe the function of a cell as a "
    "whole and ways the parts of cells contribute to the function."
)

PS2_1_PAGE = (
    "Page 7: MS-PS2-1. Apply Newton's Third Law to design a solution to a problem "
    "involving the motion of two colliding objects."
)


@pytest.fixture
def scenario_text():
    """Single page with all three dimensions."""
    return SCENARIO_PAGE


@pytest.fixture
def headerless_text():
    """Single page with a code but no section headers."""
    return PS2_1_PAGE


@pytest.fixture
def mixed_corpus():
    """PS and LS codes; MS-LS1-2 has no sections and is incomplete."""
    return " ".join([PS1_1_PAGE, PS1_3_PAGE, LS1_1_PAGE, LS1_2_PAGE])


@pytest.fixture
def topic_corpus():
    """Pages grouped under three topic headers, one of them OCR-split."""
    return " ".join([
        "Page 1: MS.Structure and Properties of Matter MS-PS1-1. Develop models of atoms.",
        "Page 2: MS.Structure and Properties of Matter MS-PS1-3. Gather information.",
        "Page 3: MS.Chemical Reactions MS-PS1-2. Analyze data on reactions.",
        "Page 4: MS.Chem ical Reactions MS-PS1-5. Develop a model of conservation.",
        "Page 5: MS.Forces and Interactions MS-PS2-1. Apply Newton's Third Law.",
        "Page 6: Appendix with no header and no codes.",
    ])


# =============================================================================
# Mock reader
# =============================================================================


@pytest.fixture
def mock_reader(mixed_corpus):
    """Mock PDFReader returning the mixed corpus."""
    reader = MagicMock()
    reader.extract_all = AsyncMock(return_value=mixed_corpus)
    reader.close = AsyncMock()
    return reader


# =============================================================================
# Real PDFs
# =============================================================================


@pytest.fixture
def make_pdf(tmp_path):
    """Factory writing a PDF with one text block per page."""
    def _make(pages: list[str], name: str = "standards.pdf"):
        path = tmp_path / name
        doc = fitz.open()
        for text in pages:
            page = doc.new_page()
            page.insert_text((72, 72), text, fontsize=11)
        doc.save(str(path))
        doc.close()
        return path

    return _make


# =============================================================================
# Logger isolation
# =============================================================================


@pytest.fixture(autouse=True)
def fresh_logger():
    """Reset the global pipeline logger around each test."""
    reset_logger()
    yield
    reset_logger()
