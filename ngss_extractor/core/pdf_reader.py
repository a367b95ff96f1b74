"""PDF reader - the text-extraction collaborator.

Pure Python + PyMuPDF. Produces page-marker text ("Page <n>: <content>")
for the scanner. Documents are opened lazily, once per path; concurrent
callers wait on the same in-flight open instead of opening their own.
"""

import asyncio
import logging
from pathlib import Path

import fitz  # PyMuPDF

from ngss_extractor.core.errors import PDFExtractionError
from ngss_extractor.core.pages import parse_page_spec

logger = logging.getLogger(__name__)


def format_page(page_num: int, text: str) -> str:
    """Render one page in the page-marker format."""
    return f"Page {page_num}: {text.strip()}"


class PDFReader:
    """Async page-text reader over PyMuPDF documents.

    Usage:
        async with PDFReader() as reader:
            text = await reader.extract_pages("standards.pdf", "12-14")
    """

    def __init__(self):
        self._docs: dict[str, fitz.Document] = {}
        self._opening: dict[str, asyncio.Task] = {}

    @property
    def open_paths(self) -> list[str]:
        """Paths with an open document."""
        return list(self._docs)

    async def _ensure_open(self, pdf_path: str | Path) -> fitz.Document:
        """Return the open document for a path, opening it if needed.

        The first caller starts the open; callers arriving while it is in
        flight await the same task. Only close() cancels that task; a
        cancelled caller leaves it running for the others.
        """
        key = str(Path(pdf_path))
        doc = self._docs.get(key)
        if doc is not None:
            return doc

        task = self._opening.get(key)
        if task is None:
            task = asyncio.ensure_future(self._open(key))
            self._opening[key] = task
        try:
            return await asyncio.shield(task)
        finally:
            if self._opening.get(key) is task and task.done():
                del self._opening[key]

    async def _open(self, key: str) -> fitz.Document:
        path = Path(key)
        if not path.exists():
            raise PDFExtractionError(f"PDF not found: {key}", path=key)
        opener = asyncio.ensure_future(asyncio.to_thread(fitz.open, key))
        try:
            doc = await asyncio.shield(opener)
        except asyncio.CancelledError:
            # close() ran mid-open; the thread still finishes and its doc must not leak
            await asyncio.wait([opener])
            if opener.exception() is None:
                opener.result().close()
            raise PDFExtractionError(f"PDF reader closed while opening {key}", path=key) from None
        except Exception as exc:
            raise PDFExtractionError(f"Failed to open PDF {key}: {exc}", path=key) from exc
        logger.debug(f"Opened {key} ({len(doc)} pages)")
        self._docs[key] = doc
        return doc

    async def page_count(self, pdf_path: str | Path) -> int:
        """Total number of pages in the document."""
        doc = await self._ensure_open(pdf_path)
        return len(doc)

    async def extract_pages(self, pdf_path: str | Path, pages: str) -> str:
        """Extract the pages named by a spec like "3", "1-5" or "1,3,5-7".

        Raises:
            PDFExtractionError: If the document cannot be opened or the spec
                is malformed or out of range.
        """
        doc = await self._ensure_open(pdf_path)
        try:
            numbers = parse_page_spec(pages)
        except ValueError as exc:
            raise PDFExtractionError(
                f"PDF extraction failed for pages {pages}: {exc}",
                path=str(pdf_path), pages=pages,
            ) from exc

        out_of_range = [n for n in numbers if n > len(doc)]
        if out_of_range:
            raise PDFExtractionError(
                f"PDF extraction failed for pages {pages}: "
                f"page {out_of_range[0]} out of range (1-{len(doc)})",
                path=str(pdf_path), pages=pages,
            )
        return self._render(doc, numbers, str(pdf_path), pages)

    async def extract_all(self, pdf_path: str | Path) -> str:
        """Extract every page of the document."""
        doc = await self._ensure_open(pdf_path)
        return self._render(doc, range(1, len(doc) + 1), str(pdf_path), None)

    async def extract_page_range(self, pdf_path: str | Path, start: int, end: int) -> str:
        """Extract pages start..end (1-indexed, inclusive)."""
        return await self.extract_pages(pdf_path, f"{start}-{end}")

    def _render(self, doc: fitz.Document, numbers, path: str, pages: str | None) -> str:
        try:
            chunks = [format_page(n, doc[n - 1].get_text()) for n in numbers]
        except Exception as exc:
            suffix = f" for pages {pages}" if pages else ""
            raise PDFExtractionError(
                f"PDF extraction failed{suffix}: {exc}", path=path, pages=pages,
            ) from exc
        return "\n\n".join(chunks)

    async def close(self):
        """Close every open document. Safe to call more than once."""
        pending = list(self._opening.values())
        for task in pending:
            task.cancel()
        await asyncio.gather(*pending, return_exceptions=True)
        self._opening.clear()
        for key, doc in list(self._docs.items()):
            try:
                doc.close()
            except Exception as exc:
                logger.warning(f"Error closing {key}: {exc}")
        self._docs.clear()

    async def __aenter__(self):
        return self

    async def __aexit__(self, _exc_type, _exc_val, _exc_tb):
        await self.close()
        return False
