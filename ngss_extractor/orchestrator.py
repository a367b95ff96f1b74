"""Batch orchestrator - drives record extraction across many standard codes.

Two batch modes share one failure policy: a code whose structuring raises
is logged, recorded in PipelineErrors, and skipped.

- extract_all: sequential, optionally filtered by domain prefix; returns
  only three-dimensionally complete records
- extract_concurrently: async, at most `concurrency` codes in flight;
  returns every record that was found

run() chains the whole pipeline for one PDF: read all pages, list topics,
then extract_all per domain.
"""

import asyncio
from pathlib import Path

from ngss_extractor.core import (
    PDFReader,
    PipelineErrors,
    get_logger,
    incomplete_error,
    pdf_read_error,
    structure_error,
    validation_error,
)
from ngss_extractor.core.config import BatchConfig
from ngss_extractor.core.pages import Pages, segment_pages
from ngss_extractor.core.scanner import discover_codes
from ngss_extractor.core.structurer import structure_standard
from ngss_extractor.core.topics import list_all_topics
from ngss_extractor.core.validator import (
    missing_dimension_codes,
    partition_by_completeness,
    validate_shape,
)
from ngss_extractor.pydantic_models import StandardRecord, StandardsDataset, TopicRange


class Orchestrator:
    """Batch orchestrator for standard record extraction."""

    def __init__(
        self,
        reader: PDFReader | None = None,
        max_concurrent: int = BatchConfig.DEFAULT_CONCURRENCY,
        verbose: bool = False,
        log_dir: str | Path | None = None,
    ):
        """Initialize the orchestrator.

        Args:
            reader: Text-extraction collaborator. Created on demand by run().
            max_concurrent: Default bound on in-flight extractions.
            verbose: If True, print detailed logs.
            log_dir: Directory for log files.
        """
        self.reader = reader
        self.max_concurrent = max_concurrent
        self.logger = get_logger(verbose=verbose, log_dir=log_dir)
        self.errors = PipelineErrors()

        self._stats = {
            "codes_discovered": 0,
            "extracted": 0,
            "complete": 0,
            "incomplete": 0,
            "shape_issues": 0,
            "topics": 0,
        }

    # =========================================================================
    # Per-code extraction
    # =========================================================================

    def _structure(self, pages: Pages, code: str, phase: str) -> StandardRecord | None:
        """Structure one code; failures are recorded and yield None."""
        try:
            return structure_standard(pages, code)
        except Exception as e:
            self.logger.error(f"Extraction failed for {code}", exc=e)
            self.errors.add(structure_error(str(e), phase, code, original=e))
            return None

    async def _extract_one(self, pages: Pages, code: str) -> StandardRecord | None:
        return await asyncio.to_thread(self._structure, pages, code, "concurrent")

    def _check_shape(self, record: StandardRecord, phase: str):
        outcome = validate_shape(record)
        if outcome.is_valid:
            return
        self._stats["shape_issues"] += 1
        for message in outcome.errors:
            field_name = message.split(":", 1)[0]
            self.errors.add(validation_error(message, phase, code=record.code, field_name=field_name))
        self.logger.debug(f"{record.code}: {len(outcome.errors)} shape issues")

    # =========================================================================
    # Batch modes
    # =========================================================================

    def extract_all(self, text: "str | Pages", domain_filter: str | None = None) -> list[StandardRecord]:
        """Extract every discovered code and keep the complete records.

        Args:
            text: Page-marker blob or segmented pages.
            domain_filter: Optional code prefix, e.g. "MS-LS".

        Returns:
            Three-dimensionally complete records, in discovery order.
        """
        pages = segment_pages(text) if isinstance(text, str) else tuple(text)
        codes = [m.code for m in discover_codes(pages)]
        self._stats["codes_discovered"] = len(codes)
        if domain_filter:
            codes = [c for c in codes if c.startswith(domain_filter)]

        phase = f"extract {domain_filter}" if domain_filter else "extract"
        self.logger.start_phase(phase, total=len(codes))

        records = []
        for code in codes:
            record = self._structure(pages, code, phase)
            self.logger.tick(code)
            if record is None:
                continue
            self._check_shape(record, phase)
            records.append(record)

        partition = partition_by_completeness(records)
        for record in partition.incomplete:
            self.errors.add(incomplete_error(phase, record.code, missing_dimension_codes(record)))

        self._stats["extracted"] += len(records)
        self._stats["complete"] += len(partition.complete)
        self._stats["incomplete"] += len(partition.incomplete)
        self.logger.phase_result(
            f"{len(partition.complete)} complete",
            extracted=len(records),
            complete=len(partition.complete),
            incomplete=len(partition.incomplete),
        )
        return partition.complete

    async def extract_concurrently(
        self,
        text: "str | Pages",
        codes: list[str],
        concurrency: int | None = None,
        chunked: bool = False,
    ) -> list[StandardRecord]:
        """Extract the given codes with bounded concurrency.

        Args:
            text: Page-marker blob or segmented pages.
            codes: Codes to extract.
            concurrency: Max extractions in flight (defaults to max_concurrent).
            chunked: If True, run fixed-size chunks and wait for each whole
                chunk before starting the next. Otherwise a semaphore keeps
                up to `concurrency` extractions running at all times.

        Returns:
            Records in input order; absent or failed codes are dropped.
        """
        size = self.max_concurrent if concurrency is None else concurrency
        if size < 1:
            raise ValueError(f"concurrency must be >= 1, got {size}")

        pages = segment_pages(text) if isinstance(text, str) else tuple(text)
        self.logger.start_phase("extract concurrently", total=len(codes))

        if chunked:
            results = []
            for i in range(0, len(codes), size):
                chunk = codes[i:i + size]
                results.extend(await asyncio.gather(*(self._extract_one(pages, c) for c in chunk)))
                for code in chunk:
                    self.logger.tick(code)
        else:
            semaphore = asyncio.Semaphore(size)

            async def bounded(code: str) -> StandardRecord | None:
                async with semaphore:
                    record = await self._extract_one(pages, code)
                self.logger.tick(code)
                return record

            results = await asyncio.gather(*(bounded(c) for c in codes))

        records = [r for r in results if r is not None]
        self._stats["extracted"] += len(records)
        self.logger.phase_result(
            f"{len(records)}/{len(codes)} found",
            chunked=chunked,
            concurrency=size,
        )
        return records

    # =========================================================================
    # Full run
    # =========================================================================

    async def run(
        self,
        pdf_path: str | Path,
        domains: tuple[str, ...] = BatchConfig.DEFAULT_DOMAINS,
    ) -> StandardsDataset:
        """Run the whole pipeline for one PDF.

        Args:
            pdf_path: Path to the standards PDF.
            domains: Code prefixes to extract, one extract_all pass each.

        Returns:
            The dataset of complete records and detected topics.
        """
        if self.reader is None:
            self.reader = PDFReader()
        self.logger.start_pipeline(str(pdf_path))

        try:
            try:
                text = await self.reader.extract_all(pdf_path)
            except Exception as e:
                self.errors.add(pdf_read_error(str(e), "read", original=e, path=str(pdf_path)))
                raise

            pages = segment_pages(text)
            self.logger.info(f"Read {len(pages)} pages")

            topics: list[TopicRange] = list_all_topics(pages)
            self._stats["topics"] = len(topics)

            standards = []
            for domain in domains:
                standards.extend(self.extract_all(pages, domain_filter=domain))

            dataset = StandardsDataset(
                source=Path(pdf_path).name,
                standards=standards,
                topics=topics,
                stats=self.get_stats(),
            )
            self.logger.end_pipeline(success=True, stats=self.get_stats())
            return dataset

        except Exception as e:
            self.logger.error(f"Pipeline failed: {e}")
            self.logger.end_pipeline(success=False, stats=self.get_stats())
            raise

        finally:
            await self.reader.close()

    def get_stats(self) -> dict:
        """Get extraction statistics."""
        return {
            **self._stats,
            "errors": self.errors.summary(),
        }

    def get_errors(self) -> PipelineErrors:
        """Get pipeline errors."""
        return self.errors
