"""Core utilities for the extraction pipeline."""

from ngss_extractor.core.pdf_reader import PDFReader, format_page
from ngss_extractor.core.config import (
    RegexPatterns,
    SectionHeaders,
    ScanConfig,
    TopicMatching,
    RecordLimits,
    DimensionCodes,
    BatchConfig,
    QualityConfig,
)
from ngss_extractor.core.pages import (
    PageText,
    segment_pages,
    ensure_pages,
    select_pages,
    parse_page_spec,
)
from ngss_extractor.core.scanner import discover_codes, find_section
from ngss_extractor.core.topics import (
    canonical_topic,
    find_topic_range,
    list_all_topics,
    read_topic_header,
)
from ngss_extractor.core.structurer import (
    structure_standard,
    synthesize_questions,
    extract_keywords,
)
from ngss_extractor.core.validator import (
    validate_shape,
    validate_shape_batch,
    is_three_dimensionally_complete,
    partition_by_completeness,
)
from ngss_extractor.core.quality import QualityReport, audit_records
from ngss_extractor.core.pipeline_logger import PipelineLogger, get_logger, reset_logger
from ngss_extractor.core.errors import (
    PDFExtractionError,
    ErrorSeverity,
    ErrorCategory,
    ExtractionError,
    PipelineErrors,
    pdf_read_error,
    structure_error,
    validation_error,
    incomplete_error,
)

__all__ = [
    # Collaborator
    "PDFReader",
    "format_page",
    # Config
    "RegexPatterns",
    "SectionHeaders",
    "ScanConfig",
    "TopicMatching",
    "RecordLimits",
    "DimensionCodes",
    "BatchConfig",
    "QualityConfig",
    # Pages
    "PageText",
    "segment_pages",
    "ensure_pages",
    "select_pages",
    "parse_page_spec",
    # Scanning
    "discover_codes",
    "find_section",
    "canonical_topic",
    "find_topic_range",
    "list_all_topics",
    "read_topic_header",
    # Structuring and validation
    "structure_standard",
    "synthesize_questions",
    "extract_keywords",
    "validate_shape",
    "validate_shape_batch",
    "is_three_dimensionally_complete",
    "partition_by_completeness",
    "QualityReport",
    "audit_records",
    # Logging
    "PipelineLogger",
    "get_logger",
    "reset_logger",
    # Errors
    "PDFExtractionError",
    "ErrorSeverity",
    "ErrorCategory",
    "ExtractionError",
    "PipelineErrors",
    "pdf_read_error",
    "structure_error",
    "validation_error",
    "incomplete_error",
]
