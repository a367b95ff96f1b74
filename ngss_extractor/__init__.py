"""NGSS Standards Extraction Pipeline.

Turns page-delimited text recovered from a scanned standards document into
validated StandardRecords, each carrying a practice, a core idea, and a
crosscutting concept.

Architecture:
    core/             - PDF reader, scanners, structurer, validator, logging, errors
    pydantic_models/  - Pydantic models for scan artifacts, records, and schemas

Usage:
    from ngss_extractor import Orchestrator

    orchestrator = Orchestrator()
    dataset = await orchestrator.run("path/to/ngss_middle_school.pdf")

    # Or from text already extracted:
    records = orchestrator.extract_all(text, domain_filter="MS-LS")
"""

from ngss_extractor.orchestrator import Orchestrator
from ngss_extractor.pydantic_models import (
    # Scan artifacts
    CodeMatch,
    SectionMatch,
    SectionType,
    DuplicatePolicy,
    TopicRange,
    # Records
    Dimension,
    DimensionOrigin,
    LessonScopeHints,
    StandardRecord,
    StandardsDataset,
)

__all__ = [
    # Main entry point
    "Orchestrator",
    # Scan artifacts
    "CodeMatch",
    "SectionMatch",
    "SectionType",
    "DuplicatePolicy",
    "TopicRange",
    # Records
    "Dimension",
    "DimensionOrigin",
    "LessonScopeHints",
    "StandardRecord",
    "StandardsDataset",
]
