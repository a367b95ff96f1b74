"""Pydantic models for the extraction pipeline."""

from ngss_extractor.pydantic_models.scan_models import (
    CodeMatch,
    DuplicatePolicy,
    SectionMatch,
    SectionType,
    TopicRange,
)
from ngss_extractor.pydantic_models.standard_models import (
    DepthBoundaries,
    Dimension,
    DimensionOrigin,
    LessonScopeHints,
    StandardRecord,
    StandardsDataset,
)
from ngss_extractor.pydantic_models.schema_models import (
    ConceptSchema,
    DepthBoundariesSchema,
    IdeaSchema,
    LessonScopeSchema,
    PracticeSchema,
    StandardSchema,
)
from ngss_extractor.pydantic_models.validation_models import (
    CompletenessPartition,
    ShapeBatchResult,
    ShapeValidation,
)

__all__ = [
    # Scan artifacts
    "CodeMatch",
    "DuplicatePolicy",
    "SectionMatch",
    "SectionType",
    "TopicRange",
    # Records
    "DepthBoundaries",
    "Dimension",
    "DimensionOrigin",
    "LessonScopeHints",
    "StandardRecord",
    "StandardsDataset",
    # Schemas
    "ConceptSchema",
    "DepthBoundariesSchema",
    "IdeaSchema",
    "LessonScopeSchema",
    "PracticeSchema",
    "StandardSchema",
    # Validation results
    "CompletenessPartition",
    "ShapeBatchResult",
    "ShapeValidation",
]
