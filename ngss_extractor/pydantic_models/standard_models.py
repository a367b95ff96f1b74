"""Pydantic schemas for structured standard records.

A StandardRecord is built once per code by the structurer and treated as an
immutable value afterwards. Each framework dimension records whether it was
read from the page or filled with the documented default.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from ngss_extractor.pydantic_models.scan_models import TopicRange


class DimensionOrigin(str, Enum):
    """How a dimension sub-record was obtained.

    - EXTRACTED: the section and its detail line were found on the page
    - DEFAULTED: the section or its detail line was missing; placeholder used
    """

    EXTRACTED = "extracted"
    DEFAULTED = "defaulted"

    def __str__(self) -> str:
        return self.value


class Dimension(BaseModel):
    """One framework dimension: a practice, a core idea, or a concept."""

    model_config = ConfigDict(frozen=True)

    code: str = Field(description="SEP-n, a DCI code like PS1.A, or CCC-n; empty when defaulted")
    name: str
    description: str = ""
    origin: DimensionOrigin = DimensionOrigin.EXTRACTED

    @property
    def is_defaulted(self) -> bool:
        return self.origin == DimensionOrigin.DEFAULTED


class DepthBoundaries(BaseModel):
    model_config = ConfigDict(frozen=True)

    include: list[str] = Field(default_factory=list)
    exclude: list[str] = Field(default_factory=list)


class LessonScopeHints(BaseModel):
    """Lesson planning hints derived from the performance statement."""

    model_config = ConfigDict(frozen=True)

    key_concepts: list[str] = Field(default_factory=list)
    prerequisite_knowledge: list[str] = Field(default_factory=list)
    common_misconceptions: list[str] = Field(default_factory=list)
    depth_boundaries: DepthBoundaries = Field(default_factory=DepthBoundaries)


class StandardRecord(BaseModel):
    """A performance standard with its three-part framework.

    Attributes:
        code: Standard code, e.g. "MS-PS1-1"
        grade_level: Grade band taken from the code, e.g. "MS"
        domain: Domain family name, or "Unknown"
        topic: Topic read from the page header ("" when absent)
        performance_statement: Text following the code on its page
        practice: Science and engineering practice
        idea: Disciplinary core idea
        concept: Crosscutting concept
        synthesized_questions: At most two generated questions
        keywords: At most eight deduplicated keywords
        lesson_scope_hints: Planning hints
        source_page: Page the code was structured from
    """

    model_config = ConfigDict(frozen=True)

    code: str
    grade_level: str
    domain: str
    topic: str = ""
    performance_statement: str = ""
    practice: Dimension
    idea: Dimension
    concept: Dimension
    synthesized_questions: list[str] = Field(default_factory=list)
    keywords: list[str] = Field(default_factory=list)
    lesson_scope_hints: LessonScopeHints = Field(default_factory=LessonScopeHints)
    source_page: int | None = None

    @property
    def dimensions(self) -> dict[str, Dimension]:
        return {"practice": self.practice, "idea": self.idea, "concept": self.concept}

    @property
    def defaulted_dimensions(self) -> list[str]:
        """Names of dimensions that were filled with defaults."""
        return [name for name, dim in self.dimensions.items() if dim.is_defaulted]


class StandardsDataset(BaseModel):
    """Result of a full pipeline run, ready for an external persistence step."""

    generated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    source: str
    standards: list[StandardRecord] = Field(default_factory=list)
    topics: list[TopicRange] = Field(default_factory=list)
    stats: dict[str, Any] = Field(default_factory=dict)
