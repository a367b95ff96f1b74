"""Canonical shape of a standard record, used for shape validation.

Stricter than StandardRecord itself: codes must follow their formats and
text fields must carry real content. A record that builds fine can still
fail here.
"""

from pydantic import BaseModel, Field


class PracticeSchema(BaseModel):
    code: str = Field(pattern=r"^SEP-\d+$")
    name: str = Field(min_length=5)
    description: str = Field(min_length=20)


class IdeaSchema(BaseModel):
    code: str = Field(pattern=r"^[A-Z]{2,3}\d+\.[A-Z]$")
    name: str = Field(min_length=5)
    description: str = Field(min_length=20)


class ConceptSchema(BaseModel):
    code: str = Field(pattern=r"^CCC-\d+$")
    name: str = Field(min_length=3)
    description: str = Field(min_length=20)


class DepthBoundariesSchema(BaseModel):
    include: list[str]
    exclude: list[str]


class LessonScopeSchema(BaseModel):
    key_concepts: list[str] = Field(min_length=1)
    prerequisite_knowledge: list[str]
    common_misconceptions: list[str]
    depth_boundaries: DepthBoundariesSchema


class StandardSchema(BaseModel):
    code: str = Field(pattern=r"^[A-Z]{2}-[A-Z]{2,3}\d+-\d+$")
    grade_level: str
    domain: str
    topic: str
    performance_statement: str = Field(min_length=50)
    practice: PracticeSchema
    idea: IdeaSchema
    concept: ConceptSchema
    synthesized_questions: list[str] = Field(min_length=1, max_length=2)
    keywords: list[str] = Field(max_length=8)
    lesson_scope_hints: LessonScopeSchema
