"""Pydantic schemas for validation results."""

from pydantic import BaseModel, Field

from ngss_extractor.pydantic_models.standard_models import StandardRecord


class ShapeValidation(BaseModel):
    """Outcome of validating one record: the record, or its errors.

    Errors are path-qualified, e.g. "practice.name: required".
    """

    record: StandardRecord | None = None
    errors: list[str] = Field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return self.record is not None and not self.errors

    @classmethod
    def ok(cls, record: StandardRecord) -> "ShapeValidation":
        return cls(record=record)

    @classmethod
    def fail(cls, errors: list[str]) -> "ShapeValidation":
        return cls(errors=errors)


class ShapeBatchResult(BaseModel):
    """Batch shape validation: records that passed, and errors by code."""

    validated: list[StandardRecord] = Field(default_factory=list)
    errors: list[str] = Field(default_factory=list)

    @property
    def success(self) -> bool:
        return not self.errors


class CompletenessPartition(BaseModel):
    """Disjoint split of records by three-dimensional completeness."""

    complete: list[StandardRecord] = Field(default_factory=list)
    incomplete: list[StandardRecord] = Field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.complete) + len(self.incomplete)
