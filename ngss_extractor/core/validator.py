"""Schema and completeness validation for standard records.

Two independent gates:
- shape: the record matches the canonical StandardSchema
- completeness: practice, idea and concept all carry a code
"""

import logging
from collections.abc import Iterable
from typing import Any

from pydantic import ValidationError

from ngss_extractor.pydantic_models.schema_models import StandardSchema
from ngss_extractor.pydantic_models.standard_models import StandardRecord
from ngss_extractor.pydantic_models.validation_models import (
    CompletenessPartition,
    ShapeBatchResult,
    ShapeValidation,
)

logger = logging.getLogger(__name__)


def format_validation_errors(exc: ValidationError) -> list[str]:
    """Render pydantic errors as "path.to.field: message" strings."""
    messages = []
    for err in exc.errors():
        path = ".".join(str(part) for part in err["loc"]) or "<root>"
        msg = "required" if err["type"] == "missing" else err["msg"]
        messages.append(f"{path}: {msg}")
    return messages


def validate_shape(record: StandardRecord | dict[str, Any]) -> ShapeValidation:
    """Check a record against the canonical shape.

    Args:
        record: A StandardRecord or a plain dict of the same fields.

    Returns:
        ShapeValidation holding the record, or path-qualified errors.
    """
    data = record.model_dump() if isinstance(record, StandardRecord) else record
    try:
        StandardSchema.model_validate(data)
    except ValidationError as exc:
        return ShapeValidation.fail(format_validation_errors(exc))

    if isinstance(record, StandardRecord):
        return ShapeValidation.ok(record)
    try:
        return ShapeValidation.ok(StandardRecord.model_validate(data))
    except ValidationError as exc:
        return ShapeValidation.fail(format_validation_errors(exc))


def validate_shape_batch(records: Iterable[StandardRecord]) -> ShapeBatchResult:
    """Validate each record; failures are reported by code and excluded."""
    result = ShapeBatchResult()
    for record in records:
        outcome = validate_shape(record)
        if outcome.is_valid:
            result.validated.append(outcome.record)
        else:
            code = record.code if isinstance(record, StandardRecord) else record.get("code", "?")
            result.errors.extend(f"{code}: {err}" for err in outcome.errors)
    return result


def missing_dimension_codes(record: StandardRecord) -> list[str]:
    """Names of dimensions whose code is empty."""
    return [name for name, dim in record.dimensions.items() if not dim.code]


def is_three_dimensionally_complete(record: StandardRecord) -> bool:
    """True iff practice, idea and concept codes are all non-empty."""
    return bool(record.practice.code and record.idea.code and record.concept.code)


def partition_by_completeness(records: Iterable[StandardRecord]) -> CompletenessPartition:
    """Split records into complete and incomplete, preserving order."""
    partition = CompletenessPartition()
    for record in records:
        if is_three_dimensionally_complete(record):
            partition.complete.append(record)
        else:
            partition.incomplete.append(record)
    return partition
