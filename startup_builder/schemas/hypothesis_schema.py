"""Hypothesis record: a testable assumption tracked through validation."""

from __future__ import annotations

from typing import Any, ClassVar, Literal, Mapping, Optional

from pydantic import Field

from ..constants import HYPOTHESIS_TYPE
from .base import RecordModel, StrList, construct_model, guard, validate_model
from .results import ValidationResult

# Mirrors constants.HYPOTHESIS_STATUSES
HypothesisStatus = Literal["untested", "testing", "validated", "invalidated"]


class Hypothesis(RecordModel):
    """An assumption, the metric that tests it, and the target value to hit.

    Status lifecycle:
    - untested: not yet put in front of customers
    - testing: experiment running
    - validated: target met, evidence attached
    - invalidated: target missed
    """

    record_type: ClassVar[str] = HYPOTHESIS_TYPE

    type: Literal[HYPOTHESIS_TYPE] = Field(..., alias="$type")
    assumption: str = Field(
        ...,
        min_length=1,
        strict=True,
        description="The belief being tested (e.g. 'Users will pay $50/mo for this')",
    )
    metric: str = Field(
        ...,
        min_length=1,
        strict=True,
        description="Metric used to test it (e.g. 'conversion_rate')",
    )
    target: float = Field(..., strict=True, description="Value of the metric that validates the assumption")
    status: HypothesisStatus
    evidence: Optional[StrList] = Field(
        default=None,
        description="Supporting observations (survey results, interviews)",
    )


def validate_hypothesis(data: Any) -> ValidationResult[Hypothesis]:
    return validate_model(Hypothesis, data)


def is_hypothesis(data: Any) -> bool:
    return guard(Hypothesis, data)


def create_hypothesis(data: Optional[Mapping[str, Any]] = None, **fields: Any) -> Hypothesis:
    return construct_model(Hypothesis, data, fields)
