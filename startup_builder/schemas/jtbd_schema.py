"""JTBD (Jobs To Be Done) record."""

from __future__ import annotations

from typing import Any, ClassVar, Literal, Mapping, Optional

from pydantic import Field

from ..constants import JTBD_TYPE
from .base import RecordModel, StrList, construct_model, guard, validate_model
from .results import ValidationResult


class JTBD(RecordModel):
    """The job a customer hires a product for, in its context."""

    record_type: ClassVar[str] = JTBD_TYPE

    type: Literal[JTBD_TYPE] = Field(..., alias="$type")
    job: str = Field(..., min_length=1, strict=True, description="The job to be done")
    context: str = Field(..., min_length=1, strict=True, description="When the job arises")
    outcome: str = Field(..., min_length=1, strict=True, description="What success looks like")
    constraints: Optional[StrList] = None
    current_solutions: Optional[StrList] = Field(
        default=None,
        description="How the job gets done today",
    )


def validate_jtbd(data: Any) -> ValidationResult[JTBD]:
    return validate_model(JTBD, data)


def is_jtbd(data: Any) -> bool:
    return guard(JTBD, data)


def create_jtbd(data: Optional[Mapping[str, Any]] = None, **fields: Any) -> JTBD:
    return construct_model(JTBD, data, fields)
