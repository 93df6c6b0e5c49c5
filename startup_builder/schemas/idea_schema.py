from __future__ import annotations

from typing import Any, ClassVar, Literal, Mapping, Optional

from pydantic import Field

from ..constants import IDEA_TYPE
from .base import NonEmptyStr, RecordModel, construct_model, guard, validate_model
from .results import ValidationResult


class Idea(RecordModel):
    """Startup idea with problem/solution framing."""

    record_type: ClassVar[str] = IDEA_TYPE

    type: Literal[IDEA_TYPE] = Field(..., alias="$type")
    concept: str = Field(..., min_length=1, strict=True, description="Core concept in one line")
    problem: str = Field(..., min_length=1, strict=True, description="Problem being solved")
    solution: str = Field(..., min_length=1, strict=True, description="How the problem is solved")
    differentiator: Optional[NonEmptyStr] = Field(
        default=None,
        description="What sets this idea apart from alternatives",
    )


def validate_idea(data: Any) -> ValidationResult[Idea]:
    return validate_model(Idea, data)


def is_idea(data: Any) -> bool:
    return guard(Idea, data)


def create_idea(data: Optional[Mapping[str, Any]] = None, **fields: Any) -> Idea:
    return construct_model(Idea, data, fields)
