"""Lean Canvas record: one-page business model.

Every list section must carry at least one entry; ``unfairAdvantage`` is the
only section that may be left out.
"""

from __future__ import annotations

from typing import Any, ClassVar, Literal, Mapping, Optional

from pydantic import Field

from ..constants import LEAN_CANVAS_TYPE
from .base import NonEmptyStr, RecordModel, StrList, construct_model, guard, validate_model
from .results import ValidationResult


class LeanCanvas(RecordModel):
    """Lean Canvas business model (9 sections)."""

    record_type: ClassVar[str] = LEAN_CANVAS_TYPE

    type: Literal[LEAN_CANVAS_TYPE] = Field(..., alias="$type")
    problem: StrList = Field(..., min_length=1, description="Top 1-3 problems")
    solution: StrList = Field(..., min_length=1, description="Top features addressing each problem")
    unique_value: str = Field(
        ...,
        min_length=1,
        strict=True,
        description="Single, clear, compelling message",
    )
    unfair_advantage: Optional[NonEmptyStr] = Field(
        default=None,
        description="Something that cannot be easily copied or bought",
    )
    customer_segments: StrList = Field(..., min_length=1)
    channels: StrList = Field(..., min_length=1, description="Paths to customers")
    revenue_streams: StrList = Field(..., min_length=1)
    cost_structure: StrList = Field(..., min_length=1)
    key_metrics: StrList = Field(..., min_length=1, description="Numbers that tell how the business is doing")


def validate_lean_canvas(data: Any) -> ValidationResult[LeanCanvas]:
    return validate_model(LeanCanvas, data)


def is_lean_canvas(data: Any) -> bool:
    return guard(LeanCanvas, data)


def create_lean_canvas(data: Optional[Mapping[str, Any]] = None, **fields: Any) -> LeanCanvas:
    return construct_model(LeanCanvas, data, fields)
