"""StoryBrand record: seven-part brand messaging framework."""

from __future__ import annotations

from typing import Any, ClassVar, Literal, Mapping, Optional

from pydantic import Field

from ..constants import STORY_BRAND_TYPE
from .base import RecordModel, StrList, construct_model, guard, validate_model
from .results import ValidationResult


class StoryBrand(RecordModel):
    """A character has a problem, meets a guide who gives them a plan and
    calls them to action, ending in success or failure."""

    record_type: ClassVar[str] = STORY_BRAND_TYPE

    type: Literal[STORY_BRAND_TYPE] = Field(..., alias="$type")
    character: str = Field(..., min_length=1, strict=True, description="The customer as hero")
    problem: str = Field(..., min_length=1, strict=True)
    guide: str = Field(..., min_length=1, strict=True, description="The brand's role")
    plan: StrList = Field(..., min_length=1, description="Ordered steps the customer takes")
    call_to_action: str = Field(..., min_length=1, strict=True)
    success: str = Field(..., min_length=1, strict=True, description="What the customer gains")
    failure: str = Field(..., min_length=1, strict=True, description="What the customer avoids")


def validate_story_brand(data: Any) -> ValidationResult[StoryBrand]:
    return validate_model(StoryBrand, data)


def is_story_brand(data: Any) -> bool:
    return guard(StoryBrand, data)


def create_story_brand(data: Optional[Mapping[str, Any]] = None, **fields: Any) -> StoryBrand:
    return construct_model(StoryBrand, data, fields)
