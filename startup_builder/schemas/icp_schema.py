"""ICP (Ideal Customer Profile) record: the as/at/are/using/to framework.

Reads as one sentence: "{as} at {at} are {are} using {using} to {to}",
see ``services.icp_frame``.
"""

from __future__ import annotations

from typing import Any, ClassVar, Literal, Mapping, Optional

from pydantic import Field

from ..constants import ICP_TYPE
from .base import NonEmptyStr, RecordModel, construct_model, guard, validate_model
from .results import ValidationResult


class ICP(RecordModel):
    """Who the startup serves, in five required clauses."""

    record_type: ClassVar[str] = ICP_TYPE

    type: Literal[ICP_TYPE] = Field(..., alias="$type")
    as_: str = Field(
        ...,
        alias="as",
        min_length=1,
        strict=True,
        description="Who the customer is (e.g. 'Developers')",
    )
    at: str = Field(..., min_length=1, strict=True, description="Where they work (e.g. 'FinTech startups')")
    are: str = Field(..., min_length=1, strict=True, description="What they are doing (e.g. 'building payment APIs')")
    using: str = Field(..., min_length=1, strict=True, description="What they use (e.g. 'Node.js and TypeScript')")
    to: str = Field(..., min_length=1, strict=True, description="Why (e.g. 'ship faster with fewer bugs')")

    occupation: Optional[NonEmptyStr] = Field(
        default=None,
        description="O*NET-SOC occupation code (e.g. '15-1252.00')",
    )
    industry: Optional[NonEmptyStr] = Field(
        default=None,
        description="NAICS industry code (e.g. '5112')",
    )


def validate_icp(data: Any) -> ValidationResult[ICP]:
    return validate_model(ICP, data)


def is_icp(data: Any) -> bool:
    return guard(ICP, data)


def create_icp(data: Optional[Mapping[str, Any]] = None, **fields: Any) -> ICP:
    """Build an ICP with ``$type`` set; ``as`` may be passed as ``as_``."""
    return construct_model(ICP, data, fields)
