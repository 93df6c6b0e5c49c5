"""Founder record: founding team member with equity and vesting."""

from __future__ import annotations

from typing import Any, ClassVar, Literal, Mapping, Optional

from pydantic import Field

from ..constants import EQUITY_MAX, EQUITY_MIN, FOUNDER_TYPE
from .base import RecordModel, SchemaModel, construct_model, guard, validate_model
from .results import ValidationResult

# Mirrors constants.FOUNDER_ROLES / constants.VESTING_SCHEDULES
FounderRole = Literal["ceo", "cto", "coo", "cfo", "co-founder"]
VestingSchedule = Literal["monthly", "quarterly"]


class Vesting(SchemaModel):
    """Vesting terms, in months."""

    cliff: float = Field(..., strict=True, description="Cliff length (e.g. 12)")
    period: float = Field(..., strict=True, description="Total vesting period (e.g. 48)")
    schedule: VestingSchedule


class Founder(RecordModel):
    """A founder; ``userId`` references the person's User identity."""

    record_type: ClassVar[str] = FOUNDER_TYPE

    type: Literal[FOUNDER_TYPE] = Field(..., alias="$type")
    user_id: str = Field(..., min_length=1, strict=True, description="$id of the founder's User record")
    name: str = Field(..., min_length=1, strict=True)
    role: FounderRole
    equity: float = Field(
        ...,
        ge=EQUITY_MIN,
        le=EQUITY_MAX,
        strict=True,
        description="Equity share in percent, 0-100 inclusive",
    )
    vesting: Optional[Vesting] = None


def validate_founder(data: Any) -> ValidationResult[Founder]:
    return validate_model(Founder, data)


def is_founder(data: Any) -> bool:
    return guard(Founder, data)


def create_founder(data: Optional[Mapping[str, Any]] = None, **fields: Any) -> Founder:
    return construct_model(Founder, data, fields)
