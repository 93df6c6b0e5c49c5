"""Startup record: the central entity tying the other records together.

Lifecycle (``status``):
  draft → validation → mvp → growth → scale

``icp``, ``idea`` and ``businessModel`` may be null while the startup is
still being shaped. ``icp`` is validated as a full ICP record; ``idea``,
``businessModel`` and each entry of ``founders`` are carried as given, so
embedded records and ``$id`` references are both accepted.
"""

from __future__ import annotations

from typing import Any, ClassVar, FrozenSet, Literal, Mapping, Optional

from pydantic import Field

from ..constants import STARTUP_TYPE
from .base import AnyList, RecordModel, construct_model, guard, validate_model
from .icp_schema import ICP
from .results import ValidationResult

# Mirrors constants.STARTUP_STATUSES
StartupStatus = Literal["draft", "validation", "mvp", "growth", "scale"]


class Startup(RecordModel):
    """A startup venture with its customer profile, idea, model and team."""

    record_type: ClassVar[str] = STARTUP_TYPE
    nullable_fields: ClassVar[FrozenSet[str]] = frozenset({"icp", "idea", "business_model"})

    type: Literal[STARTUP_TYPE] = Field(..., alias="$type")
    name: str = Field(..., min_length=1, strict=True)
    status: StartupStatus
    icp: Optional[ICP] = Field(default=None, description="Who the startup serves")
    idea: Optional[Any] = None
    business_model: Optional[Any] = Field(default=None, description="Business model canvas or similar")
    founders: AnyList = Field(
        default_factory=list,
        description="Founding team members or their $id references, in order",
    )


def validate_startup(data: Any) -> ValidationResult[Startup]:
    return validate_model(Startup, data)


def is_startup(data: Any) -> bool:
    return guard(Startup, data)


def create_startup(data: Optional[Mapping[str, Any]] = None, **fields: Any) -> Startup:
    return construct_model(Startup, data, fields)
