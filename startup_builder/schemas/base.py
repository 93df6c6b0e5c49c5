"""Record Validation Engine.

Shared base models plus the generic validate / guard / construct helpers
used by every record schema module.

Rules
-----
- NO I/O, NO shared mutable state
- Bad input is REPORTED (``ValidationResult``), never raised
- Factories construct WITHOUT validating
- Fully deterministic
"""

from __future__ import annotations

import logging
from typing import Annotated, Any, Callable, ClassVar, Dict, FrozenSet, List, Mapping, Optional, Type, TypeVar

from pydantic import (
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    StrictStr,
    StringConstraints,
    ValidationError,
    ValidationInfo,
    field_validator,
)
from pydantic.alias_generators import to_camel

from .results import FieldError, ValidationResult

logger = logging.getLogger(__name__)

T = TypeVar("T")
RecordT = TypeVar("RecordT", bound="RecordModel")

# For optional text fields: when present, same rule as a required string.
NonEmptyStr = Annotated[str, StringConstraints(strict=True, min_length=1)]


def _ordered_sequence(value: Any) -> Any:
    # Sets, generators and views carry no stable order.
    if value is not None and not isinstance(value, (list, tuple)):
        raise ValueError("must be a list or tuple")
    return value


# Sequence fields: a list or tuple. StrList also requires every item to be a str.
StrList = Annotated[List[StrictStr], BeforeValidator(_ordered_sequence)]
AnyList = Annotated[List[Any], BeforeValidator(_ordered_sequence)]


class SchemaModel(BaseModel):
    """Frozen model keyed by camelCase JSON-LD names on the wire.

    Optional fields may be omitted, but an explicit ``None`` is rejected
    unless the field is listed in ``nullable_fields``.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        allow_inf_nan=False,
        extra="ignore",
    )

    nullable_fields: ClassVar[FrozenSet[str]] = frozenset()

    @field_validator("*", mode="before")
    @classmethod
    def _present_fields_are_not_null(cls, value: Any, info: ValidationInfo) -> Any:
        if value is None and info.field_name not in cls.nullable_fields:
            raise ValueError("must not be null")
        return value

    def to_jsonld(self) -> Dict[str, Any]:
        """Plain ``dict`` of the fields that were set, keyed by JSON-LD names."""
        return record_input(self)


class RecordModel(SchemaModel):
    """Base of every schema.org.ai record: carries ``$id``; subclasses add ``$type``."""

    record_type: ClassVar[str]

    id: str = Field(
        ...,
        alias="$id",
        min_length=1,
        strict=True,
        description="Unique identifier (JSON-LD @id)",
    )


def record_input(value: Any, _path: FrozenSet[int] = frozenset()) -> Any:
    """Plain-data view of *value*: models become dicts keyed by alias.

    Only fields in ``model_fields_set`` are emitted, so defaults filled in by
    pydantic (or by ``model_construct``) never show up as explicit values.
    A container already on the current path is returned as-is, leaving
    self-referencing input for pydantic to reject or drop.
    """
    if isinstance(value, BaseModel):
        fields = type(value).model_fields
        return {
            (fields[name].alias or name): record_input(getattr(value, name), _path)
            for name in fields
            if name in value.model_fields_set
        }
    if not isinstance(value, (Mapping, list, tuple)) or id(value) in _path:
        return value
    path = _path | {id(value)}
    if isinstance(value, Mapping):
        return {key: record_input(item, path) for key, item in value.items()}
    return [record_input(item, path) for item in value]


def _field_path(loc: tuple) -> str:
    return ".".join(str(part) for part in loc)


def collect_errors(exc: ValidationError) -> List[FieldError]:
    return [
        FieldError(field=_field_path(tuple(error["loc"])), message=error["msg"], code=error["type"])
        for error in exc.errors(include_url=False)
    ]


def run_validator(label: str, validate: Callable[[Any], T], data: Any) -> ValidationResult:
    """Apply *validate* to the plain-data view of *data*, capturing failures."""
    try:
        value = validate(record_input(data))
    except ValidationError as exc:
        errors = collect_errors(exc)
        logger.debug(
            "[RECORDS] %s rejected (%d error(s)): %s",
            label,
            len(errors),
            ", ".join(error.field or "<record>" for error in errors),
        )
        return ValidationResult(succeeded=False, errors=errors)
    return ValidationResult(succeeded=True, value=value)


def validate_model(model: Type[RecordT], data: Any) -> ValidationResult[RecordT]:
    return run_validator(model.__name__, model.model_validate, data)


def guard(model: Type[RecordModel], data: Any) -> bool:
    return validate_model(model, data).succeeded


def construct_model(
    model: Type[RecordT],
    data: Optional[Mapping[str, Any]] = None,
    fields: Optional[Mapping[str, Any]] = None,
) -> RecordT:
    """Build *model* from *data* and *fields* with its ``$type`` stamped in.

    A caller-supplied ``$type`` is discarded. Nothing is validated: pass the
    result to the matching guard if confirmation is needed.
    """
    values: Dict[str, Any] = dict(data or {})
    values.update(fields or {})
    values.pop("$type", None)
    values.pop("type", None)
    values["$type"] = model.record_type
    return model.model_construct(**values)
