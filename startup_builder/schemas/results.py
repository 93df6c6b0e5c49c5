"""Validation outcome contracts shared by every record validator."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Generic, Iterable, List, Optional, TypeVar

from pydantic import BaseModel

ModelT = TypeVar("ModelT", bound=BaseModel)


@dataclass(frozen=True)
class FieldError:
    """One failing field.

    ``field`` is the dotted JSON-LD path (``vesting.schedule``,
    ``founders.0.equity``); it is empty when the record as a whole is
    rejected, e.g. when the input is not a mapping at all.
    """

    field: str
    message: str
    code: str

    def to_dict(self) -> Dict[str, str]:
        return {"field": self.field, "message": self.message, "code": self.code}


class RecordValidationError(ValueError):
    """Raised by ``ValidationResult.unwrap`` when the record is invalid."""

    def __init__(self, errors: Iterable[FieldError]):
        self.errors: List[FieldError] = list(errors)
        details = "; ".join(
            f"{error.field or '<record>'}: {error.message}" for error in self.errors
        )
        super().__init__(f"Invalid record: {details}")


@dataclass(frozen=True)
class ValidationResult(Generic[ModelT]):
    """Success-with-value or failure-with-field-errors.

    Truthy exactly when ``succeeded`` is true.
    """

    succeeded: bool
    value: Optional[ModelT] = None
    errors: List[FieldError] = field(default_factory=list)

    def __bool__(self) -> bool:
        return self.succeeded

    @property
    def error_fields(self) -> List[str]:
        """Failing field paths, in the order they were reported, deduplicated."""
        seen: Dict[str, None] = {}
        for error in self.errors:
            seen.setdefault(error.field, None)
        return list(seen)

    def unwrap(self) -> ModelT:
        if not self.succeeded:
            raise RecordValidationError(self.errors)
        return self.value  # type: ignore[return-value]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "succeeded": self.succeeded,
            "value": self.value.to_jsonld() if self.value is not None else None,  # type: ignore[attr-defined]
            "errors": [error.to_dict() for error in self.errors],
        }
