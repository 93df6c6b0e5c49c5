"""Record Registry.

The closed set of schema.org.ai record types, keyed by their ``$type`` tag.
Validates a record of any type by dispatching on its tag, exports JSON
Schema for the documentation site and mints ``$id`` values.
"""

from __future__ import annotations

import logging
import uuid
from typing import Any, Dict, Optional, Type, Union

from .. import config
from ..constants import RECORD_COLLECTIONS
from ..schemas.base import RecordModel, record_input, validate_model
from ..schemas.founder_schema import Founder
from ..schemas.hypothesis_schema import Hypothesis
from ..schemas.icp_schema import ICP
from ..schemas.idea_schema import Idea
from ..schemas.jtbd_schema import JTBD
from ..schemas.lean_canvas_schema import LeanCanvas
from ..schemas.results import FieldError, ValidationResult
from ..schemas.startup_schema import Startup
from ..schemas.story_brand_schema import StoryBrand

logger = logging.getLogger(__name__)

# One variant per record type; the $type tag selects the variant.
AnyRecord = Union[ICP, Startup, Idea, Hypothesis, JTBD, LeanCanvas, StoryBrand, Founder]

RECORD_MODELS: Dict[str, Type[RecordModel]] = {
    model.record_type: model
    for model in (ICP, Startup, Idea, Hypothesis, JTBD, LeanCanvas, StoryBrand, Founder)
}

_MODELS_BY_NAME: Dict[str, Type[RecordModel]] = {
    model.__name__: model for model in RECORD_MODELS.values()
}


def record_model(name_or_tag: str) -> Type[RecordModel]:
    """Look up a record model by entity name (``"LeanCanvas"``) or ``$type`` tag."""
    model = RECORD_MODELS.get(name_or_tag) or _MODELS_BY_NAME.get(name_or_tag)
    if model is None:
        raise KeyError(f"Unknown record type: {name_or_tag!r}")
    return model


def _rejected(field: str, message: str, code: str) -> ValidationResult:
    logger.debug("[RECORDS] AnyRecord rejected: %s (%s)", field or "<record>", code)
    return ValidationResult(succeeded=False, errors=[FieldError(field=field, message=message, code=code)])


def validate_record(data: Any) -> ValidationResult:
    """Validate a record of any type, choosing the schema from its ``$type``."""
    payload = record_input(data)
    if not isinstance(payload, dict):
        return _rejected("", "Input should be a valid dictionary or record", "model_type")

    tag = payload.get("$type")
    if tag is None:
        return _rejected("$type", "Record is missing its '$type' discriminant", "union_tag_not_found")

    model = RECORD_MODELS.get(tag) if isinstance(tag, str) else None
    if model is None:
        expected = ", ".join(repr(known) for known in RECORD_MODELS)
        return _rejected(
            "$type",
            f"Input tag {tag!r} does not match any of the expected tags: {expected}",
            "union_tag_invalid",
        )
    return validate_model(model, payload)


def is_record(data: Any) -> bool:
    return validate_record(data).succeeded


def record_json_schema(name_or_tag: str) -> Dict[str, Any]:
    """JSON Schema of one record type, keyed by JSON-LD field names."""
    return record_model(name_or_tag).model_json_schema(by_alias=True)


def all_json_schemas() -> Dict[str, Dict[str, Any]]:
    return {tag: model.model_json_schema(by_alias=True) for tag, model in RECORD_MODELS.items()}


def new_record_id(name_or_tag: str, slug: Optional[str] = None) -> str:
    """Mint an ``$id`` such as ``https://schema.org.ai/ideas/api-platform``.

    The slug defaults to a random UUID4 hex string.
    """
    model = record_model(name_or_tag)
    collection = RECORD_COLLECTIONS[model.record_type]
    return f"{config.SCHEMA_ID_BASE}/{collection}/{slug or uuid.uuid4().hex}"
