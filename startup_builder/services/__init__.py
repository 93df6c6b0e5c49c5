from .icp_frame import icp_to_frame
from .record_registry import (
    RECORD_MODELS,
    AnyRecord,
    all_json_schemas,
    is_record,
    new_record_id,
    record_json_schema,
    record_model,
    validate_record,
)

__all__ = [
    "icp_to_frame",
    "RECORD_MODELS",
    "AnyRecord",
    "all_json_schemas",
    "is_record",
    "new_record_id",
    "record_json_schema",
    "record_model",
    "validate_record",
]
