"""Startup tooling types for schema.org.ai.

Typed records for building startups, following JSON-LD conventions with
``$id`` and ``$type`` fields:

- Core: ``Startup``, ``ICP`` (as/at/are/using/to framework)
- Ideation: ``Idea``, ``Hypothesis``, ``JTBD``
- Business model: ``LeanCanvas``, ``StoryBrand``
- Team: ``Founder``

Each record has a validator (``validate_idea``), a guard (``is_idea``) and a
factory (``create_idea``)::

    from startup_builder import create_idea, is_idea

    idea = create_idea({
        "$id": "my-idea",
        "concept": "API-first business platform",
        "problem": "Building APIs is complex",
        "solution": "Pre-built API templates",
    })
    assert is_idea(idea)
"""

from .config import configure_logging
from .constants import (
    FOUNDER_TYPE,
    HYPOTHESIS_TYPE,
    ICP_TYPE,
    IDEA_TYPE,
    JTBD_TYPE,
    LEAN_CANVAS_TYPE,
    STARTUP_TYPE,
    STORY_BRAND_TYPE,
)
from .schemas import (
    ICP,
    JTBD,
    FieldError,
    Founder,
    Hypothesis,
    Idea,
    LeanCanvas,
    RecordValidationError,
    Startup,
    StoryBrand,
    ValidationResult,
    Vesting,
    create_founder,
    create_hypothesis,
    create_icp,
    create_idea,
    create_jtbd,
    create_lean_canvas,
    create_startup,
    create_story_brand,
    is_founder,
    is_hypothesis,
    is_icp,
    is_idea,
    is_jtbd,
    is_lean_canvas,
    is_startup,
    is_story_brand,
    validate_founder,
    validate_hypothesis,
    validate_icp,
    validate_idea,
    validate_jtbd,
    validate_lean_canvas,
    validate_startup,
    validate_story_brand,
)
from .services import (
    RECORD_MODELS,
    AnyRecord,
    all_json_schemas,
    icp_to_frame,
    is_record,
    new_record_id,
    record_json_schema,
    record_model,
    validate_record,
)

__version__ = "0.1.0"

__all__ = [
    "configure_logging",
    # Type tags
    "ICP_TYPE",
    "STARTUP_TYPE",
    "IDEA_TYPE",
    "HYPOTHESIS_TYPE",
    "JTBD_TYPE",
    "LEAN_CANVAS_TYPE",
    "STORY_BRAND_TYPE",
    "FOUNDER_TYPE",
    # Results
    "FieldError",
    "RecordValidationError",
    "ValidationResult",
    # Records
    "ICP",
    "Startup",
    "Idea",
    "Hypothesis",
    "JTBD",
    "LeanCanvas",
    "StoryBrand",
    "Founder",
    "Vesting",
    # Validators
    "validate_icp",
    "validate_startup",
    "validate_idea",
    "validate_hypothesis",
    "validate_jtbd",
    "validate_lean_canvas",
    "validate_story_brand",
    "validate_founder",
    # Guards
    "is_icp",
    "is_startup",
    "is_idea",
    "is_hypothesis",
    "is_jtbd",
    "is_lean_canvas",
    "is_story_brand",
    "is_founder",
    # Factories
    "create_icp",
    "create_startup",
    "create_idea",
    "create_hypothesis",
    "create_jtbd",
    "create_lean_canvas",
    "create_story_brand",
    "create_founder",
    # Registry
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
