# Schemas package
from .base import RecordModel, SchemaModel
from .results import FieldError, RecordValidationError, ValidationResult
from .icp_schema import ICP, create_icp, is_icp, validate_icp
from .idea_schema import Idea, create_idea, is_idea, validate_idea
from .hypothesis_schema import Hypothesis, HypothesisStatus, create_hypothesis, is_hypothesis, validate_hypothesis
from .jtbd_schema import JTBD, create_jtbd, is_jtbd, validate_jtbd
from .lean_canvas_schema import LeanCanvas, create_lean_canvas, is_lean_canvas, validate_lean_canvas
from .story_brand_schema import StoryBrand, create_story_brand, is_story_brand, validate_story_brand
from .founder_schema import Founder, FounderRole, Vesting, VestingSchedule, create_founder, is_founder, validate_founder
from .startup_schema import Startup, StartupStatus, create_startup, is_startup, validate_startup

__all__ = [
    "RecordModel",
    "SchemaModel",
    "FieldError",
    "RecordValidationError",
    "ValidationResult",
    "ICP",
    "validate_icp",
    "is_icp",
    "create_icp",
    "Idea",
    "validate_idea",
    "is_idea",
    "create_idea",
    "Hypothesis",
    "HypothesisStatus",
    "validate_hypothesis",
    "is_hypothesis",
    "create_hypothesis",
    "JTBD",
    "validate_jtbd",
    "is_jtbd",
    "create_jtbd",
    "LeanCanvas",
    "validate_lean_canvas",
    "is_lean_canvas",
    "create_lean_canvas",
    "StoryBrand",
    "validate_story_brand",
    "is_story_brand",
    "create_story_brand",
    "Founder",
    "FounderRole",
    "Vesting",
    "VestingSchedule",
    "validate_founder",
    "is_founder",
    "create_founder",
    "Startup",
    "StartupStatus",
    "validate_startup",
    "is_startup",
    "create_startup",
]
