"""Centralized constants shared by every record schema.

This module is the SINGLE SOURCE OF TRUTH for the schema.org.ai type tags,
the enum literal sets and the ``$id`` collection names. Reused by:
  - the record schemas (``startup_builder.schemas``)
  - the record registry (``startup_builder.services.record_registry``)
"""

from __future__ import annotations

# ── JSON-LD namespace ───────────────────────────────────────────────────
# LOCKED. The $type tags are part of the public vocabulary and never follow
# SCHEMA_ID_BASE from the environment.
SCHEMA_ORG_AI: str = "https://schema.org.ai"

ICP_TYPE = "https://schema.org.ai/ICP"
STARTUP_TYPE = "https://schema.org.ai/Startup"
IDEA_TYPE = "https://schema.org.ai/Idea"
HYPOTHESIS_TYPE = "https://schema.org.ai/Hypothesis"
JTBD_TYPE = "https://schema.org.ai/JTBD"
LEAN_CANVAS_TYPE = "https://schema.org.ai/LeanCanvas"
STORY_BRAND_TYPE = "https://schema.org.ai/StoryBrand"
FOUNDER_TYPE = "https://schema.org.ai/Founder"

RECORD_TYPES: tuple[str, ...] = (
    ICP_TYPE,
    STARTUP_TYPE,
    IDEA_TYPE,
    HYPOTHESIS_TYPE,
    JTBD_TYPE,
    LEAN_CANVAS_TYPE,
    STORY_BRAND_TYPE,
    FOUNDER_TYPE,
)

# ── Enum literal sets ───────────────────────────────────────────────────
# Mirrored by the Literal aliases in the schema modules.
STARTUP_STATUSES: tuple[str, ...] = ("draft", "validation", "mvp", "growth", "scale")
HYPOTHESIS_STATUSES: tuple[str, ...] = ("untested", "testing", "validated", "invalidated")
FOUNDER_ROLES: tuple[str, ...] = ("ceo", "cto", "coo", "cfo", "co-founder")
VESTING_SCHEDULES: tuple[str, ...] = ("monthly", "quarterly")

# ── Founder equity bounds (percent, inclusive) ──────────────────────────
EQUITY_MIN: float = 0.0
EQUITY_MAX: float = 100.0

# ── $id collections ─────────────────────────────────────────────────────
# Path segment used when minting ids: {SCHEMA_ID_BASE}/{collection}/{slug}
RECORD_COLLECTIONS: dict[str, str] = {
    ICP_TYPE: "icps",
    STARTUP_TYPE: "startups",
    IDEA_TYPE: "ideas",
    HYPOTHESIS_TYPE: "hypotheses",
    JTBD_TYPE: "jtbd",
    LEAN_CANVAS_TYPE: "canvas",
    STORY_BRAND_TYPE: "storybrand",
    FOUNDER_TYPE: "founders",
}
