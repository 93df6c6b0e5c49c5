"""Centralized library configuration.

Loads environment variables (and a local ``.env`` file, if present) once at
import time. Nothing here changes validation rules: the ``$type`` tags and
enum sets live in ``constants`` and are not configurable.
"""

from __future__ import annotations

import logging
import os
from typing import Optional, Union

from dotenv import load_dotenv

from .constants import SCHEMA_ORG_AI

load_dotenv()

logger = logging.getLogger(__name__)

# Prefix for minted $id values; trailing slashes are stripped so ids never
# contain "//" between base and collection.
SCHEMA_ID_BASE: str = (os.getenv("SCHEMA_ID_BASE", "").strip() or SCHEMA_ORG_AI).rstrip("/")

LOG_LEVEL: str = os.getenv("STARTUP_BUILDER_LOG_LEVEL", "WARNING").strip().upper() or "WARNING"

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: Optional[Union[str, int]] = None) -> logging.Logger:
    """Attach a stream handler to the package logger and set its level.

    Only the ``startup_builder`` logger is touched; the root logger is left
    to the host application. Calling this twice does not stack handlers.
    """
    package_logger = logging.getLogger("startup_builder")
    resolved = level if level is not None else LOG_LEVEL
    if isinstance(resolved, str):
        resolved = resolved.upper()
    try:
        package_logger.setLevel(resolved)
    except ValueError:
        logger.warning("[CONFIG] Unknown log level %r, falling back to WARNING", resolved)
        package_logger.setLevel(logging.WARNING)

    if not any(getattr(h, "_startup_builder", False) for h in package_logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_LOG_FORMAT))
        handler._startup_builder = True  # type: ignore[attr-defined]
        package_logger.addHandler(handler)

    return package_logger
