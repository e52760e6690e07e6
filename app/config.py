"""Configuration values for the vector math service."""

from __future__ import annotations

import os

DEFAULT_FROM_ANGLE_MAGNITUDE = 1.0

API_PREFIX = "/api/vector"

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")

# Unrecognised names fall back to INFO.
LOG_LEVEL = os.getenv("VECMATH_LOG_LEVEL", "INFO").upper()
if LOG_LEVEL not in LOG_LEVELS:
    LOG_LEVEL = "INFO"
