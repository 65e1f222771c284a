"""Shared result codes for tolerance lookups.

Both codes describe ordinary outcomes, not exceptions: callers branch on
them to pick the message shown to the user.
"""

from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    INVALID_DIMENSION = "INVALID_DIMENSION"  # Unparseable or outside 0.5-4000 mm
    UNSPECIFIED_TOLERANCE = "UNSPECIFIED_TOLERANCE"  # Standard defines no value
    INVALID_GRADE = "INVALID_GRADE"  # Grade selector is not f/m/c/v or a known name


__all__ = ["ErrorCode"]
