"""
Constants and enums for the motion token system.

No magic strings - use enums and Literal types for constrained values.
"""

from enum import Enum
from typing import Literal


class EasingToken(str, Enum):
    """Names of the easing token slots, in declaration order."""

    LINEAR = "linear"
    EMPHASIZED = "emphasized"
    EMPHASIZED_DECELERATE = "emphasized_decelerate"
    EMPHASIZED_ACCELERATE = "emphasized_accelerate"
    STANDARD = "standard"
    STANDARD_DECELERATE = "standard_decelerate"
    STANDARD_ACCELERATE = "standard_accelerate"


class DurationToken(str, Enum):
    """Names of the duration token slots, shortest first."""

    SHORT1 = "short1"
    SHORT2 = "short2"
    SHORT3 = "short3"
    SHORT4 = "short4"
    MEDIUM1 = "medium1"
    MEDIUM2 = "medium2"
    MEDIUM3 = "medium3"
    MEDIUM4 = "medium4"
    LONG1 = "long1"
    LONG2 = "long2"
    LONG3 = "long3"
    LONG4 = "long4"
    EXTRA_LONG1 = "extra_long1"
    EXTRA_LONG2 = "extra_long2"
    EXTRA_LONG3 = "extra_long3"
    EXTRA_LONG4 = "extra_long4"


class TokenKind(str, Enum):
    """The two sibling token tables."""

    EASING = "easing"
    DURATION = "duration"


# Schema versions - frozen for v1
SchemaVersion = Literal["motion-theme/v1"]

THEME_SCHEMA: SchemaVersion = "motion-theme/v1"


class ErrorMessages:
    """Standardized error messages."""

    UNKNOWN_TOKEN = "Unknown {kind} token(s): {names}. Expected one of: {expected}."
    UNKNOWN_CURVE = "Unknown curve: '{name}'. Expected one of: {expected}."
    INVALID_CURVE = "Invalid curve for '{token}': {value!r}. Expected a curve name or [x1, y1, x2, y2]."
    INVALID_DURATION = "Invalid duration for '{token}': {value!r}. Expected whole milliseconds."
    INVALID_SECTION = "Theme section '{section}' must be a mapping, got {value!r}."
    THEME_NOT_FOUND = "Theme not found: {name}"
    UNKNOWN_KIND = "Unknown token kind: '{kind}'. Expected 'easing' or 'duration'."


class SuccessMessages:
    """Standardized success messages."""

    THEME_COPIED = "Copied theme '{name}' to {path}."
