"""
Pydantic models for the motion token system.

This module provides:
- EasingTokens: The seven easing curve slots
- DurationTokens: The sixteen duration slots
- MotionTheme: Named bundle of optional token set overrides
- MotionThemeMetadata: Lightweight theme listing entry
"""

from chuk_mcp_motion.models.theme import MotionTheme, MotionThemeMetadata
from chuk_mcp_motion.models.tokens import DurationTokens, EasingTokens

__all__ = [
    "DurationTokens",
    "EasingTokens",
    "MotionTheme",
    "MotionThemeMetadata",
]
