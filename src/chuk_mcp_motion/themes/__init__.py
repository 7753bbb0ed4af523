"""
Theme system - named bundles of token overrides.

Themes register optional easing and duration sets. The resolver fills
in defaults for whatever a theme leaves out.
"""

from chuk_mcp_motion.themes.loader import ThemeLoader
from chuk_mcp_motion.themes.resolver import (
    interpolate,
    resolve_duration,
    resolve_duration_tokens,
    resolve_easing,
    resolve_easing_tokens,
)

__all__ = [
    "ThemeLoader",
    "interpolate",
    "resolve_duration",
    "resolve_duration_tokens",
    "resolve_easing",
    "resolve_easing_tokens",
]
