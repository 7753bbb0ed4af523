"""
Token resolver - the default-or-override rule.

A theme may carry zero or one token set of each kind. Callers resolve
through these functions and always get a fully populated set back:
the registered one if present, otherwise the defaults. The theme is
passed in explicitly; there is no ambient or global theme.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar

from chuk_mcp_motion.models.tokens import DurationTokens, EasingTokens

if TYPE_CHECKING:
    from chuk_mcp_motion.models.theme import MotionTheme

TokenSetT = TypeVar("TokenSetT", EasingTokens, DurationTokens)


def resolve_easing(tokens: EasingTokens | None) -> EasingTokens:
    """Return tokens, or the default easing set when there are none."""
    return tokens if tokens is not None else EasingTokens()


def resolve_duration(tokens: DurationTokens | None) -> DurationTokens:
    """Return tokens, or the default duration set when there are none."""
    return tokens if tokens is not None else DurationTokens()


def resolve_easing_tokens(theme: MotionTheme | None) -> EasingTokens:
    """
    Easing tokens for a theme.

    Args:
        theme: Active theme, or None for no theme

    Returns:
        The theme's easing set if it registers one, else the defaults
    """
    return resolve_easing(theme.easing_tokens if theme is not None else None)


def resolve_duration_tokens(theme: MotionTheme | None) -> DurationTokens:
    """
    Duration tokens for a theme.

    Args:
        theme: Active theme, or None for no theme

    Returns:
        The theme's duration set if it registers one, else the defaults
    """
    return resolve_duration(theme.duration_tokens if theme is not None else None)


def interpolate(a: TokenSetT, b: TokenSetT | None, t: float) -> TokenSetT:
    """
    Interpolate between two token sets of the same kind.

    Fields are not blended: returns b whenever it is given, otherwise a.
    """
    return a.lerp(b, t)
