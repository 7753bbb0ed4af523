"""
Core motion primitives.

- Cubic: Four-coefficient cubic Bezier easing curve
- NamedCurve: Opaque reference to a built-in curve
- Curves: The built-in named curves (linear, emphasized)
"""

from chuk_mcp_motion.core.curves import (
    Cubic,
    Curve,
    Curves,
    NamedCurve,
    curve_from_yaml,
    curve_to_yaml,
)

__all__ = [
    "Cubic",
    "Curve",
    "Curves",
    "NamedCurve",
    "curve_from_yaml",
    "curve_to_yaml",
]
