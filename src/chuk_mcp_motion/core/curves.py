"""
Curve primitives - Cubic, NamedCurve, Curves.

Curves here are definitions only. A Cubic is the four control
coefficients of a cubic Bezier easing curve with both axes normalized
to [0, 1]; a NamedCurve is an opaque reference to a built-in curve
that has no four-coefficient form (linear, the emphasized three-point
curve). Nothing in this package evaluates a curve.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from numbers import Real
from typing import ClassVar

from chuk_mcp_motion.constants import ErrorMessages


@dataclass(frozen=True)
class Cubic:
    """
    A cubic Bezier easing curve through (0, 0) and (1, 1).

    (x1, y1) and (x2, y2) are the two interior control points.
    Coefficients are not range-checked; conventional easing keeps them
    in or near [0, 1].

    Immutable and hashable.
    """

    x1: float
    y1: float
    x2: float
    y2: float

    def __post_init__(self) -> None:
        for name in ("x1", "y1", "x2", "y2"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, Real):
                raise ValueError(f"Cubic.{name} must be a real number, got {value!r}")
            object.__setattr__(self, name, float(value))

    @classmethod
    def from_sequence(cls, values: Sequence[float]) -> Cubic:
        """Build from [x1, y1, x2, y2]."""
        if len(values) != 4:
            raise ValueError(f"Cubic needs exactly 4 coefficients, got {len(values)}")
        return cls(*values)

    def to_list(self) -> list[float]:
        """Return [x1, y1, x2, y2]."""
        return [self.x1, self.y1, self.x2, self.y2]

    def __str__(self) -> str:
        return f"cubic({self.x1}, {self.y1}, {self.x2}, {self.y2})"


@dataclass(frozen=True)
class NamedCurve:
    """
    A built-in curve referenced by name.

    Equal to another NamedCurve with the same name.
    """

    name: str

    def __str__(self) -> str:
        return self.name


Curve = Cubic | NamedCurve


class Curves:
    """Built-in named curves."""

    LINEAR: ClassVar[NamedCurve]
    EASE_IN_OUT_CUBIC_EMPHASIZED: ClassVar[NamedCurve]

    @classmethod
    def all(cls) -> dict[str, NamedCurve]:
        """All built-in curves keyed by name."""
        return {
            cls.LINEAR.name: cls.LINEAR,
            cls.EASE_IN_OUT_CUBIC_EMPHASIZED.name: cls.EASE_IN_OUT_CUBIC_EMPHASIZED,
        }

    @classmethod
    def by_name(cls, name: str) -> NamedCurve:
        """
        Look up a built-in curve.

        Raises:
            ValueError: If no built-in curve has that name
        """
        curves = cls.all()
        try:
            return curves[name]
        except KeyError:
            raise ValueError(
                ErrorMessages.UNKNOWN_CURVE.format(name=name, expected=", ".join(curves))
            ) from None


def curve_to_yaml(curve: Curve) -> str | list[float]:
    """Serialize a curve: its name, or its four coefficients."""
    if isinstance(curve, NamedCurve):
        return curve.name
    return curve.to_list()


def curve_from_yaml(token: str, value: object) -> Curve:
    """
    Parse a curve written as a built-in name or [x1, y1, x2, y2].

    Args:
        token: Token the value belongs to (for error messages)
        value: Raw YAML value

    Raises:
        ValueError: If the value is neither form
    """
    if isinstance(value, str):
        return Curves.by_name(value)
    if isinstance(value, list | tuple) and len(value) == 4:
        try:
            return Cubic.from_sequence(value)
        except ValueError as e:
            raise ValueError(ErrorMessages.INVALID_CURVE.format(token=token, value=value)) from e
    raise ValueError(ErrorMessages.INVALID_CURVE.format(token=token, value=value))


# Initialize class constants after class is defined
Curves.LINEAR = NamedCurve("linear")
Curves.EASE_IN_OUT_CUBIC_EMPHASIZED = NamedCurve("ease_in_out_cubic_emphasized")
