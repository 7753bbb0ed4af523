"""
Token set models - the easing and duration tables.

Each token set is an immutable record with a fixed set of named slots.
Any subset of slots may be overridden at construction; the rest keep
the Material 3 motion defaults. Token names outside the fixed set are
rejected, both at construction and in copy_with().
"""

from __future__ import annotations

from datetime import timedelta
from numbers import Real
from typing import Any

from pydantic import BaseModel, Field, ValidationInfo, field_validator

from chuk_mcp_motion.constants import DurationToken, EasingToken, ErrorMessages, TokenKind
from chuk_mcp_motion.core.curves import Cubic, Curve, Curves, NamedCurve, curve_to_yaml


def _merged_values(
    tokens: BaseModel,
    kind: TokenKind,
    overrides: dict[str, Any],
) -> dict[str, Any]:
    """Current slot values of tokens with the non-None overrides applied."""
    fields = type(tokens).model_fields
    unknown = sorted(set(overrides) - set(fields))
    if unknown:
        raise ValueError(
            ErrorMessages.UNKNOWN_TOKEN.format(
                kind=kind.value,
                names=", ".join(unknown),
                expected=", ".join(fields),
            )
        )
    values = {name: getattr(tokens, name) for name in fields}
    values.update({name: value for name, value in overrides.items() if value is not None})
    return values


class EasingTokens(BaseModel):
    """
    Easing curves for animations and transitions.

    Defaults are the Material 3 motion easing tokens. The emphasized
    set captures the expressive style and is the most common; the
    standard set is for simple, small or utility-focused transitions.
    The plain variant is for transitions that begin and end on screen,
    decelerate for those that enter the screen, accelerate for those
    that exit it.

    Example:
        EasingTokens(emphasized=Curves.LINEAR)
    """

    linear: Curve = Field(default=Curves.LINEAR, description="A linear curve")
    emphasized: Curve = Field(
        default=Curves.EASE_IN_OUT_CUBIC_EMPHASIZED,
        description="Emphasized, begins and ends on screen",
    )
    emphasized_decelerate: Curve = Field(
        default=Cubic(0.05, 0.7, 0.1, 1.0),
        description="Emphasized, enters the screen",
    )
    emphasized_accelerate: Curve = Field(
        default=Cubic(0.3, 0.0, 0.8, 0.15),
        description="Emphasized, exits the screen",
    )
    standard: Curve = Field(
        default=Cubic(0.2, 0.0, 0.0, 1.0),
        description="Standard, begins and ends on screen",
    )
    standard_decelerate: Curve = Field(
        default=Cubic(0.0, 0.0, 0.0, 1.0),
        description="Standard, enters the screen",
    )
    standard_accelerate: Curve = Field(
        default=Cubic(0.3, 0.0, 1.0, 1.0),
        description="Standard, exits the screen",
    )

    model_config = {"frozen": True, "extra": "forbid"}

    @field_validator("*")
    @classmethod
    def validate_named_curve(cls, v: Curve) -> Curve:
        """Named curves must be built-ins."""
        if isinstance(v, NamedCurve):
            return Curves.by_name(v.name)
        return v

    def copy_with(self, **overrides: Curve | None) -> EasingTokens:
        """
        Return a copy with the given slots replaced.

        Slots that are not named, or are passed as None, keep their
        current value.

        Raises:
            ValueError: If a name is not an easing token
        """
        return EasingTokens(**_merged_values(self, TokenKind.EASING, overrides))

    def lerp(self, other: EasingTokens | None, t: float) -> EasingTokens:
        """
        Interpolate towards other.

        Curves are not blended: the result is other whenever it is
        given, otherwise self. t is ignored.
        """
        return other if other is not None else self

    def get(self, token: EasingToken | str) -> Curve:
        """Get a curve by token name."""
        name = EasingToken(token).value
        return getattr(self, name)

    def to_yaml_dict(self) -> dict[str, Any]:
        """Convert to YAML-serializable dictionary."""
        return {token.value: curve_to_yaml(self.get(token)) for token in EasingToken}


class DurationTokens(BaseModel):
    """
    Durations for animations and transitions.

    Defaults are the Material 3 motion duration tokens, 50ms to 1000ms.
    Short durations suit small utility-focused transitions, medium ones
    traverse a medium area of the screen, long ones are often paired
    with emphasized easing, and extra long ones are for ambient
    transitions that don't involve user input.

    Plain numbers are read as milliseconds. Every duration must be a
    whole number of milliseconds.

    Example:
        DurationTokens(short1=timedelta(milliseconds=100))
    """

    short1: timedelta = Field(default=timedelta(milliseconds=50))
    short2: timedelta = Field(default=timedelta(milliseconds=100))
    short3: timedelta = Field(default=timedelta(milliseconds=150))
    short4: timedelta = Field(default=timedelta(milliseconds=200))
    medium1: timedelta = Field(default=timedelta(milliseconds=250))
    medium2: timedelta = Field(default=timedelta(milliseconds=300))
    medium3: timedelta = Field(default=timedelta(milliseconds=350))
    medium4: timedelta = Field(default=timedelta(milliseconds=400))
    long1: timedelta = Field(default=timedelta(milliseconds=450))
    long2: timedelta = Field(default=timedelta(milliseconds=500))
    long3: timedelta = Field(default=timedelta(milliseconds=550))
    long4: timedelta = Field(default=timedelta(milliseconds=600))
    extra_long1: timedelta = Field(default=timedelta(milliseconds=700))
    extra_long2: timedelta = Field(default=timedelta(milliseconds=800))
    extra_long3: timedelta = Field(default=timedelta(milliseconds=900))
    extra_long4: timedelta = Field(default=timedelta(milliseconds=1000))

    model_config = {"frozen": True, "extra": "forbid"}

    @field_validator("*", mode="before")
    @classmethod
    def validate_milliseconds(cls, v: Any, info: ValidationInfo) -> Any:
        """Read plain numbers as milliseconds."""
        if isinstance(v, Real) and not isinstance(v, bool):
            if not float(v).is_integer():
                raise ValueError(
                    ErrorMessages.INVALID_DURATION.format(token=info.field_name, value=v)
                )
            return timedelta(milliseconds=int(v))
        return v

    @field_validator("*")
    @classmethod
    def validate_whole_milliseconds(cls, v: timedelta, info: ValidationInfo) -> timedelta:
        """Reject durations with a sub-millisecond part."""
        if v % timedelta(milliseconds=1):
            raise ValueError(ErrorMessages.INVALID_DURATION.format(token=info.field_name, value=v))
        return v

    def copy_with(self, **overrides: timedelta | float | None) -> DurationTokens:
        """
        Return a copy with the given slots replaced.

        Slots that are not named, or are passed as None, keep their
        current value.

        Raises:
            ValueError: If a name is not a duration token
        """
        return DurationTokens(**_merged_values(self, TokenKind.DURATION, overrides))

    def lerp(self, other: DurationTokens | None, t: float) -> DurationTokens:
        """
        Interpolate towards other.

        Durations are not blended: the result is other whenever it is
        given, otherwise self. t is ignored.
        """
        return other if other is not None else self

    def get(self, token: DurationToken | str) -> timedelta:
        """Get a duration by token name."""
        name = DurationToken(token).value
        return getattr(self, name)

    def to_milliseconds(self) -> dict[str, int]:
        """All durations as whole milliseconds, shortest slot first."""
        return {
            token.value: self.get(token) // timedelta(milliseconds=1) for token in DurationToken
        }

    def to_yaml_dict(self) -> dict[str, Any]:
        """Convert to YAML-serializable dictionary."""
        return dict(self.to_milliseconds())
