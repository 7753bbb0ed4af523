"""
Motion theme - the theming context that carries token sets.

A theme registers zero or one easing set and zero or one duration set.
A missing set means "use the defaults"; read through the easing and
duration properties to always get a fully populated set.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from chuk_mcp_motion.constants import THEME_SCHEMA
from chuk_mcp_motion.models.tokens import DurationTokens, EasingTokens


class MotionTheme(BaseModel):
    """A named bundle of optional token set overrides."""

    schema_version: str = Field(THEME_SCHEMA, alias="schema")
    name: str = Field(..., description="Theme name")
    description: str = Field("", description="Theme description")

    easing_tokens: EasingTokens | None = Field(
        default=None,
        description="Registered easing set (None means defaults)",
    )
    duration_tokens: DurationTokens | None = Field(
        default=None,
        description="Registered duration set (None means defaults)",
    )

    model_config = {"frozen": True, "populate_by_name": True}

    @property
    def easing(self) -> EasingTokens:
        """Resolved easing tokens."""
        from chuk_mcp_motion.themes.resolver import resolve_easing_tokens

        return resolve_easing_tokens(self)

    @property
    def duration(self) -> DurationTokens:
        """Resolved duration tokens."""
        from chuk_mcp_motion.themes.resolver import resolve_duration_tokens

        return resolve_duration_tokens(self)

    def lerp(self, other: MotionTheme, t: float) -> MotionTheme:
        """
        Interpolate towards another theme.

        Each token set is lerped with its counterpart; a set only the
        other theme has is taken as is. Name and description come
        from other; t is ignored.
        """
        easing = (
            self.easing_tokens.lerp(other.easing_tokens, t)
            if self.easing_tokens is not None
            else other.easing_tokens
        )
        duration = (
            self.duration_tokens.lerp(other.duration_tokens, t)
            if self.duration_tokens is not None
            else other.duration_tokens
        )
        return MotionTheme(
            name=other.name,
            description=other.description,
            easing_tokens=easing,
            duration_tokens=duration,
        )

    def to_yaml_dict(self) -> dict[str, Any]:
        """Convert to YAML-serializable dictionary."""
        data: dict[str, Any] = {
            "schema": self.schema_version,
            "name": self.name,
            "description": self.description,
        }
        if self.easing_tokens is not None:
            data["easing"] = self.easing_tokens.to_yaml_dict()
        if self.duration_tokens is not None:
            data["duration"] = self.duration_tokens.to_yaml_dict()
        return data


class MotionThemeMetadata(BaseModel):
    """Lightweight metadata for listing themes."""

    name: str
    description: str
    overrides_easing: bool
    overrides_duration: bool

    model_config = {"frozen": True}

    @classmethod
    def from_theme(cls, theme: MotionTheme) -> MotionThemeMetadata:
        """Create metadata from a theme."""
        return cls(
            name=theme.name,
            description=theme.description,
            overrides_easing=theme.easing_tokens is not None,
            overrides_duration=theme.duration_tokens is not None,
        )
