"""
Theme loader - discovers and loads motion themes.

Themes can come from:
1. Built-in library (shipped with package)
2. Project themes (user's project/themes directory)
"""

from __future__ import annotations

import logging
from datetime import timedelta
from pathlib import Path
from typing import Any

import yaml

from chuk_mcp_motion.constants import (
    THEME_SCHEMA,
    DurationToken,
    EasingToken,
    ErrorMessages,
    TokenKind,
)
from chuk_mcp_motion.core.curves import Curve, curve_from_yaml
from chuk_mcp_motion.models.theme import MotionTheme, MotionThemeMetadata
from chuk_mcp_motion.models.tokens import DurationTokens, EasingTokens

logger = logging.getLogger(__name__)


class ThemeLoader:
    """
    Discovers and loads theme definitions.

    Themes are loaded from YAML files in the library and project directories.
    Project themes override library themes with the same name.
    """

    def __init__(
        self,
        library_path: Path | None = None,
        project_path: Path | None = None,
    ):
        """
        Initialize the theme loader.

        Args:
            library_path: Path to built-in theme library
            project_path: Path to project themes directory
        """
        self.library_path = library_path or (Path(__file__).parent / "library")
        self.project_path = project_path
        self._cache: dict[str, MotionTheme] = {}

    def list_themes(self) -> list[MotionThemeMetadata]:
        """
        List all available themes.

        Returns themes from both library and project, with project
        themes taking precedence.
        """
        themes: dict[str, MotionThemeMetadata] = {}

        for directory in (self.library_path, self.project_path):
            if directory is None or not directory.exists():
                continue
            for path in sorted(directory.glob("*.yaml")):
                theme = self._load_theme_file(path)
                if theme:
                    themes[theme.name] = MotionThemeMetadata.from_theme(theme)

        return list(themes.values())

    def get_theme(self, name: str) -> MotionTheme | None:
        """
        Get a theme by name.

        Project themes take precedence over library themes.

        Args:
            name: Theme name

        Returns:
            MotionTheme if found, None otherwise
        """
        if name in self._cache:
            return self._cache[name]

        for directory in (self.project_path, self.library_path):
            if directory is None:
                continue
            theme_file = directory / f"{name}.yaml"
            if theme_file.exists():
                theme = self._load_theme_file(theme_file)
                if theme:
                    logger.debug(f"Loaded theme '{name}' from {theme_file}")
                    self._cache[name] = theme
                    return theme

        return None

    def copy_to_project(self, name: str) -> Path | None:
        """
        Copy a library theme to the project for customization.

        Args:
            name: Theme name

        Returns:
            Path to copied file, or None if not found
        """
        if not self.project_path:
            raise ValueError("No project path configured")

        library_file = self.library_path / f"{name}.yaml"
        if not library_file.exists():
            return None

        self.project_path.mkdir(parents=True, exist_ok=True)

        dest_file = self.project_path / f"{name}.yaml"
        if dest_file.exists():
            raise ValueError(f"Theme already exists in project: {name}")

        dest_file.write_text(library_file.read_text())

        # Invalidate cache
        self._cache.pop(name, None)

        return dest_file

    def save_theme(self, theme: MotionTheme) -> Path:
        """
        Write a theme to the project directory.

        Args:
            theme: Theme to write

        Returns:
            Path to the written file
        """
        if not self.project_path:
            raise ValueError("No project path configured")

        self.project_path.mkdir(parents=True, exist_ok=True)
        dest_file = self.project_path / f"{theme.name}.yaml"
        with open(dest_file, "w") as f:
            yaml.safe_dump(theme.to_yaml_dict(), f, sort_keys=False)

        self._cache[theme.name] = theme
        return dest_file

    def _load_theme_file(self, path: Path) -> MotionTheme | None:
        """Load a theme from a YAML file, or None if it can't be parsed."""
        try:
            with open(path) as f:
                data = yaml.safe_load(f)

            return self.parse_theme(data)
        except (OSError, yaml.YAMLError, ValueError) as e:
            logger.warning(f"Skipping theme file {path}: {e}")
            return None

    def parse_theme(self, data: dict[str, Any]) -> MotionTheme:
        """
        Parse a theme from YAML data.

        Raises:
            ValueError: On unknown token names or malformed values
        """
        if not isinstance(data, dict):
            raise ValueError(f"Theme must be a mapping, got {type(data).__name__}")

        easing_data = data.get("easing")
        duration_data = data.get("duration")

        return MotionTheme(
            schema=data.get("schema", THEME_SCHEMA),
            name=data.get("name", "unknown"),
            description=data.get("description", ""),
            easing_tokens=(
                self._parse_easing(easing_data) if easing_data is not None else None
            ),
            duration_tokens=(
                self._parse_duration(duration_data) if duration_data is not None else None
            ),
        )

    def _parse_easing(self, data: Any) -> EasingTokens:
        """Parse the easing section; omitted slots keep their defaults."""
        return EasingTokens(**self.parse_easing_values(data))

    def _parse_duration(self, data: Any) -> DurationTokens:
        """Parse the duration section; omitted slots keep their defaults."""
        return DurationTokens(**self.parse_duration_values(data))

    def parse_easing_values(self, data: Any) -> dict[str, Curve]:
        """
        Parse a mapping of easing token name to curve name or [x1, y1, x2, y2].

        Raises:
            ValueError: On unknown token names or malformed curves
        """
        self._check_section("easing", data, [t.value for t in EasingToken], TokenKind.EASING)
        return {name: curve_from_yaml(name, value) for name, value in data.items()}

    def parse_duration_values(self, data: Any) -> dict[str, timedelta]:
        """
        Parse a mapping of duration token name to whole milliseconds.

        Raises:
            ValueError: On unknown token names or non-integer values
        """
        self._check_section(
            "duration", data, [t.value for t in DurationToken], TokenKind.DURATION
        )

        def parse_ms(name: str, value: Any) -> timedelta:
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(ErrorMessages.INVALID_DURATION.format(token=name, value=value))
            return timedelta(milliseconds=value)

        return {name: parse_ms(name, value) for name, value in data.items()}

    def _check_section(
        self,
        section: str,
        data: Any,
        expected: list[str],
        kind: TokenKind,
    ) -> None:
        """Reject non-mapping sections and unknown token names."""
        if not isinstance(data, dict):
            raise ValueError(ErrorMessages.INVALID_SECTION.format(section=section, value=data))
        unknown = sorted(str(name) for name in set(data) - set(expected))
        if unknown:
            raise ValueError(
                ErrorMessages.UNKNOWN_TOKEN.format(
                    kind=kind.value,
                    names=", ".join(unknown),
                    expected=", ".join(expected),
                )
            )

    def clear_cache(self) -> None:
        """Clear the theme cache."""
        self._cache.clear()
