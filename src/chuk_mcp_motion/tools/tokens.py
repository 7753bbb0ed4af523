"""
Token tools - MCP tools for reading resolved token sets.

Every tool resolves against an optional theme: the theme's registered
set when it has one, otherwise the Material 3 defaults.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_motion.constants import ErrorMessages, TokenKind
from chuk_mcp_motion.models.theme import MotionTheme
from chuk_mcp_motion.themes import ThemeLoader, resolve_duration_tokens, resolve_easing_tokens

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


class ThemeNotFoundError(LookupError):
    """Raised when a tool names a theme the loader can't find."""


def register_token_tools(
    mcp: ChukMCPServer,
    theme_loader: ThemeLoader,
) -> dict[str, Any]:
    """
    Register token tools with the MCP server.

    Args:
        mcp: The MCP server instance
        theme_loader: The theme loader

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    def load_theme(name: str | None) -> MotionTheme | None:
        if name is None:
            return None
        theme = theme_loader.get_theme(name)
        if theme is None:
            raise ThemeNotFoundError(ErrorMessages.THEME_NOT_FOUND.format(name=name))
        return theme

    @mcp.tool  # type: ignore[arg-type]
    async def motion_get_easing_tokens(theme: str | None = None) -> str:
        """
        Get the easing tokens in effect for a theme.

        Curves are reported as a built-in name (e.g. 'linear') or as
        cubic Bezier coefficients [x1, y1, x2, y2].

        Args:
            theme: Optional theme name; defaults are used without one

        Returns:
            JSON string with the seven easing tokens

        Example:
            motion_get_easing_tokens(theme="reduced-motion")
        """
        try:
            easing = resolve_easing_tokens(load_theme(theme))
            return json.dumps(
                {
                    "status": "success",
                    "theme": theme,
                    "easing": easing.to_yaml_dict(),
                }
            )
        except ThemeNotFoundError as e:
            return json.dumps({"status": "error", "message": str(e)})
        except Exception as e:
            logger.exception("Failed to get easing tokens")
            return json.dumps({"status": "error", "message": str(e)})

    tools["motion_get_easing_tokens"] = motion_get_easing_tokens

    @mcp.tool  # type: ignore[arg-type]
    async def motion_get_duration_tokens(theme: str | None = None) -> str:
        """
        Get the duration tokens in effect for a theme.

        Args:
            theme: Optional theme name; defaults are used without one

        Returns:
            JSON string with the sixteen durations in milliseconds

        Example:
            motion_get_duration_tokens()
        """
        try:
            duration = resolve_duration_tokens(load_theme(theme))
            return json.dumps(
                {
                    "status": "success",
                    "theme": theme,
                    "duration_ms": duration.to_milliseconds(),
                }
            )
        except ThemeNotFoundError as e:
            return json.dumps({"status": "error", "message": str(e)})
        except Exception as e:
            logger.exception("Failed to get duration tokens")
            return json.dumps({"status": "error", "message": str(e)})

    tools["motion_get_duration_tokens"] = motion_get_duration_tokens

    @mcp.tool  # type: ignore[arg-type]
    async def motion_copy_with_tokens(
        kind: str,
        overrides: dict[str, Any],
        theme: str | None = None,
    ) -> str:
        """
        Override some tokens of a resolved set and return the result.

        Tokens not named in overrides keep the value the theme (or the
        defaults) gives them.

        Args:
            kind: 'easing' or 'duration'
            overrides: Token name to curve (name or [x1, y1, x2, y2])
                for easing, or to milliseconds for duration
            theme: Optional theme name to start from

        Returns:
            JSON string with the full merged token set

        Example:
            motion_copy_with_tokens(kind="duration", overrides={"short1": 75})
        """
        try:
            try:
                token_kind = TokenKind(kind)
            except ValueError:
                return json.dumps(
                    {"status": "error", "message": ErrorMessages.UNKNOWN_KIND.format(kind=kind)}
                )

            base_theme = load_theme(theme)
            if token_kind == TokenKind.EASING:
                easing = resolve_easing_tokens(base_theme).copy_with(
                    **theme_loader.parse_easing_values(overrides)
                )
                tokens = easing.to_yaml_dict()
            else:
                duration = resolve_duration_tokens(base_theme).copy_with(
                    **theme_loader.parse_duration_values(overrides)
                )
                tokens = duration.to_milliseconds()

            return json.dumps(
                {
                    "status": "success",
                    "kind": token_kind.value,
                    "theme": theme,
                    "overridden": sorted(overrides),
                    "tokens": tokens,
                }
            )
        except (ThemeNotFoundError, ValueError) as e:
            return json.dumps({"status": "error", "message": str(e)})
        except Exception as e:
            logger.exception("Failed to apply token overrides")
            return json.dumps({"status": "error", "message": str(e)})

    tools["motion_copy_with_tokens"] = motion_copy_with_tokens

    return tools
