"""
Theme tools - MCP tools for theme discovery.

Tools for listing themes, describing a theme's overrides, and copying
a library theme into the project for customization.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_motion.constants import ErrorMessages, SuccessMessages
from chuk_mcp_motion.themes import ThemeLoader

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_theme_tools(
    mcp: ChukMCPServer,
    theme_loader: ThemeLoader,
) -> dict[str, Any]:
    """
    Register theme tools with the MCP server.

    Args:
        mcp: The MCP server instance
        theme_loader: The theme loader

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def motion_list_themes() -> str:
        """
        List available motion themes.

        Returns all themes from the library and project with
        basic metadata.

        Returns:
            JSON string with list of theme summaries

        Example:
            motion_list_themes()
        """
        try:
            themes = theme_loader.list_themes()

            return json.dumps(
                {
                    "status": "success",
                    "themes": [t.model_dump() for t in themes],
                    "count": len(themes),
                }
            )
        except Exception as e:
            logger.exception("Failed to list themes")
            return json.dumps({"status": "error", "message": str(e)})

    tools["motion_list_themes"] = motion_list_themes

    @mcp.tool  # type: ignore[arg-type]
    async def motion_describe_theme(name: str) -> str:
        """
        Get the token overrides a theme registers.

        Sections the theme leaves out are reported as null; those
        tokens resolve to the defaults.

        Args:
            name: Theme name

        Returns:
            JSON string with theme details

        Example:
            motion_describe_theme(name="reduced-motion")
        """
        try:
            theme = theme_loader.get_theme(name)
            if theme is None:
                return json.dumps(
                    {"status": "error", "message": ErrorMessages.THEME_NOT_FOUND.format(name=name)}
                )

            return json.dumps(
                {
                    "status": "success",
                    "theme": {
                        "name": theme.name,
                        "description": theme.description,
                        "easing": (
                            theme.easing_tokens.to_yaml_dict()
                            if theme.easing_tokens is not None
                            else None
                        ),
                        "duration": (
                            theme.duration_tokens.to_yaml_dict()
                            if theme.duration_tokens is not None
                            else None
                        ),
                    },
                }
            )
        except Exception as e:
            logger.exception("Failed to describe theme")
            return json.dumps({"status": "error", "message": str(e)})

    tools["motion_describe_theme"] = motion_describe_theme

    @mcp.tool  # type: ignore[arg-type]
    async def motion_copy_theme_to_project(name: str) -> str:
        """
        Copy a library theme to the project for customization.

        Args:
            name: Theme name

        Returns:
            JSON string with path to copied theme

        Example:
            motion_copy_theme_to_project(name="material3")
        """
        try:
            path = theme_loader.copy_to_project(name)
            if path is None:
                return json.dumps(
                    {"status": "error", "message": ErrorMessages.THEME_NOT_FOUND.format(name=name)}
                )

            return json.dumps(
                {
                    "status": "success",
                    "message": SuccessMessages.THEME_COPIED.format(name=name, path=path),
                    "path": str(path),
                    "hint": "You can now customize this theme by editing the YAML file",
                }
            )
        except ValueError as e:
            return json.dumps({"status": "error", "message": str(e)})
        except Exception as e:
            logger.exception("Failed to copy theme")
            return json.dumps({"status": "error", "message": str(e)})

    tools["motion_copy_theme_to_project"] = motion_copy_theme_to_project

    return tools
