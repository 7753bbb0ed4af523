#!/usr/bin/env python3
"""
Async Motion MCP Server using chuk-mcp-server

This server exposes Material 3 motion tokens - named easing curves and
named durations - to MCP clients. Themes are YAML files that override
any subset of tokens; whatever a theme leaves out resolves to the
defaults.

The server provides tools for:
- Listing and describing motion themes
- Reading resolved easing and duration tokens
- Deriving token sets with overrides
- Copying library themes into the project for customization
"""

import logging
import os
from pathlib import Path

from chuk_mcp_server import ChukMCPServer

from chuk_mcp_motion.themes import ThemeLoader
from chuk_mcp_motion.tools import register_theme_tools, register_token_tools

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Create the MCP server instance
mcp = ChukMCPServer("chuk-mcp-motion")

# Paths - use standard project structure
BASE_PATH = Path.cwd()
THEMES_DIR = Path(os.environ.get("CHUK_MOTION_THEMES_DIR", BASE_PATH / "themes"))
THEMES_LIBRARY_PATH = Path(__file__).parent / "themes" / "library"

theme_loader = ThemeLoader(
    library_path=THEMES_LIBRARY_PATH,
    project_path=THEMES_DIR,
)

# Register all tools
theme_tools = register_theme_tools(mcp, theme_loader)
token_tools = register_token_tools(mcp, theme_loader)

# Export tool functions for direct access
motion_list_themes = theme_tools["motion_list_themes"]
motion_describe_theme = theme_tools["motion_describe_theme"]
motion_copy_theme_to_project = theme_tools["motion_copy_theme_to_project"]

motion_get_easing_tokens = token_tools["motion_get_easing_tokens"]
motion_get_duration_tokens = token_tools["motion_get_duration_tokens"]
motion_copy_with_tokens = token_tools["motion_copy_with_tokens"]

logger.info("CHUK Motion MCP Server initialized")
logger.info(f"  Themes library: {THEMES_LIBRARY_PATH}")
logger.info(f"  Project themes: {THEMES_DIR}")
