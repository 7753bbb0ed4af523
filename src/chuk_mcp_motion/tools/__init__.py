"""
MCP tool implementations.

Tools are organized by domain:
- themes - Theme discovery and customization
- tokens - Resolved easing and duration tokens
"""

from chuk_mcp_motion.tools.themes import register_theme_tools
from chuk_mcp_motion.tools.tokens import register_token_tools

__all__ = [
    "register_theme_tools",
    "register_token_tools",
]
