"""
Tests for MCP tools.

Tests the MCP tool implementations for themes and tokens.
"""

import json
from pathlib import Path

import pytest

from chuk_mcp_motion.themes import ThemeLoader


# Mock MCP server for testing tools
class MockMCPServer:
    """Mock MCP server that just stores registered tools."""

    def __init__(self, name: str):
        self.name = name
        self.tools: dict = {}

    def tool(self, func):
        """Decorator to register a tool."""
        self.tools[func.__name__] = func
        return func


@pytest.fixture
def loader(themes_library_path: Path, temp_dir: Path) -> ThemeLoader:
    """Theme loader over the built-in library and a temp project dir."""
    return ThemeLoader(library_path=themes_library_path, project_path=temp_dir / "themes")


@pytest.fixture
def token_tools(loader: ThemeLoader) -> dict:
    from chuk_mcp_motion.tools.tokens import register_token_tools

    return register_token_tools(MockMCPServer("test"), loader)


@pytest.fixture
def theme_tools(loader: ThemeLoader) -> dict:
    from chuk_mcp_motion.tools.themes import register_theme_tools

    return register_theme_tools(MockMCPServer("test"), loader)


class TestRegistration:
    """Tests for tool registration."""

    def test_tools_registered_on_server(self, loader: ThemeLoader):
        """Every returned tool is registered with the server."""
        from chuk_mcp_motion.tools import register_theme_tools, register_token_tools

        mcp = MockMCPServer("test")
        tools = {**register_theme_tools(mcp, loader), **register_token_tools(mcp, loader)}
        assert set(tools) == set(mcp.tools)
        assert "motion_get_easing_tokens" in tools
        assert "motion_list_themes" in tools


class TestTokenTools:
    """Tests for token tools."""

    @pytest.mark.asyncio
    async def test_default_easing(self, token_tools: dict):
        """Without a theme the defaults are returned."""
        data = json.loads(await token_tools["motion_get_easing_tokens"]())
        assert data["status"] == "success"
        assert data["theme"] is None
        assert data["easing"]["emphasized"] == "ease_in_out_cubic_emphasized"
        assert data["easing"]["standard"] == [0.2, 0.0, 0.0, 1.0]

    @pytest.mark.asyncio
    async def test_theme_easing(self, token_tools: dict):
        """A theme's overrides are applied over the defaults."""
        data = json.loads(await token_tools["motion_get_easing_tokens"](theme="reduced-motion"))
        assert data["status"] == "success"
        assert data["easing"]["emphasized"] == "linear"
        assert data["easing"]["standard"] == [0.2, 0.0, 0.0, 1.0]

    @pytest.mark.asyncio
    async def test_default_durations(self, token_tools: dict):
        """Default durations in milliseconds."""
        data = json.loads(await token_tools["motion_get_duration_tokens"]())
        assert data["status"] == "success"
        assert list(data["duration_ms"].values()) == [
            50, 100, 150, 200, 250, 300, 350, 400, 450, 500, 550, 600, 700, 800, 900, 1000,
        ]

    @pytest.mark.asyncio
    async def test_theme_durations(self, token_tools: dict):
        """Theme durations override only what the theme names."""
        data = json.loads(await token_tools["motion_get_duration_tokens"](theme="reduced-motion"))
        assert data["duration_ms"]["long1"] == 300
        assert data["duration_ms"]["short1"] == 50

    @pytest.mark.asyncio
    async def test_unknown_theme(self, token_tools: dict):
        """Unknown themes are errors."""
        data = json.loads(await token_tools["motion_get_easing_tokens"](theme="nope"))
        assert data["status"] == "error"
        assert "nope" in data["message"]
        data = json.loads(await token_tools["motion_get_duration_tokens"](theme="nope"))
        assert data["status"] == "error"

    @pytest.mark.asyncio
    async def test_copy_with_duration(self, token_tools: dict):
        """Duration overrides merge onto the resolved set."""
        result = await token_tools["motion_copy_with_tokens"](
            kind="duration", overrides={"short1": 75}
        )
        data = json.loads(result)
        assert data["status"] == "success"
        assert data["overridden"] == ["short1"]
        assert data["tokens"]["short1"] == 75
        assert data["tokens"]["short2"] == 100

    @pytest.mark.asyncio
    async def test_copy_with_easing_on_theme(self, token_tools: dict):
        """Easing overrides start from the theme's set."""
        result = await token_tools["motion_copy_with_tokens"](
            kind="easing",
            overrides={"standard": [0.4, 0.0, 0.2, 1.0]},
            theme="reduced-motion",
        )
        data = json.loads(result)
        assert data["status"] == "success"
        assert data["tokens"]["standard"] == [0.4, 0.0, 0.2, 1.0]
        assert data["tokens"]["emphasized"] == "linear"

    @pytest.mark.asyncio
    async def test_copy_with_unknown_token(self, token_tools: dict):
        """Unknown token names are errors."""
        result = await token_tools["motion_copy_with_tokens"](
            kind="easing", overrides={"bounce": "linear"}
        )
        data = json.loads(result)
        assert data["status"] == "error"
        assert "bounce" in data["message"]

    @pytest.mark.asyncio
    async def test_copy_with_unknown_kind(self, token_tools: dict):
        """Unknown kinds are errors."""
        result = await token_tools["motion_copy_with_tokens"](kind="color", overrides={})
        data = json.loads(result)
        assert data["status"] == "error"
        assert "color" in data["message"]


class TestThemeTools:
    """Tests for theme tools."""

    @pytest.mark.asyncio
    async def test_list_themes(self, theme_tools: dict):
        """Lists library themes."""
        data = json.loads(await theme_tools["motion_list_themes"]())
        assert data["status"] == "success"
        names = {t["name"] for t in data["themes"]}
        assert {"material3", "reduced-motion"} <= names
        assert data["count"] == len(data["themes"])

    @pytest.mark.asyncio
    async def test_describe_theme(self, theme_tools: dict):
        """Describes the overrides a theme registers."""
        data = json.loads(await theme_tools["motion_describe_theme"](name="reduced-motion"))
        assert data["status"] == "success"
        theme = data["theme"]
        assert theme["name"] == "reduced-motion"
        assert theme["easing"]["emphasized"] == "linear"
        assert theme["duration"]["extra_long4"] == 400

    @pytest.mark.asyncio
    async def test_describe_missing(self, theme_tools: dict):
        """Unknown themes are errors."""
        data = json.loads(await theme_tools["motion_describe_theme"](name="nope"))
        assert data["status"] == "error"

    @pytest.mark.asyncio
    async def test_copy_theme_to_project(self, theme_tools: dict, temp_dir: Path):
        """Copies a library theme into the project."""
        data = json.loads(await theme_tools["motion_copy_theme_to_project"](name="material3"))
        assert data["status"] == "success"
        assert Path(data["path"]) == temp_dir / "themes" / "material3.yaml"

        again = json.loads(await theme_tools["motion_copy_theme_to_project"](name="material3"))
        assert again["status"] == "error"

    @pytest.mark.asyncio
    async def test_copy_missing_theme(self, theme_tools: dict):
        """Copying an unknown theme is an error."""
        data = json.loads(await theme_tools["motion_copy_theme_to_project"](name="nope"))
        assert data["status"] == "error"
