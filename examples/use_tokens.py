#!/usr/bin/env python3
"""
Example: Using motion tokens.

Shows the default token sets, a theme that overrides part of them,
and deriving a new set with copy_with().

Usage:
    python examples/use_tokens.py
"""

import tempfile
from datetime import timedelta
from pathlib import Path

from chuk_mcp_motion.core import Cubic, Curves
from chuk_mcp_motion.models import DurationTokens, EasingTokens, MotionTheme
from chuk_mcp_motion.themes import ThemeLoader, resolve_duration_tokens, resolve_easing_tokens


def main() -> None:
    """Demonstrate the token system."""
    print("CHUK Motion Tokens Demo")
    print("=" * 40)
    print()

    # No theme: everything resolves to the defaults
    easing = resolve_easing_tokens(None)
    print("Default easing:")
    for name, curve in easing.to_yaml_dict().items():
        print(f"  {name}: {curve}")
    print()

    duration = resolve_duration_tokens(None)
    print("Default durations (ms):")
    print("  " + ", ".join(f"{k}={v}" for k, v in duration.to_milliseconds().items()))
    print()

    # A theme registers only what it changes
    theme = MotionTheme(
        name="snappy",
        easing_tokens=EasingTokens(emphasized=Curves.LINEAR),
        duration_tokens=DurationTokens(short1=timedelta(milliseconds=30)),
    )
    print(f"Theme '{theme.name}':")
    print(f"  emphasized: {theme.easing.emphasized}")
    print(f"  standard:   {theme.easing.standard}")
    print(f"  short1:     {theme.duration.short1}")
    print(f"  short2:     {theme.duration.short2}")
    print()

    # Derive a set without naming every slot
    derived = theme.easing.copy_with(standard=Cubic(0.4, 0.0, 0.2, 1.0))
    print(f"Derived standard: {derived.standard}")
    print()

    # Library themes
    library_path = Path(__file__).parent.parent / "src/chuk_mcp_motion/themes/library"
    with tempfile.TemporaryDirectory() as tmp:
        loader = ThemeLoader(library_path=library_path, project_path=Path(tmp))
        print("Available themes:")
        for meta in loader.list_themes():
            print(f"  {meta.name}: {meta.description}")

        reduced = loader.get_theme("reduced-motion")
        if reduced:
            print()
            print(f"reduced-motion long1: {reduced.duration.long1}")


if __name__ == "__main__":
    main()
