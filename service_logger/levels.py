"""
Log levels and their display colors.

Log levels (lower number = more severe):
- crit: Critical events cause more severe problems or outages.
- error: Error events are likely to cause problems.
- warn: Warning events might cause problems.
- info: Routine information, such as ongoing status or performance.
- debug: Debug or trace information.

Kept free of other service_logger imports so config and core can both use it.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from colorama import Back, Fore

LEVELS: Mapping[str, int] = MappingProxyType({
    "crit": 0,
    "error": 1,
    "warn": 2,
    "info": 3,
    "debug": 4,
})

DEFAULT_LEVEL = "info"

DEFAULT_COLORS: Mapping[str, str] = MappingProxyType({
    "crit": "bg_red",
    "error": "red",
    "warn": "yellow",
    "info": "green",
    "debug": "blue",
})

# Process-wide level -> color name registry read by the development renderer.
_colors: dict[str, str] = {}


def severity(level: str) -> int:
    """Return the numeric severity of a level name; ValueError if unknown."""
    try:
        return LEVELS[level]
    except KeyError:
        raise ValueError(
            f"Unknown log level {level!r}; expected one of {', '.join(LEVELS)}"
        ) from None


def color_code(color: str) -> str:
    """
    Map a color name to its colorama escape sequence.

    Foreground colors use colorama.Fore names in lower case ("red",
    "light_black_ex"); backgrounds take a "bg_" prefix ("bg_red").
    """
    palette, name = (Back, color[3:]) if color.startswith("bg_") else (Fore, color)
    code = getattr(palette, name.upper(), None) if name.islower() else None
    if not isinstance(code, str):
        raise ValueError(f"Unknown color {color!r}")
    return code


def add_colors(colors: Mapping[str, str]) -> None:
    """Register display colors for level names. Safe to call repeatedly."""
    for level, color in colors.items():
        try:
            color_code(color)
        except ValueError:
            raise ValueError(f"Unknown color {color!r} for level {level!r}") from None
        _colors[level] = color


def level_style(level: str) -> str:
    """Escape sequence for a level, or an empty string when no color is registered."""
    color = _colors.get(level)
    return color_code(color) if color else ""
