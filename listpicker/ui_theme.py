"""UI theme definitions.

Themes are ANSI palettes for the checklist chrome. ``plain`` carries no
escape codes and is used when color is disabled.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by renderers."""

    name: str
    reverse: str
    reset: str
    header: str
    success: str


DEFAULT_THEME = UITheme(
    name="default",
    reverse="\033[7m",
    reset="\033[0m",
    header="\033[1m",
    success="\033[32m",
)

PLAIN_THEME = UITheme(
    name="plain",
    reverse="",
    reset="",
    header="",
    success="",
)

_THEMES = {theme.name: theme for theme in (DEFAULT_THEME, PLAIN_THEME)}


def available_theme_names() -> tuple[str, ...]:
    return tuple(_THEMES)


def resolve_theme(name: str | None) -> UITheme:
    """Return the named theme, falling back to the default palette."""
    if name is None:
        return DEFAULT_THEME
    return _THEMES.get(name.strip().lower(), DEFAULT_THEME)
