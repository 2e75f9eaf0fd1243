"""UI theme definitions and selection helpers.

Themes are ANSI palettes for pane chrome, list rows, and the composer.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by renderers."""

    name: str
    reset: str
    border: str
    border_active: str
    pane_title: str
    action_item: str
    action_selected: str
    note_title: str
    note_timestamp: str
    note_divider: str
    note_selected: str
    info_heading: str
    info_text: str
    composer_editing: str


DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    border="\033[2m",
    border_active="\033[1;38;5;81m",
    pane_title="\033[1m",
    action_item="\033[34m",
    action_selected="\033[30;47m",
    note_title="\033[34m",
    note_timestamp="\033[3m",
    note_divider="\033[2m",
    note_selected="\033[48;2;133;95;80m",
    info_heading="\033[31m",
    info_text="",
    composer_editing="\033[33m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    reset="\033[0m",
    border="\033[2;38;5;31m",
    border_active="\033[1;38;5;45m",
    pane_title="\033[1;38;5;153m",
    action_item="\033[38;5;117m",
    action_selected="\033[38;5;16;48;5;45m",
    note_title="\033[38;5;45m",
    note_timestamp="\033[3;38;5;110m",
    note_divider="\033[2;38;5;31m",
    note_selected="\033[48;5;24m",
    info_heading="\033[1;38;5;39m",
    info_text="\033[38;5;252m",
    composer_editing="\033[38;5;229m",
)

PLAIN_THEME = UITheme(
    name="plain",
    reset="",
    border="",
    border_active="",
    pane_title="",
    action_item="",
    action_selected="\033[7m",
    note_title="",
    note_timestamp="",
    note_divider="",
    note_selected="\033[7m",
    info_heading="",
    info_text="",
    composer_editing="",
)

_THEMES: dict[str, UITheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
}


def available_theme_names() -> tuple[str, ...]:
    """Return selectable non-plain theme names."""
    return tuple(sorted(_THEMES.keys()))


def normalize_theme_name(name: str | None) -> str:
    """Return a valid theme name, falling back to default."""
    if not name:
        return DEFAULT_THEME.name
    candidate = str(name).strip().lower()
    if candidate in _THEMES:
        return candidate
    return DEFAULT_THEME.name


def resolve_theme(name: str | None, *, no_color: bool = False) -> UITheme:
    """Return concrete theme for requested name and color mode."""
    if no_color:
        return PLAIN_THEME
    return _THEMES[normalize_theme_name(name)]


__all__ = [
    "UITheme",
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "available_theme_names",
    "normalize_theme_name",
    "resolve_theme",
]
