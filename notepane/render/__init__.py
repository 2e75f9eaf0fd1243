"""Frame composition for the three-pane note screen.

Layout (columns split in half, status row at the bottom)::

    +- Actions ---+- Notes ------+
    | > New note  | ------------ |
    +- Info ------+ title  time  |
    | ...         |              |
    +-------------+--------------+
    status hint

``build_frame`` is pure and returns the full ANSI frame; ``FrameRenderer``
writes it to stdout each time the loop asks for a redraw.
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass

from ..notes import Note
from ..state import AppState, ComposerMode, Pane
from ..ui_theme import DEFAULT_THEME, UITheme
from .ansi import clip_ansi_line, display_width, fit_ansi_line, wrap_text
from .help import INFO_LINES, INFO_TITLE, status_hint

ACTIONS_HEIGHT_PERCENT = 25
SELECTED_MARKER = "> "
NOTE_TITLE_WIDTH = 9
ROWS_PER_NOTE = 4


@dataclass(frozen=True)
class FrameLayout:
    """Screen geometry for one frame; rows and columns are 0-based."""

    columns: int
    lines: int
    left_width: int
    right_width: int
    body_rows: int
    actions_rows: int
    panel_rows: int

    @classmethod
    def for_size(cls, columns: int, lines: int) -> FrameLayout:
        columns = max(8, columns)
        lines = max(7, lines)
        body_rows = lines - 1
        left_width = columns // 2
        actions_rows = max(3, body_rows * ACTIONS_HEIGHT_PERCENT // 100)
        return cls(
            columns=columns,
            lines=lines,
            left_width=left_width,
            right_width=columns - left_width,
            body_rows=body_rows,
            actions_rows=actions_rows,
            panel_rows=max(3, body_rows - actions_rows),
        )


def _styled(style: str, text: str, theme: UITheme) -> str:
    if not style:
        return text
    return f"{style}{text}{theme.reset}"


def draw_box(
    title: str,
    content: list[str],
    width: int,
    height: int,
    theme: UITheme,
    *,
    active: bool = False,
) -> list[str]:
    """Return ``height`` rows of exactly ``width`` columns framing ``content``."""
    inner = max(0, width - 2)
    border = theme.border_active if active else theme.border
    label = clip_ansi_line(f" {title} ", inner) if title else ""
    top = "┌" + label + "─" * max(0, inner - display_width(label)) + "┐"
    rows = [_styled(border, top, theme)]
    side = _styled(border, "│", theme)
    for idx in range(max(0, height - 2)):
        body = fit_ansi_line(content[idx] if idx < len(content) else "", inner)
        if "\033" in body:
            body += "\033[0m"
        rows.append(side + body + side)
    rows.append(_styled(border, "└" + "─" * inner + "┘", theme))
    return rows[:height]


def _action_rows(state: AppState, width: int, theme: UITheme) -> list[str]:
    actions = state.composer if state.pane is Pane.COMPOSER else state.menu
    selected = actions.selected()
    rows: list[str] = []
    for idx, action in enumerate(actions):
        if idx == selected:
            rows.append(_styled(theme.action_selected, fit_ansi_line(SELECTED_MARKER + action.value, width), theme))
        else:
            rows.append(" " * len(SELECTED_MARKER) + _styled(theme.action_item, action.value, theme))
    return rows


def _info_rows(width: int, theme: UITheme) -> list[str]:
    rows: list[str] = []
    for is_heading, text in INFO_LINES:
        style = theme.info_heading if is_heading else theme.info_text
        for chunk in wrap_text(text, width):
            rows.append(_styled(style, chunk, theme))
    return rows


def _panel(state: AppState, layout: FrameLayout, theme: UITheme) -> list[str]:
    inner = layout.left_width - 2
    if state.pane is Pane.NOTES and state.notes.selected_item() is not None:
        note = state.notes.selected_item()
        content = wrap_text(note.text, inner)
        return draw_box(note.title, content, layout.left_width, layout.panel_rows, theme, active=True)
    if state.pane is Pane.COMPOSER:
        style = theme.composer_editing if state.composer_mode is ComposerMode.EDITING else ""
        lines = state.buffer.split("\n")
        # Keep the last line in view; the caret sits on it.
        visible = lines[-max(1, layout.panel_rows - 2) :]
        content = [_styled(style, line, theme) for line in visible]
        return draw_box("New note", content, layout.left_width, layout.panel_rows, theme, active=state.editing)
    return draw_box(INFO_TITLE, _info_rows(inner, theme), layout.left_width, layout.panel_rows, theme)


def _note_rows(note: Note, width: int, selected: bool, theme: UITheme) -> list[str]:
    header = (
        _styled(theme.note_title, note.title.ljust(NOTE_TITLE_WIDTH), theme)
        + " "
        + _styled(theme.note_timestamp, note.timestamp, theme)
    )
    rows = [
        _styled(theme.note_divider, "-" * width, theme),
        header,
        "",
        note.text,
    ]
    if not selected:
        return rows
    return [_styled(theme.note_selected, fit_ansi_line(row, width), theme) for row in rows]


def _notes_list(state: AppState, layout: FrameLayout, theme: UITheme) -> list[str]:
    inner_width = layout.right_width - 2
    inner_height = layout.body_rows - 2
    visible_notes = max(1, inner_height // ROWS_PER_NOTE)
    selected = state.notes.selected()
    first = 0
    if selected is not None and selected >= visible_notes:
        first = selected - visible_notes + 1
    content: list[str] = []
    for idx, note in enumerate(state.notes.items[first:], start=first):
        if len(content) >= inner_height:
            break
        content.extend(_note_rows(note, inner_width, idx == selected, theme))
    return draw_box(
        "Notes",
        content,
        layout.right_width,
        layout.body_rows,
        theme,
        active=state.pane is Pane.NOTES,
    )


def caret_position(state: AppState, columns: int, lines: int) -> tuple[int, int] | None:
    """Return 1-based ``(row, col)`` for the insertion caret, or ``None``.

    Only Editing mode shows a caret. It sits one cell past the last buffer
    line, measured in display columns and clamped inside the composer box.
    """
    if not state.editing:
        return None
    layout = FrameLayout.for_size(columns, lines)
    _, line_count = state.composer_cursor()
    last_line_width = display_width(state.buffer.rsplit("\n", 1)[-1])
    row = layout.actions_rows + min(line_count, layout.panel_rows - 2)
    col = 1 + min(last_line_width, layout.left_width - 3)
    return row + 1, col + 1


def build_frame(state: AppState, columns: int, lines: int, theme: UITheme = DEFAULT_THEME) -> str:
    """Compose one full-screen ANSI frame for ``state``."""
    layout = FrameLayout.for_size(columns, lines)
    left = draw_box(
        "Actions",
        _action_rows(state, layout.left_width - 2, theme),
        layout.left_width,
        layout.actions_rows,
        theme,
        active=state.pane in {Pane.MENU, Pane.COMPOSER} and not state.editing,
    ) + _panel(state, layout, theme)
    right = _notes_list(state, layout, theme)

    out: list[str] = ["\033[H\033[J"]
    for row in range(layout.body_rows):
        out.append(left[row] if row < len(left) else " " * layout.left_width)
        out.append(right[row] if row < len(right) else "")
        out.append("\r\n")
    out.append("\033[7m")
    out.append(fit_ansi_line(f" {status_hint(state)}", layout.columns))
    out.append("\033[0m")

    caret = caret_position(state, columns, lines)
    if caret is None:
        out.append("\033[?25l")
    else:
        out.append(f"\033[{caret[0]};{caret[1]}H\033[?25h")
    return "".join(out)


class FrameRenderer:
    """Callable renderer bound to one theme and output descriptor.

    The loop calls it every tick; a frame identical to the last one written is
    not written again.
    """

    def __init__(self, theme: UITheme = DEFAULT_THEME, stdout_fd: int | None = None) -> None:
        self.theme = theme
        self.stdout_fd = stdout_fd
        self._last_frame: str | None = None

    def __call__(self, state: AppState, columns: int, lines: int) -> None:
        frame = build_frame(state, columns, lines, self.theme)
        if frame == self._last_frame:
            return
        fd = self.stdout_fd if self.stdout_fd is not None else sys.stdout.fileno()
        os.write(fd, frame.encode("utf-8", errors="replace"))
        self._last_frame = frame


__all__ = ["FrameLayout", "FrameRenderer", "build_frame", "caret_position", "draw_box"]
