"""Rendering helpers: paint a ViewModel onto the curses screen."""

import curses
from dataclasses import dataclass

from ..browser.core import _fit_text_to_cells
from ..constants import PROMPT_ROWS, TOP_BAR_ROWS
from ..utils import safe_addstr, theme_attr

# Blank rows inside each pane above and below the listing.
PANE_PADDING = 1


@dataclass(frozen=True)
class Layout:
    list_x: int
    list_width: int
    preview_x: int
    preview_width: int
    pane_top: int
    pane_height: int
    prompt_y: int

    @property
    def viewport_height(self):
        return max(1, self.pane_height - 2 * PANE_PADDING)


def compute_layout(height, width):
    """Split the screen into path bar, two panes and the prompt area."""
    pane_height = max(1, height - TOP_BAR_ROWS - PROMPT_ROWS)
    list_width = max(1, width // 2)
    return Layout(
        list_x=0,
        list_width=list_width,
        preview_x=list_width + 1,
        preview_width=max(1, width - list_width - 1),
        pane_top=TOP_BAR_ROWS,
        pane_height=pane_height,
        prompt_y=TOP_BAR_ROWS + pane_height,
    )


def _row_attr(row):
    if row.is_dir:
        attr = theme_attr("directory") | curses.A_BOLD
    elif row.is_executable:
        attr = theme_attr("executable")
    else:
        attr = theme_attr("file")
    if row.is_selected:
        attr |= curses.A_REVERSE
    if row.is_marked:
        attr |= curses.A_UNDERLINE
    return attr


def draw_top_bar(stdscr, view, width):
    text = f" twinpane  {len(view.rows)} items"
    if view.mark_count:
        text += f"  ({view.mark_count} marked)"
    safe_addstr(stdscr, 0, 0, _fit_text_to_cells(text, width - 1), theme_attr("status") | curses.A_BOLD)


def draw_listing(stdscr, view, layout):
    """Draw the visible slice of rows, one mark column plus name."""
    top = layout.pane_top + PANE_PADDING
    text_width = layout.list_width - 2
    for i in range(layout.viewport_height):
        index = view.scroll_offset + i
        if index >= len(view.rows):
            break
        row = view.rows[index]
        label = f"{'M' if row.is_marked else ' '} {row.name}"
        safe_addstr(stdscr, top + i, layout.list_x + 1, _fit_text_to_cells(label, text_width), _row_attr(row))


def draw_separator(stdscr, layout):
    attr = theme_attr("border")
    for y in range(layout.pane_top, layout.pane_top + layout.pane_height):
        safe_addstr(stdscr, y, layout.preview_x - 1, "|", attr)


def draw_preview(stdscr, view, layout):
    top = layout.pane_top + PANE_PADDING
    text_width = layout.preview_width - 2
    for i, line in enumerate(view.preview_lines[: layout.viewport_height]):
        safe_addstr(stdscr, top + i, layout.preview_x + 1, _fit_text_to_cells(line, text_width))


def draw_prompt(stdscr, view, layout, width):
    """Prompt/status message on the first row, path and entry info on the second."""
    if view.prompt_text:
        safe_addstr(stdscr, layout.prompt_y, 1, view.prompt_text, theme_attr("status") | curses.A_BOLD)
    elif view.status_text:
        role = "error" if view.status_is_error else "status"
        safe_addstr(stdscr, layout.prompt_y, 1, view.status_text, theme_attr(role))
    safe_addstr(stdscr, layout.prompt_y + 1, 1, view.path_text, curses.A_BOLD)
    if view.info_text:
        x = width - len(view.info_text) - 2
        if x > len(view.path_text) + 2:
            safe_addstr(stdscr, layout.prompt_y + 1, x, view.info_text, theme_attr("status"))


def draw_view(stdscr, view, layout):
    """Paint one full frame."""
    _, width = stdscr.getmaxyx()
    draw_top_bar(stdscr, view, width)
    draw_listing(stdscr, view, layout)
    draw_separator(stdscr, layout)
    draw_preview(stdscr, view, layout)
    draw_prompt(stdscr, view, layout, width)
