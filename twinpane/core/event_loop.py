"""Main loop helpers for twinpane."""

import curses

from ..browser.view import build_view_model
from .rendering import compute_layout, draw_view


def draw_frame(app):
    """Render a full frame before reading input."""
    app.stdscr.erase()
    height, width = app.stdscr.getmaxyx()
    layout = compute_layout(height, width)
    app.dispatcher.resize(layout.viewport_height)
    view = build_view_model(
        app.dispatcher.session,
        layout.viewport_height,
        show_hidden=app.dispatcher.lister.show_hidden,
    )
    draw_view(app.stdscr, view, layout)
    app.stdscr.noutrefresh()
    curses.doupdate()
    return view


def read_input_key(stdscr):
    """Read one key from curses, returning None on timeout/no input."""
    try:
        return stdscr.get_wch()
    except curses.error:
        return None


def dispatch_input(app, key):
    """Dispatch one input event."""
    if key is None:
        return
    if isinstance(key, int) and key == curses.KEY_RESIZE:
        curses.update_lines_cols()
        return
    app.handle_key(key)


def run_app_loop(app):
    """Draw, block for one key, process it completely, repeat."""
    while app.running:
        draw_frame(app)
        key = read_input_key(app.stdscr)
        dispatch_input(app, key)
