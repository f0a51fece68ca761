"""Terminal bootstrap helpers for twinpane startup."""

import curses

from ..utils import init_colors


def configure_terminal(stdscr):
    """Apply core curses terminal setup: blocking reads, no echo, keypad on."""
    try:
        curses.curs_set(0)
    except curses.error:
        pass
    curses.noecho()
    curses.cbreak()
    stdscr.keypad(True)
    stdscr.nodelay(False)
    # Short ESC delay so Escape cancels filter/prompt without a visible lag.
    set_escdelay = getattr(curses, 'set_escdelay', None)
    if callable(set_escdelay):
        set_escdelay(25)
    if curses.has_colors():
        init_colors()
