"""Color roles and palette for twinpane."""

import curses

from .constants import C_BORDER, C_DIRECTORY, C_ERROR, C_EXECUTABLE, C_FILE, C_STATUS

# Test doubles may expose only a subset of color constants.
for _name, _fallback in {
    "COLOR_BLUE": 4,
    "COLOR_CYAN": 6,
    "COLOR_GREEN": 2,
    "COLOR_RED": 1,
    "COLOR_WHITE": 7,
}.items():
    if not hasattr(curses, _name):
        setattr(curses, _name, _fallback)

ROLE_TO_PAIR_ID = {
    "file": C_FILE,
    "directory": C_DIRECTORY,
    "executable": C_EXECUTABLE,
    "status": C_STATUS,
    "error": C_ERROR,
    "border": C_BORDER,
}

# (foreground, background); -1 keeps the terminal's default background.
PALETTE = {
    "file": (curses.COLOR_WHITE, -1),
    "directory": (curses.COLOR_BLUE, -1),
    "executable": (curses.COLOR_GREEN, -1),
    "status": (curses.COLOR_CYAN, -1),
    "error": (curses.COLOR_RED, -1),
    "border": (curses.COLOR_WHITE, -1),
}
