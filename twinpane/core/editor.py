"""External editor handoff.

The curses session is suspended while the editor runs and restored once it
exits. Failures come back as a message string instead of raising.
"""

from __future__ import annotations

import curses
import logging
import os
import shlex
import subprocess
from typing import Callable

from ..constants import DEFAULT_EDITOR

LOGGER = logging.getLogger(__name__)


def resolve_editor_command(configured: str = "") -> list[str]:
    """Return the editor argv prefix: config, then $VISUAL/$EDITOR, then nvim."""
    for candidate in (configured, os.environ.get("VISUAL", ""), os.environ.get("EDITOR", "")):
        candidate = (candidate or "").strip()
        if candidate:
            cmd = shlex.split(candidate)
            if cmd:
                return cmd
    return [DEFAULT_EDITOR]


def suspend_curses() -> None:
    curses.def_prog_mode()
    curses.endwin()


def resume_curses(stdscr=None) -> None:
    try:
        curses.reset_prog_mode()
        if stdscr is not None:
            stdscr.refresh()
    except curses.error:
        pass


class EditorLauncher:
    """Runs ``<editor> <path>`` synchronously between suspend/resume hooks."""

    def __init__(
        self,
        command: list[str],
        suspend: Callable[[], None] = suspend_curses,
        resume: Callable[[], None] = resume_curses,
        runner: Callable[..., object] = subprocess.run,
    ):
        self.command = list(command)
        self._suspend = suspend
        self._resume = resume
        self._runner = runner

    def open(self, path: str) -> str | None:
        argv = [*self.command, os.path.abspath(path)]
        LOGGER.debug("launching editor: %s", argv)
        self._suspend()
        try:
            self._runner(argv, check=False)
        except OSError as exc:
            LOGGER.warning("editor launch failed: %s", exc)
            return f"Failed to launch editor: {exc}"
        finally:
            self._resume()
        return None
