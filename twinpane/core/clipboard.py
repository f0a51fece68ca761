"""
System clipboard access for copying entry paths.
"""
from __future__ import annotations

import logging

import pyperclip

LOGGER = logging.getLogger(__name__)


def copy_path(path: str) -> str | None:
    """Copy ``path`` to the system clipboard; return an error message on failure."""
    try:
        pyperclip.copy(path)
    except pyperclip.PyperclipException as exc:
        LOGGER.warning("clipboard copy failed: %s", exc)
        return "Clipboard Error: Unable to copy the path."
    return None
