"""
Modal line-editing sub-states: live filter and name prompts.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional


BACKSPACE_CODES = (8, 127, 263)
ENTER_CODES = (10, 13, 343)
ESCAPE_CODE = 27
BACKSPACE_CHARS = ("\x7f", "\b")
ENTER_CHARS = ("\n", "\r")


class EditOutcome(str, Enum):
    """What a single keystroke did to a line-editing session."""

    UPDATED = "updated"
    UNCHANGED = "unchanged"
    COMMITTED = "committed"
    CANCELLED = "cancelled"


def _classify(key):
    """Map a raw get_wch() key to (control, text). Characters arrive as str, function keys as int."""
    if isinstance(key, str):
        if len(key) != 1:
            return None, None
        if key == "\x1b":
            return "escape", None
        if key in ENTER_CHARS:
            return "enter", None
        if key in BACKSPACE_CHARS:
            return "backspace", None
        return None, key if key.isprintable() else None
    if isinstance(key, int):
        if key == ESCAPE_CODE:
            return "escape", None
        if key in ENTER_CODES:
            return "enter", None
        if key in BACKSPACE_CODES:
            return "backspace", None
        if 32 <= key < 127:
            return None, chr(key)
    return None, None


@dataclass
class LineEditor:
    """Text buffer edited one key at a time."""

    text: str = ""

    def feed(self, key):
        control, char = _classify(key)
        if control == "escape":
            return EditOutcome.CANCELLED
        if control == "enter":
            return EditOutcome.COMMITTED
        if control == "backspace":
            if not self.text:
                return EditOutcome.UNCHANGED
            self.text = self.text[:-1]
            return EditOutcome.UPDATED
        if char is not None:
            self.text += char
            return EditOutcome.UPDATED
        return EditOutcome.UNCHANGED


@dataclass
class FilterSession(LineEditor):
    """In-progress filter plus the state to restore on cancel."""

    prior_query: str = ""
    prior_listing: list = field(default_factory=list)
    prior_selected: int = 0
    prior_scroll: int = 0

    @property
    def query(self):
        return self.text


class PromptKind(str, Enum):
    RENAME = "rename"
    NEW_FILE = "new_file"
    NEW_DIRECTORY = "new_directory"


@dataclass
class PromptSession(LineEditor):
    """Name prompt used by rename and create actions."""

    kind: PromptKind = PromptKind.NEW_FILE
    label: str = ""
    target: Optional[Any] = None
