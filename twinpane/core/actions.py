"""
Typed action contract between the key router, the dispatcher and the app loop.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Any


class ActionType(str, Enum):
    """Kinds of result the dispatcher hands back to the app loop."""

    REFRESH = "refresh"
    STATUS = "status"
    ERROR = "error"
    OPEN_FILE = "open_file"
    QUIT = "quit"


class Action(str, Enum):
    """Logical browser actions produced by key decoding."""

    MOVE_UP = "move_up"
    MOVE_DOWN = "move_down"
    ENTER = "enter"
    LEAVE = "leave"
    JUMP_TOP = "jump_top"
    JUMP_BOTTOM = "jump_bottom"
    TOGGLE_MARK = "toggle_mark"
    BATCH_DELETE = "batch_delete"
    DELETE = "delete"
    RENAME = "rename"
    NEW_FILE = "new_file"
    NEW_DIRECTORY = "new_directory"
    START_FILTER = "start_filter"
    CLEAR_FILTER = "clear_filter"
    COPY_PATH = "copy_path"
    QUIT = "quit"


class Mode(str, Enum):
    """Top-level state of the session state machine."""

    BROWSING = "browsing"
    FILTERING = "filtering"
    PROMPTING = "prompting"
    CONFIRMING = "confirming"
    EDITING_EXTERNALLY = "editing_externally"


@dataclass(frozen=True)
class ActionResult:
    """Result message emitted by dispatcher handlers."""

    type: ActionType
    payload: Any = None
