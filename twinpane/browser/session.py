"""
The single owned unit of browser state.
"""
import os
from dataclasses import dataclass, field
from typing import List, Optional

from ..core.actions import Mode
from .core import Entry
from .filtering import FilterSession, PromptSession
from .marks import MarkSet
from .navigation import NavigationState


@dataclass
class ConfirmQueue:
    """Paths awaiting a y/n answer, one prompt at a time."""

    paths: List[str]
    batch: bool = False
    approved: List[str] = field(default_factory=list)
    deleted: int = 0
    failed: int = 0
    total: int = 0

    def __post_init__(self):
        self.total = len(self.paths)

    @property
    def current(self):
        return self.paths[0] if self.paths else None


@dataclass
class SessionContext:
    """Everything one running browser knows; mutated only by the dispatcher."""

    navigation: NavigationState
    listing: List[Entry] = field(default_factory=list)
    marks: MarkSet = field(default_factory=MarkSet)
    filter_query: str = ''
    mode: Mode = Mode.BROWSING
    filter_session: Optional[FilterSession] = None
    prompt: Optional[PromptSession] = None
    confirm: Optional[ConfirmQueue] = None
    pending_editor_path: Optional[str] = None
    status_text: str = ''
    status_is_error: bool = False
    running: bool = True

    @property
    def current_path(self):
        return self.navigation.current_path

    def selected_entry(self):
        index = self.navigation.selected_index
        if 0 <= index < len(self.listing):
            return self.listing[index]
        return None

    def full_path(self, entry):
        return os.path.join(self.navigation.current_path, entry.name)

    def selected_path(self):
        entry = self.selected_entry()
        return self.full_path(entry) if entry is not None else None
