"""
Selection and scroll state for the listing pane.
"""
import os
from dataclasses import dataclass


@dataclass
class NavigationState:
    """Current path plus selection/scroll over a listing of ``count`` rows.

    Every mutator keeps ``0 <= selected_index < max(1, count)`` and
    ``scroll_offset <= selected_index < scroll_offset + viewport_height``.
    """

    current_path: str
    selected_index: int = 0
    scroll_offset: int = 0
    viewport_height: int = 1

    def move_up(self):
        if self.selected_index > 0:
            self.selected_index -= 1
            if self.selected_index < self.scroll_offset:
                self.scroll_offset = self.selected_index

    def move_down(self, count):
        if self.selected_index < count - 1:
            self.selected_index += 1
            if self.selected_index >= self.scroll_offset + self.viewport_height:
                self.scroll_offset += 1

    def jump_top(self):
        self.selected_index = 0
        self.scroll_offset = 0

    def jump_bottom(self, count):
        self.selected_index = max(0, count - 1)
        self.scroll_offset = max(0, self.selected_index - self.viewport_height + 1)

    def reset(self):
        self.selected_index = 0
        self.scroll_offset = 0

    def parent_path(self):
        """Return the parent directory, or None at the filesystem root."""
        parent = os.path.dirname(self.current_path.rstrip(os.sep)) or os.sep
        if parent == self.current_path:
            return None
        return parent

    def resize(self, viewport_height, count):
        self.viewport_height = max(1, int(viewport_height))
        self.clamp(count)

    def clamp(self, count):
        """Clamp the selection into the listing and make it visible."""
        if self.selected_index >= count:
            self.selected_index = count - 1
        if self.selected_index < 0:
            self.selected_index = 0
        self._ensure_visible()

    def _ensure_visible(self):
        if self.selected_index < self.scroll_offset:
            self.scroll_offset = self.selected_index
        elif self.selected_index >= self.scroll_offset + self.viewport_height:
            self.scroll_offset = self.selected_index - self.viewport_height + 1
        if self.scroll_offset < 0:
            self.scroll_offset = 0
