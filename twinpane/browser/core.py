"""
Core data structures and helpers for the browser pane.
"""
import unicodedata
from dataclasses import dataclass


def _cell_width(ch):
    """Return terminal cell width for a single character."""
    if not ch:
        return 0
    if unicodedata.combining(ch):
        return 0
    if unicodedata.east_asian_width(ch) in ('W', 'F'):
        return 2
    return 1


def _fit_text_to_cells(text, max_cells):
    """Clip/pad text so rendered width does not exceed max_cells."""
    if max_cells <= 0:
        return ''
    out = []
    used = 0
    for ch in text:
        w = _cell_width(ch)
        if used + w > max_cells:
            break
        out.append(ch)
        used += w
    if used < max_cells:
        out.append(' ' * (max_cells - used))
    return ''.join(out)


def format_size(size):
    if size > 1048576:
        return f'{size / 1048576:.1f}M'
    elif size > 1024:
        return f'{size / 1024:.1f}K'
    else:
        return f'{size}B'


@dataclass(frozen=True)
class Entry:
    """One child of a listed directory."""

    name: str
    is_dir: bool
    is_executable: bool = False

    @property
    def is_hidden(self):
        return self.name.startswith('.')


def entry_sort_key(entry):
    """Directories first, hidden before visible, then by name."""
    return (not entry.is_dir, not entry.is_hidden, entry.name)
