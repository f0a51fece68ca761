"""
Marked entries queued for batch deletion.
"""
import os


class MarkSet:
    """Set of marked entries, keyed by absolute path."""

    def __init__(self):
        self._paths = set()

    def __contains__(self, path):
        return os.path.abspath(path) in self._paths

    def __len__(self):
        return len(self._paths)

    def __iter__(self):
        return iter(sorted(self._paths))

    def __bool__(self):
        return bool(self._paths)

    def toggle(self, path):
        """Mark ``path`` if unmarked, else unmark it. Returns the new state."""
        key = os.path.abspath(path)
        if key in self._paths:
            self._paths.remove(key)
            return False
        self._paths.add(key)
        return True

    def discard(self, path):
        self._paths.discard(os.path.abspath(path))

    def clear(self):
        self._paths.clear()

    def snapshot(self):
        return frozenset(self._paths)

    def roots(self):
        """Sorted marked paths, leaving out those inside a marked directory."""
        return [path for path in sorted(self._paths) if not self._has_marked_ancestor(path)]

    def _has_marked_ancestor(self, path):
        parent = os.path.dirname(path)
        while parent != path:
            if parent in self._paths:
                return True
            path, parent = parent, os.path.dirname(parent)
        return False
