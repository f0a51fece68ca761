"""
Directory listing with substring filtering and a stat-validated cache.
"""
import logging
import os
from collections import OrderedDict

from ..core.errors import DirectoryError
from .core import Entry, entry_sort_key

LOGGER = logging.getLogger(__name__)

# Live filtering adds one listing per typed prefix; keep only the most recent.
CACHE_ENTRIES = 16


def _scan_entry(dir_entry):
    try:
        is_dir = dir_entry.is_dir()
    except OSError:
        is_dir = False
    is_exec = False
    if not is_dir:
        try:
            is_exec = dir_entry.is_file() and os.access(dir_entry.path, os.X_OK)
        except OSError:
            is_exec = False
    return Entry(dir_entry.name, is_dir, is_exec)


def read_entries(path, filter_query='', show_hidden=True):
    """Return sorted entries of ``path``; raise DirectoryError on failure."""
    entries = []
    try:
        with os.scandir(path) as it:
            for dir_entry in it:
                name = dir_entry.name
                if filter_query and filter_query not in name:
                    continue
                if not show_hidden and name.startswith('.'):
                    continue
                entries.append(_scan_entry(dir_entry))
    except OSError as exc:
        raise DirectoryError.from_os_error(exc, path) from exc
    entries.sort(key=entry_sort_key)
    return entries


class EntryLister:
    """Lists directories, reusing results while a directory is unchanged."""

    def __init__(self, show_hidden=True, max_entries=CACHE_ENTRIES):
        self.show_hidden = bool(show_hidden)
        self.max_entries = max(1, int(max_entries))
        self._cache = OrderedDict()

    @staticmethod
    def _stat_key(path):
        try:
            st = os.stat(path)
        except OSError:
            return None
        return getattr(st, 'st_mtime_ns', int(st.st_mtime * 1_000_000_000))

    def list(self, path, filter_query=''):
        key = (path, filter_query, self.show_hidden)
        stamp = self._stat_key(path)
        cached = self._cache.get(key)
        if cached is not None and stamp is not None and cached[0] == stamp:
            self._cache.move_to_end(key)
            return list(cached[1])

        entries = read_entries(path, filter_query, show_hidden=self.show_hidden)
        LOGGER.debug('listed %s (filter=%r): %d entries', path, filter_query, len(entries))
        if stamp is not None:
            self._cache[key] = (stamp, tuple(entries))
            self._cache.move_to_end(key)
            while len(self._cache) > self.max_entries:
                self._cache.popitem(last=False)
        return entries

    def invalidate(self, path=None):
        """Drop cached listings for ``path``, or everything when None."""
        if path is None:
            self._cache.clear()
            return
        for key in [k for k in self._cache if k[0] == path]:
            del self._cache[key]
