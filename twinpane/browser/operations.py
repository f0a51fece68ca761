"""
File system operations for the browser.
"""
import logging
import os
import shutil

from ..core.errors import AlreadyExists, CreateError, DeleteError, EmptyName, FileOpError, RenameError

LOGGER = logging.getLogger(__name__)


def _target_path(base_path, name):
    if not name or not name.strip():
        raise EmptyName()
    path = os.path.join(base_path, name)
    if os.path.lexists(path):
        raise AlreadyExists(path)
    return path


class FileOpsEngine:
    """Create, rename and delete entries, invalidating cached listings."""

    def __init__(self, lister=None):
        self._lister = lister

    def _invalidate(self, directory):
        if self._lister is not None:
            self._lister.invalidate(directory)

    def create_file(self, base_path, name):
        """Create a new empty file and return its path."""
        path = _target_path(base_path, name)
        try:
            # 'x' refuses to clobber a file created since the existence check.
            with open(path, 'x', encoding='utf-8'):
                pass
        except FileExistsError as exc:
            raise AlreadyExists(path) from exc
        except OSError as exc:
            raise CreateError(path, exc.strerror or str(exc)) from exc
        LOGGER.debug('created file %s', path)
        self._invalidate(base_path)
        return path

    def create_directory(self, base_path, name):
        """Create a new directory and return its path."""
        path = _target_path(base_path, name)
        try:
            os.mkdir(path)
        except FileExistsError as exc:
            raise AlreadyExists(path) from exc
        except OSError as exc:
            raise CreateError(path, exc.strerror or str(exc)) from exc
        LOGGER.debug('created directory %s', path)
        self._invalidate(base_path)
        return path

    def rename(self, old_path, new_name):
        """Rename ``old_path`` within its directory and return the new path."""
        base_path = os.path.dirname(old_path)
        new_path = _target_path(base_path, new_name)
        try:
            os.rename(old_path, new_path)
        except OSError as exc:
            raise RenameError(old_path, exc.strerror or str(exc)) from exc
        LOGGER.debug('renamed %s -> %s', old_path, new_path)
        self._invalidate(base_path)
        return new_path

    def delete(self, path):
        """Remove a file, symlink or directory tree."""
        try:
            if os.path.isdir(path) and not os.path.islink(path):
                shutil.rmtree(path)
            else:
                os.remove(path)
        except OSError as exc:
            raise DeleteError(path, exc.strerror or str(exc)) from exc
        LOGGER.debug('deleted %s', path)
        self._invalidate(os.path.dirname(path))
        return True

    def delete_many(self, paths):
        """Delete every path, best-effort. Returns ``[(path, error_or_None)]``."""
        results = []
        for path in paths:
            try:
                self.delete(path)
            except FileOpError as exc:
                LOGGER.warning('batch delete failed for %s: %s', path, exc.message)
                results.append((path, exc))
            else:
                results.append((path, None))
        return results
