"""
Typed errors raised by the lister and file operations.

Every error carries a short, human-readable ``message`` suitable for the
status line. The dispatcher catches them; they never end the session.
"""
import errno
from enum import Enum


class TwinpaneError(Exception):
    """Base class for recoverable browser errors."""

    def __init__(self, message, path=None):
        super().__init__(message)
        self.message = message
        self.path = path


class DirectoryErrorKind(str, Enum):
    PERMISSION_DENIED = "permission_denied"
    NOT_FOUND = "not_found"
    NOT_A_DIRECTORY = "not_a_directory"
    OTHER = "other"


_KIND_MESSAGES = {
    DirectoryErrorKind.PERMISSION_DENIED: "Permission denied",
    DirectoryErrorKind.NOT_FOUND: "No such directory",
    DirectoryErrorKind.NOT_A_DIRECTORY: "Not a directory",
}


class DirectoryError(TwinpaneError):
    """A directory could not be read."""

    def __init__(self, kind, path, detail=None):
        label = _KIND_MESSAGES.get(kind) or detail or "Cannot read directory"
        super().__init__(f"Error reading directory: {label}: {path}", path)
        self.kind = kind

    @classmethod
    def from_os_error(cls, exc, path):
        """Classify an ``OSError`` raised while reading ``path``."""
        if isinstance(exc, PermissionError):
            kind = DirectoryErrorKind.PERMISSION_DENIED
        elif isinstance(exc, FileNotFoundError):
            kind = DirectoryErrorKind.NOT_FOUND
        elif isinstance(exc, NotADirectoryError) or exc.errno == errno.ENOTDIR:
            kind = DirectoryErrorKind.NOT_A_DIRECTORY
        else:
            kind = DirectoryErrorKind.OTHER
        return cls(kind, path, detail=exc.strerror)


class FileOpError(TwinpaneError):
    """Base class for create/rename/delete failures."""


class AlreadyExists(FileOpError):
    def __init__(self, path):
        super().__init__("Error: Already exists!", path)


class EmptyName(FileOpError):
    def __init__(self):
        super().__init__("Error: Name cannot be empty!")


class CreateError(FileOpError):
    def __init__(self, path, detail):
        super().__init__(f"Error creating {path}: {detail}", path)


class RenameError(FileOpError):
    def __init__(self, path, detail):
        super().__init__(f"Error renaming {path}: {detail}", path)


class DeleteError(FileOpError):
    def __init__(self, path, detail):
        super().__init__(f"Error deleting {path}: {detail}", path)
