from .core import Entry, entry_sort_key
from .dispatcher import ActionDispatcher
from .lister import EntryLister, read_entries
from .marks import MarkSet
from .navigation import NavigationState
from .operations import FileOpsEngine
from .preview import preview
from .session import SessionContext
from .view import ViewModel, build_view_model

__all__ = [
    'ActionDispatcher', 'Entry', 'EntryLister', 'FileOpsEngine', 'MarkSet',
    'NavigationState', 'SessionContext', 'ViewModel', 'build_view_model',
    'entry_sort_key', 'preview', 'read_entries',
]
