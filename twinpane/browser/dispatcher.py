"""
Top-level state machine for the browser session.

``ActionDispatcher`` owns the ``SessionContext``. Raw keys enter through
``handle_key``, which routes them to the active modal sub-state (filter,
name prompt, delete confirmation) or, while browsing, resolves them to a
logical ``Action`` and calls ``dispatch``. Every transition ends with the
same clamp pass so the selection/scroll invariants hold afterwards.
"""
import logging
import os

from ..core.actions import Action, ActionResult, ActionType, Mode
from ..core.errors import DirectoryError, FileOpError
from ..utils import normalize_key_code
from .filtering import EditOutcome, FilterSession, PromptKind, PromptSession
from .lister import EntryLister
from .navigation import NavigationState
from .operations import FileOpsEngine
from .session import ConfirmQueue, SessionContext

LOGGER = logging.getLogger(__name__)

CONFIRM_YES = (ord('y'), ord('Y'))


class ActionDispatcher:
    """Applies actions and keystrokes to one owned session context."""

    def __init__(self, start_path, *, lister=None, fileops=None, keymap=None,
                 clipboard=None, viewport_height=1):
        self.lister = lister if lister is not None else EntryLister()
        self.fileops = fileops if fileops is not None else FileOpsEngine(self.lister)
        if keymap is None:
            from ..core.key_router import KeyMap
            keymap = KeyMap()
        self.keymap = keymap
        if clipboard is None:
            from ..core.clipboard import copy_path
            clipboard = copy_path
        self.clipboard = clipboard
        navigation = NavigationState(
            current_path=os.path.abspath(start_path),
            viewport_height=max(1, int(viewport_height)),
        )
        self.session = SessionContext(navigation=navigation)
        self._handlers = {
            Action.MOVE_UP: self._move_up,
            Action.MOVE_DOWN: self._move_down,
            Action.JUMP_TOP: self._jump_top,
            Action.JUMP_BOTTOM: self._jump_bottom,
            Action.ENTER: self._enter,
            Action.LEAVE: self._leave,
            Action.TOGGLE_MARK: self._toggle_mark,
            Action.BATCH_DELETE: self._batch_delete,
            Action.DELETE: self._delete,
            Action.RENAME: self._rename,
            Action.NEW_FILE: self._new_file,
            Action.NEW_DIRECTORY: self._new_directory,
            Action.START_FILTER: self._start_filter,
            Action.CLEAR_FILTER: self._clear_filter,
            Action.COPY_PATH: self._copy_path,
            Action.QUIT: self._quit,
        }

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def start(self):
        """List the starting directory. DirectoryError propagates: it is fatal here."""
        session = self.session
        session.listing = self.lister.list(session.current_path, session.filter_query)
        session.navigation.clamp(len(session.listing))
        LOGGER.debug('session started at %s', session.current_path)

    def resize(self, viewport_height):
        self.session.navigation.resize(viewport_height, len(self.session.listing))

    def finish_external_edit(self, error=None):
        """Leave EDITING_EXTERNALLY and resume browsing."""
        session = self.session
        if session.mode is not Mode.EDITING_EXTERNALLY:
            return None
        session.mode = Mode.BROWSING
        session.pending_editor_path = None
        result = self._refresh()
        if error:
            result = self._error(error)
        self._post_transition()
        return result

    # ------------------------------------------------------------------
    # Input routing
    # ------------------------------------------------------------------

    def handle_key(self, key):
        """Route one raw key according to the current mode."""
        key_code = normalize_key_code(key)
        mode = self.session.mode
        if key_code is None or mode is Mode.EDITING_EXTERNALLY:
            return None
        if mode is Mode.FILTERING:
            result = self._filter_key(key)
        elif mode is Mode.PROMPTING:
            result = self._prompt_key(key)
        elif mode is Mode.CONFIRMING:
            result = self._confirm_key(key_code)
        else:
            action = self.keymap.resolve(key_code)
            if action is None:
                return None
            return self.dispatch(action)
        self._post_transition()
        return result

    def dispatch(self, action):
        """Apply one logical action while browsing."""
        session = self.session
        if session.mode is not Mode.BROWSING:
            LOGGER.debug('ignoring %s in mode %s', action, session.mode)
            return None
        handler = self._handlers[Action(action)]
        session.status_text = ''
        session.status_is_error = False
        result = handler()
        self._post_transition()
        return result

    def _post_transition(self):
        self.session.navigation.clamp(len(self.session.listing))

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _error(self, message):
        LOGGER.debug('status error: %s', message)
        self.session.status_text = message
        self.session.status_is_error = True
        return ActionResult(ActionType.ERROR, message)

    def _status(self, message):
        self.session.status_text = message
        self.session.status_is_error = False
        return ActionResult(ActionType.STATUS, message)

    def _refresh(self):
        """Relist the current directory under the current filter."""
        session = self.session
        try:
            session.listing = self.lister.list(session.current_path, session.filter_query)
        except DirectoryError as exc:
            return self._error(exc.message)
        return ActionResult(ActionType.REFRESH)

    def _select_name(self, name):
        for index, entry in enumerate(self.session.listing):
            if entry.name == name:
                self.session.navigation.selected_index = index
                return True
        return False

    def _change_directory(self, path):
        session = self.session
        try:
            listing = self.lister.list(path, '')
        except DirectoryError as exc:
            return self._error(exc.message)
        session.navigation.current_path = path
        session.navigation.reset()
        session.listing = listing
        session.filter_query = ''
        LOGGER.debug('changed directory to %s', path)
        return ActionResult(ActionType.REFRESH)

    # ------------------------------------------------------------------
    # Browsing actions
    # ------------------------------------------------------------------

    def _move_up(self):
        self.session.navigation.move_up()
        return ActionResult(ActionType.REFRESH)

    def _move_down(self):
        self.session.navigation.move_down(len(self.session.listing))
        return ActionResult(ActionType.REFRESH)

    def _jump_top(self):
        self.session.navigation.jump_top()
        return ActionResult(ActionType.REFRESH)

    def _jump_bottom(self):
        self.session.navigation.jump_bottom(len(self.session.listing))
        return ActionResult(ActionType.REFRESH)

    def _enter(self):
        session = self.session
        entry = session.selected_entry()
        if entry is None:
            return None
        path = session.full_path(entry)
        if entry.is_dir:
            return self._change_directory(path)
        session.mode = Mode.EDITING_EXTERNALLY
        session.pending_editor_path = path
        return ActionResult(ActionType.OPEN_FILE, path)

    def _leave(self):
        parent = self.session.navigation.parent_path()
        if parent is None:
            return None
        return self._change_directory(parent)

    def _toggle_mark(self):
        path = self.session.selected_path()
        if path is None:
            return None
        self.session.marks.toggle(path)
        return ActionResult(ActionType.REFRESH)

    def _batch_delete(self):
        session = self.session
        if not session.marks:
            return self._status('No marked entries.')
        session.confirm = ConfirmQueue(session.marks.roots(), batch=True)
        session.mode = Mode.CONFIRMING
        return ActionResult(ActionType.REFRESH)

    def _delete(self):
        session = self.session
        path = session.selected_path()
        if path is None:
            return None
        session.confirm = ConfirmQueue([path])
        session.mode = Mode.CONFIRMING
        return ActionResult(ActionType.REFRESH)

    def _open_prompt(self, kind, label, target=None):
        self.session.prompt = PromptSession(kind=kind, label=label, target=target)
        self.session.mode = Mode.PROMPTING
        return ActionResult(ActionType.REFRESH)

    def _rename(self):
        session = self.session
        entry = session.selected_entry()
        if entry is None:
            return None
        return self._open_prompt(
            PromptKind.RENAME, f"Rename '{entry.name}' to: ", target=session.full_path(entry)
        )

    def _new_file(self):
        return self._open_prompt(PromptKind.NEW_FILE, 'New file: ')

    def _new_directory(self):
        return self._open_prompt(PromptKind.NEW_DIRECTORY, 'New directory: ')

    def _start_filter(self):
        session = self.session
        session.filter_session = FilterSession(
            prior_query=session.filter_query,
            prior_listing=list(session.listing),
            prior_selected=session.navigation.selected_index,
            prior_scroll=session.navigation.scroll_offset,
        )
        session.mode = Mode.FILTERING
        return ActionResult(ActionType.REFRESH)

    def _clear_filter(self):
        session = self.session
        if not session.filter_query:
            return None
        previous = session.filter_query
        session.filter_query = ''
        result = self._refresh()
        if result.type is ActionType.ERROR:
            session.filter_query = previous
            return result
        session.navigation.reset()
        return self._status('Filter cleared.')

    def _copy_path(self):
        path = self.session.selected_path()
        if path is None:
            return None
        error = self.clipboard(path)
        if error:
            return self._error(error)
        return self._status(f'Copied: {path}')

    def _quit(self):
        self.session.running = False
        return ActionResult(ActionType.QUIT)

    # ------------------------------------------------------------------
    # Modal sub-states
    # ------------------------------------------------------------------

    def _filter_key(self, key):
        session = self.session
        filter_session = session.filter_session
        outcome = filter_session.feed(key)

        if outcome is EditOutcome.CANCELLED:
            session.listing = list(filter_session.prior_listing)
            session.filter_query = filter_session.prior_query
            session.navigation.selected_index = filter_session.prior_selected
            session.navigation.scroll_offset = filter_session.prior_scroll
            session.filter_session = None
            session.mode = Mode.BROWSING
            return ActionResult(ActionType.REFRESH)

        if outcome is EditOutcome.COMMITTED:
            session.filter_session = None
            session.mode = Mode.BROWSING
            session.filter_query = filter_session.query
            session.navigation.reset()
            return self._refresh()

        if outcome is EditOutcome.UPDATED:
            try:
                session.listing = self.lister.list(session.current_path, filter_session.query)
            except DirectoryError as exc:
                return self._error(exc.message)
            return ActionResult(ActionType.REFRESH)
        return None

    def _prompt_key(self, key):
        session = self.session
        prompt = session.prompt
        outcome = prompt.feed(key)
        if outcome is EditOutcome.CANCELLED:
            session.prompt = None
            session.mode = Mode.BROWSING
            return self._status('Cancelled.')
        if outcome is not EditOutcome.COMMITTED:
            return None

        session.prompt = None
        session.mode = Mode.BROWSING
        try:
            if prompt.kind is PromptKind.RENAME:
                self.fileops.rename(prompt.target, prompt.text)
            elif prompt.kind is PromptKind.NEW_DIRECTORY:
                self.fileops.create_directory(session.current_path, prompt.text)
            else:
                self.fileops.create_file(session.current_path, prompt.text)
        except FileOpError as exc:
            return self._error(exc.message)

        if prompt.kind is PromptKind.RENAME:
            session.marks.discard(prompt.target)
        refreshed = self._refresh()
        if refreshed.type is ActionType.ERROR:
            return refreshed
        if prompt.kind is PromptKind.RENAME:
            session.navigation.reset()
            return self._status('Renamed successfully!')
        self._select_name(prompt.text)
        if prompt.kind is PromptKind.NEW_DIRECTORY:
            return self._status('Directory created!')
        return self._status('File created!')

    def _confirm_key(self, key_code):
        session = self.session
        queue = session.confirm
        path = queue.paths.pop(0)
        confirmed = key_code in CONFIRM_YES
        if queue.batch:
            if confirmed:
                queue.approved.append(path)
            if queue.paths:
                return ActionResult(ActionType.REFRESH)
            return self._finish_batch(queue)

        session.confirm = None
        session.mode = Mode.BROWSING
        if not confirmed:
            return self._status('Cancelled.')
        try:
            self.fileops.delete(path)
        except FileOpError as exc:
            self._refresh()
            return self._error(exc.message)
        session.marks.discard(path)
        refreshed = self._refresh()
        if refreshed.type is ActionType.ERROR:
            return refreshed
        return self._status('Deleted successfully!')

    def _finish_batch(self, queue):
        """Delete every approved path best-effort, then drop all marks."""
        session = self.session
        session.confirm = None
        session.mode = Mode.BROWSING
        results = self.fileops.delete_many(queue.approved)
        queue.deleted = sum(1 for _, error in results if error is None)
        queue.failed = len(results) - queue.deleted
        session.marks.clear()
        refreshed = self._refresh()
        if refreshed.type is ActionType.ERROR:
            return refreshed
        if queue.failed:
            return self._error(
                f'Deleted {queue.deleted} of {queue.total} marked; {queue.failed} failed.'
            )
        return self._status(f'Deleted {queue.deleted} of {queue.total} marked.')
