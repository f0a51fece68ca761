"""
Main twinpane application class.
"""
import logging

from ..browser.dispatcher import ActionDispatcher
from ..browser.lister import EntryLister
from .actions import Mode
from .bootstrap import configure_terminal
from .editor import EditorLauncher, resolve_editor_command, resume_curses, suspend_curses
from .event_loop import run_app_loop
from .key_router import KeyMap

LOGGER = logging.getLogger(__name__)


class TwinpaneApp:
    """Wires the dispatcher to curses, the editor and the main loop."""

    def __init__(self, stdscr, config, start_path, editor=None):
        self.stdscr = stdscr
        self.config = config
        self.dispatcher = ActionDispatcher(
            start_path,
            lister=EntryLister(show_hidden=config.show_hidden),
            keymap=KeyMap(config.keys),
        )
        if editor is None:
            editor = EditorLauncher(
                resolve_editor_command(config.editor),
                suspend=suspend_curses,
                resume=lambda: resume_curses(self.stdscr),
            )
        self.editor = editor

    @property
    def running(self):
        return self.dispatcher.session.running

    def start(self):
        """List the start directory; DirectoryError here aborts startup."""
        self.dispatcher.start()

    def handle_key(self, key):
        result = self.dispatcher.handle_key(key)
        session = self.dispatcher.session
        if session.mode is Mode.EDITING_EXTERNALLY:
            error = self.editor.open(session.pending_editor_path)
            result = self.dispatcher.finish_external_edit(error)
        return result

    def run(self):
        configure_terminal(self.stdscr)
        self.start()
        LOGGER.debug('entering main loop')
        run_app_loop(self)
