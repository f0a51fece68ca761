"""Keyboard routing: raw key codes to logical browser actions."""

import curses
import logging

from .actions import Action

LOGGER = logging.getLogger(__name__)

DEFAULT_BINDINGS = {
    Action.MOVE_UP: ("KEY_UP", "k"),
    Action.MOVE_DOWN: ("KEY_DOWN", "j"),
    Action.ENTER: ("KEY_RIGHT", "l", "enter", "KEY_ENTER"),
    Action.LEAVE: ("KEY_LEFT", "h", "backspace", "KEY_BACKSPACE"),
    Action.JUMP_TOP: ("gg", "KEY_HOME"),
    Action.JUMP_BOTTOM: ("G", "KEY_END"),
    Action.TOGGLE_MARK: ("space",),
    Action.BATCH_DELETE: ("D",),
    Action.DELETE: ("d", "KEY_DC"),
    Action.RENAME: ("r", "KEY_F2"),
    Action.NEW_FILE: ("n",),
    Action.NEW_DIRECTORY: ("N",),
    Action.START_FILTER: ("/",),
    Action.CLEAR_FILTER: ("c",),
    Action.COPY_PATH: ("y",),
    Action.QUIT: ("q",),
}

NAMED_KEYS = {
    "space": 32,
    "enter": 10,
    "return": 10,
    "tab": 9,
    "backspace": 127,
    "esc": 27,
    "escape": 27,
}


def parse_key_spec(spec):
    """Turn a binding like ``"j"``, ``"KEY_UP"``, ``"space"`` or ``"gg"`` into key codes."""
    if not spec:
        return None
    lowered = spec.lower()
    if lowered in NAMED_KEYS:
        return (NAMED_KEYS[lowered],)
    if spec.upper().startswith("KEY_"):
        code = getattr(curses, spec.upper(), None)
        return (code,) if isinstance(code, int) else None
    return tuple(ord(ch) for ch in spec)


class KeyMap:
    """Resolves key codes to actions, including multi-key sequences like ``gg``.

    A key that starts a sequence is held as pending; the next key either
    completes the sequence or cancels it.
    """

    def __init__(self, overrides=None):
        bindings = dict(DEFAULT_BINDINGS)
        bindings.update(overrides or {})
        self._single = {}
        self._sequences = {}
        for action, specs in bindings.items():
            for spec in specs:
                codes = parse_key_spec(spec)
                if not codes:
                    LOGGER.warning("unknown key %r for %s", spec, action.value)
                    continue
                if len(codes) == 1:
                    self._single[codes[0]] = action
                else:
                    self._sequences[codes] = action
        self._prefixes = {
            seq[:i] for seq in self._sequences for i in range(1, len(seq))
        }
        self._pending = ()

    @property
    def pending(self):
        return self._pending

    def resolve(self, key_code):
        if key_code is None:
            return None
        candidate = self._pending + (key_code,)
        if candidate in self._sequences:
            self._pending = ()
            return self._sequences[candidate]
        if candidate in self._prefixes:
            self._pending = candidate
            return None
        if self._pending:
            self._pending = ()
            return None
        return self._single.get(key_code)

