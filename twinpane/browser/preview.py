"""
Preview generation for the right-hand pane.
"""
import itertools
import logging
import os
import stat
from datetime import datetime

from ..core.errors import DirectoryError
from .core import format_size
from .lister import read_entries

LOGGER = logging.getLogger(__name__)

EMPTY_DIRECTORY = '[Empty Directory]'
CANNOT_OPEN = '[Error: Cannot open file]'
PERMISSION_DENIED = '[Error: Permission Denied]'

BINARY_SNIFF_BYTES = 8 * 1024
# Per-redraw read caps: longer lines are cut, and reading stops once the
# budget is spent.
MAX_LINE_BYTES = 4 * 1024
PREVIEW_READ_BYTES = 64 * 1024


def _directory_lines(path, show_hidden):
    try:
        entries = read_entries(path, show_hidden=show_hidden)
    except DirectoryError:
        yield PERMISSION_DENIED
        return
    if not entries:
        yield EMPTY_DIRECTORY
        return
    for entry in entries:
        yield entry.name


def _skip_rest_of_line(stream, budget):
    """Consume the remainder of an over-long line; return the bytes read."""
    consumed = 0
    while consumed < budget:
        chunk = stream.readline(min(MAX_LINE_BYTES, budget - consumed))
        consumed += len(chunk)
        if not chunk or chunk.endswith(b'\n'):
            break
    return consumed


def _file_lines(path):
    # Regular files only: opening a FIFO blocks until a writer appears.
    try:
        if not stat.S_ISREG(os.stat(path).st_mode):
            yield CANNOT_OPEN
            return
        stream = open(path, 'rb')
    except OSError:
        yield CANNOT_OPEN
        return
    with stream:
        try:
            head = stream.read(BINARY_SNIFF_BYTES)
        except OSError:
            yield CANNOT_OPEN
            return
        if b'\x00' in head:
            yield CANNOT_OPEN
            return
        stream.seek(0)
        budget = PREVIEW_READ_BYTES
        try:
            while budget > 0:
                limit = min(MAX_LINE_BYTES, budget)
                raw = stream.readline(limit)
                if not raw:
                    break
                budget -= len(raw)
                if len(raw) == limit and not raw.endswith(b'\n'):
                    budget -= _skip_rest_of_line(stream, budget)
                text = raw.decode('utf-8', errors='replace')
                yield text.rstrip('\r\n').replace('\t', '    ')
        except OSError:
            LOGGER.debug('preview read failed for %s', path, exc_info=True)


def preview(path, max_lines, show_hidden=True):
    """Lazily yield at most ``max_lines`` preview lines for ``path``."""
    if max_lines <= 0:
        return iter(())
    if os.path.isdir(path):
        lines = _directory_lines(path, show_hidden)
    else:
        lines = _file_lines(path)
    return itertools.islice(lines, max_lines)


def entry_info(path):
    """Return a one-line permissions/size/mtime summary for ``path``."""
    try:
        st = os.lstat(path)
    except OSError:
        return ''
    mode = stat.filemode(st.st_mode)
    size = '-' if stat.S_ISDIR(st.st_mode) else format_size(st.st_size)
    mtime = datetime.fromtimestamp(st.st_mtime).strftime('%Y-%m-%d %H:%M')
    return f'{mode}  {size:>7}  {mtime}'
