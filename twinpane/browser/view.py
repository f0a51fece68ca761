"""
Render-ready snapshot of the session, rebuilt after every transition.
"""
import os
from dataclasses import dataclass
from typing import List

from ..core.actions import Mode
from .preview import entry_info, preview


@dataclass(frozen=True)
class Row:
    name: str
    is_dir: bool
    is_marked: bool
    is_selected: bool
    is_executable: bool = False


@dataclass(frozen=True)
class ViewModel:
    path_text: str
    rows: List[Row]
    scroll_offset: int
    preview_lines: List[str]
    status_text: str
    prompt_text: str
    info_text: str
    mode: Mode
    mark_count: int = 0
    status_is_error: bool = False


def _display_path(path, current_path):
    """Path relative to the current directory, or absolute when it lies elsewhere."""
    relative = os.path.relpath(path, current_path)
    if relative == os.pardir or relative.startswith(os.pardir + os.sep):
        return path
    return relative


def _prompt_text(session):
    if session.mode is Mode.FILTERING and session.filter_session is not None:
        return f'Filter: {session.filter_session.query}'
    if session.mode is Mode.PROMPTING and session.prompt is not None:
        return f'{session.prompt.label}{session.prompt.text}'
    if session.mode is Mode.CONFIRMING and session.confirm is not None:
        name = _display_path(session.confirm.current, session.current_path)
        return f"Delete '{name}'? (y/n): "
    return ''


def build_view_model(session, preview_height, show_hidden=True):
    """Snapshot ``session`` for the renderer, previewing the selection."""
    nav = session.navigation
    rows = []
    for index, entry in enumerate(session.listing):
        rows.append(Row(
            name=entry.name,
            is_dir=entry.is_dir,
            is_marked=session.full_path(entry) in session.marks,
            is_selected=index == nav.selected_index,
            is_executable=entry.is_executable,
        ))

    target = session.selected_path() or session.current_path
    path_text = session.current_path
    if session.filter_query:
        path_text = f'{path_text}  [filter: {session.filter_query}]'

    return ViewModel(
        path_text=path_text,
        rows=rows,
        scroll_offset=nav.scroll_offset,
        preview_lines=list(preview(target, preview_height, show_hidden=show_hidden)),
        status_text=session.status_text,
        prompt_text=_prompt_text(session),
        info_text=entry_info(target),
        mode=session.mode,
        mark_count=len(session.marks),
        status_is_error=session.status_is_error,
    )
