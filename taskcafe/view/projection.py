"""Pure filter -> sort -> render-model projection of a :class:`ViewState`.

Nothing here performs I/O, so the whole presentation logic can be tested
without a browser or a server.
"""
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Callable, Iterable, List, Optional, Tuple

import icu

from ..config import COLLATION_LOCALE
from ..models import Task
from .state import ViewState

EMPTY_NO_TASKS = "no_tasks"
EMPTY_NO_RESULTS = "no_results"

PRIORITY_LABELS = {"high": "High", "medium": "Medium", "low": "Low"}
PRIORITY_COLORS = {"high": "accent-red", "medium": "accent-yellow", "low": "accent-green"}
TASK_ACTIONS = ("toggle", "edit", "delete")


@dataclass(frozen=True)
class RenderItem:
    id: str
    text: str
    completed: bool
    priority: str
    priority_label: str
    priority_color: str
    editing: bool = False
    actions: Tuple[str, ...] = TASK_ACTIONS


@dataclass(frozen=True)
class RenderModel:
    items: List[RenderItem] = field(default_factory=list)
    empty_state: Optional[str] = None
    total_count: int = 0
    pending_count: int = 0


def filter_tasks(tasks: Iterable[Task], status: str = "all", priority: str = "all", search: str = "") -> List[Task]:
    """Apply status, priority and search predicates, in that order."""
    result = list(tasks)

    if status == "completed":
        result = [t for t in result if t.completed]
    elif status == "pending":
        result = [t for t in result if not t.completed]

    if priority != "all":
        result = [t for t in result if t.priority.value == priority]

    needle = (search or "").lower()
    if needle:
        result = [t for t in result if needle in t.text.lower()]

    return result


@lru_cache(maxsize=None)
def _collator(locale: str) -> icu.Collator:
    return icu.Collator.createInstance(icu.Locale(locale.replace("-", "_")))


def collation_key(locale: str = COLLATION_LOCALE) -> Callable[[str], bytes]:
    """Sort key matching the browser's ``localeCompare(a, b, locale)``."""
    return _collator(locale).getSortKey


def sort_tasks(tasks: Iterable[Task], mode: str = "created", locale: str = COLLATION_LOCALE) -> List[Task]:
    """Return a sorted copy; the input order is never modified."""
    result = list(tasks)

    if mode == "priority":
        result.sort(key=lambda t: (t.priority.rank, t.created_at), reverse=True)
    elif mode == "alphabetical":
        key = collation_key(locale)
        result.sort(key=lambda t: key(t.text))
    else:
        result.sort(key=lambda t: t.created_at, reverse=True)

    return result


def _render_item(task: Task, editing_id: Optional[str]) -> RenderItem:
    priority = task.priority.value
    return RenderItem(
        id=task.id,
        text=task.text,
        completed=task.completed,
        priority=priority,
        priority_label=PRIORITY_LABELS[priority],
        priority_color=PRIORITY_COLORS[priority],
        editing=task.id == editing_id,
    )


def project(state: ViewState, locale: str = COLLATION_LOCALE) -> RenderModel:
    total = len(state.tasks)
    pending = sum(1 for t in state.tasks if not t.completed)

    visible = sort_tasks(
        filter_tasks(state.tasks, state.status_filter, state.priority_filter, state.search),
        state.sort_mode,
        locale,
    )

    if not visible:
        empty_state = EMPTY_NO_TASKS if total == 0 else EMPTY_NO_RESULTS
        return RenderModel(empty_state=empty_state, total_count=total, pending_count=pending)

    return RenderModel(
        items=[_render_item(t, state.editing_id) for t in visible],
        total_count=total,
        pending_count=pending,
    )
