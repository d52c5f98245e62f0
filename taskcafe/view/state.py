from dataclasses import dataclass, field
from typing import List, Optional

from ..models import Priority, Task

STATUS_FILTERS = ("all", "completed", "pending")
PRIORITY_FILTERS = ("all", "low", "medium", "high")
SORT_MODES = ("created", "priority", "alphabetical")


@dataclass
class ViewState:
    """Everything the client shows, held in one place.

    ``tasks`` is the mirror of the server's collection in server order. It is
    only changed from server responses, never optimistically.
    """

    tasks: List[Task] = field(default_factory=list)
    status_filter: str = "all"
    priority_filter: str = "all"
    search: str = ""
    sort_mode: str = "created"
    editing_id: Optional[str] = None
    edit_text: str = ""
    edit_priority: Priority = Priority.MEDIUM

    def set_status_filter(self, value: str) -> None:
        if value not in STATUS_FILTERS:
            raise ValueError(f"unknown status filter: {value!r}")
        self.status_filter = value

    def set_priority_filter(self, value: str) -> None:
        if value not in PRIORITY_FILTERS:
            raise ValueError(f"unknown priority filter: {value!r}")
        self.priority_filter = value

    def set_sort_mode(self, value: str) -> None:
        if value not in SORT_MODES:
            raise ValueError(f"unknown sort mode: {value!r}")
        self.sort_mode = value

    def set_search(self, value: str) -> None:
        self.search = value or ""

    @property
    def is_editing(self) -> bool:
        return self.editing_id is not None

    # mirror helpers

    def find(self, task_id: str) -> Optional[Task]:
        return next((t for t in self.tasks if t.id == task_id), None)

    def replace_all(self, tasks: List[Task]) -> None:
        self.tasks = list(tasks)

    def append(self, task: Task) -> None:
        self.tasks.append(task)

    def replace(self, task: Task) -> None:
        for index, existing in enumerate(self.tasks):
            if existing.id == task.id:
                self.tasks[index] = task
                return
        self.tasks.append(task)

    def remove(self, task_id: str) -> None:
        self.tasks = [t for t in self.tasks if t.id != task_id]
