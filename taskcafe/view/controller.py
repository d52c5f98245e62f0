"""Side-effecting half of the view: user intents become Store calls.

The mirror in :class:`ViewState` is only touched with objects the server
returned. Every finished operation, successful or not, leaves a transient
message in the :class:`Notifier`.
"""
import logging
from typing import Callable, Optional

import requests

from ..config import PREFS_FILE
from ..models import Priority, Task
from .client import ApiError, TodoApiClient
from .notifications import Notifier
from .projection import RenderModel, project
from .state import ViewState
from .theme import LIGHT, ThemePreference

logger = logging.getLogger(__name__)

# Failures that must never reach the user as raw exceptions.
CLIENT_ERRORS = (ApiError, requests.RequestException, ValueError)

MSG_LOAD_FAILED = "Failed to load todos."
MSG_TEXT_REQUIRED = "Please enter a todo."
MSG_ADDED = "Todo added."
MSG_ADD_FAILED = "Failed to add todo."
MSG_COMPLETED = "Todo completed."
MSG_REOPENED = "Todo marked as not completed."
MSG_TOGGLE_FAILED = "Failed to change todo status."
MSG_DELETED = "Todo deleted."
MSG_DELETE_FAILED = "Failed to delete todo."
MSG_UPDATED = "Todo updated."
MSG_UPDATE_FAILED = "Failed to update todo."
MSG_INVALID_PRIORITY = "Please choose a valid priority."


def _always_confirm(task: Task) -> bool:
    return True


class TodoController:
    def __init__(
        self,
        client: TodoApiClient,
        state: Optional[ViewState] = None,
        notifier: Optional[Notifier] = None,
        theme: Optional[ThemePreference] = None,
        confirm: Optional[Callable[[Task], bool]] = None,
    ):
        self.client = client
        self.state = state or ViewState()
        self.notifier = notifier or Notifier()
        self.theme = theme or ThemePreference(PREFS_FILE)
        self.confirm = confirm or _always_confirm

    def _fail(self, message: str, exc: Exception) -> None:
        logger.warning("%s (%s)", message, exc)
        if isinstance(exc, ApiError) and exc.status_code == 400:
            message = exc.message
        self.notifier.error(message)

    # lifecycle

    def start(self) -> RenderModel:
        """Apply the stored theme, then fetch the list and render it."""
        self.theme.load()
        self.load()
        return self.render()

    def load(self) -> bool:
        try:
            tasks = self.client.list_todos()
        except CLIENT_ERRORS as e:
            self._fail(MSG_LOAD_FAILED, e)
            return False
        self.state.replace_all(tasks)
        return True

    def render(self) -> RenderModel:
        return project(self.state)

    # mutations

    def add(self, text: str, priority: str = Priority.MEDIUM.value) -> Optional[Task]:
        text = (text or "").strip()
        if not text:
            self.notifier.error(MSG_TEXT_REQUIRED)
            return None

        try:
            task = self.client.create_todo(text, priority)
        except CLIENT_ERRORS as e:
            self._fail(MSG_ADD_FAILED, e)
            return None

        self.state.append(task)
        self.notifier.success(MSG_ADDED)
        return task

    def toggle(self, task_id: str) -> Optional[Task]:
        current = self.state.find(task_id)
        if current is None:
            return None

        try:
            task = self.client.update_todo(task_id, completed=not current.completed)
        except CLIENT_ERRORS as e:
            self._fail(MSG_TOGGLE_FAILED, e)
            return None

        self.state.replace(task)
        self.notifier.success(MSG_COMPLETED if task.completed else MSG_REOPENED)
        return task

    def delete(self, task_id: str) -> bool:
        current = self.state.find(task_id)
        if current is None or not self.confirm(current):
            return False

        try:
            self.client.delete_todo(task_id)
        except CLIENT_ERRORS as e:
            self._fail(MSG_DELETE_FAILED, e)
            return False

        self.state.remove(task_id)
        if self.state.editing_id == task_id:
            self.cancel_edit()
        self.notifier.success(MSG_DELETED)
        return True

    # editing state machine: idle <-> editing(task)

    def open_edit(self, task_id: str) -> bool:
        task = self.state.find(task_id)
        if task is None:
            return False
        self.state.editing_id = task.id
        self.state.edit_text = task.text
        self.state.edit_priority = task.priority
        return True

    def cancel_edit(self) -> None:
        self.state.editing_id = None
        self.state.edit_text = ""
        self.state.edit_priority = Priority.MEDIUM

    dismiss_edit = cancel_edit

    def handle_key(self, key: str) -> None:
        if key == "Escape":
            self.cancel_edit()

    def save_edit(self, text: Optional[str] = None, priority: Optional[str] = None) -> Optional[Task]:
        task_id = self.state.editing_id
        if task_id is None:
            return None

        if text is not None:
            self.state.edit_text = text
        if priority is not None:
            try:
                self.state.edit_priority = Priority(priority)
            except ValueError:
                self.notifier.error(MSG_INVALID_PRIORITY)
                return None

        edited_text = self.state.edit_text.strip()
        if not edited_text:
            self.notifier.error(MSG_TEXT_REQUIRED)
            return None

        try:
            task = self.client.update_todo(
                task_id, text=edited_text, priority=self.state.edit_priority.value
            )
        except CLIENT_ERRORS as e:
            self._fail(MSG_UPDATE_FAILED, e)
            return None

        self.state.replace(task)
        self.cancel_edit()
        self.notifier.success(MSG_UPDATED)
        return task

    # presentation settings

    def set_status_filter(self, value: str) -> RenderModel:
        self.state.set_status_filter(value)
        return self.render()

    def set_priority_filter(self, value: str) -> RenderModel:
        self.state.set_priority_filter(value)
        return self.render()

    def set_search(self, value: str) -> RenderModel:
        self.state.set_search(value)
        return self.render()

    def set_sort_mode(self, value: str) -> RenderModel:
        self.state.set_sort_mode(value)
        return self.render()

    def toggle_theme(self) -> str:
        mode = self.theme.toggle()
        self.notifier.success(f"Switched to {'light' if mode == LIGHT else 'dark'} theme.")
        return mode
