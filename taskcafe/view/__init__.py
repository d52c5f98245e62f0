from .client import ApiError, TodoApiClient
from .controller import TodoController
from .notifications import Notification, Notifier
from .projection import RenderItem, RenderModel, filter_tasks, project, sort_tasks
from .state import ViewState
from .theme import ThemePreference

__all__ = [
    "ApiError",
    "Notification",
    "Notifier",
    "RenderItem",
    "RenderModel",
    "ThemePreference",
    "TodoApiClient",
    "TodoController",
    "ViewState",
    "filter_tasks",
    "project",
    "sort_tasks",
]
