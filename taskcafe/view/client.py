from __future__ import annotations

from typing import Any, List, Optional

import requests

from ..config import API_BASE_URL
from ..models import Task


class ApiError(Exception):
    """The server answered with a non-success status."""

    def __init__(self, status_code: int, message: str):
        self.status_code = status_code
        self.message = message
        super().__init__(f"{status_code}: {message}")


class TodoApiClient:
    """Thin HTTP client for the /api/todos endpoints.

    ``session`` can be a ``requests.Session`` or anything with the same
    ``get/post/put/delete`` surface (FastAPI's ``TestClient`` works). No
    timeout is applied: a hung request simply never returns.
    """

    def __init__(self, base_url: str = API_BASE_URL, session: Optional[Any] = None):
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()

    def _url(self, task_id: Optional[str] = None) -> str:
        url = f"{self.base_url}/api/todos"
        if task_id is not None:
            url = f"{url}/{task_id}"
        return url

    @staticmethod
    def _check(r) -> None:
        if 200 <= r.status_code < 300:
            return
        try:
            message = r.json().get("error")
        except (ValueError, AttributeError):
            message = None
        raise ApiError(r.status_code, message or r.text or f"HTTP {r.status_code}")

    def list_todos(self) -> List[Task]:
        r = self.session.get(self._url())
        self._check(r)
        return [Task.model_validate(item) for item in r.json()]

    def create_todo(self, text: str, priority: str = "medium") -> Task:
        r = self.session.post(self._url(), json={"text": text, "priority": priority})
        self._check(r)
        return Task.model_validate(r.json())

    def update_todo(self, task_id: str, **fields: Any) -> Task:
        r = self.session.put(self._url(task_id), json=fields)
        self._check(r)
        return Task.model_validate(r.json())

    def delete_todo(self, task_id: str) -> None:
        r = self.session.delete(self._url(task_id))
        self._check(r)
