# tests/conftest.py

from __future__ import annotations

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from taskcafe.main import app
from taskcafe.storage import InMemoryTaskRepository, JsonFileTaskRepository, get_repository
from taskcafe.view import Notifier, ThemePreference, TodoApiClient, TodoController

from .fakes import FakeClock


@pytest.fixture()
def repo() -> InMemoryTaskRepository:
    return InMemoryTaskRepository()


@pytest.fixture()
def file_repo(tmp_path: Path) -> JsonFileTaskRepository:
    repo = JsonFileTaskRepository(tmp_path / "data" / "todos.json")
    repo.ensure_storage_dir()
    return repo


@pytest.fixture()
def use_repo():
    """Route the API to a given repository for the duration of a test."""

    def _use(repository):
        app.dependency_overrides[get_repository] = lambda: repository
        return repository

    yield _use
    app.dependency_overrides.clear()


@pytest.fixture()
def client(repo, use_repo) -> TestClient:
    use_repo(repo)
    return TestClient(app)


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def controller(client, clock, tmp_path: Path) -> TodoController:
    """Controller talking to the real API through the in-process test client."""
    return TodoController(
        TodoApiClient("http://testserver", session=client),
        notifier=Notifier(clock=clock),
        theme=ThemePreference(tmp_path / "prefs.json"),
    )
