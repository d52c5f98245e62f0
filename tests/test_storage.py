# tests/test_storage.py

from __future__ import annotations

import json
import threading
from pathlib import Path

import pytest

from taskcafe.errors import StorageReadError, StorageWriteError
from taskcafe.models import Task
from taskcafe.storage import JsonFileTaskRepository, mutation

from .fakes import make_task


def test_missing_file_is_empty_collection(tmp_path: Path) -> None:
    repo = JsonFileTaskRepository(tmp_path / "absent" / "todos.json")
    assert repo.load_all() == []


def test_ensure_storage_dir_is_idempotent(tmp_path: Path) -> None:
    repo = JsonFileTaskRepository(tmp_path / "a" / "b" / "todos.json")
    repo.ensure_storage_dir()
    repo.ensure_storage_dir()
    assert (tmp_path / "a" / "b").is_dir()


def test_save_then_load_keeps_order_and_camel_case(file_repo: JsonFileTaskRepository) -> None:
    tasks = [make_task("first", minutes=0), make_task("두번째", "high", minutes=1)]
    file_repo.save_all(tasks)

    raw = json.loads(file_repo.path.read_text(encoding="utf-8"))
    assert [item["text"] for item in raw] == ["first", "두번째"]
    assert "createdAt" in raw[0]
    assert "updatedAt" not in raw[0]
    assert raw[1]["priority"] == "high"

    loaded = file_repo.load_all()
    assert [t.id for t in loaded] == [t.id for t in tasks]
    assert loaded[0].created_at == tasks[0].created_at


def test_reads_files_written_by_javascript_clients(file_repo: JsonFileTaskRepository) -> None:
    file_repo.path.write_text(
        json.dumps([{
            "id": "1714554000000",
            "text": "buy milk",
            "completed": True,
            "priority": "low",
            "createdAt": "2024-05-01T09:00:00.000Z",
            "updatedAt": "2024-05-01T10:00:00.000Z",
        }]),
        encoding="utf-8",
    )
    (task,) = file_repo.load_all()
    assert task.id == "1714554000000"
    assert task.completed is True
    assert task.updated_at is not None


@pytest.mark.parametrize("content", ["{not json", '{"id": "x"}', '[{"text": "x", "priority": "urgent"}]'])
def test_corrupt_file_raises_read_error(file_repo: JsonFileTaskRepository, content: str) -> None:
    file_repo.path.write_text(content, encoding="utf-8")
    with pytest.raises(StorageReadError):
        file_repo.load_all()


def test_write_failure_raises_write_error(tmp_path: Path) -> None:
    # Parent directory never created, so the write cannot succeed.
    repo = JsonFileTaskRepository(tmp_path / "missing" / "todos.json")
    with pytest.raises(StorageWriteError):
        repo.save_all([make_task("x")])


def test_mutation_does_not_save_when_block_raises(repo) -> None:
    repo.save_all([make_task("keep")])
    saves = repo.save_count

    with pytest.raises(RuntimeError):
        with mutation(repo) as tasks:
            tasks.clear()
            raise RuntimeError("boom")

    assert repo.save_count == saves
    assert [t.text for t in repo.load_all()] == ["keep"]


def test_serialized_writes_lose_no_updates(file_repo: JsonFileTaskRepository) -> None:
    def worker(n: int) -> None:
        with mutation(file_repo) as tasks:
            tasks.append(Task(text=f"task {n}"))

    threads = [threading.Thread(target=worker, args=(n,)) for n in range(20)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert sorted(t.text for t in file_repo.load_all()) == sorted(f"task {n}" for n in range(20))


def test_unserialized_repository_has_no_lock(tmp_path: Path) -> None:
    repo = JsonFileTaskRepository(tmp_path / "todos.json", serialize_writes=False)
    lock = repo.write_lock()
    assert not isinstance(lock, type(threading.Lock()))
