import json
import logging
import threading
from contextlib import contextmanager, nullcontext
from pathlib import Path
from typing import Iterator, List

from pydantic import ValidationError as PydanticValidationError

from .config import DATA_FILE, SERIALIZE_WRITES
from .errors import StorageReadError, StorageWriteError
from .models import Task

logger = logging.getLogger(__name__)


class TaskRepository:
    """Load-full-collection / save-full-collection persistence interface."""

    def load_all(self) -> List[Task]:
        raise NotImplementedError

    def save_all(self, tasks: List[Task]) -> None:
        raise NotImplementedError

    def ensure_storage_dir(self) -> None:
        """Prepare the storage location. Safe to call more than once."""

    def write_lock(self):
        """Context manager held across one load -> mutate -> save sequence."""
        return nullcontext()


class JsonFileTaskRepository(TaskRepository):
    """Stores the whole collection as a JSON array in a single file.

    Every save rewrites the file in full. With ``serialize_writes`` the
    read-modify-write sequences of this process run one at a time; without it
    two interleaved mutations can lose an update (last write wins).
    """

    def __init__(self, path, serialize_writes: bool = True):
        self.path = Path(path)
        self.serialize_writes = serialize_writes
        self._lock = threading.Lock()

    def ensure_storage_dir(self) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
        except OSError:
            logger.exception("Error creating data directory %s", self.path.parent)

    def write_lock(self):
        if self.serialize_writes:
            return self._lock
        return nullcontext()

    def load_all(self) -> List[Task]:
        try:
            raw = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return []
        except OSError as e:
            raise StorageReadError() from e

        try:
            data = json.loads(raw)
            if not isinstance(data, list):
                raise ValueError("expected a JSON array of todos")
            return [Task.model_validate(item) for item in data]
        except (ValueError, PydanticValidationError) as e:
            logger.error("Corrupt data file %s: %s", self.path, e)
            raise StorageReadError() from e

    def save_all(self, tasks: List[Task]) -> None:
        payload = json.dumps([task.to_json() for task in tasks], indent=2, ensure_ascii=False)
        try:
            self.path.write_text(payload, encoding="utf-8")
        except OSError as e:
            logger.exception("Error saving todos to %s", self.path)
            raise StorageWriteError() from e


class InMemoryTaskRepository(TaskRepository):
    """Keeps the collection in a list; each load returns fresh copies."""

    def __init__(self, tasks: List[Task] = None):
        self._items = [task.to_json() for task in tasks or []]
        self._lock = threading.Lock()
        self.save_count = 0

    def write_lock(self):
        return self._lock

    def load_all(self) -> List[Task]:
        return [Task.model_validate(item) for item in self._items]

    def save_all(self, tasks: List[Task]) -> None:
        self._items = [task.to_json() for task in tasks]
        self.save_count += 1


def _create_repository() -> TaskRepository:
    return JsonFileTaskRepository(DATA_FILE, serialize_writes=SERIALIZE_WRITES)


repository = _create_repository()


def get_repository() -> TaskRepository:
    """Dependency returning the configured repository."""
    return repository


@contextmanager
def mutation(repo: TaskRepository) -> Iterator[List[Task]]:
    """Load the collection, let the caller change it, then save it.

    Usage:
        with mutation(repo) as tasks:
            tasks.append(task)

    Nothing is saved if the block raises.
    """
    with repo.write_lock():
        tasks = repo.load_all()
        yield tasks
        repo.save_all(tasks)


def ensure_storage_dir() -> None:
    """Create the directory holding the data file."""
    repository.ensure_storage_dir()
