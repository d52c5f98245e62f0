import logging
from typing import List

from fastapi import APIRouter, Depends, Response, status

from ..errors import NotFoundError, ValidationError
from ..models import Task, utc_now
from ..schemas.task import ErrorResponse, TaskCreate, TaskUpdate
from ..storage import TaskRepository, get_repository, mutation

logger = logging.getLogger(__name__)

router = APIRouter()

_ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


def _get_update_data(task_update: TaskUpdate) -> dict:
    data = task_update.model_dump(exclude_unset=True)
    return {field: value for field, value in data.items() if value is not None}


def _clean_text(text) -> str:
    cleaned = (text or "").strip()
    if not cleaned:
        raise ValidationError("Todo text is required")
    return cleaned


def _find_index(tasks: List[Task], task_id: str) -> int:
    for index, task in enumerate(tasks):
        if task.id == task_id:
            return index
    raise NotFoundError()


@router.get(
    "/todos",
    response_model=List[Task],
    response_model_exclude_none=True,
    responses=_ERROR_RESPONSES,
)
def list_todos(repo: TaskRepository = Depends(get_repository)):
    """Return the full collection, unfiltered, in persisted order."""
    return repo.load_all()


@router.get(
    "/todos/{task_id}",
    response_model=Task,
    response_model_exclude_none=True,
    responses=_ERROR_RESPONSES,
)
def get_todo(task_id: str, repo: TaskRepository = Depends(get_repository)):
    tasks = repo.load_all()
    return tasks[_find_index(tasks, task_id)]


@router.post(
    "/todos",
    response_model=Task,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
    responses=_ERROR_RESPONSES,
)
def create_todo(payload: TaskCreate, repo: TaskRepository = Depends(get_repository)):
    """Create a task. Blank text is rejected before storage is touched."""
    text = _clean_text(payload.text)
    task = Task(text=text, priority=payload.priority)

    with mutation(repo) as tasks:
        tasks.append(task)

    logger.info("Created todo id=%s priority=%s", task.id, task.priority.value)
    return task


@router.put(
    "/todos/{task_id}",
    response_model=Task,
    response_model_exclude_none=True,
    responses=_ERROR_RESPONSES,
)
def update_todo(task_id: str, task_update: TaskUpdate, repo: TaskRepository = Depends(get_repository)):
    """Apply only the fields present in the request body."""
    update_data = _get_update_data(task_update)

    with mutation(repo) as tasks:
        task = tasks[_find_index(tasks, task_id)]
        if "text" in update_data:
            update_data["text"] = _clean_text(update_data["text"])
        for field, value in update_data.items():
            setattr(task, field, value)
        task.updated_at = utc_now()

    logger.info("Updated todo id=%s fields=%s", task_id, sorted(update_data))
    return task


@router.delete(
    "/todos/{task_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=_ERROR_RESPONSES,
)
def delete_todo(task_id: str, repo: TaskRepository = Depends(get_repository)):
    with mutation(repo) as tasks:
        del tasks[_find_index(tasks, task_id)]

    logger.info("Deleted todo id=%s", task_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
