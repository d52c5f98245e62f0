from pydantic import BaseModel
from typing import Optional

from ..models import Priority


class TaskCreate(BaseModel):
    """Schema for creating new tasks.

    ``text`` is optional here so that a missing value is reported with the
    same message as a blank one.
    """
    text: Optional[str] = None
    priority: Priority = Priority.MEDIUM


class TaskUpdate(BaseModel):
    """Schema for partial updates; only fields sent by the client are applied."""
    text: Optional[str] = None
    completed: Optional[bool] = None
    priority: Optional[Priority] = None


class ErrorResponse(BaseModel):
    error: str
