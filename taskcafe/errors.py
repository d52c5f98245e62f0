class TaskCafeError(Exception):
    """Base error for the task store; carries the HTTP status it maps to."""

    status_code = 500
    default_message = "Internal error"

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(TaskCafeError):
    """Required input is missing or malformed. Nothing was changed."""

    status_code = 400
    default_message = "Todo text is required"


class NotFoundError(TaskCafeError):
    """No task has the requested id. Nothing was changed."""

    status_code = 404
    default_message = "Todo not found"


class StorageError(TaskCafeError):
    status_code = 500
    default_message = "Storage failure"


class StorageReadError(StorageError):
    default_message = "Failed to load todos"


class StorageWriteError(StorageError):
    default_message = "Failed to save todos"
