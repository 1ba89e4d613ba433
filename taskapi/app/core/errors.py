from typing import Optional


class TaskStoreError(Exception):
    """Raised when the task store cannot be read or written."""

    def __init__(self, message: str, *, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.message = message
        self.cause = cause
