# backend/wishwello/core/exceptions.py
"""
Shared typed errors.

Domain errors stay plain LookupError / ValueError carrying an upper-case
code (TEAM_NOT_FOUND, UNKNOWN_QUESTION...) that routers map to HTTP.
StoreError is the only infrastructure error that leaves the repositories.
"""
import functools
import logging

from sqlalchemy.exc import SQLAlchemyError

logger = logging.getLogger(__name__)


class StoreError(RuntimeError):
    """The response / catalog / pulse store could not be read or written."""

    def __init__(self, operation: str, cause: Exception | None = None):
        self.operation = operation
        self.cause = cause
        super().__init__(f"Store operation failed: {operation}")


def store_operation(fn):
    """Wrap an async repository method so driver errors surface as StoreError."""

    @functools.wraps(fn)
    async def wrapper(*args, **kwargs):
        try:
            return await fn(*args, **kwargs)
        except SQLAlchemyError as e:
            logger.error("Store operation %s failed: %s", fn.__qualname__, e)
            raise StoreError(fn.__qualname__, e) from e

    return wrapper
