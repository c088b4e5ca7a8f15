import asyncio
from typing import Any, Optional

import asyncpg
from sqlalchemy.exc import DBAPIError, SQLAlchemyError

STORE_ERRORS = (
    SQLAlchemyError,
    asyncpg.PostgresError,
    asyncpg.InterfaceError,
    asyncio.TimeoutError,
    OSError,
)


class ApiError(Exception):
    status: int = 500

    def __init__(self, message: str, data: Optional[Any] = None):
        super().__init__(message)
        self.message = message
        self.data = data


class UsageError(ApiError):
    """Missing or malformed input supplied by the caller."""
    status = 400


class ForbiddenError(ApiError):
    status = 403


class StoreError(ApiError):
    """Failure reported by the database or the connection to it."""
    status = 500

    @classmethod
    def from_exception(cls, exc: BaseException) -> "StoreError":
        return cls(store_error_message(exc))


def store_error_message(exc: BaseException) -> str:
    # the asyncpg adapter chains the driver exception as the cause of orig
    if isinstance(exc, DBAPIError) and exc.orig is not None:
        exc = exc.orig.__cause__ or exc.orig

    if isinstance(exc, asyncio.TimeoutError) and not str(exc):
        return "Statement timed out"

    return str(exc)
