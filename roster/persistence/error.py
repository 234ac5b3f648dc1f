"""Persistence error translation."""

from contextlib import asynccontextmanager
from typing import AsyncIterator

import logfire
from sqlalchemy.exc import SQLAlchemyError

from roster.domain.error import TransientError


@asynccontextmanager
async def translate_errors(operation: str) -> AsyncIterator[None]:
    """Re-raise database failures as retryable domain errors.

    Args:
        operation: Name of the repository operation, for logging

    Raises:
        TransientError: If the wrapped block raised SQLAlchemyError
    """
    try:
        yield
    except SQLAlchemyError as e:
        logfire.error("Database operation failed", operation=operation, error=str(e))
        raise TransientError(f"Database operation failed: {operation}") from e
