"""Translation of failures into HTTP errors."""

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from fastapi import HTTPException, status

from macro_tracker.domain.errors import (
    InvalidInputError,
    InvalidTransitionError,
    NotFoundError,
)

logger = logging.getLogger(__name__)

DOMAIN_ERRORS = (InvalidInputError, InvalidTransitionError, NotFoundError)


@contextmanager
def alert_on_failure(message: str, **context: object) -> Iterator[None]:
    """Log unexpected failures and return the alert text as a 500 detail.

    Domain errors pass through to their own exception handlers.
    """
    try:
        yield
    except DOMAIN_ERRORS:
        raise
    except HTTPException:
        raise
    except Exception as exc:
        logger.exception(
            message, extra={key: str(value) for key, value in context.items()}
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=message
        ) from exc
