"""Translate SQLAlchemy errors into domain exceptions at the repository boundary.

Errors are surfaced once, without retry; the SQLAlchemy exception is chained
and its message kept in details["reason"].
"""

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from clouddriver.domain.exceptions import (
    BackendUnavailableException,
    ConstraintViolationException,
)

logger = logging.getLogger(__name__)


@contextmanager
def translate_errors(operation: str) -> Iterator[None]:
    """Map IntegrityError to ConstraintViolation and other backend errors to BackendUnavailable."""
    try:
        yield
    except IntegrityError as exc:
        reason = str(exc.orig) if exc.orig is not None else str(exc)
        logger.warning("%s rejected by backend constraint: %s", operation, reason)
        raise ConstraintViolationException(operation, reason) from exc
    except SQLAlchemyError as exc:
        logger.warning("%s failed: backend error %s", operation, type(exc).__name__)
        raise BackendUnavailableException(operation, str(exc)) from exc
