"""Logged construction of ``ServiceError`` values, one function per category.

Every function logs the new error once at error level and returns it; none of
them raise. The caller decides what to do with the value::

    raise error_factory.validation("Entity id {} is invalid", entity_id)

Accepted argument forms, for ``of`` and every category function:

- ``fn(message)``
- ``fn(cause)``
- ``fn(message, *params)``
- ``fn(cause, message, *params)``
- ``fn(message, *params, cause=exc)``
"""

from __future__ import annotations

import structlog

from domain.exceptions import ErrorCategory, ServiceError

logger = structlog.get_logger()

CAUSE_NOT_AVAILABLE = "N/A"


def _log_and_return(error: ServiceError) -> ServiceError:
    logger.error(
        "service_error_created",
        category=error.category.value,
        message=error.message,
        cause=CAUSE_NOT_AVAILABLE if error.cause is None else repr(error.cause),
    )
    return error


def of(
    category: ErrorCategory | None,
    message: str | BaseException | None = None,
    *params: object,
    cause: BaseException | None = None,
) -> ServiceError:
    """Create and log a ``ServiceError`` of ``category`` (``GENERAL`` if ``None``)."""
    if isinstance(message, BaseException):
        if cause is not None:
            msg = "cause given both positionally and by keyword"
            raise TypeError(msg)
        cause = message
        message, params = (params[0], params[1:]) if params else (None, ())
    return _log_and_return(ServiceError(message, *params, category=category, cause=cause))


def validation(
    message: str | BaseException | None = None,
    *params: object,
    cause: BaseException | None = None,
) -> ServiceError:
    """Invalid input or violated business rule."""
    return of(ErrorCategory.VALIDATION, message, *params, cause=cause)


def service(
    message: str | BaseException | None = None,
    *params: object,
    cause: BaseException | None = None,
) -> ServiceError:
    """Failure of an external service or of an adapter's business rules."""
    return of(ErrorCategory.SERVICE, message, *params, cause=cause)


def database(
    message: str | BaseException | None = None,
    *params: object,
    cause: BaseException | None = None,
) -> ServiceError:
    return of(ErrorCategory.DATABASE, message, *params, cause=cause)


def config(
    message: str | BaseException | None = None,
    *params: object,
    cause: BaseException | None = None,
) -> ServiceError:
    return of(ErrorCategory.CONFIG, message, *params, cause=cause)


def general(
    message: str | BaseException | None = None,
    *params: object,
    cause: BaseException | None = None,
) -> ServiceError:
    return of(ErrorCategory.GENERAL, message, *params, cause=cause)


def wrap(exc: BaseException, message: str | None = None, *params: object) -> ServiceError:
    """Turn any exception into a logged ``ServiceError``.

    A ``ServiceError`` is returned as is and not logged again. Otherwise the
    category comes from ``ErrorCategory.for_exception`` and the message
    defaults to ``str(exc)``.
    """
    if isinstance(exc, ServiceError):
        return exc
    if message is None:
        message = str(exc) or None
        params = ()
    return of(ErrorCategory.for_exception(exc), exc, message, *params)
