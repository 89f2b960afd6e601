"""Bridge between raised ``ServiceError`` and ``returns`` result containers."""

import functools
from collections.abc import Callable

import structlog
from returns.result import Failure, Result, Success

from application.dtos.errors import AppError
from domain.exceptions import ServiceError

logger = structlog.get_logger()


def as_result[**P, T](func: Callable[P, T]) -> Callable[P, Result[T, AppError]]:
    """Run ``func`` and report its outcome as a ``Result``.

    - A return value becomes ``Success(value)``.
    - A raised ``ServiceError`` becomes ``Failure(AppError)``.
    - Any other exception propagates unchanged.

    The error was already logged when the factory built it, so capturing it
    only adds a debug-level boundary trace.
    """

    @functools.wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> Result[T, AppError]:
        try:
            return Success(func(*args, **kwargs))
        except ServiceError as e:
            logger.debug(
                "service_error_captured",
                function=func.__qualname__,
                category=e.category.value,
                error=e.message,
            )
            return Failure(AppError.from_service_error(e))

    return wrapper
