"""Categorized exceptions shared by every layer."""

from __future__ import annotations

from enum import Enum

DEFAULT_MESSAGE = "An unexpected error occurred."

PLACEHOLDER = "{}"


class ErrorCategory(str, Enum):
    """Origin of a failure.

    Closed set; every ``ServiceError`` carries exactly one of these.
    """

    GENERAL = "GENERAL"
    """Uncategorized failures, typically a bare ``Exception``."""

    CONFIG = "CONFIG"
    """System or application configuration problems."""

    DATABASE = "DATABASE"
    """Database access or integrity failures."""

    VALIDATION = "VALIDATION"
    """Invalid input or violated business rules."""

    SERVICE = "SERVICE"
    """Failures of services outside the application (APIs, web services)."""

    @classmethod
    def for_exception(cls, exc: BaseException) -> ErrorCategory:
        """Classify an arbitrary exception.

        ``ValueError`` covers pydantic's ``ValidationError`` as well.
        """
        if isinstance(exc, ServiceError):
            return exc.category
        if isinstance(exc, (ValueError, TypeError)):
            return cls.VALIDATION
        if isinstance(exc, (ConnectionError, TimeoutError)):
            return cls.SERVICE
        return cls.GENERAL


def format_message(template: str, *params: object) -> str:
    """Replace ``{}`` tokens in ``template`` with ``params``, left to right.

    Tokens without a matching param stay literal; surplus params are ignored.
    Any other brace in the template is left untouched.
    """
    parts: list[str] = []
    rest = template
    for param in params:
        head, token, rest = rest.partition(PLACEHOLDER)
        parts.append(head)
        if not token:
            break
        parts.append(str(param))
    parts.append(rest)
    return "".join(parts)


class ServiceError(Exception):
    """Failure tagged with an ``ErrorCategory``.

    Values are read-only once built. Construction never logs; use
    ``domain.error_factory`` for logged creation.
    """

    def __init__(
        self,
        message: str | None = None,
        *params: object,
        category: ErrorCategory | None = None,
        cause: BaseException | None = None,
    ) -> None:
        if message is None:
            message = DEFAULT_MESSAGE
        elif params:
            message = format_message(message, *params)
        super().__init__(message)
        self._category = ErrorCategory(category) if category else ErrorCategory.GENERAL
        self._message = message
        self._cause = cause
        if cause is not None:
            self.__cause__ = cause

    @property
    def category(self) -> ErrorCategory:
        return self._category

    @property
    def message(self) -> str:
        return self._message

    @property
    def cause(self) -> BaseException | None:
        return self._cause

    def __str__(self) -> str:
        return self._message

    def __repr__(self) -> str:
        return f"{type(self).__name__}(category={self._category.value}, message={self._message!r})"
