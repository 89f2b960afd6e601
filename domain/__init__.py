"""Domain layer exports."""

from domain import error_factory
from domain.exceptions import DEFAULT_MESSAGE, ErrorCategory, ServiceError, format_message

__all__ = [
    "DEFAULT_MESSAGE",
    "ErrorCategory",
    "ServiceError",
    "error_factory",
    "format_message",
]
