"""Argument checks run by use-case contracts before reaching an adapter."""

from collections.abc import Iterable

from domain import error_factory


def require_present[T](value: T | None, name: str) -> T:
    """Return ``value`` or raise a validation error if it is ``None``."""
    if value is None:
        raise error_factory.validation("Argument '{}' must not be None", name)
    return value


def require_all_present[T](values: Iterable[T | None] | None, name: str) -> list[T]:
    """Materialize ``values`` once and reject ``None`` or ``None`` elements.

    Returns the list so callers never iterate the original twice.
    """
    if values is None:
        raise error_factory.validation("Argument '{}' must not be None", name)
    if isinstance(values, (str, bytes)):
        raise error_factory.validation(
            "Argument '{}' must be a collection, got {}",
            name,
            type(values).__name__,
        )
    try:
        items = list(values)
    except TypeError as e:
        raise error_factory.validation(
            e,
            "Argument '{}' must be iterable, got {}",
            name,
            type(values).__name__,
        ) from e
    for index, item in enumerate(items):
        if item is None:
            raise error_factory.validation("Argument '{}' contains None at index {}", name, index)
    return items
