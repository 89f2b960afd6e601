"""Shared test fixtures and configuration."""

from __future__ import annotations

from uuid import UUID, uuid4

import pytest

from application.dtos.pagination import PageRequest
from tests.mocks import Item, MockItemUseCase


@pytest.fixture
def sample_item_id() -> UUID:
    """Return a consistent sample item ID."""
    return uuid4()


@pytest.fixture
def sample_item() -> Item:
    """Create a sample Item without an identifier."""
    return Item(name="Widget", quantity=3)


@pytest.fixture
def use_case() -> MockItemUseCase:
    """Create an empty in-memory use case."""
    return MockItemUseCase()


@pytest.fixture
def populated_use_case() -> MockItemUseCase:
    """Create an in-memory use case holding five items."""
    use_case = MockItemUseCase()
    use_case.create_all(Item(name=f"item-{index}", quantity=index) for index in range(5))
    use_case.calls.clear()
    return use_case


@pytest.fixture
def page_request() -> PageRequest:
    """Return a request for the first page of two items."""
    return PageRequest.of(0, 2)
