"""Read contracts: lookup by identifier, existence checks and listing."""

from abc import ABC, abstractmethod

import structlog

from application.dtos.pagination import Page, PageRequest
from application.ports.use_cases.guards import require_present
from domain import error_factory

logger = structlog.get_logger()


class FindUseCase[E, ID](ABC):
    """Find a single entity by identifier and check whether it exists.

    A missing entity is a normal result (``None`` / ``False``); only a missing
    identifier is an error.
    """

    def find_by_id(self, entity_id: ID) -> E | None:
        """Return the entity with ``entity_id``, or ``None`` if there is none.

        Raises:
            ServiceError: ``VALIDATION`` if ``entity_id`` is ``None``; any
                category the adapter raises while fetching.

        """
        require_present(entity_id, "entity_id")
        logger.debug("find_by_id", use_case=type(self).__name__, entity_id=str(entity_id))
        return self._find_by_id(entity_id)

    def exists_by_id(self, entity_id: ID) -> bool:
        """Return whether an entity with ``entity_id`` exists.

        Raises:
            ServiceError: ``VALIDATION`` if ``entity_id`` is ``None``; any
                category the adapter raises while checking.

        """
        require_present(entity_id, "entity_id")
        logger.debug("exists_by_id", use_case=type(self).__name__, entity_id=str(entity_id))
        return self._exists_by_id(entity_id)

    @abstractmethod
    def _find_by_id(self, entity_id: ID) -> E | None:
        """Fetch the entity with ``entity_id``; ``entity_id`` is never ``None`` here.

        Return ``None`` when nothing matches instead of raising.

        Raises:
            ServiceError: ``DATABASE`` or ``SERVICE``, built with
                ``error_factory``, if the lookup cannot be completed.

        """

    @abstractmethod
    def _exists_by_id(self, entity_id: ID) -> bool:
        """Check for an entity with ``entity_id``; ``entity_id`` is never ``None`` here.

        Raises:
            ServiceError: ``DATABASE`` or ``SERVICE``, built with
                ``error_factory``, if the check cannot be completed.

        """


class BatchFindUseCase[E](ABC):
    """Fetch many entities, either all at once or one page at a time."""

    def find_all(self) -> list[E]:
        """Return every entity, unpaged."""
        logger.debug("find_all", use_case=type(self).__name__)
        return list(self._find_all())

    def find_page(self, page_request: PageRequest) -> Page[E]:
        """Return the page of entities described by ``page_request``.

        Raises:
            ServiceError: ``VALIDATION`` if ``page_request`` is ``None`` or not
                a ``PageRequest``; any category the adapter raises.

        """
        require_present(page_request, "page_request")
        if not isinstance(page_request, PageRequest):
            raise error_factory.validation(
                "Argument 'page_request' must be a PageRequest, got {}",
                type(page_request).__name__,
            )
        logger.debug(
            "find_page",
            use_case=type(self).__name__,
            page=page_request.page,
            size=page_request.size,
        )
        return self._find_page(page_request)

    @abstractmethod
    def _find_all(self) -> list[E]:
        """Load every entity.

        Raises:
            ServiceError: ``DATABASE`` or ``SERVICE`` if loading fails.

        """

    @abstractmethod
    def _find_page(self, page_request: PageRequest) -> Page[E]:
        """Load the page described by an already validated ``page_request``.

        A page past the end is returned empty, not raised.

        Raises:
            ServiceError: ``DATABASE`` or ``SERVICE`` if loading fails.

        """


class ReadOnlyUseCase[E, ID](FindUseCase[E, ID], BatchFindUseCase[E]):
    """Single and batch lookups, without any write operation."""
