"""Write contracts: create one entity or a batch of them."""

from abc import ABC, abstractmethod
from collections.abc import Iterable

import structlog

from application.ports.use_cases.guards import require_all_present, require_present

logger = structlog.get_logger()


class PersistUseCase[E, ID](ABC):
    """Create or save a single entity."""

    def create(self, entity: E) -> E:
        """Persist ``entity`` and return it as stored.

        The returned value may carry fields set by the persistence layer, such
        as a generated identifier; every other field is left as given.

        Raises:
            ServiceError: ``VALIDATION`` if ``entity`` is ``None``; any category
                the adapter raises while persisting.

        """
        require_present(entity, "entity")
        logger.debug("create", use_case=type(self).__name__, entity_type=type(entity).__name__)
        return self._create(entity)

    @abstractmethod
    def _create(self, entity: E) -> E:
        """Store ``entity``, which is never ``None`` here, and return it as stored.

        Raises:
            ServiceError: ``SERVICE`` for business-rule rejections or
                ``DATABASE`` for storage failures, built with ``error_factory``.

        """


class BatchPersistUseCase[E, ID](ABC):
    """Create or save several entities in one call."""

    def create_all(self, entities: Iterable[E]) -> list[E]:
        """Persist every entity in ``entities`` and return them as stored.

        The whole input is checked before the adapter sees any of it.

        Raises:
            ServiceError: ``VALIDATION`` if ``entities`` is ``None``, not
                iterable or contains ``None``; any category the adapter raises.

        """
        items = require_all_present(entities, "entities")
        logger.debug("create_all", use_case=type(self).__name__, count=len(items))
        return list(self._create_all(items))

    @abstractmethod
    def _create_all(self, entities: list[E]) -> list[E]:
        """Store a list with no ``None`` elements and return the stored entities.

        Raises:
            ServiceError: ``SERVICE`` for business-rule rejections or
                ``DATABASE`` for storage failures, built with ``error_factory``.

        """


class PersistenceOnlyUseCase[E, ID](PersistUseCase[E, ID], BatchPersistUseCase[E, ID]):
    """Single and batch creation, without reads or deletes."""
