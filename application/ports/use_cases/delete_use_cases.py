"""Delete contracts: remove one entity or a batch of them by identifier."""

from abc import ABC, abstractmethod
from collections.abc import Iterable

import structlog

from application.ports.use_cases.guards import require_all_present, require_present

logger = structlog.get_logger()


class DeleteUseCase[ID](ABC):
    """Delete a single entity by identifier."""

    def delete(self, entity_id: ID) -> None:
        """Delete the entity with ``entity_id``.

        Raises:
            ServiceError: ``VALIDATION`` if ``entity_id`` is ``None``;
                ``SERVICE`` (or another category) if the adapter refuses.

        """
        require_present(entity_id, "entity_id")
        logger.debug("delete", use_case=type(self).__name__, entity_id=str(entity_id))
        self._delete(entity_id)

    @abstractmethod
    def _delete(self, entity_id: ID) -> None:
        """Remove the entity with ``entity_id``; ``entity_id`` is never ``None`` here.

        Raises:
            ServiceError: ``SERVICE`` if business rules forbid the deletion,
                ``DATABASE`` if storage fails; both built with ``error_factory``.

        """


class BatchDeleteUseCase[ID](ABC):
    """Delete several entities by identifier in one call."""

    def delete_all(self, entity_ids: Iterable[ID]) -> None:
        """Delete every entity whose identifier is in ``entity_ids``.

        Raises:
            ServiceError: ``VALIDATION`` if ``entity_ids`` is ``None``, not
                iterable or contains ``None``; ``SERVICE`` (or another
                category) if the adapter refuses.

        """
        ids = require_all_present(entity_ids, "entity_ids")
        logger.debug("delete_all", use_case=type(self).__name__, count=len(ids))
        self._delete_all(ids)

    @abstractmethod
    def _delete_all(self, entity_ids: list[ID]) -> None:
        """Remove every entity in a list with no ``None`` elements.

        Raises:
            ServiceError: ``SERVICE`` if business rules forbid the deletion,
                ``DATABASE`` if storage fails; both built with ``error_factory``.

        """


class DeleteOnlyUseCase[ID](DeleteUseCase[ID], BatchDeleteUseCase[ID]):
    """Single and batch deletion, without reads or writes."""
