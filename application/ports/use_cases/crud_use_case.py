from application.ports.use_cases.delete_use_cases import DeleteOnlyUseCase
from application.ports.use_cases.find_use_cases import ReadOnlyUseCase
from application.ports.use_cases.persist_use_cases import PersistenceOnlyUseCase


class CrudUseCase[E, ID](
    ReadOnlyUseCase[E, ID],
    PersistenceOnlyUseCase[E, ID],
    DeleteOnlyUseCase[ID],
):
    """Full create/read/delete contract over one entity type.

    Combines ``ReadOnlyUseCase``, ``PersistenceOnlyUseCase`` and
    ``DeleteOnlyUseCase`` without adding behaviour.
    """
