"""Generic use-case contracts implemented by application adapters."""

from application.ports.use_cases.crud_use_case import CrudUseCase
from application.ports.use_cases.delete_use_cases import (
    BatchDeleteUseCase,
    DeleteOnlyUseCase,
    DeleteUseCase,
)
from application.ports.use_cases.find_use_cases import (
    BatchFindUseCase,
    FindUseCase,
    ReadOnlyUseCase,
)
from application.ports.use_cases.persist_use_cases import (
    BatchPersistUseCase,
    PersistenceOnlyUseCase,
    PersistUseCase,
)

__all__ = [
    "BatchDeleteUseCase",
    "BatchFindUseCase",
    "BatchPersistUseCase",
    "CrudUseCase",
    "DeleteOnlyUseCase",
    "DeleteUseCase",
    "FindUseCase",
    "PersistUseCase",
    "PersistenceOnlyUseCase",
    "ReadOnlyUseCase",
]
