"""Contains concrete implementations of the RegistryRepository interface."""

from .in_memory import InMemoryRegistryRepository
from .sqlalchemy_repository import SqlAlchemyRegistryRepository

__all__ = [
    "InMemoryRegistryRepository",
    "SqlAlchemyRegistryRepository",
]
