"""Manager interface and in-memory implementation for entities."""

from abc import ABC, abstractmethod
from collections.abc import Iterator
from typing import Generic, Protocol, TypeVar

import structlog

logger = structlog.get_logger()


class Named(Protocol):
    """Any record that can be looked up by name."""

    @property
    def name(self) -> str: ...


E = TypeVar("E", bound=Named)


class Manager(ABC, Generic[E]):
    """Abstract base class for entity managers."""

    @abstractmethod
    def add(self, entity: E) -> E:
        """Add an entity and return it."""
        pass

    @abstractmethod
    def remove(self, name: str) -> E | None:
        """Remove entities by name and return the first one removed."""
        pass

    @abstractmethod
    def get(self, name: str) -> E | None:
        """Get the first entity with the given name."""
        pass

    @abstractmethod
    def list_all(self) -> tuple[E, ...]:
        """List all entities in insertion order."""
        pass


class EntityManager(Manager[E]):
    """In-memory, ordered collection of entities of a single kind.

    Names are not required to be unique. Lookups return the first match in
    insertion order, while removal drops every entity with the given name.
    """

    def __init__(self, label: str = "entity") -> None:
        """Initialize an empty manager.

        Args:
            label: Name of the managed kind, used in log events only
        """
        self.label = label
        self._entities: list[E] = []
        logger.debug("Manager initialized", label=label)

    def add(self, entity: E) -> E:
        self._entities.append(entity)
        logger.debug("Entity added", label=self.label, name=entity.name, count=len(self._entities))
        return entity

    def remove(self, name: str) -> E | None:
        entity = self.get(name)
        if entity is None:
            logger.debug("Entity to remove not found", label=self.label, name=name)
            return None

        before = len(self._entities)
        self._entities = [e for e in self._entities if e.name != name]
        logger.debug("Entity removed", label=self.label, name=name, removed=before - len(self._entities))
        return entity

    def get(self, name: str) -> E | None:
        for entity in self._entities:
            if entity.name == name:
                return entity
        return None

    def list_all(self) -> tuple[E, ...]:
        return tuple(self._entities)

    def __len__(self) -> int:
        return len(self._entities)

    def __iter__(self) -> Iterator[E]:
        return iter(self.list_all())
