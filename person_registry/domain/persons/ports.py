"""
Port interfaces (ABCs) for the persons bounded context.

Ports define the contracts that the domain requires from the outside world.
Infrastructure adapters implement these interfaces.
The domain layer never depends on concrete implementations.
"""

from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from person_registry.domain.persons.entities import Person
from person_registry.domain.persons.errors import (
    PersonAlreadyExists,
    PersonDoesNotExist,
)
from person_registry.domain.persons.results import (
    CreateResult,
    DeleteResult,
    Outcome,
    UpdateResult,
)


class PersonsRepository(ABC):
    """Port for storing and retrieving Person records.

    All operations are coroutines. Domain-level failures are returned
    as Failure values and never raised across this boundary.
    """

    @abstractmethod
    async def create(
        self, person: Person
    ) -> Outcome[CreateResult, PersonAlreadyExists]:
        """Store a new person.

        Returns:
            Success(CreateResult), or Failure(PersonAlreadyExists) if an
            entry is already stored under ``person.id``.
        """
        raise NotImplementedError

    @abstractmethod
    async def read(self, person_id: UUID) -> Optional[Person]:
        """Return the stored person, or None if absent."""
        raise NotImplementedError

    @abstractmethod
    async def update(
        self, person: Person
    ) -> Outcome[UpdateResult, PersonDoesNotExist]:
        """Replace the stored value under ``person.id``.

        This is a full replacement, not a patch.

        Returns:
            Success(UpdateResult), or Failure(PersonDoesNotExist) if no
            entry is stored under ``person.id``.
        """
        raise NotImplementedError

    @abstractmethod
    async def delete(
        self, person_id: UUID
    ) -> Outcome[DeleteResult, PersonDoesNotExist]:
        """Remove the entry stored under ``person_id``.

        Returns:
            Success(DeleteResult), or Failure(PersonDoesNotExist) if no
            entry is stored under ``person_id``.
        """
        raise NotImplementedError

    @abstractmethod
    async def all(self) -> list[Person]:
        """Return every stored person, in no particular order."""
        raise NotImplementedError
