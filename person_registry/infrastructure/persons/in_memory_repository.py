"""
Adapter: volatile in-memory Person storage.

Implements PersonsRepository port.
Nothing survives a process restart.
"""

import logging
import threading
from typing import Optional
from uuid import UUID

from person_registry.domain.persons.entities import Person
from person_registry.domain.persons.errors import (
    PersonAlreadyExists,
    PersonDoesNotExist,
)
from person_registry.domain.persons.ports import PersonsRepository
from person_registry.domain.persons.results import (
    CreateResult,
    DeleteResult,
    Failure,
    Outcome,
    Success,
    UpdateResult,
)

logger = logging.getLogger(__name__)

DEFAULT_STRIPES = 16


class InMemoryPersonsRepository(PersonsRepository):
    """Lock-striped dictionary keyed by person id.

    Every check-then-act sequence on a single key runs while holding the
    stripe lock for that key, so concurrent creates, updates and deletes
    of the same id serialize. Operations on different stripes proceed
    independently. Locks are only held for dictionary access and never
    across an await.
    """

    def __init__(self, stripes: int = DEFAULT_STRIPES) -> None:
        """Initialize an empty store.

        Args:
            stripes: Number of locks the key space is partitioned into.

        Raises:
            ValueError: If ``stripes`` is less than 1.
        """
        if stripes < 1:
            raise ValueError(f"stripes must be at least 1, got {stripes}")
        self._store: dict[UUID, Person] = {}
        self._locks = [threading.Lock() for _ in range(stripes)]

    def _lock_for(self, person_id: UUID) -> threading.Lock:
        return self._locks[hash(person_id) % len(self._locks)]

    def __len__(self) -> int:
        return len(self._store)

    async def create(
        self, person: Person
    ) -> Outcome[CreateResult, PersonAlreadyExists]:
        with self._lock_for(person.id):
            if person.id in self._store:
                logger.warning("Create collided with existing id=%s", person.id)
                return Failure(PersonAlreadyExists(person.id))
            self._store[person.id] = person
        logger.debug("Stored person id=%s", person.id)
        return Success(CreateResult(person))

    async def read(self, person_id: UUID) -> Optional[Person]:
        return self._store.get(person_id)

    async def update(
        self, person: Person
    ) -> Outcome[UpdateResult, PersonDoesNotExist]:
        with self._lock_for(person.id):
            if person.id not in self._store:
                return Failure(PersonDoesNotExist(person.id))
            self._store[person.id] = person
        logger.debug("Replaced person id=%s", person.id)
        return Success(UpdateResult(person))

    async def delete(
        self, person_id: UUID
    ) -> Outcome[DeleteResult, PersonDoesNotExist]:
        with self._lock_for(person_id):
            removed = self._store.pop(person_id, None)
        if removed is None:
            return Failure(PersonDoesNotExist(person_id))
        logger.debug("Removed person id=%s", person_id)
        return Success(DeleteResult(person_id))

    async def all(self) -> list[Person]:
        # dict.copy() snapshots atomically; iterating the live dict could
        # race with a concurrent insert from another thread.
        return list(self._store.copy().values())
