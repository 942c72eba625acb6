"""
Use case: Remove a person.

Input: person id
Output: Outcome[DeleteResult, PersonDoesNotExist]
Side effects: Removes the stored person.
Failure cases: PersonDoesNotExist.
"""

import logging
from uuid import UUID

from person_registry.domain.persons.errors import PersonDoesNotExist
from person_registry.domain.persons.ports import PersonsRepository
from person_registry.domain.persons.results import DeleteResult, Outcome

logger = logging.getLogger(__name__)


class DeletePersonUseCase:
    """Removes a person from the repository."""

    def __init__(self, repository: PersonsRepository) -> None:
        self._repository = repository

    async def execute(
        self, person_id: UUID
    ) -> Outcome[DeleteResult, PersonDoesNotExist]:
        logger.info("Deleting person id=%s", person_id)
        return await self._repository.delete(person_id)
