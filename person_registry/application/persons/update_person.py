"""
Use case: Partially update a stored person.

Input: person id, UpdatePersonCommand
Output: Outcome[UpdateResult, PersonDoesNotExist]
Side effects: Replaces the stored person.
Failure cases: PersonDoesNotExist, either on the initial read or when the
entry disappears between the read and the update.
"""

import logging
from uuid import UUID

from person_registry.application.persons.dtos import UpdatePersonCommand
from person_registry.domain.persons.errors import PersonDoesNotExist
from person_registry.domain.persons.ports import PersonsRepository
from person_registry.domain.persons.results import Failure, Outcome, UpdateResult

logger = logging.getLogger(__name__)


class UpdatePersonUseCase:
    """Merges provided fields onto the stored person and replaces it.

    The repository update is a full replacement, so the merge happens
    here. Fields absent from the command keep their stored values.
    """

    def __init__(self, repository: PersonsRepository) -> None:
        self._repository = repository

    async def execute(
        self, person_id: UUID, command: UpdatePersonCommand
    ) -> Outcome[UpdateResult, PersonDoesNotExist]:
        """Run the update use case.

        Args:
            person_id: Identity of the person to update.
            command: Fields to change.

        Returns:
            The repository outcome, or Failure(PersonDoesNotExist) when the
            person is not stored (update is then never attempted).
        """
        existing = await self._repository.read(person_id)
        if existing is None:
            logger.info("Update skipped, person id=%s not found", person_id)
            return Failure(PersonDoesNotExist(person_id))

        merged = existing.with_changes(**command.changes())
        return await self._repository.update(merged)
