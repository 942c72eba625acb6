"""
Use case: Register a new person.

Input: CreatePersonCommand
Output: Outcome[CreateResult, PersonAlreadyExists]
Side effects: Stores the person in the repository.
Failure cases: PersonAlreadyExists (identity collision).
"""

import logging
from typing import Callable, Optional
from uuid import UUID, uuid4

from person_registry.application.persons.dtos import CreatePersonCommand
from person_registry.domain.persons.entities import Person
from person_registry.domain.persons.errors import PersonAlreadyExists
from person_registry.domain.persons.ports import PersonsRepository
from person_registry.domain.persons.results import CreateResult, Outcome

logger = logging.getLogger(__name__)


class CreatePersonUseCase:
    """Builds a Person with a server-generated id and stores it."""

    def __init__(
        self,
        repository: PersonsRepository,
        id_factory: Optional[Callable[[], UUID]] = None,
    ) -> None:
        """Initialize the use case.

        Args:
            repository: Port used to store the new person.
            id_factory: Source of fresh identities. Defaults to uuid4.
        """
        self._repository = repository
        self._id_factory = id_factory or uuid4

    async def execute(
        self, command: CreatePersonCommand
    ) -> Outcome[CreateResult, PersonAlreadyExists]:
        """Run the create use case.

        Args:
            command: Validated person fields.

        Returns:
            The repository outcome of the create.
        """
        person = Person(
            id=self._id_factory(),
            first_name=command.first_name,
            last_name=command.last_name,
            student_id=command.student_id,
            gender=command.gender,
        )
        logger.info("Creating person id=%s", person.id)
        return await self._repository.create(person)
