"""
Use case: Look up a person by id.

Input: person id
Output: Optional[Person]
Side effects: None (read-only query).
Failure cases: None. Absence is reported as None.
"""

from typing import Optional
from uuid import UUID

from person_registry.domain.persons.entities import Person
from person_registry.domain.persons.ports import PersonsRepository


class GetPersonUseCase:
    """Read-only lookup of a single person."""

    def __init__(self, repository: PersonsRepository) -> None:
        self._repository = repository

    async def execute(self, person_id: UUID) -> Optional[Person]:
        return await self._repository.read(person_id)
