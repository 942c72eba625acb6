"""
Use case: List every stored person.

Input: None
Output: list[Person]
Side effects: None (read-only query).
Failure cases: None.
"""

from person_registry.domain.persons.entities import Person
from person_registry.domain.persons.ports import PersonsRepository


class ListPersonsUseCase:
    """Read-only query returning all persons in no particular order."""

    def __init__(self, repository: PersonsRepository) -> None:
        self._repository = repository

    async def execute(self) -> list[Person]:
        return await self._repository.all()
