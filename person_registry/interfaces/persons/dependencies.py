"""
Dependency injection for the persons bounded context.

Provides FastAPI dependency functions that hand the process-wide
repository to the mediator, and decode raw JSON request bodies.
"""

from typing import Any

from fastapi import Depends, Request

from person_registry.domain.persons.ports import PersonsRepository
from person_registry.interfaces.persons.mediator import PersonsMediator
from person_registry.shared.errors.exceptions import InvalidJsonBodyError


def get_persons_repository(request: Request) -> PersonsRepository:
    """Return the repository built by the composition root."""
    return request.app.state.persons_repository


def get_persons_mediator(
    repository: PersonsRepository = Depends(get_persons_repository),
) -> PersonsMediator:
    """Build a PersonsMediator over the shared repository."""
    return PersonsMediator(repository)


async def read_json_body(request: Request) -> Any:
    """Decode the request body without validating its shape.

    Raises:
        InvalidJsonBodyError: If the body is empty or not JSON.
    """
    try:
        return await request.json()
    except ValueError as exc:
        raise InvalidJsonBodyError(str(exc)) from exc
