"""
Request/response mediation for the persons bounded context.

Translates raw request payloads into use case calls, and repository
outcomes into HTTP-shaped responses. Validation failures and domain
failures are answered here as values; nothing is raised for them.
"""

import logging
from dataclasses import dataclass
from typing import Any, Optional
from uuid import UUID

from pydantic import ValidationError

from person_registry.application.persons.create_person import CreatePersonUseCase
from person_registry.application.persons.delete_person import DeletePersonUseCase
from person_registry.application.persons.dtos import (
    CreatePersonCommand,
    UpdatePersonCommand,
)
from person_registry.application.persons.get_person import GetPersonUseCase
from person_registry.application.persons.list_persons import ListPersonsUseCase
from person_registry.application.persons.update_person import UpdatePersonUseCase
from person_registry.domain.persons.entities import Person
from person_registry.domain.persons.errors import PersonDoesNotExist
from person_registry.domain.persons.ports import PersonsRepository
from person_registry.domain.persons.results import Failure
from person_registry.interfaces.persons.schemas import (
    CreatePersonRequest,
    DeletePersonResponse,
    PersonResponse,
    UpdatePersonRequest,
)
from person_registry.shared.errors.envelope import (
    COULD_NOT_FIND_KEY,
    DOES_NOT_EXIST_CODE,
    VALIDATION_ERROR_CODE,
    error_envelope,
    format_validation_errors,
)

logger = logging.getLogger(__name__)

HTTP_200 = 200
HTTP_201 = 201
HTTP_400 = 400
HTTP_404 = 404


@dataclass(frozen=True)
class ApiResponse:
    """HTTP-shaped result: a status code and a JSON-ready body."""

    status_code: int
    body: Any


def _person_body(person: Person) -> dict[str, Any]:
    return PersonResponse.from_entity(person).model_dump(mode="json", by_alias=True)


def _does_not_exist(person_id: UUID) -> ApiResponse:
    message = PersonDoesNotExist(person_id).message
    return ApiResponse(
        HTTP_404,
        error_envelope(DOES_NOT_EXIST_CODE, {COULD_NOT_FIND_KEY: [message]}),
    )


def _validation_failed(exc: ValidationError) -> ApiResponse:
    errors = format_validation_errors(exc.errors())
    logger.info("Payload validation failed for fields: %s", sorted(errors))
    return ApiResponse(HTTP_400, error_envelope(VALIDATION_ERROR_CODE, errors))


class PersonsMediator:
    """Reconciles person requests with repository outcomes.

    One method per route. Each returns an ApiResponse and never raises
    for validation or repository failures.
    """

    def __init__(
        self,
        repository: PersonsRepository,
        create_use_case: Optional[CreatePersonUseCase] = None,
    ) -> None:
        """Initialize the mediator.

        Args:
            repository: Store shared by every use case.
            create_use_case: Optional pre-built create use case, used to
                control identity generation.
        """
        self._create = create_use_case or CreatePersonUseCase(repository)
        self._get = GetPersonUseCase(repository)
        self._update = UpdatePersonUseCase(repository)
        self._delete = DeletePersonUseCase(repository)
        self._list = ListPersonsUseCase(repository)

    async def create(self, payload: Any) -> ApiResponse:
        """Validate a create payload and store a new person.

        Returns:
            201 with the created person, 400 with the validation envelope,
            or 400 carrying the conflict message on an identity collision.
        """
        try:
            request = CreatePersonRequest.model_validate(payload)
        except ValidationError as exc:
            return _validation_failed(exc)

        outcome = await self._create.execute(
            CreatePersonCommand(
                first_name=request.first_name,
                last_name=request.last_name,
                student_id=request.student_id,
                gender=request.gender,
            )
        )
        if isinstance(outcome, Failure):
            return ApiResponse(HTTP_400, error_envelope(outcome.error.message))
        return ApiResponse(HTTP_201, _person_body(outcome.value.person))

    async def read(self, person_id: UUID) -> ApiResponse:
        person = await self._get.execute(person_id)
        if person is None:
            logger.debug("Person id=%s not found", person_id)
            return _does_not_exist(person_id)
        return ApiResponse(HTTP_200, _person_body(person))

    async def update(self, person_id: UUID, payload: Any) -> ApiResponse:
        """Validate a partial update and apply it to the stored person.

        Returns:
            200 with the updated person, 400 with the validation envelope,
            or 404 when the person is missing (also when it vanished
            between the read and the update).
        """
        try:
            request = UpdatePersonRequest.model_validate(payload)
        except ValidationError as exc:
            return _validation_failed(exc)

        outcome = await self._update.execute(
            person_id,
            UpdatePersonCommand(
                first_name=request.first_name,
                last_name=request.last_name,
                student_id=request.student_id,
                gender=request.gender,
            ),
        )
        if isinstance(outcome, Failure):
            return _does_not_exist(person_id)
        return ApiResponse(HTTP_200, _person_body(outcome.value.person))

    async def delete(self, person_id: UUID) -> ApiResponse:
        outcome = await self._delete.execute(person_id)
        if isinstance(outcome, Failure):
            return _does_not_exist(person_id)
        body = DeletePersonResponse(removed_id=str(outcome.value.deleted_id))
        return ApiResponse(HTTP_200, body.model_dump(by_alias=True))

    async def list_all(self) -> ApiResponse:
        persons = await self._list.execute()
        return ApiResponse(HTTP_200, [_person_body(person) for person in persons])
