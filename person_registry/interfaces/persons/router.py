"""
FastAPI router for the persons bounded context.

All routes delegate to the PersonsMediator. No business logic here.
Payload validation and outcome mapping happen in the mediator.
"""

import logging
from typing import Any
from uuid import UUID

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from person_registry.interfaces.persons.dependencies import (
    get_persons_mediator,
    read_json_body,
)
from person_registry.interfaces.persons.mediator import ApiResponse, PersonsMediator
from person_registry.interfaces.persons.schemas import (
    DeletePersonResponse,
    ErrorResponse,
    PersonResponse,
)
from person_registry.shared.security.rate_limiting import (
    default_rate_limit,
    limiter,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/persons", tags=["persons"])

NOT_FOUND = {404: {"model": ErrorResponse}}
BAD_REQUEST = {400: {"model": ErrorResponse}}


def _to_json(response: ApiResponse) -> JSONResponse:
    return JSONResponse(status_code=response.status_code, content=response.body)


@router.post(
    "",
    status_code=201,
    response_model=PersonResponse,
    responses=BAD_REQUEST,
    summary="Create a person",
    description="Register a person under a freshly generated id.",
)
@limiter.limit(default_rate_limit)
async def create_person(
    request: Request,
    payload: Any = Depends(read_json_body),
    mediator: PersonsMediator = Depends(get_persons_mediator),
) -> JSONResponse:
    logger.debug("POST /persons")
    return _to_json(await mediator.create(payload))


@router.get(
    "",
    response_model=list[PersonResponse],
    summary="List persons",
    description="Return every stored person in no particular order.",
)
@limiter.limit(default_rate_limit)
async def list_persons(
    request: Request,
    mediator: PersonsMediator = Depends(get_persons_mediator),
) -> JSONResponse:
    logger.debug("GET /persons")
    return _to_json(await mediator.list_all())


@router.get(
    "/{person_id}",
    response_model=PersonResponse,
    responses={**BAD_REQUEST, **NOT_FOUND},
    summary="Read a person",
)
@limiter.limit(default_rate_limit)
async def read_person(
    request: Request,
    person_id: UUID,
    mediator: PersonsMediator = Depends(get_persons_mediator),
) -> JSONResponse:
    logger.debug("GET /persons/%s", person_id)
    return _to_json(await mediator.read(person_id))


@router.put(
    "/{person_id}",
    response_model=PersonResponse,
    responses={**BAD_REQUEST, **NOT_FOUND},
    summary="Update a person",
    description="Partially update a person. Omitted fields are left unchanged.",
)
@limiter.limit(default_rate_limit)
async def update_person(
    request: Request,
    person_id: UUID,
    payload: Any = Depends(read_json_body),
    mediator: PersonsMediator = Depends(get_persons_mediator),
) -> JSONResponse:
    logger.debug("PUT /persons/%s", person_id)
    return _to_json(await mediator.update(person_id, payload))


@router.delete(
    "/{person_id}",
    response_model=DeletePersonResponse,
    responses={**BAD_REQUEST, **NOT_FOUND},
    summary="Delete a person",
)
@limiter.limit(default_rate_limit)
async def delete_person(
    request: Request,
    person_id: UUID,
    mediator: PersonsMediator = Depends(get_persons_mediator),
) -> JSONResponse:
    logger.debug("DELETE /persons/%s", person_id)
    return _to_json(await mediator.delete(person_id))
