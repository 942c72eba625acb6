"""
Pydantic schemas for person API request/response validation.

These schemas define the JSON contract. Field names are snake_case in
Python and camelCase on the wire.
No business logic belongs here.
"""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, StrictStr

from person_registry.domain.persons.entities import Person


class CreatePersonRequest(BaseModel):
    """Request schema for registering a person. All fields are required."""

    model_config = ConfigDict(populate_by_name=True)

    first_name: StrictStr = Field(..., alias="firstName", description="Given name")
    last_name: StrictStr = Field(..., alias="lastName", description="Family name")
    student_id: StrictStr = Field(
        ..., alias="studentId", description="Institution-issued student identifier"
    )
    gender: StrictStr = Field(..., description="Gender")


class UpdatePersonRequest(BaseModel):
    """Request schema for a partial update.

    Omitted or null fields leave the stored value unchanged.
    """

    model_config = ConfigDict(populate_by_name=True)

    first_name: Optional[StrictStr] = Field(default=None, alias="firstName")
    last_name: Optional[StrictStr] = Field(default=None, alias="lastName")
    student_id: Optional[StrictStr] = Field(default=None, alias="studentId")
    gender: Optional[StrictStr] = Field(default=None)


class PersonResponse(BaseModel):
    """Wire representation of a Person."""

    model_config = ConfigDict(populate_by_name=True)

    id: UUID
    first_name: str = Field(..., alias="firstName")
    last_name: str = Field(..., alias="lastName")
    student_id: str = Field(..., alias="studentId")
    gender: str

    @classmethod
    def from_entity(cls, person: Person) -> "PersonResponse":
        return cls(
            id=person.id,
            first_name=person.first_name,
            last_name=person.last_name,
            student_id=person.student_id,
            gender=person.gender,
        )


class DeletePersonResponse(BaseModel):
    """Response schema for a successful delete."""

    model_config = ConfigDict(populate_by_name=True)

    removed_id: str = Field(..., alias="removedId")


class ErrorResponse(BaseModel):
    """Error envelope returned on every failure."""

    code: str
    errors: dict[str, list[str]]
