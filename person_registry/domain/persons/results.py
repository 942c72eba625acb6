"""
Outcome values returned by the persons repository.

Success and Failure form a tagged union so each repository operation
reports at most one error kind without raising.
"""

from dataclasses import dataclass
from typing import Generic, TypeVar, Union
from uuid import UUID

from person_registry.domain.persons.entities import Person

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True)
class Success(Generic[T]):
    """Successful outcome carrying the operation's payload."""

    value: T

    @property
    def is_success(self) -> bool:
        return True


@dataclass(frozen=True)
class Failure(Generic[E]):
    """Failed outcome carrying a typed error marker."""

    error: E

    @property
    def is_success(self) -> bool:
        return False


Outcome = Union[Success[T], Failure[E]]


@dataclass(frozen=True)
class CreateResult:
    """Outcome payload of a successful create."""

    person: Person

    @property
    def person_id(self) -> UUID:
        return self.person.id


@dataclass(frozen=True)
class UpdateResult:
    """Outcome payload of a successful update, carrying the stored value."""

    person: Person


@dataclass(frozen=True)
class DeleteResult:
    """Outcome payload of a successful delete."""

    deleted_id: UUID
