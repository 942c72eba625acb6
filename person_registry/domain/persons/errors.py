"""
Repository error markers for the persons bounded context.

These are returned as values inside a Failure outcome, never raised.
They are mapped to HTTP responses at the interface layer.
No framework imports allowed.
"""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True)
class PersonsRepositoryError:
    """Base marker for all repository-level failures."""

    person_id: UUID

    @property
    def message(self) -> str:
        return f"Repository failure for person {self.person_id}"


@dataclass(frozen=True)
class PersonAlreadyExists(PersonsRepositoryError):
    """A create collided with an entry stored under the same identity."""

    @property
    def message(self) -> str:
        return f"Person with (id: {self.person_id}) already exists"


@dataclass(frozen=True)
class PersonDoesNotExist(PersonsRepositoryError):
    """A read, update or delete targeted an identity that is not stored."""

    @property
    def message(self) -> str:
        return f"Person with (id: {self.person_id}) does not exist"
