"""
Domain entities for the persons bounded context.

Entities represent core business objects with identity and lifecycle.
They contain no framework imports and no IO operations.
"""

from dataclasses import dataclass, replace
from uuid import UUID


@dataclass(frozen=True)
class Person:
    """A registered person, identified by a server-generated UUID.

    Instances are immutable. An update produces a new value that
    keeps the same ``id``.
    """

    id: UUID
    first_name: str
    last_name: str
    student_id: str
    gender: str

    def with_changes(self, **changes: str) -> "Person":
        """Return a copy with the given fields replaced.

        Raises:
            ValueError: If the caller tries to change the identity.
        """
        if "id" in changes:
            raise ValueError("The identity of a Person cannot change")
        return replace(self, **changes)
