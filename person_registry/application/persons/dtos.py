"""
Data Transfer Objects for the persons application layer.

DTOs carry data between the interface and application layers.
They are plain dataclasses with no behavior.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class CreatePersonCommand:
    """Input DTO for registering a new person.

    Attributes:
        first_name: Given name.
        last_name: Family name.
        student_id: Institution-issued student identifier.
        gender: Free-form gender value.
    """

    first_name: str
    last_name: str
    student_id: str
    gender: str


@dataclass(frozen=True)
class UpdatePersonCommand:
    """Input DTO for a partial update.

    Fields left as None keep their stored value.
    """

    first_name: Optional[str] = None
    last_name: Optional[str] = None
    student_id: Optional[str] = None
    gender: Optional[str] = None

    def changes(self) -> dict[str, str]:
        """Return only the fields that were provided."""
        provided = {
            "first_name": self.first_name,
            "last_name": self.last_name,
            "student_id": self.student_id,
            "gender": self.gender,
        }
        return {name: value for name, value in provided.items() if value is not None}
