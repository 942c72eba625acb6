"""
Tests for error envelope construction and validation error formatting.
"""

from person_registry.shared.errors.envelope import (
    error_envelope,
    format_field_path,
    format_validation_errors,
)


class TestFormatFieldPath:
    """Tests for dot/bracket path rendering."""

    def test_single_field(self) -> None:
        assert format_field_path(("lastName",)) == "lastName"

    def test_nested_with_index(self) -> None:
        assert format_field_path(("address", "lines", 0, "text")) == (
            "address.lines[0].text"
        )

    def test_root_location(self) -> None:
        assert format_field_path(()) == "body"


class TestFormatValidationErrors:
    """Tests for grouping pydantic-style errors by field."""

    def test_groups_messages_per_field(self) -> None:
        errors = [
            {"loc": ("lastName",), "msg": "Field required"},
            {"loc": ("gender",), "msg": "Input should be a valid string"},
            {"loc": ("gender",), "msg": "Second problem"},
        ]

        assert format_validation_errors(errors) == {
            "lastName": ["Field required"],
            "gender": ["Input should be a valid string", "Second problem"],
        }

    def test_strip_source_drops_request_location(self) -> None:
        errors = [{"loc": ("path", "person_id"), "msg": "Input should be a valid UUID"}]

        assert format_validation_errors(errors, strip_source=True) == {
            "person_id": ["Input should be a valid UUID"]
        }


class TestErrorEnvelope:
    def test_empty_errors(self) -> None:
        assert error_envelope("Oops") == {"code": "Oops", "errors": {}}
