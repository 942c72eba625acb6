"""
Error envelope construction.

Every error response body has the shape
``{"code": <string>, "errors": {<field path>: [<message>, ...]}}``.
"""

from collections.abc import Iterable, Mapping, Sequence
from typing import Any

VALIDATION_ERROR_CODE = "Validation Error"
INVALID_JSON_CODE = "Invalid Json"
DOES_NOT_EXIST_CODE = "Does not Exist"
COULD_NOT_FIND_KEY = "CouldNotFind"
INTERNAL_ERROR_CODE = "Internal Server Error"

ROOT_FIELD = "body"
_REQUEST_SOURCES = frozenset({"body", "path", "query", "header", "cookie"})


def error_envelope(code: str, errors: Mapping[str, list[str]] | None = None) -> dict[str, Any]:
    """Build an error envelope body."""
    return {"code": code, "errors": dict(errors or {})}


def format_field_path(loc: Sequence[str | int]) -> str:
    """Render a validation location as a dot/bracket path.

    ``("address", "lines", 0)`` becomes ``"address.lines[0]"``. An empty
    location refers to the document root.
    """
    path = ""
    for part in loc:
        if isinstance(part, int):
            path += f"[{part}]"
        elif path:
            path += f".{part}"
        else:
            path = str(part)
    return path or ROOT_FIELD


def format_validation_errors(
    errors: Iterable[Mapping[str, Any]], strip_source: bool = False
) -> dict[str, list[str]]:
    """Group pydantic-style error dicts by field path.

    Args:
        errors: Items carrying ``loc`` and ``msg`` keys.
        strip_source: Drop a leading request source (``body``, ``path``,
            ...) from each location, as FastAPI prepends one.

    Returns:
        Mapping of field path to the list of messages for that field.
    """
    grouped: dict[str, list[str]] = {}
    for error in errors:
        loc = tuple(error.get("loc", ()))
        if strip_source and loc and loc[0] in _REQUEST_SOURCES:
            loc = loc[1:]
        grouped.setdefault(format_field_path(loc), []).append(str(error["msg"]))
    return grouped
