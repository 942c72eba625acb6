"""
Request-level errors raised before a payload reaches a mediator.

Mapped to HTTP responses by the centralized error handlers.
"""


class InvalidJsonBodyError(Exception):
    """Raised when a request body cannot be decoded as JSON."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"Request body is not valid JSON: {detail}")
