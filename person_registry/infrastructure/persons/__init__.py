"""Infrastructure adapters for the persons bounded context."""
