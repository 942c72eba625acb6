"""HTTP interface for the persons bounded context."""
