"""
Shared error handling package.

Centralizes error-to-HTTP mapping so that request-level failures
are consistently translated into the error envelope.
"""
