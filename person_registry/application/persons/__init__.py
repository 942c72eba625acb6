"""
Application layer for the persons bounded context.

Use cases coordinate the Person entity and the repository port.
No framework or infrastructure imports allowed.
"""
