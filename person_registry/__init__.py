"""
Person Registry — CRUD service for student person records.

Application package root. This is a small service using
hexagonal architecture (ports & adapters).

Bounded contexts:
    - persons: Create, read, update, delete and list Person records.

Layers:
    - domain: Entities, result values, ports (ABCs), error markers.
    - application: Use cases, DTOs, orchestration.
    - infrastructure: Adapters implementing domain ports.
    - interfaces: FastAPI routers, Pydantic schemas, response mediation.
    - shared: Cross-cutting concerns (errors, security, logging).
"""
