"""
Interfaces layer package.

Contains FastAPI routers, Pydantic request/response schemas,
and the mediators that reconcile repository outcomes into
HTTP-shaped responses. No business logic belongs here.
"""
