"""
Trades API: transactional trade creation service.

Application package root. Hexagonal architecture (ports & adapters):

Layers:
    - domain: Trade entity, validation rules, ports (ABCs), errors, notifier.
    - application: Use cases and DTOs.
    - infrastructure: SQLAlchemy storage and Event Grid publishing adapters.
    - interfaces: FastAPI routers and Pydantic schemas.
    - shared: Cross-cutting concerns (errors, logging).
"""
