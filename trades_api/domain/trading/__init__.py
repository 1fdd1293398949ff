"""
Trading bounded context, domain layer.

- Trade entity and validation
- Persistence and event publishing ports
- Best-effort "trade created" notification
"""
