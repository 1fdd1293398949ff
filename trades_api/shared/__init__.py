"""
Shared module package.

Cross-cutting concerns used across layers:
- Error handling and mapping
- Logging configuration
"""
