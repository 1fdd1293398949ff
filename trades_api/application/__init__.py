"""
Application layer package.

Use cases orchestrate domain objects and ports. No framework imports.
"""
