"""
Domain layer package.

Contains pure business logic: entities, validation rules and port
interfaces. No framework imports, no IO.
"""
