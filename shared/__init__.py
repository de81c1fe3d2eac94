"""
Shared modules used by the REST API: configuration, infrastructure,
security helpers, schemas and exceptions.
"""
