"""Models for neo4j_testcontainers."""

from .runtime import Auth, DerivedRuntimeConfig

__all__ = [
    'Auth',
    'DerivedRuntimeConfig',
]
