"""PostgreSQL repository implementations."""

from linkbio.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresUserRepository",
]
