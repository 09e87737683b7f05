"""PostgreSQL repository implementations."""

from lounge.persistence.repository.category import PostgresCategoryRepository
from lounge.persistence.repository.suggestion import PostgresSuggestionRepository
from lounge.persistence.repository.user import PostgresUserRepository
from lounge.persistence.repository.vote import PostgresVoteRepository

__all__ = [
    "PostgresCategoryRepository",
    "PostgresSuggestionRepository",
    "PostgresUserRepository",
    "PostgresVoteRepository",
]
