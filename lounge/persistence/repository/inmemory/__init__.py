"""In-memory repository implementations for testing."""

from .category import InMemoryCategoryRepository
from .suggestion import InMemorySuggestionRepository
from .user import InMemoryUserRepository
from .vote import InMemoryVoteRepository

__all__ = [
    "InMemoryCategoryRepository",
    "InMemorySuggestionRepository",
    "InMemoryUserRepository",
    "InMemoryVoteRepository",
]
