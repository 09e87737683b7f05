"""Repository interfaces for the Lounge domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from lounge.domain.repository.category import CategoryRepository
from lounge.domain.repository.suggestion import SuggestionRepository
from lounge.domain.repository.user import UserRepository
from lounge.domain.repository.vote import VoteRepository

__all__ = [
    "CategoryRepository",
    "SuggestionRepository",
    "UserRepository",
    "VoteRepository",
]
