"""Domain model entities for Lounge."""

from lounge.domain.model.category import Category
from lounge.domain.model.suggestion import Suggestion
from lounge.domain.model.user import User
from lounge.domain.model.vote import Vote

__all__ = [
    "Category",
    "Suggestion",
    "User",
    "Vote",
]
