"""Domain value objects for Lounge."""

from lounge.domain.value.identifiers import (
    CategoryId,
    SuggestionId,
    UserId,
    VoteId,
)
from lounge.domain.value.types import (
    CategoryType,
    ContentType,
    DayWindow,
    SuggestionStatus,
    UserRole,
)

__all__ = [
    # Identifiers
    "UserId",
    "CategoryId",
    "SuggestionId",
    "VoteId",
    # Types
    "CategoryType",
    "ContentType",
    "DayWindow",
    "SuggestionStatus",
    "UserRole",
]
