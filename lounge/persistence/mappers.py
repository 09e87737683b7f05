"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict
from uuid import UUID

from lounge.domain.model import Category, Suggestion, User, Vote
from lounge.domain.value import (
    CategoryId,
    CategoryType,
    ContentType,
    SuggestionId,
    SuggestionStatus,
    UserId,
    UserRole,
    VoteId,
)


def _uuid(value: Any) -> UUID:
    """Normalise a UUID column value (drivers may return str)."""
    return UUID(value) if isinstance(value, str) else value


def row_to_suggestion(row: Dict[str, Any]) -> Suggestion:
    """Convert database row to Suggestion domain model.

    Args:
        row: Database row as dict

    Returns:
        Suggestion domain model
    """
    return Suggestion(
        id=SuggestionId(_uuid(row["id"])),
        title=row["title"],
        type=ContentType(row["type"]),
        category_id=CategoryId(_uuid(row["category_id"])),
        user_id=UserId(_uuid(row["user_id"])),
        votes=row["votes"],
        status=SuggestionStatus(row["status"]),
        created_at=row["created_at"],
        resolved_at=row.get("resolved_at"),
    )


def suggestion_to_dict(suggestion: Suggestion) -> Dict[str, Any]:
    """Convert Suggestion domain model to database dict.

    Args:
        suggestion: Suggestion domain model

    Returns:
        Dict suitable for database insertion
    """
    return {
        "id": suggestion.id,
        "title": suggestion.title,
        "type": suggestion.type.value,
        "category_id": suggestion.category_id,
        "user_id": suggestion.user_id,
        "votes": suggestion.votes,
        "status": suggestion.status.value,
        "created_at": suggestion.created_at,
        "resolved_at": suggestion.resolved_at,
    }


def row_to_vote(row: Dict[str, Any]) -> Vote:
    """Convert database row to Vote domain model."""
    return Vote(
        id=VoteId(_uuid(row["id"])),
        suggestion_id=SuggestionId(_uuid(row["suggestion_id"])),
        user_id=UserId(_uuid(row["user_id"])),
        created_at=row["created_at"],
    )


def vote_to_dict(vote: Vote) -> Dict[str, Any]:
    """Convert Vote domain model to database dict."""
    return vote.model_dump()


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model."""
    return User(
        id=UserId(_uuid(row["id"])),
        username=row["username"],
        display_name=row["display_name"],
        role=UserRole(row["role"]),
        created_at=row["created_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict."""
    data = user.model_dump()
    data["role"] = user.role.value
    return data


def row_to_category(row: Dict[str, Any]) -> Category:
    """Convert database row to Category domain model."""
    return Category(
        id=CategoryId(_uuid(row["id"])),
        name=row["name"],
        type=CategoryType(row["type"]),
    )


def category_to_dict(category: Category) -> Dict[str, Any]:
    """Convert Category domain model to database dict."""
    return {"id": category.id, "name": category.name, "type": category.type.value}
