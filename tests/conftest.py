"""Test configuration and fixtures."""

from datetime import datetime
from uuid import uuid4

import logfire

from lounge.domain.model import Category, Suggestion, User
from lounge.domain.model.clock import utcnow
from lounge.domain.repository import (
    CategoryRepository,
    SuggestionRepository,
    UserRepository,
)
from lounge.domain.value import (
    CategoryId,
    CategoryType,
    ContentType,
    SuggestionId,
    SuggestionStatus,
    UserId,
    UserRole,
)

# Spans stay local during tests
logfire.configure(send_to_logfire=False, console=False)


async def make_user(
    user_repo: UserRepository,
    username: str | None = None,
    display_name: str = "Test Guest",
    role: UserRole = UserRole.GUEST,
) -> User:
    """Helper to store a portal user."""
    user = User(
        id=UserId(uuid4()),
        username=username or f"guest-{uuid4().hex[:8]}",
        display_name=display_name,
        role=role,
    )
    return await user_repo.save(user)


async def make_category(
    category_repo: CategoryRepository,
    name: str = "Drama",
    type: CategoryType = CategoryType.BOTH,
) -> Category:
    """Helper to store a media category."""
    category = Category(id=CategoryId(uuid4()), name=name, type=type)
    return await category_repo.save(category)


async def make_suggestion(
    suggestion_repo: SuggestionRepository,
    category_id: CategoryId,
    user_id: UserId,
    title: str = "Test Movie",
    type: ContentType = ContentType.MOVIE,
    votes: int = 0,
    status: SuggestionStatus = SuggestionStatus.PENDING,
    created_at: datetime | None = None,
) -> Suggestion:
    """Helper to store a suggestion with an explicit creation time.

    Resolved suggestions get a resolution time right after creation.
    """
    created = created_at or utcnow()
    suggestion = Suggestion(
        id=SuggestionId(uuid4()),
        title=title,
        type=type,
        category_id=category_id,
        user_id=user_id,
        votes=votes,
        status=status,
        created_at=created,
        resolved_at=None if status == SuggestionStatus.PENDING else created,
    )
    return await suggestion_repo.save(suggestion)
