"""Listing items shared by the suggestion use cases."""

from datetime import datetime

from pydantic import BaseModel

from lounge.domain.model import Suggestion
from lounge.domain.repository import CategoryRepository, UserRepository
from lounge.domain.value import ContentType, SuggestionId, SuggestionStatus


class SuggestionItem(BaseModel):
    """Suggestion as shown in voting and admin lists."""

    suggestion_id: str
    title: str
    type: ContentType
    category_id: str
    category_name: str | None = None
    user_id: str
    user_display_name: str | None = None
    votes: int
    status: SuggestionStatus
    created_at: datetime
    resolved_at: datetime | None = None
    has_voted: bool | None = None


class SuggestionItemBuilder:
    """Enriches suggestions with category names and proposer display names."""

    def __init__(
        self,
        user_repository: UserRepository,
        category_repository: CategoryRepository,
    ) -> None:
        self.user_repository = user_repository
        self.category_repository = category_repository

    async def build(
        self,
        suggestions: list[Suggestion],
        voted: dict[SuggestionId, bool] | None = None,
    ) -> list[SuggestionItem]:
        """Convert suggestions to listing items.

        Args:
            suggestions: Suggestions in display order
            voted: Optional per-suggestion vote state of the current user

        Returns:
            Items in the same order
        """
        if not suggestions:
            return []

        # Batch lookups (avoid N+1)
        users = await self.user_repository.find_by_ids(
            list({s.user_id for s in suggestions})
        )
        categories = await self.category_repository.find_by_ids(
            list({s.category_id for s in suggestions})
        )
        display_names = {user.id: user.display_name for user in users}
        category_names = {category.id: category.name for category in categories}

        return [
            SuggestionItem(
                suggestion_id=str(s.id),
                title=s.title,
                type=s.type,
                category_id=str(s.category_id),
                category_name=category_names.get(s.category_id),
                user_id=str(s.user_id),
                user_display_name=display_names.get(s.user_id),
                votes=s.votes,
                status=s.status,
                created_at=s.created_at,
                resolved_at=s.resolved_at,
                has_voted=voted.get(s.id, False) if voted is not None else None,
            )
            for s in suggestions
        ]

    async def build_one(self, suggestion: Suggestion) -> SuggestionItem:
        """Convert a single suggestion to an item."""
        items = await self.build([suggestion])
        return items[0]
