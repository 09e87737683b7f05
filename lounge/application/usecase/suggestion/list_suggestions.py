"""Suggestion listing use cases."""

from pydantic import BaseModel, Field

from lounge.domain.service import SuggestionService, VoteService

from ..ids import parse_user_id
from .items import SuggestionItem, SuggestionItemBuilder


class ListSuggestionsResponse(BaseModel):
    """Suggestion listing response."""

    suggestions: list[SuggestionItem]
    total: int


class ListTodaySuggestionsRequest(BaseModel):
    """Request for today's voting list."""

    user_id: str | None = None  # Set when the caller is authenticated


class ListTodaySuggestionsUseCase:
    """Today's pending suggestions for the guest voting screen."""

    def __init__(
        self,
        suggestion_service: SuggestionService,
        vote_service: VoteService,
        item_builder: SuggestionItemBuilder,
    ) -> None:
        self.suggestion_service = suggestion_service
        self.vote_service = vote_service
        self.item_builder = item_builder

    async def execute(
        self, request: ListTodaySuggestionsRequest
    ) -> ListSuggestionsResponse:
        """List today's pending suggestions, most voted first.

        Authenticated callers also get their own vote state per item.
        """
        suggestions = await self.suggestion_service.get_pending_today()

        voted = None
        if request.user_id:
            voted = await self.vote_service.get_user_votes_for_suggestions(
                user_id=parse_user_id(request.user_id),
                suggestion_ids=[s.id for s in suggestions],
            )

        items = await self.item_builder.build(suggestions, voted=voted)
        return ListSuggestionsResponse(suggestions=items, total=len(items))


class ListAllSuggestionsUseCase:
    """Every suggestion with its resolution state (admin)."""

    def __init__(
        self,
        suggestion_service: SuggestionService,
        item_builder: SuggestionItemBuilder,
    ) -> None:
        self.suggestion_service = suggestion_service
        self.item_builder = item_builder

    async def execute(self) -> ListSuggestionsResponse:
        """List all suggestions, newest first."""
        suggestions = await self.suggestion_service.get_all_suggestions()
        items = await self.item_builder.build(suggestions)
        return ListSuggestionsResponse(suggestions=items, total=len(items))


class GetTopVotedRequest(BaseModel):
    """Request for the top-voted list."""

    limit: int = Field(default=5, ge=1, le=100)


class GetTopVotedUseCase:
    """Most voted pending suggestions (admin dashboard)."""

    def __init__(
        self,
        suggestion_service: SuggestionService,
        item_builder: SuggestionItemBuilder,
    ) -> None:
        self.suggestion_service = suggestion_service
        self.item_builder = item_builder

    async def execute(self, request: GetTopVotedRequest) -> ListSuggestionsResponse:
        """List pending suggestions by votes, capped at ``limit``."""
        suggestions = await self.suggestion_service.get_top_voted(request.limit)
        items = await self.item_builder.build(suggestions)
        return ListSuggestionsResponse(suggestions=items, total=len(items))
