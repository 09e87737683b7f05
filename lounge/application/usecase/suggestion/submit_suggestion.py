"""Submit suggestion use case."""

from pydantic import BaseModel

from lounge.domain.service import SuggestionService

from ..ids import parse_user_id
from .items import SuggestionItem, SuggestionItemBuilder


class SubmitSuggestionRequest(BaseModel):
    """Submit suggestion request.

    Type and category are plain strings so that the domain, not the
    transport, decides what counts as a recognised value.
    """

    user_id: str  # User ID from authenticated user
    title: str
    type: str
    category_id: str


class SubmitSuggestionUseCase:
    """Use case for proposing new content to vote on."""

    def __init__(
        self,
        suggestion_service: SuggestionService,
        item_builder: SuggestionItemBuilder,
    ) -> None:
        """Initialize submit suggestion use case.

        Args:
            suggestion_service: Suggestion domain service
            item_builder: Builds enriched response items
        """
        self.suggestion_service = suggestion_service
        self.item_builder = item_builder

    async def execute(self, request: SubmitSuggestionRequest) -> SuggestionItem:
        """Execute submit flow.

        Raises:
            QuotaExceededError: If the daily allowance is used up
            ValidationError: If title, type or category is invalid
        """
        suggestion = await self.suggestion_service.submit_suggestion(
            user_id=parse_user_id(request.user_id),
            title=request.title,
            content_type=request.type,
            category_id=request.category_id,
        )
        return await self.item_builder.build_one(suggestion)
