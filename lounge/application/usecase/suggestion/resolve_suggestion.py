"""Resolve (approve/reject) suggestion use case."""

from typing import Literal

from pydantic import BaseModel

from lounge.domain.service import SuggestionService

from ..ids import parse_suggestion_id
from .items import SuggestionItem, SuggestionItemBuilder


class ResolveSuggestionRequest(BaseModel):
    """Resolve suggestion request."""

    suggestion_id: str  # UUID string
    decision: Literal["approve", "reject"]


class ResolveSuggestionResponse(BaseModel):
    """Resolve suggestion response."""

    message: str
    suggestion: SuggestionItem


class ResolveSuggestionUseCase:
    """Use case for an admin resolving a pending suggestion."""

    def __init__(
        self,
        suggestion_service: SuggestionService,
        item_builder: SuggestionItemBuilder,
    ) -> None:
        """Initialize resolve suggestion use case.

        Args:
            suggestion_service: Suggestion domain service
            item_builder: Builds enriched response items
        """
        self.suggestion_service = suggestion_service
        self.item_builder = item_builder

    async def execute(
        self, request: ResolveSuggestionRequest
    ) -> ResolveSuggestionResponse:
        """Execute resolution flow.

        Raises:
            NotFoundError: If the suggestion does not exist
            InvalidStateError: If the suggestion is already resolved
        """
        suggestion_id = parse_suggestion_id(request.suggestion_id)

        if request.decision == "approve":
            suggestion = await self.suggestion_service.approve(suggestion_id)
            message = "Suggestion approved successfully"
        else:
            suggestion = await self.suggestion_service.reject(suggestion_id)
            message = "Suggestion rejected successfully"

        return ResolveSuggestionResponse(
            message=message,
            suggestion=await self.item_builder.build_one(suggestion),
        )
