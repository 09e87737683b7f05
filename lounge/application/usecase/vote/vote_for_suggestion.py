"""Vote for suggestion use case."""

from datetime import datetime

from pydantic import BaseModel

from lounge.domain.service import VoteService

from ..ids import parse_suggestion_id, parse_user_id


class VoteRequest(BaseModel):
    """Vote request."""

    suggestion_id: str  # UUID string
    user_id: str  # User ID from authenticated user


class VoteResponse(BaseModel):
    """Vote response."""

    message: str
    vote_id: str
    suggestion_id: str
    created_at: datetime


class VoteForSuggestionUseCase:
    """Use case for voting on a pending suggestion."""

    def __init__(self, vote_service: VoteService) -> None:
        """Initialize vote use case.

        Args:
            vote_service: Vote domain service
        """
        self.vote_service = vote_service

    async def execute(self, request: VoteRequest) -> VoteResponse:
        """Execute vote flow.

        Raises:
            NotFoundError: If the suggestion does not exist
            InvalidStateError: If the suggestion is already resolved
            DuplicateVoteError: If the user already voted
        """
        vote = await self.vote_service.vote_for_suggestion(
            parse_suggestion_id(request.suggestion_id),
            parse_user_id(request.user_id),
        )
        return VoteResponse(
            message="Vote recorded successfully",
            vote_id=str(vote.id),
            suggestion_id=str(vote.suggestion_id),
            created_at=vote.created_at,
        )
