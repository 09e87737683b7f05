"""Vote domain service."""

from uuid import uuid4

import logfire
from sqlalchemy.exc import IntegrityError

from lounge.domain.error import DuplicateVoteError, InvalidStateError, NotFoundError
from lounge.domain.model.clock import utcnow
from lounge.domain.model.vote import Vote
from lounge.domain.repository import VoteRepository
from lounge.domain.value import SuggestionId, UserId, VoteId

from .base import Service
from .suggestion_service import SuggestionService

# Name of the (user_id, suggestion_id) unique constraint
UNIQUE_VOTE_CONSTRAINT = "unique_suggestion_vote"


def _is_duplicate_vote(error: IntegrityError) -> bool:
    """Whether an integrity error came from the vote uniqueness constraint."""
    return UNIQUE_VOTE_CONSTRAINT in str(error)


class VoteService(Service):
    """Domain service for vote operations."""

    def __init__(
        self,
        vote_repository: VoteRepository,
        suggestion_service: SuggestionService,
    ) -> None:
        """Initialize vote service.

        Args:
            vote_repository: Vote repository
            suggestion_service: Suggestion domain service
        """
        self.vote_repository = vote_repository
        self.suggestion_service = suggestion_service

    async def has_voted(self, user_id: UserId, suggestion_id: SuggestionId) -> bool:
        """Check whether a user already voted for a suggestion."""
        vote = await self.vote_repository.find_by_user_and_suggestion(
            user_id, suggestion_id
        )
        return vote is not None

    async def record_vote(self, user_id: UserId, suggestion_id: SuggestionId) -> Vote:
        """Insert a vote record and count it on the suggestion.

        The unique constraint is the final arbiter, so two concurrent
        requests from the same user cannot both succeed. The insert and the
        pending-only increment are one ledger write: a suggestion resolved
        after the caller's status check leaves neither a vote row nor a
        changed counter.

        Raises:
            DuplicateVoteError: If the user already voted for the suggestion
            InvalidStateError: If the suggestion is no longer pending
        """
        if await self.has_voted(user_id, suggestion_id):
            logfire.warn(
                "Duplicate vote attempt",
                user_id=str(user_id),
                suggestion_id=str(suggestion_id),
            )
            raise DuplicateVoteError(str(user_id), str(suggestion_id))

        vote = Vote(
            id=VoteId(uuid4()),
            suggestion_id=suggestion_id,
            user_id=user_id,
            created_at=utcnow(),
        )

        try:
            counted = await self.vote_repository.save_and_count(vote)
        except IntegrityError as e:
            if not _is_duplicate_vote(e):
                raise
            logfire.warn(
                "Duplicate vote lost insert race",
                user_id=str(user_id),
                suggestion_id=str(suggestion_id),
            )
            raise DuplicateVoteError(str(user_id), str(suggestion_id)) from e

        if not counted:
            logfire.warn(
                "Suggestion resolved while voting",
                suggestion_id=str(suggestion_id),
            )
            raise InvalidStateError(str(suggestion_id), "resolved", "vote for")

        return vote

    async def vote_for_suggestion(
        self, suggestion_id: SuggestionId, user_id: UserId
    ) -> Vote:
        """Vote for a pending suggestion.

        Creates the vote record and increments the suggestion's vote
        counter as one ledger write.

        Args:
            suggestion_id: Suggestion ID
            user_id: User ID

        Returns:
            Created vote

        Raises:
            NotFoundError: If the suggestion does not exist
            InvalidStateError: If the suggestion is already resolved
            DuplicateVoteError: If the user already voted
        """
        with logfire.span(
            "vote_service.vote_for_suggestion",
            suggestion_id=str(suggestion_id),
            user_id=str(user_id),
        ):
            suggestion = await self.suggestion_service.get_suggestion_by_id(
                suggestion_id
            )
            if not suggestion:
                raise NotFoundError("Suggestion", str(suggestion_id))

            if not suggestion.is_pending:
                logfire.warn(
                    "Vote on resolved suggestion",
                    suggestion_id=str(suggestion_id),
                    status=suggestion.status.value,
                )
                raise InvalidStateError(
                    str(suggestion_id), suggestion.status.value, "vote for"
                )

            vote = await self.record_vote(user_id, suggestion_id)

            logfire.info(
                "Vote recorded",
                suggestion_id=str(suggestion_id),
                user_id=str(user_id),
            )
            return vote

    async def get_user_votes_for_suggestions(
        self, user_id: UserId, suggestion_ids: list[SuggestionId]
    ) -> dict[SuggestionId, bool]:
        """Check which suggestions a user has voted on.

        Args:
            user_id: User ID
            suggestion_ids: Suggestions to check

        Returns:
            Dictionary mapping suggestion ID to whether the user has voted
        """
        if not suggestion_ids:
            return {}

        # Batch query to fetch all votes at once (avoid N+1)
        votes = await self.vote_repository.find_by_user_and_suggestions(
            user_id=user_id, suggestion_ids=suggestion_ids
        )
        voted_ids = {vote.suggestion_id for vote in votes}
        return {sid: sid in voted_ids for sid in suggestion_ids}
