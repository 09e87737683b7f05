"""PostgreSQL implementation of Vote repository."""

from typing import List, Optional, Sequence

from sqlalchemy import and_, func, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from lounge.domain.model import Vote
from lounge.domain.repository import SuggestionRepository, VoteRepository
from lounge.domain.value import SuggestionId, UserId
from lounge.persistence.mappers import row_to_vote, vote_to_dict
from lounge.persistence.tables import suggestion_votes_table


class PostgresVoteRepository(VoteRepository):
    """PostgreSQL implementation of VoteRepository."""

    def __init__(
        self, session: AsyncSession, suggestion_repository: SuggestionRepository
    ) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
            suggestion_repository: Suggestion repository sharing the session,
                used to increment the vote counter
        """
        self.session = session
        self.suggestion_repository = suggestion_repository

    async def find_by_user_and_suggestion(
        self, user_id: UserId, suggestion_id: SuggestionId
    ) -> Optional[Vote]:
        """Find a user's vote on a specific suggestion."""
        stmt = select(suggestion_votes_table).where(
            and_(
                suggestion_votes_table.c.user_id == user_id,
                suggestion_votes_table.c.suggestion_id == suggestion_id,
            )
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_vote(row._asdict()) if row else None

    async def save_and_count(self, vote: Vote) -> bool:
        """Insert a vote and increment the counter inside one savepoint.

        The savepoint is rolled back explicitly when the insert fails or the
        increment matches no pending row, so the request transaction never
        keeps an uncounted vote and stays usable afterwards.
        """
        stmt = insert(suggestion_votes_table).values(**vote_to_dict(vote))
        savepoint = await self.session.begin_nested()
        try:
            await self.session.execute(stmt)
            counted = await self.suggestion_repository.increment_votes(
                vote.suggestion_id
            )
        except Exception:
            await savepoint.rollback()
            raise

        if not counted:
            await savepoint.rollback()
            return False

        await savepoint.commit()
        return True

    async def count_by_suggestion(self, suggestion_id: SuggestionId) -> int:
        """Count votes on a suggestion."""
        stmt = select(func.count()).where(
            suggestion_votes_table.c.suggestion_id == suggestion_id
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def find_by_user_and_suggestions(
        self, user_id: UserId, suggestion_ids: Sequence[SuggestionId]
    ) -> List[Vote]:
        """Find a user's votes on multiple suggestions (batch query)."""
        if not suggestion_ids:
            return []

        stmt = select(suggestion_votes_table).where(
            and_(
                suggestion_votes_table.c.user_id == user_id,
                suggestion_votes_table.c.suggestion_id.in_(suggestion_ids),
            )
        )
        result = await self.session.execute(stmt)
        return [row_to_vote(row._asdict()) for row in result.fetchall()]
