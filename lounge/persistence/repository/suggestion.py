"""PostgreSQL implementation of Suggestion repository."""

from datetime import datetime
from typing import List, Optional

import logfire
from sqlalchemy import and_, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from lounge.domain.model import Suggestion
from lounge.domain.repository import SuggestionRepository
from lounge.domain.value import DayWindow, SuggestionId, SuggestionStatus, UserId
from lounge.persistence.mappers import row_to_suggestion, suggestion_to_dict
from lounge.persistence.tables import suggestions_table

# Most votes first; equal votes keep submission order
_BY_VOTES = (suggestions_table.c.votes.desc(), suggestions_table.c.created_at.asc())


class PostgresSuggestionRepository(SuggestionRepository):
    """PostgreSQL implementation of SuggestionRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, suggestion_id: SuggestionId) -> Optional[Suggestion]:
        """Find a suggestion by ID."""
        stmt = select(suggestions_table).where(suggestions_table.c.id == suggestion_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_suggestion(row._asdict()) if row else None

    async def save(self, suggestion: Suggestion) -> Suggestion:
        """Insert a suggestion."""
        stmt = insert(suggestions_table).values(**suggestion_to_dict(suggestion))
        await self.session.execute(stmt)
        await self.session.flush()
        return suggestion

    async def find_pending_in_window(self, window: DayWindow) -> List[Suggestion]:
        """Find today's pending suggestions, most voted first."""
        stmt = (
            select(suggestions_table)
            .where(
                and_(
                    suggestions_table.c.status == SuggestionStatus.PENDING.value,
                    suggestions_table.c.created_at >= window.start,
                    suggestions_table.c.created_at < window.end,
                )
            )
            .order_by(*_BY_VOTES)
        )
        result = await self.session.execute(stmt)
        return [row_to_suggestion(row._asdict()) for row in result.fetchall()]

    async def find_all(self) -> List[Suggestion]:
        """Find every suggestion, newest first."""
        stmt = select(suggestions_table).order_by(suggestions_table.c.created_at.desc())
        result = await self.session.execute(stmt)
        return [row_to_suggestion(row._asdict()) for row in result.fetchall()]

    async def find_top_voted(self, limit: int = 5) -> List[Suggestion]:
        """Find the most voted pending suggestions."""
        stmt = (
            select(suggestions_table)
            .where(suggestions_table.c.status == SuggestionStatus.PENDING.value)
            .order_by(*_BY_VOTES)
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return [row_to_suggestion(row._asdict()) for row in result.fetchall()]

    async def count_by_user_in_window(self, user_id: UserId, window: DayWindow) -> int:
        """Count a user's suggestions inside a day window."""
        stmt = select(func.count()).where(
            and_(
                suggestions_table.c.user_id == user_id,
                suggestions_table.c.created_at >= window.start,
                suggestions_table.c.created_at < window.end,
            )
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def lock_user_submissions(self, user_id: UserId) -> None:
        """Take a transaction-scoped advisory lock keyed on the user."""
        stmt = select(func.pg_advisory_xact_lock(func.hashtext(str(user_id))))
        await self.session.execute(stmt)

    async def increment_votes(self, suggestion_id: SuggestionId) -> bool:
        """Atomically increment votes by 1 (pending suggestions only)."""
        stmt = (
            update(suggestions_table)
            .where(suggestions_table.c.id == suggestion_id)
            .where(suggestions_table.c.status == SuggestionStatus.PENDING.value)
            .values(votes=suggestions_table.c.votes + 1)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def update_status(
        self,
        suggestion_id: SuggestionId,
        status: SuggestionStatus,
        resolved_at: datetime,
    ) -> Optional[Suggestion]:
        """Resolve a suggestion only if it is still pending."""
        with logfire.span(
            "suggestion_repository.update_status",
            suggestion_id=str(suggestion_id),
            status=status.value,
        ):
            stmt = (
                update(suggestions_table)
                .where(suggestions_table.c.id == suggestion_id)
                .where(suggestions_table.c.status == SuggestionStatus.PENDING.value)
                .values(status=status.value, resolved_at=resolved_at)
                .returning(*suggestions_table.c)
            )
            result = await self.session.execute(stmt)
            row = result.fetchone()
            await self.session.flush()
            return row_to_suggestion(row._asdict()) if row else None
