"""In-memory suggestion repository for testing."""

from datetime import datetime
from typing import Optional

from lounge.domain.model.suggestion import Suggestion
from lounge.domain.repository.suggestion import SuggestionRepository
from lounge.domain.value import DayWindow, SuggestionId, SuggestionStatus, UserId


def _by_votes(suggestions: list[Suggestion]) -> list[Suggestion]:
    # list.sort is stable, so equal votes keep insertion order
    return sorted(suggestions, key=lambda s: s.votes, reverse=True)


class InMemorySuggestionRepository(SuggestionRepository):
    """In-memory implementation of SuggestionRepository for testing.

    Dicts preserve insertion order, which stands in for submission order.
    None of the methods suspend, so each call is atomic on the event loop.
    """

    def __init__(self) -> None:
        self._suggestions: dict[SuggestionId, Suggestion] = {}

    async def find_by_id(self, suggestion_id: SuggestionId) -> Optional[Suggestion]:
        """Find a suggestion by ID."""
        return self._suggestions.get(suggestion_id)

    async def save(self, suggestion: Suggestion) -> Suggestion:
        """Insert a suggestion."""
        self._suggestions[suggestion.id] = suggestion
        return suggestion

    async def find_pending_in_window(self, window: DayWindow) -> list[Suggestion]:
        """Find today's pending suggestions, most voted first."""
        return _by_votes(
            [
                s
                for s in self._suggestions.values()
                if s.is_pending and window.contains(s.created_at)
            ]
        )

    async def find_all(self) -> list[Suggestion]:
        """Find every suggestion, newest first."""
        return sorted(
            self._suggestions.values(), key=lambda s: s.created_at, reverse=True
        )

    async def find_top_voted(self, limit: int = 5) -> list[Suggestion]:
        """Find the most voted pending suggestions."""
        pending = [s for s in self._suggestions.values() if s.is_pending]
        return _by_votes(pending)[:limit]

    async def count_by_user_in_window(self, user_id: UserId, window: DayWindow) -> int:
        """Count a user's suggestions inside a day window."""
        return sum(
            1
            for s in self._suggestions.values()
            if s.user_id == user_id and window.contains(s.created_at)
        )

    async def lock_user_submissions(self, user_id: UserId) -> None:
        """No-op: calls never suspend, so submissions cannot interleave."""

    async def increment_votes(self, suggestion_id: SuggestionId) -> bool:
        """Increment votes by 1 (pending suggestions only)."""
        suggestion = self._suggestions.get(suggestion_id)
        if not suggestion or not suggestion.is_pending:
            return False
        self._suggestions[suggestion_id] = suggestion.model_copy(
            update={"votes": suggestion.votes + 1}
        )
        return True

    async def update_status(
        self,
        suggestion_id: SuggestionId,
        status: SuggestionStatus,
        resolved_at: datetime,
    ) -> Optional[Suggestion]:
        """Resolve a suggestion only if it is still pending."""
        suggestion = self._suggestions.get(suggestion_id)
        if not suggestion or not suggestion.is_pending:
            return None
        updated = suggestion.model_copy(
            update={"status": status, "resolved_at": resolved_at}
        )
        self._suggestions[suggestion_id] = updated
        return updated
