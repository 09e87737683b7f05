"""Suggestion repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional

from lounge.domain.model.suggestion import Suggestion
from lounge.domain.value import DayWindow, SuggestionId, SuggestionStatus, UserId


class SuggestionRepository(ABC):
    """Repository for Suggestion aggregate.

    Defines the contract for suggestion persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, suggestion_id: SuggestionId) -> Optional[Suggestion]:
        """Find a suggestion by ID.

        Args:
            suggestion_id: The suggestion's unique identifier

        Returns:
            The suggestion if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, suggestion: Suggestion) -> Suggestion:
        """Save a new suggestion.

        Args:
            suggestion: The suggestion to insert

        Returns:
            The saved suggestion
        """
        pass

    @abstractmethod
    async def find_pending_in_window(self, window: DayWindow) -> List[Suggestion]:
        """Find pending suggestions created inside a day window.

        Sorted by votes descending; ties keep insertion order (oldest first).

        Args:
            window: Day window to filter creation time by

        Returns:
            List of pending suggestions
        """
        pass

    @abstractmethod
    async def find_all(self) -> List[Suggestion]:
        """Find every suggestion, newest first.

        Returns:
            List of all suggestions sorted by created_at descending
        """
        pass

    @abstractmethod
    async def find_top_voted(self, limit: int = 5) -> List[Suggestion]:
        """Find the most voted pending suggestions.

        Args:
            limit: Maximum number of suggestions to return

        Returns:
            Pending suggestions sorted by votes descending
        """
        pass

    @abstractmethod
    async def count_by_user_in_window(self, user_id: UserId, window: DayWindow) -> int:
        """Count suggestions a user created inside a day window.

        Args:
            user_id: The proposing user's ID
            window: Day window to filter creation time by

        Returns:
            Number of suggestions
        """
        pass

    @abstractmethod
    async def lock_user_submissions(self, user_id: UserId) -> None:
        """Serialize a user's submissions until the current transaction ends.

        Held around the quota check and the insert so concurrent submissions
        by one user cannot overshoot the daily maximum.

        Args:
            user_id: The proposing user's ID
        """
        pass

    @abstractmethod
    async def increment_votes(self, suggestion_id: SuggestionId) -> bool:
        """Atomically increment votes by 1 on a pending suggestion.

        Uses SQL-level increment to avoid lost updates.

        Args:
            suggestion_id: The suggestion ID

        Returns:
            True if a pending suggestion was incremented, False otherwise
        """
        pass

    @abstractmethod
    async def update_status(
        self,
        suggestion_id: SuggestionId,
        status: SuggestionStatus,
        resolved_at: datetime,
    ) -> Optional[Suggestion]:
        """Resolve a suggestion if and only if it is still pending.

        Compare-and-swap on status so two concurrent resolutions cannot both win.

        Args:
            suggestion_id: The suggestion ID
            status: Terminal status to set
            resolved_at: Resolution timestamp

        Returns:
            The updated suggestion, or None if missing or no longer pending
        """
        pass
