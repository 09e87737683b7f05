"""Daily suggestion quota domain service."""

from datetime import datetime
from typing import Optional

import logfire

from lounge.config import VotingSettings
from lounge.domain.model.clock import utcnow
from lounge.domain.repository import SuggestionRepository
from lounge.domain.value import DayWindow, UserId

from .base import Service


class QuotaService(Service):
    """Computes how many suggestions a user may still submit today.

    The quota is derived from suggestion history; nothing is stored.
    """

    def __init__(
        self,
        suggestion_repository: SuggestionRepository,
        voting_settings: VotingSettings,
    ) -> None:
        """Initialize quota service.

        Args:
            suggestion_repository: Suggestion repository
            voting_settings: Voting configuration (daily maximum, timezone)
        """
        self.suggestion_repository = suggestion_repository
        self.voting_settings = voting_settings

    @property
    def max_daily_suggestions(self) -> int:
        """Configured daily maximum."""
        return self.voting_settings.max_daily_suggestions

    def current_window(self, now: Optional[datetime] = None) -> DayWindow:
        """Day window for "today" in the voting timezone.

        Args:
            now: Reference moment (defaults to the current time)

        Returns:
            Window from local midnight to the next midnight
        """
        return DayWindow.containing(now or utcnow(), self.voting_settings.tzinfo)

    async def used_suggestions(
        self, user_id: UserId, now: Optional[datetime] = None
    ) -> int:
        """Count suggestions the user created today."""
        window = self.current_window(now)
        return await self.suggestion_repository.count_by_user_in_window(
            user_id, window
        )

    async def remaining_suggestions(
        self, user_id: UserId, now: Optional[datetime] = None
    ) -> int:
        """Remaining suggestions for today, never below zero.

        Args:
            user_id: User ID
            now: Reference moment (defaults to the current time)

        Returns:
            max(0, max_daily_suggestions - suggestions created today)
        """
        with logfire.span("quota_service.remaining_suggestions", user_id=str(user_id)):
            used = await self.used_suggestions(user_id, now)
            remaining = max(0, self.max_daily_suggestions - used)
            logfire.debug(
                "Suggestion quota computed",
                user_id=str(user_id),
                used=used,
                remaining=remaining,
            )
            return remaining
