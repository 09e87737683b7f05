"""Unit tests for DayWindow and the suggestion model rules."""

from datetime import datetime, timedelta, timezone
from uuid import uuid4
from zoneinfo import ZoneInfo

import pytest
from pydantic import ValidationError

from lounge.domain.model import Suggestion
from lounge.domain.value import (
    CategoryId,
    CategoryType,
    ContentType,
    DayWindow,
    SuggestionId,
    SuggestionStatus,
    UserId,
)


class TestDayWindow:
    """Tests for DayWindow value object."""

    def test_window_is_utc_midnight_to_midnight(self):
        """Default UTC window spans one calendar day."""
        moment = datetime(2026, 5, 1, 15, 45, tzinfo=timezone.utc)

        window = DayWindow.containing(moment, timezone.utc)

        assert window.start == datetime(2026, 5, 1, tzinfo=timezone.utc)
        assert window.end == datetime(2026, 5, 2, tzinfo=timezone.utc)

    def test_window_is_half_open(self):
        """Start is inside the window, end belongs to the next day."""
        window = DayWindow.containing(
            datetime(2026, 5, 1, 12, tzinfo=timezone.utc), timezone.utc
        )

        assert window.contains(window.start)
        assert window.contains(window.end - timedelta(microseconds=1))
        assert not window.contains(window.end)

    def test_dst_day_stays_midnight_aligned(self):
        """A 23-hour DST day still ends at the next local midnight."""
        tz = ZoneInfo("Europe/Berlin")
        moment = datetime(2026, 3, 29, 12, tzinfo=tz)

        window = DayWindow.containing(moment, tz)

        assert window.end - window.start == timedelta(hours=23)
        assert window.end.astimezone(tz).hour == 0

    def test_naive_bounds_are_rejected(self):
        """Windows must be timezone-aware."""
        with pytest.raises(ValidationError):
            DayWindow(start=datetime(2026, 5, 1), end=datetime(2026, 5, 2))


class TestSuggestionModel:
    """Tests for Suggestion aggregate rules."""

    def _suggestion(self, **overrides) -> Suggestion:
        data = dict(
            id=SuggestionId(uuid4()),
            title="Dune",
            type=ContentType.MOVIE,
            category_id=CategoryId(uuid4()),
            user_id=UserId(uuid4()),
        )
        data.update(overrides)
        return Suggestion(**data)

    def test_defaults_are_pending_with_zero_votes(self):
        suggestion = self._suggestion()

        assert suggestion.status == SuggestionStatus.PENDING
        assert suggestion.votes == 0
        assert suggestion.is_pending

    def test_negative_votes_are_rejected(self):
        with pytest.raises(ValidationError):
            self._suggestion(votes=-1)

    def test_resolved_without_timestamp_is_rejected(self):
        with pytest.raises(ValidationError):
            self._suggestion(status=SuggestionStatus.APPROVED)

    def test_pending_with_timestamp_is_rejected(self):
        with pytest.raises(ValidationError):
            self._suggestion(resolved_at=datetime.now(timezone.utc))

    def test_title_over_300_characters_is_rejected(self):
        with pytest.raises(ValidationError):
            self._suggestion(title="x" * 301)


class TestCategoryType:
    """Tests for category/content compatibility."""

    def test_both_accepts_every_content_type(self):
        assert CategoryType.BOTH.accepts(ContentType.MOVIE)
        assert CategoryType.BOTH.accepts(ContentType.SERIES)

    def test_movie_category_rejects_series(self):
        assert CategoryType.MOVIE.accepts(ContentType.MOVIE)
        assert not CategoryType.MOVIE.accepts(ContentType.SERIES)


class TestSuggestionStatus:
    """Tests for status transitions."""

    def test_only_pending_is_open(self):
        assert not SuggestionStatus.PENDING.is_terminal
        assert SuggestionStatus.APPROVED.is_terminal
        assert SuggestionStatus.REJECTED.is_terminal

    def test_resolved_suggestion_is_not_pending(self):
        suggestion = Suggestion(
            id=SuggestionId(uuid4()),
            title="Dune",
            type=ContentType.MOVIE,
            category_id=CategoryId(uuid4()),
            user_id=UserId(uuid4()),
            status=SuggestionStatus.REJECTED,
            resolved_at=datetime.now(timezone.utc),
        )

        assert not suggestion.is_pending
