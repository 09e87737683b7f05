"""Domain value objects for Lounge.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

from datetime import datetime, time, timedelta, timezone, tzinfo
from enum import Enum

from pydantic import model_validator

from lounge.domain.value.common import ValueObject


class ContentType(str, Enum):
    """Kind of content a suggestion proposes."""

    MOVIE = "movie"
    SERIES = "series"


class CategoryType(str, Enum):
    """Kind of content a category holds."""

    MOVIE = "movie"
    SERIES = "series"
    BOTH = "both"

    def accepts(self, content_type: ContentType) -> bool:
        """Whether content of the given type may be filed under this category."""
        return self == CategoryType.BOTH or self.value == content_type.value


class SuggestionStatus(str, Enum):
    """Status of a suggestion.

    pending -> approved | rejected; both resolutions are terminal.
    """

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"

    @property
    def is_terminal(self) -> bool:
        """Whether no further transition is allowed."""
        return self != SuggestionStatus.PENDING


class UserRole(str, Enum):
    """Portal role carried in the session token."""

    GUEST = "guest"
    ADMIN = "admin"


class DayWindow(ValueObject):
    """Half-open [start, end) interval covering one voting day.

    Day boundaries are midnight in the configured voting timezone.
    """

    start: datetime
    end: datetime

    @model_validator(mode="after")
    def validate_bounds(self) -> "DayWindow":
        """Validate that the window is aware and non-empty."""
        if self.start.tzinfo is None or self.end.tzinfo is None:
            raise ValueError("Day window bounds must be timezone-aware")
        if self.end <= self.start:
            raise ValueError("Day window end must be after start")
        return self

    @classmethod
    def containing(cls, moment: datetime, tz: tzinfo) -> "DayWindow":
        """Build the window for the calendar day that contains ``moment`` in ``tz``."""
        local = moment.astimezone(tz)
        start = datetime.combine(local.date(), time.min, tzinfo=tz)
        # Add a calendar day in local terms so DST days stay midnight-aligned
        end = datetime.combine(local.date() + timedelta(days=1), time.min, tzinfo=tz)
        # Stored as UTC: same-tzinfo arithmetic would ignore the DST offset change
        return cls(
            start=start.astimezone(timezone.utc), end=end.astimezone(timezone.utc)
        )

    def contains(self, moment: datetime) -> bool:
        """Check whether a moment falls inside the window."""
        return self.start <= moment < self.end
