"""Parsing of string identifiers coming from the interface layer."""

from uuid import UUID

from lounge.domain.error import NotFoundError
from lounge.domain.value import SuggestionId, UserId


def parse_suggestion_id(value: str) -> SuggestionId:
    """Parse a suggestion ID; malformed IDs cannot exist, so they are not found."""
    try:
        return SuggestionId(UUID(value))
    except ValueError:
        raise NotFoundError("Suggestion", value)


def parse_user_id(value: str) -> UserId:
    """Parse an authenticated user's ID."""
    return UserId(UUID(value))
