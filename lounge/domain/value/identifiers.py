"""Strongly typed identifiers for Lounge domain entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting.
"""

from typing import NewType
from uuid import UUID

UserId = NewType("UserId", UUID)
CategoryId = NewType("CategoryId", UUID)
SuggestionId = NewType("SuggestionId", UUID)
VoteId = NewType("VoteId", UUID)
