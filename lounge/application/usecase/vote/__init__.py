"""Vote use cases."""

from .vote_for_suggestion import VoteForSuggestionUseCase, VoteRequest, VoteResponse

__all__ = [
    "VoteForSuggestionUseCase",
    "VoteRequest",
    "VoteResponse",
]
