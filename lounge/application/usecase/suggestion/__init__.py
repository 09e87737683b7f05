"""Suggestion use cases."""

from .items import SuggestionItem, SuggestionItemBuilder
from .list_suggestions import (
    GetTopVotedRequest,
    GetTopVotedUseCase,
    ListAllSuggestionsUseCase,
    ListSuggestionsResponse,
    ListTodaySuggestionsRequest,
    ListTodaySuggestionsUseCase,
)
from .resolve_suggestion import (
    ResolveSuggestionRequest,
    ResolveSuggestionResponse,
    ResolveSuggestionUseCase,
)
from .submit_suggestion import SubmitSuggestionRequest, SubmitSuggestionUseCase

__all__ = [
    "GetTopVotedRequest",
    "GetTopVotedUseCase",
    "ListAllSuggestionsUseCase",
    "ListSuggestionsResponse",
    "ListTodaySuggestionsRequest",
    "ListTodaySuggestionsUseCase",
    "ResolveSuggestionRequest",
    "ResolveSuggestionResponse",
    "ResolveSuggestionUseCase",
    "SubmitSuggestionRequest",
    "SubmitSuggestionUseCase",
    "SuggestionItem",
    "SuggestionItemBuilder",
]
