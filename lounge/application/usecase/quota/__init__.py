"""Quota use cases."""

from .get_remaining_suggestions import (
    GetRemainingSuggestionsRequest,
    GetRemainingSuggestionsResponse,
    GetRemainingSuggestionsUseCase,
)

__all__ = [
    "GetRemainingSuggestionsRequest",
    "GetRemainingSuggestionsResponse",
    "GetRemainingSuggestionsUseCase",
]
