"""Domain services."""

from .base import Service
from .jwt_service import JWTService
from .quota_service import QuotaService
from .suggestion_service import SuggestionService
from .vote_service import VoteService

__all__ = [
    "JWTService",
    "QuotaService",
    "Service",
    "SuggestionService",
    "VoteService",
]
