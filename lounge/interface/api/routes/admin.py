"""Admin routes for reviewing suggestions."""

from typing import Literal

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Query

from lounge.application.usecase.suggestion import (
    GetTopVotedRequest,
    GetTopVotedUseCase,
    ListAllSuggestionsUseCase,
    ListSuggestionsResponse,
    ResolveSuggestionRequest,
    ResolveSuggestionResponse,
    ResolveSuggestionUseCase,
)
from lounge.config import VotingSettings
from lounge.domain.error import DomainError
from lounge.domain.service import JWTService
from lounge.interface.api.auth import require_admin
from lounge.interface.error import to_http_exception

router = APIRouter(prefix="/admin", tags=["admin"], route_class=DishkaRoute)


@router.get("/vote-suggestions", response_model=ListSuggestionsResponse)
async def list_all_suggestions(
    list_use_case: FromDishka[ListAllSuggestionsUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ListSuggestionsResponse:
    """List every suggestion with its resolution state, newest first."""
    require_admin(jwt_service, auth_token)
    return await list_use_case.execute()


@router.get("/top-voted", response_model=ListSuggestionsResponse)
async def get_top_voted(
    top_voted_use_case: FromDishka[GetTopVotedUseCase],
    jwt_service: FromDishka[JWTService],
    voting_settings: FromDishka[VotingSettings],
    limit: int | None = Query(default=None, ge=1, le=100),
    auth_token: str | None = Cookie(default=None),
) -> ListSuggestionsResponse:
    """List the most voted pending suggestions.

    Args:
        limit: Maximum number of items (defaults to VOTING__TOP_VOTED_LIMIT)
    """
    require_admin(jwt_service, auth_token)
    request = GetTopVotedRequest(limit=limit or voting_settings.top_voted_limit)
    return await top_voted_use_case.execute(request)


async def _resolve(
    use_case: ResolveSuggestionUseCase,
    suggestion_id: str,
    decision: Literal["approve", "reject"],
) -> ResolveSuggestionResponse:
    try:
        return await use_case.execute(
            ResolveSuggestionRequest(suggestion_id=suggestion_id, decision=decision)
        )
    except DomainError as e:
        logfire.warn(
            "Suggestion resolution rejected",
            suggestion_id=suggestion_id,
            decision=decision,
            error=str(e),
        )
        raise to_http_exception(e)


@router.post(
    "/vote-suggestions/{suggestion_id}/approve",
    response_model=ResolveSuggestionResponse,
)
async def approve_suggestion(
    suggestion_id: str,
    resolve_use_case: FromDishka[ResolveSuggestionUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ResolveSuggestionResponse:
    """Approve a pending suggestion.

    Raises:
        HTTPException: 401/403 for non-admins, 404 if not found,
            409 if already resolved
    """
    require_admin(jwt_service, auth_token)
    return await _resolve(resolve_use_case, suggestion_id, "approve")


@router.post(
    "/vote-suggestions/{suggestion_id}/reject",
    response_model=ResolveSuggestionResponse,
)
async def reject_suggestion(
    suggestion_id: str,
    resolve_use_case: FromDishka[ResolveSuggestionUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ResolveSuggestionResponse:
    """Reject a pending suggestion.

    Raises:
        HTTPException: 401/403 for non-admins, 404 if not found,
            409 if already resolved
    """
    require_admin(jwt_service, auth_token)
    return await _resolve(resolve_use_case, suggestion_id, "reject")
