"""Vote suggestion routes (guest side)."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, status
from pydantic import BaseModel

from lounge.application.usecase.suggestion import (
    ListSuggestionsResponse,
    ListTodaySuggestionsRequest,
    ListTodaySuggestionsUseCase,
    SubmitSuggestionRequest,
    SubmitSuggestionUseCase,
    SuggestionItem,
)
from lounge.application.usecase.vote import (
    VoteForSuggestionUseCase,
    VoteRequest,
    VoteResponse,
)
from lounge.domain.error import DomainError
from lounge.domain.service import JWTService
from lounge.interface.api.auth import require_user
from lounge.interface.error import to_http_exception

router = APIRouter(
    prefix="/vote-suggestions", tags=["vote-suggestions"], route_class=DishkaRoute
)


class SubmitSuggestionAPIRequest(BaseModel):
    """API request for proposing content."""

    title: str
    type: str  # "movie" or "series"
    category_id: str


@router.get("", response_model=ListSuggestionsResponse)
async def list_today_suggestions(
    list_use_case: FromDishka[ListTodaySuggestionsUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ListSuggestionsResponse:
    """List today's pending suggestions, most voted first.

    Authentication is optional. Signed-in callers also get ``has_voted``
    on every item.

    Args:
        list_use_case: Today's suggestions use case from DI
        jwt_service: JWT service for optional token verification (injected)
        auth_token: JWT token from cookie (optional)

    Returns:
        Today's voting list
    """
    payload = jwt_service.get_payload_from_token(auth_token)
    request = ListTodaySuggestionsRequest(
        user_id=payload.user_id if payload else None
    )
    return await list_use_case.execute(request)


@router.post("", response_model=SuggestionItem, status_code=status.HTTP_201_CREATED)
async def submit_suggestion(
    request: SubmitSuggestionAPIRequest,
    submit_use_case: FromDishka[SubmitSuggestionUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> SuggestionItem:
    """Propose a movie or series for today's vote.

    Requires authentication.

    Args:
        request: Suggestion data
        submit_use_case: Submit suggestion use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie

    Returns:
        Created suggestion

    Raises:
        HTTPException: 401 if not authenticated, 400 if invalid,
            403 if the daily limit is reached
    """
    payload = require_user(
        jwt_service, auth_token, "Authentication required to submit suggestions"
    )

    try:
        return await submit_use_case.execute(
            SubmitSuggestionRequest(
                user_id=payload.user_id,
                title=request.title,
                type=request.type,
                category_id=request.category_id,
            )
        )
    except DomainError as e:
        logfire.warn("Suggestion submission rejected", error=str(e))
        raise to_http_exception(e)


@router.post("/{suggestion_id}/vote", response_model=VoteResponse)
async def vote_for_suggestion(
    suggestion_id: str,
    vote_use_case: FromDishka[VoteForSuggestionUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> VoteResponse:
    """Vote for a pending suggestion.

    Requires authentication. Each user may vote once per suggestion.

    Args:
        suggestion_id: Suggestion UUID
        vote_use_case: Vote use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie

    Returns:
        Vote acknowledgement

    Raises:
        HTTPException: 401 if not authenticated, 403 if already voted,
            404 if not found, 409 if already resolved
    """
    payload = require_user(jwt_service, auth_token, "Authentication required to vote")

    try:
        return await vote_use_case.execute(
            VoteRequest(suggestion_id=suggestion_id, user_id=payload.user_id)
        )
    except DomainError as e:
        logfire.warn("Vote rejected", suggestion_id=suggestion_id, error=str(e))
        raise to_http_exception(e)
