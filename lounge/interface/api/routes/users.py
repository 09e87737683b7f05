"""Current user routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie

from lounge.application.usecase.quota import (
    GetRemainingSuggestionsRequest,
    GetRemainingSuggestionsResponse,
    GetRemainingSuggestionsUseCase,
)
from lounge.domain.service import JWTService
from lounge.interface.api.auth import require_user

router = APIRouter(prefix="/users", tags=["users"], route_class=DishkaRoute)


@router.get("/me/suggestions-remaining", response_model=GetRemainingSuggestionsResponse)
async def get_my_remaining_suggestions(
    remaining_use_case: FromDishka[GetRemainingSuggestionsUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> GetRemainingSuggestionsResponse:
    """How many suggestions the caller may still submit today.

    Example:
        GET /users/me/suggestions-remaining

        Response:
        {
            "remaining": 7,
            "max_daily": 10
        }
    """
    payload = require_user(jwt_service, auth_token)
    return await remaining_use_case.execute(
        GetRemainingSuggestionsRequest(user_id=payload.user_id)
    )
