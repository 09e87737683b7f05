"""Remaining daily suggestions use case."""

from pydantic import BaseModel

from lounge.domain.service import QuotaService

from ..ids import parse_user_id


class GetRemainingSuggestionsRequest(BaseModel):
    """Remaining suggestions request."""

    user_id: str


class GetRemainingSuggestionsResponse(BaseModel):
    """Remaining suggestions response."""

    remaining: int
    max_daily: int


class GetRemainingSuggestionsUseCase:
    """How many suggestions the caller may still submit today."""

    def __init__(self, quota_service: QuotaService) -> None:
        self.quota_service = quota_service

    async def execute(
        self, request: GetRemainingSuggestionsRequest
    ) -> GetRemainingSuggestionsResponse:
        remaining = await self.quota_service.remaining_suggestions(
            parse_user_id(request.user_id)
        )
        return GetRemainingSuggestionsResponse(
            remaining=remaining,
            max_daily=self.quota_service.max_daily_suggestions,
        )
