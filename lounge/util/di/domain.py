"""Domain layer DI providers."""

from dishka import Scope, provide

from lounge.config import AuthSettings, VotingSettings
from lounge.domain.repository import (
    CategoryRepository,
    SuggestionRepository,
    VoteRepository,
)
from lounge.domain.service import (
    JWTService,
    QuotaService,
    SuggestionService,
    VoteService,
)
from lounge.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_quota_service(
        self,
        suggestion_repository: SuggestionRepository,
        voting_settings: VotingSettings,
    ) -> QuotaService:
        """Provide daily quota domain service."""
        return QuotaService(
            suggestion_repository=suggestion_repository,
            voting_settings=voting_settings,
        )

    @provide
    def get_suggestion_service(
        self,
        suggestion_repository: SuggestionRepository,
        category_repository: CategoryRepository,
        quota_service: QuotaService,
    ) -> SuggestionService:
        """Provide suggestion domain service."""
        return SuggestionService(
            suggestion_repository=suggestion_repository,
            category_repository=category_repository,
            quota_service=quota_service,
        )

    @provide
    def get_vote_service(
        self,
        vote_repository: VoteRepository,
        suggestion_service: SuggestionService,
    ) -> VoteService:
        """Provide vote domain service."""
        return VoteService(
            vote_repository=vote_repository,
            suggestion_service=suggestion_service,
        )
