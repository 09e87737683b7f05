"""Application layer DI providers."""

from dishka import Scope, provide

from lounge.application.usecase.quota import GetRemainingSuggestionsUseCase
from lounge.application.usecase.suggestion import (
    GetTopVotedUseCase,
    ListAllSuggestionsUseCase,
    ListTodaySuggestionsUseCase,
    ResolveSuggestionUseCase,
    SubmitSuggestionUseCase,
    SuggestionItemBuilder,
)
from lounge.application.usecase.vote import VoteForSuggestionUseCase
from lounge.domain.repository import CategoryRepository, UserRepository
from lounge.domain.service import QuotaService, SuggestionService, VoteService
from lounge.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    @provide(scope=Scope.REQUEST)
    def get_suggestion_item_builder(
        self,
        user_repository: UserRepository,
        category_repository: CategoryRepository,
    ) -> SuggestionItemBuilder:
        """Provide listing item builder."""
        return SuggestionItemBuilder(
            user_repository=user_repository,
            category_repository=category_repository,
        )

    # Suggestion use cases
    @provide(scope=Scope.REQUEST)
    def get_submit_suggestion_use_case(
        self,
        suggestion_service: SuggestionService,
        item_builder: SuggestionItemBuilder,
    ) -> SubmitSuggestionUseCase:
        """Provide submit suggestion use case."""
        return SubmitSuggestionUseCase(
            suggestion_service=suggestion_service, item_builder=item_builder
        )

    @provide(scope=Scope.REQUEST)
    def get_list_today_suggestions_use_case(
        self,
        suggestion_service: SuggestionService,
        vote_service: VoteService,
        item_builder: SuggestionItemBuilder,
    ) -> ListTodaySuggestionsUseCase:
        """Provide today's suggestions use case."""
        return ListTodaySuggestionsUseCase(
            suggestion_service=suggestion_service,
            vote_service=vote_service,
            item_builder=item_builder,
        )

    @provide(scope=Scope.REQUEST)
    def get_list_all_suggestions_use_case(
        self,
        suggestion_service: SuggestionService,
        item_builder: SuggestionItemBuilder,
    ) -> ListAllSuggestionsUseCase:
        """Provide all suggestions use case."""
        return ListAllSuggestionsUseCase(
            suggestion_service=suggestion_service, item_builder=item_builder
        )

    @provide(scope=Scope.REQUEST)
    def get_top_voted_use_case(
        self,
        suggestion_service: SuggestionService,
        item_builder: SuggestionItemBuilder,
    ) -> GetTopVotedUseCase:
        """Provide top voted use case."""
        return GetTopVotedUseCase(
            suggestion_service=suggestion_service, item_builder=item_builder
        )

    @provide(scope=Scope.REQUEST)
    def get_resolve_suggestion_use_case(
        self,
        suggestion_service: SuggestionService,
        item_builder: SuggestionItemBuilder,
    ) -> ResolveSuggestionUseCase:
        """Provide resolve suggestion use case."""
        return ResolveSuggestionUseCase(
            suggestion_service=suggestion_service, item_builder=item_builder
        )

    # Vote use cases
    @provide(scope=Scope.REQUEST)
    def get_vote_for_suggestion_use_case(
        self, vote_service: VoteService
    ) -> VoteForSuggestionUseCase:
        """Provide vote use case."""
        return VoteForSuggestionUseCase(vote_service=vote_service)

    # Quota use cases
    @provide(scope=Scope.REQUEST)
    def get_remaining_suggestions_use_case(
        self, quota_service: QuotaService
    ) -> GetRemainingSuggestionsUseCase:
        """Provide remaining suggestions use case."""
        return GetRemainingSuggestionsUseCase(quota_service=quota_service)
