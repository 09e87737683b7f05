"""Suggestion domain service."""

from uuid import UUID, uuid4

import logfire
from pydantic import ValidationError as PydanticValidationError

from lounge.domain.error import (
    InvalidStateError,
    NotFoundError,
    QuotaExceededError,
    ValidationError,
)
from lounge.domain.model.clock import utcnow
from lounge.domain.model.suggestion import Suggestion
from lounge.domain.repository import CategoryRepository, SuggestionRepository
from lounge.domain.value import (
    CategoryId,
    ContentType,
    SuggestionId,
    SuggestionStatus,
    UserId,
)

from .base import Service
from .quota_service import QuotaService


class SuggestionService(Service):
    """Domain service for suggestion storage and lifecycle."""

    def __init__(
        self,
        suggestion_repository: SuggestionRepository,
        category_repository: CategoryRepository,
        quota_service: QuotaService,
    ) -> None:
        """Initialize suggestion service.

        Args:
            suggestion_repository: Suggestion repository
            category_repository: Category repository (for submission checks)
            quota_service: Daily quota service
        """
        self.suggestion_repository = suggestion_repository
        self.category_repository = category_repository
        self.quota_service = quota_service

    async def create_suggestion(
        self,
        title: str,
        content_type: ContentType | str,
        category_id: CategoryId | UUID | str,
        user_id: UserId,
    ) -> Suggestion:
        """Validate and insert a new pending suggestion.

        Args:
            title: Suggested title
            content_type: "movie" or "series"
            category_id: Category the content belongs to
            user_id: Proposing user

        Returns:
            Created suggestion (votes=0, status=pending)

        Raises:
            ValidationError: If title, type or category is not acceptable
        """
        with logfire.span(
            "suggestion_service.create_suggestion",
            user_id=str(user_id),
            title=title,
        ):
            try:
                resolved_type = ContentType(content_type)
            except ValueError:
                logfire.warn("Unknown content type", content_type=str(content_type))
                raise ValidationError(f"Unknown content type: {content_type}")

            try:
                resolved_category_id = CategoryId(UUID(str(category_id)))
            except ValueError:
                raise ValidationError(f"Invalid category id: {category_id}")

            category = await self.category_repository.find_by_id(resolved_category_id)
            if not category:
                logfire.warn("Unknown category", category_id=str(category_id))
                raise ValidationError(f"Unknown category: {category_id}")
            if not category.type.accepts(resolved_type):
                raise ValidationError(
                    f"Category '{category.name}' does not hold {resolved_type.value} content"
                )

            try:
                suggestion = Suggestion(
                    id=SuggestionId(uuid4()),
                    title=title,
                    type=resolved_type,
                    category_id=resolved_category_id,
                    user_id=user_id,
                    votes=0,
                    status=SuggestionStatus.PENDING,
                    created_at=utcnow(),
                )
            except PydanticValidationError as e:
                logfire.warn("Invalid suggestion data", error=str(e))
                first = e.errors()[0]
                field = ".".join(str(part) for part in first["loc"]) or "suggestion"
                raise ValidationError(f"Invalid {field}: {first['msg']}") from e

            saved = await self.suggestion_repository.save(suggestion)
            logfire.info(
                "Suggestion created",
                suggestion_id=str(saved.id),
                user_id=str(user_id),
            )
            return saved

    async def submit_suggestion(
        self,
        user_id: UserId,
        title: str,
        content_type: ContentType | str,
        category_id: CategoryId | UUID | str,
    ) -> Suggestion:
        """Submit a guest suggestion, honouring the daily quota.

        The user's submission lock is taken before the quota is read and is
        held until the request transaction ends, so the check and the insert
        act as one step per user.

        Raises:
            QuotaExceededError: If the user has no suggestions left today
            ValidationError: If the suggestion data is invalid
        """
        with logfire.span("suggestion_service.submit_suggestion", user_id=str(user_id)):
            await self.suggestion_repository.lock_user_submissions(user_id)
            remaining = await self.quota_service.remaining_suggestions(user_id)
            if remaining <= 0:
                logfire.warn("Daily suggestion quota exceeded", user_id=str(user_id))
                raise QuotaExceededError(
                    str(user_id), self.quota_service.max_daily_suggestions
                )

            return await self.create_suggestion(
                title=title,
                content_type=content_type,
                category_id=category_id,
                user_id=user_id,
            )

    async def get_suggestion_by_id(
        self, suggestion_id: SuggestionId
    ) -> Suggestion | None:
        """Get a suggestion by ID.

        Args:
            suggestion_id: Suggestion ID

        Returns:
            Suggestion if found, None otherwise
        """
        with logfire.span(
            "suggestion_service.get_suggestion_by_id",
            suggestion_id=str(suggestion_id),
        ):
            suggestion = await self.suggestion_repository.find_by_id(suggestion_id)
            if not suggestion:
                logfire.warn("Suggestion not found", suggestion_id=str(suggestion_id))
            return suggestion

    async def get_pending_today(self) -> list[Suggestion]:
        """Today's pending suggestions, most voted first."""
        window = self.quota_service.current_window()
        with logfire.span(
            "suggestion_service.get_pending_today", day_start=window.start.isoformat()
        ):
            return await self.suggestion_repository.find_pending_in_window(window)

    async def get_all_suggestions(self) -> list[Suggestion]:
        """All suggestions, newest first."""
        with logfire.span("suggestion_service.get_all_suggestions"):
            return await self.suggestion_repository.find_all()

    async def get_top_voted(self, limit: int = 5) -> list[Suggestion]:
        """Most voted pending suggestions."""
        with logfire.span("suggestion_service.get_top_voted", limit=limit):
            return await self.suggestion_repository.find_top_voted(limit)

    async def set_status(
        self, suggestion_id: SuggestionId, status: SuggestionStatus
    ) -> Suggestion:
        """Resolve a pending suggestion.

        Args:
            suggestion_id: Suggestion ID
            status: approved or rejected

        Returns:
            Resolved suggestion

        Raises:
            NotFoundError: If the suggestion does not exist
            InvalidStateError: If the suggestion is already resolved
        """
        if not status.is_terminal:
            raise ValidationError("Suggestions cannot be moved back to pending")

        action = "approve" if status == SuggestionStatus.APPROVED else "reject"
        with logfire.span(
            f"suggestion_service.{action}", suggestion_id=str(suggestion_id)
        ):
            updated = await self.suggestion_repository.update_status(
                suggestion_id, status, utcnow()
            )
            if updated:
                logfire.info(
                    "Suggestion resolved",
                    suggestion_id=str(suggestion_id),
                    status=status.value,
                )
                return updated

            # The conditional update matched nothing: find out why
            existing = await self.suggestion_repository.find_by_id(suggestion_id)
            if not existing:
                logfire.warn(
                    "Resolution of non-existent suggestion",
                    suggestion_id=str(suggestion_id),
                )
                raise NotFoundError("Suggestion", str(suggestion_id))

            logfire.warn(
                "Suggestion already resolved",
                suggestion_id=str(suggestion_id),
                status=existing.status.value,
            )
            raise InvalidStateError(str(suggestion_id), existing.status.value, action)

    async def approve(self, suggestion_id: SuggestionId) -> Suggestion:
        """Approve a pending suggestion."""
        return await self.set_status(suggestion_id, SuggestionStatus.APPROVED)

    async def reject(self, suggestion_id: SuggestionId) -> Suggestion:
        """Reject a pending suggestion."""
        return await self.set_status(suggestion_id, SuggestionStatus.REJECTED)
