"""Integration tests for the PostgreSQL voting repositories.

These tests need a running PostgreSQL (DATABASE__URL) and are skipped unless
LOUNGE_TEST_POSTGRES=1. The schema is created if missing.
"""

import asyncio
import os
from uuid import uuid4

import httpx
import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncEngine

from lounge.config import Settings
from lounge.domain.error import (
    DuplicateVoteError,
    InvalidStateError,
    QuotaExceededError,
)
from lounge.domain.model.clock import utcnow
from lounge.domain.repository import (
    CategoryRepository,
    SuggestionRepository,
    UserRepository,
    VoteRepository,
)
from lounge.domain.service import (
    JWTService,
    QuotaService,
    SuggestionService,
    VoteService,
)
from lounge.domain.value import ContentType, SuggestionStatus
from lounge.interface.api.app import create_app
from lounge.persistence.tables import metadata
from tests.conftest import make_category, make_suggestion, make_user
from tests.di import build_test_container

pytestmark = pytest.mark.skipif(
    os.environ.get("LOUNGE_TEST_POSTGRES") != "1",
    reason="Set LOUNGE_TEST_POSTGRES=1 to run against PostgreSQL",
)


@pytest_asyncio.fixture
async def postgres_container():
    container = build_test_container(unmock={"persistence"})
    engine = await container.get(AsyncEngine)
    async with engine.begin() as conn:
        await conn.run_sync(metadata.create_all)
    yield container
    await container.close()


async def _seed_pending(container):
    """Commit a category, proposer and pending suggestion in one request."""
    async with container() as request:
        category = await make_category(await request.get(CategoryRepository))
        proposer = await make_user(await request.get(UserRepository))
        suggestion = await make_suggestion(
            await request.get(SuggestionRepository), category.id, proposer.id
        )
    return suggestion


async def _vote(container, suggestion_id, user_id):
    async with container() as request:
        vote_service = await request.get(VoteService)
        return await vote_service.vote_for_suggestion(suggestion_id, user_id)


class TestPostgresVoting:
    """Counter and uniqueness guarantees backed by the database."""

    @pytest.mark.asyncio
    async def test_concurrent_votes_keep_counter_consistent(self, postgres_container):
        """Votes from separate transactions all land in the counter."""
        # Arrange
        suggestion = await _seed_pending(postgres_container)
        async with postgres_container() as request:
            user_repo = await request.get(UserRepository)
            voters = [await make_user(user_repo) for _ in range(10)]

        # Act
        await asyncio.gather(
            *(_vote(postgres_container, suggestion.id, v.id) for v in voters)
        )

        # Assert
        async with postgres_container() as request:
            stored = await (await request.get(SuggestionRepository)).find_by_id(
                suggestion.id
            )
            count = await (await request.get(VoteRepository)).count_by_suggestion(
                suggestion.id
            )
        assert stored.votes == 10
        assert count == 10

    @pytest.mark.asyncio
    async def test_concurrent_duplicate_votes_count_once(self, postgres_container):
        """The unique constraint lets only one of racing duplicates commit."""
        # Arrange
        suggestion = await _seed_pending(postgres_container)
        async with postgres_container() as request:
            voter = await make_user(await request.get(UserRepository))

        # Act
        results = await asyncio.gather(
            *(_vote(postgres_container, suggestion.id, voter.id) for _ in range(4)),
            return_exceptions=True,
        )

        # Assert
        failures = [r for r in results if isinstance(r, Exception)]
        assert len(failures) == 3
        assert all(isinstance(f, DuplicateVoteError) for f in failures)
        async with postgres_container() as request:
            stored = await (await request.get(SuggestionRepository)).find_by_id(
                suggestion.id
            )
        assert stored.votes == 1

    @pytest.mark.asyncio
    async def test_racing_resolutions_have_one_winner(self, postgres_container):
        """Compare-and-swap resolution lets exactly one admin decision through."""
        # Arrange
        suggestion = await _seed_pending(postgres_container)

        async def resolve(decision: SuggestionStatus):
            async with postgres_container() as request:
                service = await request.get(SuggestionService)
                return await service.set_status(suggestion.id, decision)

        # Act
        results = await asyncio.gather(
            resolve(SuggestionStatus.APPROVED),
            resolve(SuggestionStatus.REJECTED),
            return_exceptions=True,
        )

        # Assert
        winners = [r for r in results if not isinstance(r, Exception)]
        losers = [r for r in results if isinstance(r, Exception)]
        assert len(winners) == 1
        assert len(losers) == 1
        assert isinstance(losers[0], InvalidStateError)
        async with postgres_container() as request:
            stored = await (await request.get(SuggestionRepository)).find_by_id(
                suggestion.id
            )
        assert stored.status == winners[0].status
        assert stored.resolved_at is not None

    @pytest.mark.asyncio
    async def test_vote_on_resolved_suggestion_leaves_no_row(self, postgres_container):
        """A vote on a resolved suggestion leaves no vote row behind."""
        # Arrange
        suggestion = await _seed_pending(postgres_container)
        async with postgres_container() as request:
            await (await request.get(SuggestionService)).approve(suggestion.id)
            voter = await make_user(await request.get(UserRepository))

        # Act
        with pytest.raises(InvalidStateError):
            await _vote(postgres_container, suggestion.id, voter.id)

        # Assert
        async with postgres_container() as request:
            vote = await (
                await request.get(VoteRepository)
            ).find_by_user_and_suggestion(voter.id, suggestion.id)
        assert vote is None

    @pytest.mark.asyncio
    async def test_resolution_after_status_check_keeps_ledger_in_step(
        self, postgres_container, monkeypatch
    ):
        """A request that handles the conflict still commits, without the vote.

        Mirrors the HTTP path: the route turns the error into a response, so
        the request transaction commits and only the savepoint undoes the
        vote.
        """
        # Arrange
        suggestion = await _seed_pending(postgres_container)
        other = await _seed_pending(postgres_container)
        async with postgres_container() as request:
            await (await request.get(SuggestionService)).reject(suggestion.id)
            voter = await make_user(await request.get(UserRepository))

        async def stale_lookup(self, suggestion_id):
            return suggestion

        monkeypatch.setattr(SuggestionService, "get_suggestion_by_id", stale_lookup)

        # Act
        async with postgres_container() as request:
            vote_service = await request.get(VoteService)
            with pytest.raises(InvalidStateError, match="vote for"):
                await vote_service.vote_for_suggestion(suggestion.id, voter.id)
            # The transaction stays usable after the rolled back savepoint
            monkeypatch.undo()
            await vote_service.vote_for_suggestion(other.id, voter.id)

        # Assert
        async with postgres_container() as request:
            suggestion_repo = await request.get(SuggestionRepository)
            vote_repo = await request.get(VoteRepository)
            stored = await suggestion_repo.find_by_id(suggestion.id)
            stored_other = await suggestion_repo.find_by_id(other.id)
            count = await vote_repo.count_by_suggestion(suggestion.id)
            count_other = await vote_repo.count_by_suggestion(other.id)
        assert stored.status == SuggestionStatus.REJECTED
        assert count == stored.votes == 0
        assert count_other == stored_other.votes == 1

    @pytest.mark.asyncio
    async def test_http_vote_racing_rejection_keeps_ledger_in_step(
        self, postgres_container, monkeypatch
    ):
        """The 409 answer commits the request but not the vote."""
        # Arrange
        suggestion = await _seed_pending(postgres_container)
        async with postgres_container() as request:
            await (await request.get(SuggestionService)).reject(suggestion.id)
            voter = await make_user(await request.get(UserRepository))

        async def stale_lookup(self, suggestion_id):
            return suggestion

        monkeypatch.setattr(SuggestionService, "get_suggestion_by_id", stale_lookup)
        token = JWTService(auth_settings=Settings().auth).create_token(
            str(voter.id), voter.username, voter.role
        )
        app = create_app(container=postgres_container)

        # Act
        async with httpx.AsyncClient(
            transport=httpx.ASGITransport(app=app),
            base_url="http://test",
            cookies={"auth_token": token},
        ) as client:
            response = await client.post(f"/vote-suggestions/{suggestion.id}/vote")

        # Assert
        async with postgres_container() as request:
            stored = await (await request.get(SuggestionRepository)).find_by_id(
                suggestion.id
            )
            count = await (await request.get(VoteRepository)).count_by_suggestion(
                suggestion.id
            )
        assert response.status_code == 409
        assert count == stored.votes == 0

    @pytest.mark.asyncio
    async def test_concurrent_submissions_respect_daily_limit(
        self, postgres_container
    ):
        """Each submission runs in its own transaction; none overshoot."""
        # Arrange
        async with postgres_container() as request:
            category = await make_category(await request.get(CategoryRepository))
            proposer = await make_user(await request.get(UserRepository))
            limit = (
                await request.get(SuggestionService)
            ).quota_service.max_daily_suggestions

        async def submit(i: int):
            async with postgres_container() as request:
                service = await request.get(SuggestionService)
                return await service.submit_suggestion(
                    user_id=proposer.id,
                    title=f"Movie {i}",
                    content_type=ContentType.MOVIE,
                    category_id=category.id,
                )

        # Act
        results = await asyncio.gather(
            *(submit(i) for i in range(limit + 2)), return_exceptions=True
        )

        # Assert
        failures = [r for r in results if isinstance(r, Exception)]
        assert len(failures) == 2
        assert all(isinstance(f, QuotaExceededError) for f in failures)
        async with postgres_container() as request:
            remaining = await (
                await request.get(QuotaService)
            ).remaining_suggestions(proposer.id)
        assert remaining == 0

    @pytest.mark.asyncio
    async def test_unknown_ids_do_not_match(self, postgres_container):
        async with postgres_container() as request:
            repo = await request.get(SuggestionRepository)
            assert await repo.increment_votes(uuid4()) is False
            assert (
                await repo.update_status(
                    uuid4(), SuggestionStatus.APPROVED, utcnow()
                )
                is None
            )
