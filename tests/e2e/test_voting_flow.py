"""End-to-end tests for the daily voting HTTP API."""

from uuid import UUID, uuid4

import httpx
import pytest
import pytest_asyncio

from lounge.config import Settings
from lounge.domain.model import Category, User
from lounge.domain.repository import (
    CategoryRepository,
    SuggestionRepository,
    UserRepository,
    VoteRepository,
)
from lounge.domain.service import JWTService, SuggestionService
from lounge.domain.value import CategoryType, SuggestionId, UserRole
from lounge.interface.api.app import create_app
from tests.conftest import make_category, make_user
from tests.di import build_test_container


class Portal:
    """Test app wired to in-memory persistence, plus seeding helpers."""

    def __init__(self, container):
        self.container = container
        self.app = create_app(container=container)
        self.jwt_service = JWTService(auth_settings=Settings().auth)

    async def user(self, role: UserRole = UserRole.GUEST, **kwargs) -> User:
        return await make_user(
            await self.container.get(UserRepository), role=role, **kwargs
        )

    async def category(self, **kwargs) -> Category:
        return await make_category(
            await self.container.get(CategoryRepository), **kwargs
        )

    def client(self, user: User | None = None) -> httpx.AsyncClient:
        cookies = {}
        if user:
            cookies["auth_token"] = self.jwt_service.create_token(
                str(user.id), user.username, user.role
            )
        return httpx.AsyncClient(
            transport=httpx.ASGITransport(app=self.app),
            base_url="http://test",
            cookies=cookies,
        )


@pytest_asyncio.fixture
async def portal():
    container = build_test_container()
    yield Portal(container)
    await container.close()


async def _submit(client, category, title="Arrival", type="movie"):
    return await client.post(
        "/vote-suggestions",
        json={"title": title, "type": type, "category_id": str(category.id)},
    )


class TestHealth:
    @pytest.mark.asyncio
    async def test_health_reports_healthy(self, portal):
        async with portal.client() as client:
            response = await client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"


class TestSubmitAndVote:
    """Guest flow: submit, list, vote."""

    @pytest.mark.asyncio
    async def test_submit_vote_and_list(self, portal):
        """A submitted suggestion can be voted on and shows the vote."""
        # Arrange
        proposer = await portal.user(display_name="Ayla")
        voter = await portal.user()
        category = await portal.category(name="Drama")

        async with portal.client(proposer) as proposer_client:
            created = await _submit(proposer_client, category)
        suggestion_id = created.json()["suggestion_id"]

        # Act
        async with portal.client(voter) as voter_client:
            vote = await voter_client.post(f"/vote-suggestions/{suggestion_id}/vote")
            listing = await voter_client.get("/vote-suggestions")

        # Assert
        assert created.status_code == 201
        assert created.json()["status"] == "pending"
        assert created.json()["user_display_name"] == "Ayla"
        assert vote.status_code == 200
        assert vote.json()["message"] == "Vote recorded successfully"
        assert listing.status_code == 200
        items = listing.json()["suggestions"]
        assert len(items) == 1
        assert items[0]["votes"] == 1
        assert items[0]["has_voted"] is True
        assert items[0]["category_name"] == "Drama"

    @pytest.mark.asyncio
    async def test_anonymous_listing_is_public(self, portal):
        async with portal.client() as client:
            response = await client.get("/vote-suggestions")

        assert response.status_code == 200
        assert response.json() == {"suggestions": [], "total": 0}

    @pytest.mark.asyncio
    async def test_submit_without_cookie_is_unauthorized(self, portal):
        category = await portal.category()

        async with portal.client() as client:
            response = await _submit(client, category)

        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_submit_with_tampered_cookie_is_unauthorized(self, portal):
        category = await portal.category()

        async with portal.client() as client:
            client.cookies.set("auth_token", "not.a.token")
            response = await _submit(client, category)

        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_submit_invalid_type_is_bad_request(self, portal):
        user = await portal.user()
        category = await portal.category()

        async with portal.client(user) as client:
            response = await _submit(client, category, type="podcast")

        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_submit_with_missing_title_is_bad_request(self, portal):
        user = await portal.user()
        category = await portal.category()

        async with portal.client(user) as client:
            response = await client.post(
                "/vote-suggestions",
                json={"type": "movie", "category_id": str(category.id)},
            )

        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_submit_with_non_string_fields_is_bad_request(self, portal):
        user = await portal.user()
        category = await portal.category()

        async with portal.client(user) as client:
            numeric_title = await client.post(
                "/vote-suggestions",
                json={"title": 42, "type": "movie", "category_id": str(category.id)},
            )
            numeric_type = await client.post(
                "/vote-suggestions",
                json={"title": "Arrival", "type": 1, "category_id": str(category.id)},
            )
            numeric_category = await client.post(
                "/vote-suggestions",
                json={"title": "Arrival", "type": "movie", "category_id": 7},
            )
            remaining = await client.get("/users/me/suggestions-remaining")

        assert numeric_title.status_code == 400
        assert numeric_type.status_code == 400
        assert numeric_category.status_code == 400
        assert remaining.json()["remaining"] == remaining.json()["max_daily"]

    @pytest.mark.asyncio
    async def test_submit_into_incompatible_category_is_bad_request(self, portal):
        user = await portal.user()
        category = await portal.category(name="Films", type=CategoryType.MOVIE)

        async with portal.client(user) as client:
            response = await _submit(client, category, type="series")

        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_quota_exhaustion_is_forbidden(self, portal):
        """The submission after the daily maximum is refused."""
        # Arrange
        user = await portal.user()
        category = await portal.category()

        async with portal.client(user) as client:
            quota = (await client.get("/users/me/suggestions-remaining")).json()
            for i in range(quota["remaining"]):
                created = await _submit(client, category, title=f"Movie {i}")
                assert created.status_code == 201

            # Act
            refused = await _submit(client, category, title="One Too Many")
            after = await client.get("/users/me/suggestions-remaining")

        # Assert
        assert refused.status_code == 403
        assert after.json() == {"remaining": 0, "max_daily": quota["max_daily"]}

    @pytest.mark.asyncio
    async def test_second_vote_is_forbidden(self, portal):
        proposer = await portal.user()
        voter = await portal.user()
        category = await portal.category()
        async with portal.client(proposer) as client:
            suggestion_id = (await _submit(client, category)).json()["suggestion_id"]

        async with portal.client(voter) as client:
            first = await client.post(f"/vote-suggestions/{suggestion_id}/vote")
            second = await client.post(f"/vote-suggestions/{suggestion_id}/vote")
            listing = await client.get("/vote-suggestions")

        assert first.status_code == 200
        assert second.status_code == 403
        assert listing.json()["suggestions"][0]["votes"] == 1

    @pytest.mark.asyncio
    async def test_vote_on_unknown_or_malformed_id_is_not_found(self, portal):
        user = await portal.user()

        async with portal.client(user) as client:
            unknown = await client.post(f"/vote-suggestions/{uuid4()}/vote")
            malformed = await client.post("/vote-suggestions/abc/vote")

        assert unknown.status_code == 404
        assert malformed.status_code == 404

    @pytest.mark.asyncio
    async def test_vote_without_cookie_is_unauthorized(self, portal):
        async with portal.client() as client:
            response = await client.post(f"/vote-suggestions/{uuid4()}/vote")

        assert response.status_code == 401


class TestAdmin:
    """Admin review flow."""

    @pytest.mark.asyncio
    async def test_admin_endpoints_require_admin_role(self, portal):
        guest = await portal.user()

        async with portal.client() as anonymous:
            unauthenticated = await anonymous.get("/admin/vote-suggestions")
        async with portal.client(guest) as client:
            forbidden = await client.get("/admin/vote-suggestions")
            approve = await client.post(f"/admin/vote-suggestions/{uuid4()}/approve")

        assert unauthenticated.status_code == 401
        assert forbidden.status_code == 403
        assert approve.status_code == 403

    @pytest.mark.asyncio
    async def test_approve_then_vote_and_resolve_again_conflict(self, portal):
        """Resolved suggestions reject votes and further resolutions."""
        # Arrange
        admin = await portal.user(role=UserRole.ADMIN)
        guest = await portal.user()
        category = await portal.category()
        async with portal.client(guest) as client:
            suggestion_id = (await _submit(client, category)).json()["suggestion_id"]

        # Act
        async with portal.client(admin) as admin_client:
            approved = await admin_client.post(
                f"/admin/vote-suggestions/{suggestion_id}/approve"
            )
            rejected = await admin_client.post(
                f"/admin/vote-suggestions/{suggestion_id}/reject"
            )
            all_items = await admin_client.get("/admin/vote-suggestions")
        async with portal.client(guest) as client:
            vote = await client.post(f"/vote-suggestions/{suggestion_id}/vote")
            listing = await client.get("/vote-suggestions")

        # Assert
        assert approved.status_code == 200
        assert approved.json()["message"] == "Suggestion approved successfully"
        assert approved.json()["suggestion"]["status"] == "approved"
        assert rejected.status_code == 409
        assert vote.status_code == 409
        assert listing.json()["total"] == 0
        assert all_items.json()["suggestions"][0]["status"] == "approved"

    @pytest.mark.asyncio
    async def test_vote_racing_rejection_leaves_counter_and_ledger_in_step(
        self, portal, monkeypatch
    ):
        """A rejection landing after the vote's status check records nothing."""
        # Arrange
        admin = await portal.user(role=UserRole.ADMIN)
        guest = await portal.user()
        voter = await portal.user()
        category = await portal.category()
        async with portal.client(guest) as client:
            suggestion_id = (await _submit(client, category)).json()["suggestion_id"]

        suggestion_repo = await portal.container.get(SuggestionRepository)
        vote_repo = await portal.container.get(VoteRepository)
        sid = SuggestionId(UUID(suggestion_id))
        pending_snapshot = await suggestion_repo.find_by_id(sid)

        async with portal.client(admin) as admin_client:
            rejected = await admin_client.post(
                f"/admin/vote-suggestions/{suggestion_id}/reject"
            )

        # The vote's status check still sees the suggestion as pending
        async def stale_lookup(self, suggestion_id):
            return pending_snapshot

        monkeypatch.setattr(SuggestionService, "get_suggestion_by_id", stale_lookup)

        # Act
        async with portal.client(voter) as client:
            vote = await client.post(f"/vote-suggestions/{suggestion_id}/vote")

        # Assert
        stored = await suggestion_repo.find_by_id(sid)
        assert rejected.status_code == 200
        assert vote.status_code == 409
        assert stored.votes == 0
        assert await vote_repo.count_by_suggestion(sid) == stored.votes
        assert await vote_repo.find_by_user_and_suggestion(voter.id, sid) is None

    @pytest.mark.asyncio
    async def test_resolve_unknown_suggestion_is_not_found(self, portal):
        admin = await portal.user(role=UserRole.ADMIN)

        async with portal.client(admin) as client:
            response = await client.post(f"/admin/vote-suggestions/{uuid4()}/reject")

        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_top_voted_orders_and_limits(self, portal):
        admin = await portal.user(role=UserRole.ADMIN)
        proposer = await portal.user()
        category = await portal.category()
        voters = [await portal.user() for _ in range(3)]

        async with portal.client(proposer) as client:
            ids = [
                (await _submit(client, category, title=t)).json()["suggestion_id"]
                for t in ("One", "Two", "Three")
            ]
        # "Two" gets three votes, "Three" gets one
        for voter in voters:
            async with portal.client(voter) as client:
                await client.post(f"/vote-suggestions/{ids[1]}/vote")
        async with portal.client(voters[0]) as client:
            await client.post(f"/vote-suggestions/{ids[2]}/vote")

        async with portal.client(admin) as client:
            response = await client.get("/admin/top-voted", params={"limit": 2})
            invalid = await client.get("/admin/top-voted", params={"limit": 0})

        assert response.status_code == 200
        assert [(s["title"], s["votes"]) for s in response.json()["suggestions"]] == [
            ("Two", 3),
            ("Three", 1),
        ]
        assert invalid.status_code == 400
