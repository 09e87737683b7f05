"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

import logfire
from dishka import Scope, provide
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from lounge.config import Settings
from lounge.domain.repository import (
    CategoryRepository,
    SuggestionRepository,
    UserRepository,
    VoteRepository,
)
from lounge.persistence.database import create_engine, create_session_factory
from lounge.persistence.repository import (
    PostgresCategoryRepository,
    PostgresSuggestionRepository,
    PostgresUserRepository,
    PostgresVoteRepository,
)
from lounge.util.di.base import ProviderBase
from lounge.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using PostgreSQL."""

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    async def get_engine(self, settings: Settings) -> AsyncIterator[AsyncEngine]:
        """Provide database engine, disposed when the container closes."""
        engine = create_engine(settings)
        instrument_sqlalchemy(engine)
        yield engine
        await engine.dispose()

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        """Provide session factory."""
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """Provide database session for request scope.

        The session is committed at the end of the request if no exception
        occurred, or rolled back if an exception was raised. Routes turn
        domain errors into HTTP responses before the scope closes, so those
        requests still commit; repositories undo partial writes themselves.
        """
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
                logfire.debug("Session committed")
            except Exception as e:
                logfire.warn("Session rollback", error=str(e))
                await session.rollback()
                raise

    @provide(scope=Scope.REQUEST)
    def get_suggestion_repository(self, session: AsyncSession) -> SuggestionRepository:
        """Provide Suggestion repository."""
        return PostgresSuggestionRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_vote_repository(
        self, session: AsyncSession, suggestion_repository: SuggestionRepository
    ) -> VoteRepository:
        """Provide Vote repository."""
        return PostgresVoteRepository(session, suggestion_repository)

    @provide(scope=Scope.REQUEST)
    def get_user_repository(self, session: AsyncSession) -> UserRepository:
        """Provide User repository."""
        return PostgresUserRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_category_repository(self, session: AsyncSession) -> CategoryRepository:
        """Provide Category repository."""
        return PostgresCategoryRepository(session)
