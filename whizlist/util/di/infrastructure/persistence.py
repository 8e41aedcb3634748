"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
import logfire
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from whizlist.config import Settings
from whizlist.domain.repository import (
    CommentLikeRepository,
    CommentRepository,
    FolderRepository,
    ListMembershipRepository,
    ProductListRepository,
    ProductRepository,
    ProfileRepository,
)
from whizlist.persistence.database import create_engine, create_session_factory
from whizlist.persistence.repository import (
    PostgresCommentLikeRepository,
    PostgresCommentRepository,
    PostgresFolderRepository,
    PostgresListMembershipRepository,
    PostgresProductListRepository,
    PostgresProductRepository,
    PostgresProfileRepository,
)
from whizlist.util.di.base import ProviderBase
from whizlist.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using PostgreSQL."""

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    def get_engine(self, settings: Settings) -> AsyncEngine:
        """Provide database engine."""
        engine = create_engine(settings)
        instrument_sqlalchemy(engine)
        return engine

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
        occurred, or rolled back if one was raised.
        """
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
                logfire.info("Session committed")
            except Exception as e:
                logfire.warn("Session rollback", error=str(e))
                await session.rollback()
                raise

    @provide(scope=Scope.REQUEST)
    def get_profile_repository(self, session: AsyncSession) -> ProfileRepository:
        """Provide Profile repository."""
        return PostgresProfileRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_comment_repository(self, session: AsyncSession) -> CommentRepository:
        """Provide Comment repository."""
        return PostgresCommentRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_comment_like_repository(
        self, session: AsyncSession
    ) -> CommentLikeRepository:
        """Provide CommentLike repository."""
        return PostgresCommentLikeRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_product_repository(self, session: AsyncSession) -> ProductRepository:
        """Provide Product repository."""
        return PostgresProductRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_product_list_repository(
        self, session: AsyncSession
    ) -> ProductListRepository:
        """Provide List repository."""
        return PostgresProductListRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_list_membership_repository(
        self, session: AsyncSession
    ) -> ListMembershipRepository:
        """Provide ListMembership repository."""
        return PostgresListMembershipRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_folder_repository(self, session: AsyncSession) -> FolderRepository:
        """Provide Folder repository."""
        return PostgresFolderRepository(session)
