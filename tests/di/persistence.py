"""Mock persistence providers for testing."""

import asyncio

from dishka import Scope, provide

from whizlist.domain.model import ListMembership
from whizlist.domain.repository import (
    CommentLikeRepository,
    CommentRepository,
    FolderRepository,
    ListMembershipRepository,
    ProductListRepository,
    ProductRepository,
    ProfileRepository,
)
from whizlist.domain.value import ListId, ProductId
from whizlist.persistence.repository.inmemory import (
    InMemoryCommentLikeRepository,
    InMemoryCommentRepository,
    InMemoryFolderRepository,
    InMemoryListMembershipRepository,
    InMemoryProductListRepository,
    InMemoryProductRepository,
    InMemoryProfileRepository,
)
from whizlist.util.di.infrastructure.persistence import PersistenceProvider


class FaultyListMembershipRepository(InMemoryListMembershipRepository):
    """In-memory memberships that fail on demand.

    Adding to a list in fail_on_add, or removing from a list in
    fail_on_remove, raises RuntimeError after yielding to the event loop.
    """

    def __init__(self) -> None:
        super().__init__()
        self.fail_on_add: set[ListId] = set()
        self.fail_on_remove: set[ListId] = set()

    async def add(self, list_id: ListId, product_id: ProductId) -> ListMembership:
        if list_id in self.fail_on_add:
            await asyncio.sleep(0)
            raise RuntimeError(f"add to list {list_id} failed")
        return await super().add(list_id, product_id)

    async def remove(self, list_id: ListId, product_id: ProductId) -> bool:
        if list_id in self.fail_on_remove:
            await asyncio.sleep(0)
            raise RuntimeError(f"remove from list {list_id} failed")
        return await super().remove(list_id, product_id)


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    Repositories are APP-scoped so that several HTTP requests against one
    test container see the same data. Every test builds its own container,
    which keeps tests isolated.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_profile_repository(self) -> ProfileRepository:
        """Provide in-memory profile repository."""
        return InMemoryProfileRepository()

    @provide(scope=Scope.APP)
    def get_comment_repository(self) -> CommentRepository:
        """Provide in-memory comment repository."""
        return InMemoryCommentRepository()

    @provide(scope=Scope.APP)
    def get_comment_like_repository(self) -> CommentLikeRepository:
        """Provide in-memory comment like repository."""
        return InMemoryCommentLikeRepository()

    @provide(scope=Scope.APP)
    def get_product_repository(self) -> ProductRepository:
        """Provide in-memory product repository."""
        return InMemoryProductRepository()

    @provide(scope=Scope.APP)
    def get_product_list_repository(self) -> ProductListRepository:
        """Provide in-memory list repository."""
        return InMemoryProductListRepository()

    @provide(scope=Scope.APP)
    def get_list_membership_repository(self) -> ListMembershipRepository:
        """Provide in-memory list membership repository with fault injection."""
        return FaultyListMembershipRepository()

    @provide(scope=Scope.APP)
    def get_folder_repository(self) -> FolderRepository:
        """Provide in-memory folder repository."""
        return InMemoryFolderRepository()
