"""Per-session application state.

A Workspace is opened for one signed-in user and caches their products,
lists and folders plus the comment thread currently on screen. Every
mutation goes through the domain services and then updates the cache from
what the service returned, so the cache never holds values that were not
confirmed by storage, except for the like overlay of the CommentStore.
"""

import asyncio
from typing import Optional
from uuid import UUID

import logfire

from whizlist.application.usecase.base import require_owner
from whizlist.application.usecase.product import (
    AddProductRequest,
    AddProductUseCase,
    EnhanceProductRequest,
    EnhanceProductUseCase,
)
from whizlist.domain.error import BusinessRuleViolationError, NotFoundError, ValidationError
from whizlist.domain.model import Comment, CommentNode, Folder, Product, ProductList
from whizlist.domain.service import (
    AssignmentService,
    CommentLikeService,
    CommentService,
    FolderService,
    ProductListService,
    ProductService,
    ReconcileOutcome,
)
from whizlist.domain.service.search_service import search as run_search
from whizlist.domain.service.thread import find_node, reply_parent, subtree_ids
from whizlist.domain.value import (
    CommentId,
    EntityType,
    ListId,
    ProductId,
    SearchResults,
    UserId,
)


class CommentStore:
    """Cached comment thread of one entity.

    Likes toggled in this session are kept as a predicted overlay on top of
    the last fetched values. Toggling twice without a fetch in between
    restores the fetched state; any fetch drops the overlay.
    """

    def __init__(
        self,
        user_id: UserId,
        comment_service: CommentService,
        like_service: CommentLikeService,
        max_depth: int = 3,
    ) -> None:
        self.user_id = user_id
        self.comment_service = comment_service
        self.like_service = like_service
        self.max_depth = max_depth

        self.entity_type: Optional[EntityType] = None
        self.entity_id: Optional[str] = None
        self.error: Optional[str] = None
        self._roots: list[CommentNode] = []
        self._toggled: set[CommentId] = set()
        self._in_flight: set[CommentId] = set()

    @property
    def thread(self) -> list[CommentNode]:
        """Root nodes with the predicted like overlay applied."""
        if not self._toggled:
            return list(self._roots)
        return [self._overlay(node) for node in self._roots]

    def is_liking(self, comment_id: CommentId) -> bool:
        return comment_id in self._in_flight

    async def load(self, entity_type: EntityType, entity_id: str) -> list[CommentNode]:
        """Fetch the thread of an entity.

        On failure the previous thread stays and the message lands in error.
        """
        with logfire.span(
            "comment_store.load", entity_type=entity_type.value, entity_id=entity_id
        ):
            try:
                roots = await self.comment_service.get_thread(
                    entity_type, entity_id, self.user_id
                )
            except Exception as e:
                logfire.error(
                    "Comment fetch failed",
                    entity_type=entity_type.value,
                    entity_id=entity_id,
                    error=str(e),
                )
                self.error = str(e)
                return self.thread

            self.entity_type = entity_type
            self.entity_id = entity_id
            self._roots = roots
            self._toggled.clear()
            self.error = None
            return self.thread

    async def refresh(self) -> list[CommentNode]:
        if self.entity_type is None or self.entity_id is None:
            return []
        return await self.load(self.entity_type, self.entity_id)

    async def post(self, content: str, reply_to: Optional[CommentId] = None) -> Comment:
        """Post a comment, or a reply to the comment the user clicked.

        The reply parent follows the nesting depth rule, and the thread is
        re-fetched afterwards.

        Raises:
            BusinessRuleViolationError: If no thread is loaded
            ValidationError: If the content is blank
        """
        entity_type, entity_id = self._require_entity()

        parent_id = None
        if reply_to is not None:
            parent_id = reply_parent(self._roots, reply_to, max_depth=self.max_depth)

        try:
            comment = await self.comment_service.create_comment(
                entity_type=entity_type,
                entity_id=entity_id,
                author_id=self.user_id,
                content=content,
                parent_id=parent_id,
            )
        except Exception as e:
            self.error = str(e)
            raise

        await self.refresh()
        return comment

    async def edit(self, comment_id: CommentId, content: str) -> Comment:
        """Edit one of the user's comments and replace it in the thread."""
        node = self._require_node(comment_id)
        require_owner(node.comment.user_id, self.user_id, "comment", str(comment_id))

        try:
            updated = await self.comment_service.update_content(comment_id, content)
        except Exception as e:
            self.error = str(e)
            raise

        self._roots = _replace_comment(self._roots, updated)
        return updated

    async def delete(self, comment_id: CommentId) -> None:
        """Delete one of the user's comments and drop its subtree."""
        node = self._require_node(comment_id)
        require_owner(node.comment.user_id, self.user_id, "comment", str(comment_id))

        try:
            await self.comment_service.delete_comment(comment_id)
        except Exception as e:
            self.error = str(e)
            raise

        removed = subtree_ids(self._roots, comment_id)
        self._roots = _prune(self._roots, removed)
        self._toggled -= removed

    async def toggle_like(self, comment_id: CommentId) -> bool:
        """Toggle the user's like with an immediate predicted update.

        Returns:
            The liked state reported by storage

        Raises:
            BusinessRuleViolationError: If a toggle on this comment is in flight
        """
        self._require_node(comment_id)
        if comment_id in self._in_flight:
            raise BusinessRuleViolationError(
                f"Like toggle already in progress for comment {comment_id}"
            )

        self._in_flight.add(comment_id)
        self._toggled ^= {comment_id}
        try:
            return await self.like_service.toggle_like(comment_id, self.user_id)
        except Exception as e:
            self._toggled ^= {comment_id}
            self.error = str(e)
            logfire.warn(
                "Like toggle failed, prediction reverted",
                comment_id=str(comment_id),
                error=str(e),
            )
            raise
        finally:
            self._in_flight.discard(comment_id)

    def clear(self) -> None:
        self.entity_type = None
        self.entity_id = None
        self.error = None
        self._roots = []
        self._toggled.clear()
        self._in_flight.clear()

    def _require_entity(self) -> tuple[EntityType, str]:
        if self.entity_type is None or self.entity_id is None:
            raise BusinessRuleViolationError("No comment thread is loaded")
        return self.entity_type, self.entity_id

    def _require_node(self, comment_id: CommentId) -> CommentNode:
        node = find_node(self._roots, comment_id)
        if node is None:
            raise NotFoundError("Comment", str(comment_id))
        return node

    def _overlay(self, node: CommentNode) -> CommentNode:
        replies = [self._overlay(reply) for reply in node.replies]
        if node.id not in self._toggled:
            return node.model_copy(update={"replies": replies})

        liked = not node.is_liked_by_user
        count = max(0, node.like_count + (1 if liked else -1))
        return node.model_copy(
            update={"replies": replies, "like_count": count, "is_liked_by_user": liked}
        )


def _replace_comment(nodes: list[CommentNode], comment: Comment) -> list[CommentNode]:
    replaced = []
    for node in nodes:
        if node.id == comment.id:
            replaced.append(node.model_copy(update={"comment": comment}))
        else:
            replaced.append(
                node.model_copy(
                    update={"replies": _replace_comment(node.replies, comment)}
                )
            )
    return replaced


def _prune(nodes: list[CommentNode], removed: set[CommentId]) -> list[CommentNode]:
    return [
        node.model_copy(update={"replies": _prune(node.replies, removed)})
        for node in nodes
        if node.id not in removed
    ]


class Workspace:
    """Application state of one signed-in user.

    Use Workspace.open to build a loaded workspace and close() to tear it
    down; close cancels any product enhancement still running.
    """

    def __init__(
        self,
        user_id: UserId,
        product_service: ProductService,
        list_service: ProductListService,
        folder_service: FolderService,
        assignment_service: AssignmentService,
        add_product_use_case: AddProductUseCase,
        enhance_product_use_case: EnhanceProductUseCase,
        comments: CommentStore,
    ) -> None:
        self.user_id = user_id
        self.product_service = product_service
        self.list_service = list_service
        self.folder_service = folder_service
        self.assignment_service = assignment_service
        self.add_product_use_case = add_product_use_case
        self.enhance_product_use_case = enhance_product_use_case
        self.comments = comments

        self.products: list[Product] = []
        self.lists: list[ProductList] = []
        self.folders: list[Folder] = []
        self.error: Optional[str] = None
        self._tasks: set[asyncio.Task] = set()
        self._closed = False

    @classmethod
    async def open(
        cls,
        user_id: UserId,
        product_service: ProductService,
        list_service: ProductListService,
        folder_service: FolderService,
        assignment_service: AssignmentService,
        add_product_use_case: AddProductUseCase,
        enhance_product_use_case: EnhanceProductUseCase,
        comments: CommentStore,
    ) -> "Workspace":
        """Create a workspace for a user and load their entities."""
        workspace = cls(
            user_id,
            product_service,
            list_service,
            folder_service,
            assignment_service,
            add_product_use_case,
            enhance_product_use_case,
            comments,
        )
        await workspace.refresh()
        logfire.info(
            "Workspace opened",
            user_id=str(user_id),
            products=len(workspace.products),
            lists=len(workspace.lists),
        )
        return workspace

    async def close(self) -> None:
        """Cancel pending enhancements and clear all cached state."""
        self._closed = True
        tasks = list(self._tasks)
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
        self._tasks.clear()

        self.products = []
        self.lists = []
        self.folders = []
        self.error = None
        self.comments.clear()
        logfire.info("Workspace closed", user_id=str(self.user_id))

    @property
    def pending_enhancements(self) -> int:
        return len(self._tasks)

    async def refresh(self) -> None:
        """Reload products, lists (with counts) and folders.

        On failure the previous cache stays and the message lands in error.
        """
        with logfire.span("workspace.refresh", user_id=str(self.user_id)):
            try:
                products = await self.product_service.get_products_for_owner(
                    self.user_id
                )
                lists = await self.list_service.get_lists_for_owner(self.user_id)
                folders = await self.folder_service.get_folders_for_owner(self.user_id)
            except Exception as e:
                logfire.error(
                    "Workspace refresh failed", user_id=str(self.user_id), error=str(e)
                )
                self.error = str(e)
                return

            self.products = products
            self.lists = lists
            self.folders = folders
            self.error = None

    def search(self, query: str) -> SearchResults:
        """Search the cached entities."""
        return run_search(query, self.products, self.lists, self.folders)

    def product(self, product_id: ProductId) -> Product:
        for product in self.products:
            if product.id == product_id:
                return product
        raise NotFoundError("Product", str(product_id))

    async def add_product(
        self,
        product_url: str,
        list_ids: Optional[list[ListId]] = None,
        new_list_name: Optional[str] = None,
        **fields: object,
    ) -> Product:
        """Create a product now and enhance it in the background.

        Returns:
            The product as created by the fast phase
        """
        if self._closed:
            raise BusinessRuleViolationError("Workspace is closed")

        request = AddProductRequest(
            user_id=str(self.user_id),
            product_url=product_url,
            list_ids=[str(list_id) for list_id in list_ids or []],
            new_list_name=new_list_name,
            **fields,
        )
        try:
            response = await self.add_product_use_case.execute(request)
        except Exception as e:
            self.error = str(e)
            raise

        product = await self.product_service.get_product_by_id(
            ProductId(UUID(response.product.product_id))
        )
        self._upsert_product(product)
        await self._reload_lists()
        self._schedule_enhancement(product.id)
        return product

    async def move_product(
        self,
        product_id: ProductId,
        list_id: Optional[ListId] = None,
        new_list_name: Optional[str] = None,
    ) -> Product:
        """Move a product to a list (or unassign it with neither argument)."""
        self.product(product_id)
        target = await self._resolve_target(list_id, new_list_name)
        try:
            moved = await self.assignment_service.move(product_id, target)
        except Exception as e:
            self.error = str(e)
            raise

        self._upsert_product(moved)
        await self._reload_lists()
        return moved

    async def copy_product(
        self,
        product_id: ProductId,
        list_id: Optional[ListId] = None,
        new_list_name: Optional[str] = None,
    ) -> Product:
        """Copy a product into a list; returns the new product."""
        self.product(product_id)
        target = await self._resolve_target(list_id, new_list_name)
        if target is None:
            raise ValidationError("Copy needs a target list")
        try:
            copy = await self.assignment_service.copy(product_id, target)
        except Exception as e:
            self.error = str(e)
            raise

        self._upsert_product(copy)
        await self._reload_lists()
        return copy

    async def set_product_lists(
        self,
        product_id: ProductId,
        list_ids: set[ListId],
        new_list_name: Optional[str] = None,
    ) -> ReconcileOutcome:
        """Make a product's memberships match the selected lists.

        A failure leaves whatever completed in place; the cache is
        reloaded either way.
        """
        self.product(product_id)
        selected = set(list_ids)
        for list_id in selected:
            self._require_list(list_id)

        try:
            if new_list_name is not None:
                created = await self.assignment_service.create_inline_list(
                    self.user_id, new_list_name
                )
                self.lists.append(created)
                selected.add(created.id)
            return await self.assignment_service.reconcile(product_id, selected)
        except Exception as e:
            self.error = str(e)
            raise
        finally:
            await self._reload_lists()

    async def _resolve_target(
        self, list_id: Optional[ListId], new_list_name: Optional[str]
    ) -> Optional[ListId]:
        if new_list_name is not None:
            created = await self.assignment_service.create_inline_list(
                self.user_id, new_list_name
            )
            self.lists.append(created)
            return created.id
        if list_id is not None:
            self._require_list(list_id)
        return list_id

    def _require_list(self, list_id: ListId) -> ProductList:
        for product_list in self.lists:
            if product_list.id == list_id:
                return product_list
        raise NotFoundError("List", str(list_id))

    def _upsert_product(self, product: Product) -> None:
        for index, existing in enumerate(self.products):
            if existing.id == product.id:
                self.products[index] = product
                return
        self.products.append(product)

    async def _reload_lists(self) -> None:
        try:
            self.lists = await self.list_service.get_lists_for_owner(self.user_id)
        except Exception as e:
            logfire.warn("List reload failed", user_id=str(self.user_id), error=str(e))
            self.error = str(e)

    def _schedule_enhancement(self, product_id: ProductId) -> None:
        task = asyncio.create_task(self._enhance(product_id))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)

    async def _enhance(self, product_id: ProductId) -> None:
        response = await self.enhance_product_use_case.execute(
            EnhanceProductRequest(product_id=str(product_id))
        )
        if response.updated_fields and not self._closed:
            try:
                self._upsert_product(
                    await self.product_service.get_product_by_id(product_id)
                )
            except NotFoundError:
                logfire.info(
                    "Enhanced product no longer exists", product_id=str(product_id)
                )
