"""Unit tests for AssignmentService."""

from uuid import uuid4

import pytest

from whizlist.domain.error import NotFoundError, ValidationError
from whizlist.domain.repository import ListMembershipRepository
from whizlist.domain.service import (
    AssignmentService,
    BlobStorage,
    ProductListService,
    ProductService,
)
from whizlist.domain.value import ProductId, UserId
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def _setup(unit_env, list_names=("A", "B", "C")):
    list_service = await unit_env.get(ProductListService)
    product_service = await unit_env.get(ProductService)
    owner = UserId(uuid4())
    lists = [await list_service.create_list(owner, name) for name in list_names]
    product = await product_service.create_product(
        owner, "Bike", "https://example.com/bike", list_id=lists[0].id
    )
    return owner, lists, product


class TestMove:
    @pytest.mark.asyncio
    async def test_move_changes_home_list(self, unit_env):
        assignment_service = await unit_env.get(AssignmentService)
        _, lists, product = await _setup(unit_env)

        moved = await assignment_service.move(product.id, lists[1].id)

        assert moved.id == product.id
        assert moved.list_id == lists[1].id

    @pytest.mark.asyncio
    async def test_move_to_none_unassigns(self, unit_env):
        assignment_service = await unit_env.get(AssignmentService)
        _, _, product = await _setup(unit_env)

        moved = await assignment_service.move(product.id, None)

        assert moved.list_id is None

    @pytest.mark.asyncio
    async def test_move_missing_product_raises(self, unit_env):
        assignment_service = await unit_env.get(AssignmentService)
        _, lists, _ = await _setup(unit_env)

        with pytest.raises(NotFoundError):
            await assignment_service.move(ProductId(uuid4()), lists[0].id)


class TestCopy:
    @pytest.mark.asyncio
    async def test_copy_duplicates_everything_but_identity(self, unit_env):
        # Arrange
        assignment_service = await unit_env.get(AssignmentService)
        product_service = await unit_env.get(ProductService)
        _, lists, product = await _setup(unit_env)
        product = await product_service.update_product(
            product.id,
            {"description": "Road bike", "price": "$900", "tags": ["bike", "road"]},
        )
        product = await product_service.toggle_pin(product.id)

        # Act
        copy = await assignment_service.copy(product.id, lists[2].id)

        # Assert
        assert copy.id != product.id
        assert copy.list_id == lists[2].id
        assert copy.is_pinned is False
        assert copy.title == product.title
        assert copy.description == "Road bike"
        assert copy.price == "$900"
        assert copy.tags == ["bike", "road"]
        assert copy.owner_id == product.owner_id

        source = await product_service.get_product_by_id(product.id)
        assert source.list_id == lists[0].id
        assert source.is_pinned is True

    @pytest.mark.asyncio
    async def test_copy_copies_stored_image(self, unit_env):
        # Arrange
        assignment_service = await unit_env.get(AssignmentService)
        product_service = await unit_env.get(ProductService)
        storage = await unit_env.get(BlobStorage)
        owner, lists, product = await _setup(unit_env)
        path = f"{owner}/{product.id}.png"
        await storage.upload(path, b"png-bytes", "image/png")
        product = await product_service.update_product(
            product.id, {"image_url": storage.public_url(path)}
        )

        # Act
        copy = await assignment_service.copy(product.id, lists[1].id)

        # Assert
        copy_path = f"{owner}/{copy.id}.png"
        assert copy.image_url == storage.public_url(copy_path)
        assert storage.objects[copy_path] == (b"png-bytes", "image/png")

    @pytest.mark.asyncio
    async def test_copy_keeps_source_image_when_copy_fails(self, unit_env):
        assignment_service = await unit_env.get(AssignmentService)
        product_service = await unit_env.get(ProductService)
        storage = await unit_env.get(BlobStorage)
        owner, lists, product = await _setup(unit_env)
        image_url = storage.public_url(f"{owner}/{product.id}.jpg")
        product = await product_service.update_product(
            product.id, {"image_url": image_url}
        )
        storage.fail_copy = True

        copy = await assignment_service.copy(product.id, lists[1].id)

        assert copy.image_url == image_url

    @pytest.mark.asyncio
    async def test_copy_shares_external_image(self, unit_env):
        assignment_service = await unit_env.get(AssignmentService)
        product_service = await unit_env.get(ProductService)
        _, lists, product = await _setup(unit_env)
        product = await product_service.update_product(
            product.id, {"image_url": "https://cdn.example.com/bike.jpg"}
        )

        copy = await assignment_service.copy(product.id, lists[1].id)

        assert copy.image_url == "https://cdn.example.com/bike.jpg"


class TestReconcile:
    """Tests for reconciling memberships against a selection."""

    @pytest.mark.asyncio
    async def test_reconcile_applies_diff(self, unit_env):
        # Arrange
        assignment_service = await unit_env.get(AssignmentService)
        list_service = await unit_env.get(ProductListService)
        _, (a, b, c), product = await _setup(unit_env)
        await list_service.add_product(a.id, product.id)
        await list_service.add_product(b.id, product.id)

        # Act
        outcome = await assignment_service.reconcile(product.id, {b.id, c.id})

        # Assert
        assert outcome.added == {c.id}
        assert outcome.removed == {a.id}
        assert outcome.changed is True
        assert await list_service.get_membership_list_ids(product.id) == {b.id, c.id}

    @pytest.mark.asyncio
    async def test_reconcile_with_same_selection_is_noop(self, unit_env):
        assignment_service = await unit_env.get(AssignmentService)
        list_service = await unit_env.get(ProductListService)
        _, (a, _, _), product = await _setup(unit_env)
        await list_service.add_product(a.id, product.id)

        outcome = await assignment_service.reconcile(product.id, {a.id})

        assert outcome.changed is False

    @pytest.mark.asyncio
    async def test_reconcile_to_empty_selection_removes_all(self, unit_env):
        assignment_service = await unit_env.get(AssignmentService)
        list_service = await unit_env.get(ProductListService)
        _, (a, b, _), product = await _setup(unit_env)
        await list_service.add_product(a.id, product.id)
        await list_service.add_product(b.id, product.id)

        outcome = await assignment_service.reconcile(product.id, set())

        assert outcome.removed == {a.id, b.id}
        assert await list_service.get_membership_list_ids(product.id) == set()

    @pytest.mark.asyncio
    async def test_failure_propagates_without_rollback(self, unit_env):
        """Operations that completed before the failure stay applied."""
        # Arrange
        assignment_service = await unit_env.get(AssignmentService)
        list_service = await unit_env.get(ProductListService)
        membership_repo = await unit_env.get(ListMembershipRepository)
        _, (a, b, c), product = await _setup(unit_env)
        await list_service.add_product(a.id, product.id)
        membership_repo.fail_on_add.add(c.id)

        # Act
        with pytest.raises(RuntimeError):
            await assignment_service.reconcile(product.id, {b.id, c.id})

        # Assert
        current = await list_service.get_membership_list_ids(product.id)
        assert b.id in current
        assert a.id not in current
        assert c.id not in current

    @pytest.mark.asyncio
    async def test_reconcile_missing_product_raises(self, unit_env):
        assignment_service = await unit_env.get(AssignmentService)

        with pytest.raises(NotFoundError):
            await assignment_service.reconcile(ProductId(uuid4()), set())


class TestInlineList:
    @pytest.mark.asyncio
    async def test_create_inline_list(self, unit_env):
        assignment_service = await unit_env.get(AssignmentService)
        owner = UserId(uuid4())

        product_list = await assignment_service.create_inline_list(owner, " Wishlist ")

        assert product_list.name == "Wishlist"
        assert product_list.owner_id == owner

    @pytest.mark.asyncio
    async def test_blank_inline_list_name_raises(self, unit_env):
        assignment_service = await unit_env.get(AssignmentService)

        with pytest.raises(ValidationError):
            await assignment_service.create_inline_list(UserId(uuid4()), "")

    @pytest.mark.asyncio
    async def test_add_to_lists_adds_every_list_once(self, unit_env):
        assignment_service = await unit_env.get(AssignmentService)
        list_service = await unit_env.get(ProductListService)
        _, (a, b, _), product = await _setup(unit_env)

        await assignment_service.add_to_lists(product.id, [a.id, b.id, a.id])

        assert await list_service.get_membership_list_ids(product.id) == {a.id, b.id}
