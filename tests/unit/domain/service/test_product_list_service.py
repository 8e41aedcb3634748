"""Unit tests for ProductListService."""

from uuid import uuid4

import pytest

from whizlist.domain.error import NotFoundError, ValidationError
from whizlist.domain.service import ProductListService, ProductService
from whizlist.domain.value import ListId, UserId
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestCreateList:
    @pytest.mark.asyncio
    async def test_create_list_strips_name(self, unit_env):
        list_service = await unit_env.get(ProductListService)
        owner = UserId(uuid4())

        product_list = await list_service.create_list(owner, "  Gifts  ", "  ")

        assert product_list.name == "Gifts"
        assert product_list.description is None
        assert product_list.is_pinned is False

    @pytest.mark.asyncio
    async def test_blank_name_raises(self, unit_env):
        list_service = await unit_env.get(ProductListService)

        with pytest.raises(ValidationError):
            await list_service.create_list(UserId(uuid4()), "   ")


class TestProductCounts:
    """Product counts combine home-list products and memberships."""

    @pytest.mark.asyncio
    async def test_counts_distinct_products(self, unit_env):
        # Arrange
        list_service = await unit_env.get(ProductListService)
        product_service = await unit_env.get(ProductService)
        owner = UserId(uuid4())
        gifts = await list_service.create_list(owner, "Gifts")
        empty = await list_service.create_list(owner, "Empty")

        homed = await product_service.create_product(
            owner, "Scarf", "https://example.com/scarf", list_id=gifts.id
        )
        member = await product_service.create_product(
            owner, "Gloves", "https://example.com/gloves"
        )
        await list_service.add_product(gifts.id, homed.id)
        await list_service.add_product(gifts.id, member.id)

        # Act
        lists = await list_service.get_lists_for_owner(owner)

        # Assert
        counts = {pl.id: pl.product_count for pl in lists}
        assert counts == {gifts.id: 2, empty.id: 0}

    @pytest.mark.asyncio
    async def test_owner_without_lists(self, unit_env):
        list_service = await unit_env.get(ProductListService)

        assert await list_service.get_lists_for_owner(UserId(uuid4())) == []


class TestUpdateList:
    @pytest.mark.asyncio
    async def test_update_editable_fields(self, unit_env):
        list_service = await unit_env.get(ProductListService)
        product_list = await list_service.create_list(UserId(uuid4()), "Old")

        updated = await list_service.update_list(
            product_list.id, {"name": " New ", "is_pinned": True}
        )

        assert updated.name == "New"
        assert updated.is_pinned is True

    @pytest.mark.asyncio
    async def test_update_rejects_unknown_fields(self, unit_env):
        list_service = await unit_env.get(ProductListService)
        product_list = await list_service.create_list(UserId(uuid4()), "List")

        with pytest.raises(ValidationError, match="owner_id"):
            await list_service.update_list(product_list.id, {"owner_id": uuid4()})

    @pytest.mark.asyncio
    async def test_update_missing_list_raises(self, unit_env):
        list_service = await unit_env.get(ProductListService)

        with pytest.raises(NotFoundError):
            await list_service.update_list(ListId(uuid4()), {"name": "x"})


class TestDeleteList:
    @pytest.mark.asyncio
    async def test_delete_unassigns_products(self, unit_env):
        """Products survive the deletion of their list."""
        # Arrange
        list_service = await unit_env.get(ProductListService)
        product_service = await unit_env.get(ProductService)
        owner = UserId(uuid4())
        doomed = await list_service.create_list(owner, "Doomed")
        homed = await product_service.create_product(
            owner, "Mug", "https://example.com/mug", list_id=doomed.id
        )
        member = await product_service.create_product(
            owner, "Plate", "https://example.com/plate"
        )
        await list_service.add_product(doomed.id, member.id)

        # Act
        await list_service.delete_list(doomed.id)

        # Assert
        assert (await product_service.get_product_by_id(homed.id)).list_id is None
        assert await list_service.get_membership_list_ids(member.id) == set()
        with pytest.raises(NotFoundError):
            await list_service.get_list_by_id(doomed.id)


class TestMemberships:
    @pytest.mark.asyncio
    async def test_add_is_idempotent_and_remove_reports(self, unit_env):
        list_service = await unit_env.get(ProductListService)
        product_service = await unit_env.get(ProductService)
        owner = UserId(uuid4())
        product_list = await list_service.create_list(owner, "List")
        product = await product_service.create_product(
            owner, "Pen", "https://example.com/pen"
        )

        await list_service.add_product(product_list.id, product.id)
        await list_service.add_product(product_list.id, product.id)

        assert await list_service.get_member_product_ids(product_list.id) == {
            product.id
        }
        assert await list_service.remove_product(product_list.id, product.id) is True
        assert await list_service.remove_product(product_list.id, product.id) is False
