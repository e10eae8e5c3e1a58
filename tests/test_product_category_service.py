"""Tests for product category service."""
from uuid import uuid4

import pytest

from sales_api.exceptions.api_exception import ConflictError, NotFoundError, ValidationError
from sales_api.schemas.product_category import ProductCategoryCreate, ProductCategoryUpdate
from sales_api.services.product_category_service import (
    create_category,
    get_category,
    list_categories,
    update_category,
    delete_category,
)


@pytest.mark.asyncio
class TestCreateCategory:
    """Tests for category creation."""

    async def test_create_category(self, db_session):
        """A valid request returns the stored category with a generated id."""
        result = await create_category(
            db_session,
            ProductCategoryCreate(code="CAT1", name="Cat", description="First"),
        )
        assert result.id is not None
        assert result.code == "CAT1"
        assert result.description == "First"

        fetched = await get_category(db_session, result.id)
        assert fetched == result

    async def test_get_missing_category(self, db_session):
        with pytest.raises(NotFoundError):
            await get_category(db_session, uuid4())

    @pytest.mark.parametrize("code,name", [("   ", "Cat"), ("CAT1", " ")])
    async def test_blank_code_or_name_rejected(self, db_session, code, name):
        """Blank code or name fails before anything is stored."""
        with pytest.raises(ValidationError):
            await create_category(db_session, ProductCategoryCreate(code=code, name=name))
        assert await list_categories(db_session) == []

    async def test_duplicate_code_conflicts(self, db_session, category):
        """An existing code cannot be reused."""
        with pytest.raises(ConflictError):
            await create_category(db_session, ProductCategoryCreate(code="CAT1", name="Other"))


@pytest.mark.asyncio
class TestUpdateAndDeleteCategory:
    """Tests for category update and delete."""

    async def test_update_category(self, db_session, category):
        """Name and description are replaced, the code is kept."""
        result = await update_category(
            db_session,
            category.id,
            ProductCategoryUpdate(name="Renamed", description=None),
        )
        assert result.name == "Renamed"
        assert result.code == "CAT1"
        assert result.description is None

    async def test_update_missing_category(self, db_session):
        with pytest.raises(NotFoundError):
            await update_category(db_session, uuid4(), ProductCategoryUpdate(name="X"))

    async def test_update_blank_name_rejected(self, db_session, category):
        with pytest.raises(ValidationError):
            await update_category(db_session, category.id, ProductCategoryUpdate(name="  "))

    async def test_delete_category(self, db_session, category):
        await delete_category(db_session, category.id)
        with pytest.raises(NotFoundError):
            await get_category(db_session, category.id)

    async def test_delete_missing_category(self, db_session):
        with pytest.raises(NotFoundError):
            await delete_category(db_session, uuid4())

    async def test_delete_category_with_products_conflicts(self, db_session, category, products):
        """A referenced category is kept intact."""
        category_id = category.id
        with pytest.raises(ConflictError):
            await delete_category(db_session, category_id)

        fetched = await get_category(db_session, category_id)
        assert fetched.code == "CAT1"
