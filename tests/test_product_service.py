"""Tests for product service."""
from decimal import Decimal
from uuid import uuid4

import pytest
from sqlalchemy import select, func

from sales_api.exceptions.api_exception import (
    ConflictError,
    DomainError,
    NotFoundError,
    ValidationError,
)
from sales_api.models.product import Product
from sales_api.models.sale import SaleDetail
from sales_api.schemas.product import ProductCreate, ProductUpdate
from sales_api.schemas.sale import SaleCreate, SaleDetailCreate
from sales_api.services.product_service import (
    create_product,
    get_product,
    list_products,
    list_products_by_category,
    update_product,
    delete_product,
)
from sales_api.services.sale_service import create_sale


def _product_request(category_id, **overrides) -> ProductCreate:
    fields = {
        "code": "P9",
        "name": "Sprocket",
        "price": Decimal("4.50"),
        "stock": 10,
        "categoryId": category_id,
    }
    fields.update(overrides)
    return ProductCreate(**fields)


@pytest.mark.asyncio
class TestCreateProduct:
    """Tests for product creation."""

    async def test_create_product(self, db_session, category):
        result = await create_product(db_session, _product_request(category.id))
        assert result.code == "P9"
        assert result.price == Decimal("4.50")
        assert result.stock == 10
        assert result.category_id == category.id

    async def test_unknown_category_is_domain_error(self, db_session, category):
        """A dangling category reference stores nothing."""
        with pytest.raises(DomainError):
            await create_product(db_session, _product_request(uuid4()))

        count = await db_session.execute(select(func.count()).select_from(Product))
        assert count.scalar() == 0

    async def test_duplicate_code_conflicts(self, db_session, products):
        category_id = products[0].category_id
        with pytest.raises(ConflictError):
            await create_product(db_session, _product_request(category_id, code="P1"))

    async def test_blank_name_rejected(self, db_session, category):
        with pytest.raises(ValidationError):
            await create_product(db_session, _product_request(category.id, name="   "))

    async def test_non_positive_price_rejected(self, db_session, category):
        """Callers bypassing the schema still hit the price rule."""
        data = ProductCreate.model_construct(
            code="P9",
            name="Sprocket",
            description=None,
            price=Decimal("0"),
            stock=1,
            category_id=category.id,
        )
        with pytest.raises(ValidationError):
            await create_product(db_session, data)

    async def test_negative_stock_rejected(self, db_session, category):
        data = ProductCreate.model_construct(
            code="P9",
            name="Sprocket",
            description=None,
            price=Decimal("1.00"),
            stock=-1,
            category_id=category.id,
        )
        with pytest.raises(ValidationError):
            await create_product(db_session, data)


@pytest.mark.asyncio
class TestProductQueries:
    """Tests for product lookup, update and delete."""

    async def test_list_products(self, db_session, products):
        result = await list_products(db_session)
        assert [p.code for p in result] == ["P1", "P2"]

    async def test_list_by_category(self, db_session, category, products):
        result = await list_products_by_category(db_session, category.id)
        assert {p.code for p in result} == {"P1", "P2"}
        assert await list_products_by_category(db_session, uuid4()) == []

    async def test_get_missing_product(self, db_session):
        with pytest.raises(NotFoundError):
            await get_product(db_session, uuid4())

    async def test_update_product(self, db_session, category, products):
        product_id = products[0].id
        result = await update_product(
            db_session,
            product_id,
            ProductUpdate(
                name="Widget XL",
                price=Decimal("12.00"),
                stock=7,
                categoryId=category.id,
            ),
        )
        assert result.name == "Widget XL"
        assert result.code == "P1"
        assert result.stock == 7
        assert result.price == Decimal("12.00")

    async def test_update_with_unknown_category(self, db_session, products):
        with pytest.raises(DomainError):
            await update_product(
                db_session,
                products[0].id,
                ProductUpdate(name="X", price=Decimal("1.00"), stock=0, categoryId=uuid4()),
            )

    async def test_update_missing_product(self, db_session, category):
        with pytest.raises(NotFoundError):
            await update_product(
                db_session,
                uuid4(),
                ProductUpdate(name="X", price=Decimal("1.00"), stock=0, categoryId=category.id),
            )

    async def test_delete_product(self, db_session, products):
        product_id = products[1].id
        await delete_product(db_session, product_id)
        with pytest.raises(NotFoundError):
            await get_product(db_session, product_id)

    async def test_delete_missing_product(self, db_session):
        with pytest.raises(NotFoundError):
            await delete_product(db_session, uuid4())

    async def test_delete_sold_product_conflicts(self, db_session, sale_statuses, products):
        product_id = products[0].id
        await create_sale(
            db_session,
            SaleCreate(
                saleDate="2024-01-14",
                details=[
                    SaleDetailCreate(
                        productId=product_id,
                        quantity=1,
                        unitPrice=Decimal("9.99"),
                        subtotal=Decimal("9.99"),
                    )
                ],
            ),
        )
        with pytest.raises(ConflictError):
            await delete_product(db_session, product_id)

        count = await db_session.execute(select(func.count()).select_from(SaleDetail))
        assert count.scalar() == 1
