"""Product repository module."""
from typing import Iterable, Optional, Sequence
from uuid import UUID

from sqlalchemy import Select, select, exists
from sqlalchemy.ext.asyncio import AsyncSession

from sales_api.models.product import Product
from sales_api.models.sale import SaleDetail


def locked_products_query(product_ids: Iterable[UUID]) -> Select:
    """SELECT ... FOR UPDATE over the products, locking rows in ascending id order."""
    return (
        select(Product)
        .where(Product.id.in_(sorted(set(product_ids))))
        .order_by(Product.id)
        .with_for_update()
        .execution_options(populate_existing=True)
    )


class ProductRepository:
    """Data access for products."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_by_id(self, product_id: UUID) -> Optional[Product]:
        result = await self.db.execute(select(Product).where(Product.id == product_id))
        return result.scalar_one_or_none()

    async def lock_many(self, product_ids: Iterable[UUID]) -> dict[UUID, Product]:
        """Row-lock the given products until the transaction ends, keyed by id.

        Unknown ids are simply absent from the result.
        """
        result = await self.db.execute(locked_products_query(product_ids))
        return {product.id: product for product in result.scalars()}

    async def exists_by_code(self, code: str) -> bool:
        result = await self.db.execute(select(exists().where(Product.code == code)))
        return bool(result.scalar())

    async def list_all(self) -> Sequence[Product]:
        result = await self.db.execute(select(Product).order_by(Product.code))
        return result.scalars().all()

    async def list_by_category(self, category_id: UUID) -> Sequence[Product]:
        query = (
            select(Product)
            .where(Product.category_id == category_id)
            .order_by(Product.code)
        )
        result = await self.db.execute(query)
        return result.scalars().all()

    async def is_sold(self, product_id: UUID) -> bool:
        """Whether any sale detail references the product."""
        result = await self.db.execute(select(exists().where(SaleDetail.product_id == product_id)))
        return bool(result.scalar())

    async def add(self, product: Product) -> Product:
        self.db.add(product)
        await self.db.flush()
        return product

    async def delete(self, product: Product) -> None:
        await self.db.delete(product)
        await self.db.flush()
