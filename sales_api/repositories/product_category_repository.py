"""Product category repository module."""
from typing import Optional, Sequence
from uuid import UUID

from sqlalchemy import select, exists
from sqlalchemy.ext.asyncio import AsyncSession

from sales_api.models.product import Product
from sales_api.models.product_category import ProductCategory


class ProductCategoryRepository:
    """Data access for product categories."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_by_id(self, category_id: UUID) -> Optional[ProductCategory]:
        query = select(ProductCategory).where(ProductCategory.id == category_id)
        result = await self.db.execute(query)
        return result.scalar_one_or_none()

    async def exists_by_code(self, code: str) -> bool:
        result = await self.db.execute(select(exists().where(ProductCategory.code == code)))
        return bool(result.scalar())

    async def list_all(self) -> Sequence[ProductCategory]:
        result = await self.db.execute(select(ProductCategory).order_by(ProductCategory.code))
        return result.scalars().all()

    async def has_products(self, category_id: UUID) -> bool:
        """Whether any product still references the category."""
        result = await self.db.execute(select(exists().where(Product.category_id == category_id)))
        return bool(result.scalar())

    async def add(self, category: ProductCategory) -> ProductCategory:
        self.db.add(category)
        await self.db.flush()
        return category

    async def delete(self, category: ProductCategory) -> None:
        await self.db.delete(category)
        await self.db.flush()
