"""Sale repository module."""
from typing import Optional, Sequence
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from sales_api.models.sale import Sale, SaleDetail, SaleStatus


class SaleRepository:
    """Data access for sales, their details and the status master data."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_by_id(self, sale_id: UUID) -> Optional[Sale]:
        query = select(Sale).where(Sale.id == sale_id)
        result = await self.db.execute(query)
        return result.scalar_one_or_none()

    async def list_all(self) -> Sequence[Sale]:
        query = select(Sale).order_by(Sale.sale_date.desc(), Sale.created_at.desc())
        result = await self.db.execute(query)
        return result.scalars().all()

    async def add(self, sale: Sale, details: list[SaleDetail]) -> Sale:
        """Insert a sale header together with its details."""
        sale.details = details
        self.db.add(sale)
        await self.db.flush()
        return sale

    async def delete(self, sale: Sale) -> None:
        await self.db.delete(sale)
        await self.db.flush()

    async def get_status_by_code(self, code: str) -> Optional[SaleStatus]:
        query = select(SaleStatus).where(SaleStatus.code == code)
        result = await self.db.execute(query)
        return result.scalar_one_or_none()

    async def get_status_by_id(self, status_id: UUID) -> Optional[SaleStatus]:
        query = select(SaleStatus).where(SaleStatus.id == status_id)
        result = await self.db.execute(query)
        return result.scalar_one_or_none()

    async def list_statuses(self) -> Sequence[SaleStatus]:
        result = await self.db.execute(select(SaleStatus).order_by(SaleStatus.code))
        return result.scalars().all()
