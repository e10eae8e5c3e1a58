"""Sale status master data seeding."""
import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from sales_api.models.sale import SaleStatus
from sales_api.services.identifiers import generate_id

logger = logging.getLogger(__name__)

SALE_STATUSES = [
    {"code": "PENDING", "name": "Pending", "description": "Sale created, awaiting processing"},
    {"code": "COMPLETED", "name": "Completed", "description": "Sale fulfilled"},
    {"code": "PAID", "name": "Paid", "description": "Sale paid"},
    {"code": "CANCELLED", "name": "Cancelled", "description": "Sale cancelled"},
]


async def seed_sale_statuses(db: AsyncSession) -> int:
    """Insert the missing sale statuses. Returns how many were added."""
    result = await db.execute(select(SaleStatus.code))
    existing = set(result.scalars().all())

    missing = [s for s in SALE_STATUSES if s["code"] not in existing]
    db.add_all(SaleStatus(id=generate_id(), **s) for s in missing)
    await db.commit()

    if missing:
        logger.info("Seeded %d sale status(es)", len(missing))
    return len(missing)
