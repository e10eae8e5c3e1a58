"""Sale service module.

Implements the sale workflow:
- Atomic sale creation: status lookup, stock check and decrement,
  header and detail inserts all commit together or not at all
- Status transitions by status code (or id)
- Read and delete of sales with their details

Status lifecycle: PENDING -> COMPLETED | CANCELLED | PAID.
Any known target status is accepted unless STRICT_STATUS_TRANSITIONS
is enabled, in which case ALLOWED_STATUS_TRANSITIONS is enforced.
"""
import logging
from decimal import Decimal
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from sales_api.exceptions.api_exception import DomainError, NotFoundError, ValidationError
from sales_api.models.sale import Sale, SaleDetail, SaleStatus
from sales_api.repositories.product_repository import ProductRepository
from sales_api.repositories.sale_repository import SaleRepository
from sales_api.schemas.sale import (
    SaleCreate,
    SaleDetailResponse,
    SaleResponse,
    SaleStatusResponse,
    SaleStatusUpdate,
)
from sales_api.services.identifiers import generate_id
from sales_api.settings import settings

logger = logging.getLogger(__name__)

PENDING = "PENDING"
COMPLETED = "COMPLETED"
PAID = "PAID"
CANCELLED = "CANCELLED"

ALLOWED_STATUS_TRANSITIONS: dict[str, set[str]] = {
    PENDING: {COMPLETED, CANCELLED, PAID},
    COMPLETED: set(),
    CANCELLED: set(),
    PAID: set(),
}


def _to_response(sale: Sale) -> SaleResponse:
    return SaleResponse(
        id=sale.id,
        saleDate=sale.sale_date,
        totalAmount=sale.total_amount,
        statusId=sale.status_id,
        statusCode=sale.status.code,
        details=[
            SaleDetailResponse(
                id=d.id,
                productId=d.product_id,
                quantity=d.quantity,
                unitPrice=d.unit_price,
                subtotal=d.subtotal,
            )
            for d in sale.details
        ],
    )


async def _get_or_404(repository: SaleRepository, sale_id: UUID) -> Sale:
    sale = await repository.get_by_id(sale_id)
    if not sale:
        raise NotFoundError(f"Sale '{sale_id}' not found")
    return sale


async def create_sale(
    db: AsyncSession,
    data: SaleCreate,
) -> SaleResponse:
    """
    Create a sale and its details in a single transaction.

    All referenced products are row-locked up front in ascending id
    order. Then, for each detail in submission order, the product stock
    is checked against the requested quantity and decremented.
    The total is the sum of the given subtotals. Any failure rolls
    back the whole sale, stock changes included.

    Raises:
        ValidationError: sale date or details missing (nothing touched)
        DomainError: PENDING status not seeded, unknown product,
            or insufficient stock
    """
    if not data.sale_date:
        raise ValidationError("saleDate is required")
    if not data.details:
        raise ValidationError("A sale needs at least one detail")

    sales = SaleRepository(db)
    products = ProductRepository(db)

    try:
        pending = await sales.get_status_by_code(PENDING)
        if not pending:
            logger.error("Sale status %s is not configured; seed the sale_statuses table", PENDING)
            raise DomainError(f"Sale status {PENDING} is not configured")

        locked = await products.lock_many(item.product_id for item in data.details)

        total = Decimal("0")
        details: list[SaleDetail] = []
        for position, item in enumerate(data.details):
            product = locked.get(item.product_id)
            if not product:
                raise DomainError(f"Product not found: {item.product_id}")
            if product.stock < item.quantity:
                raise DomainError(f"Insufficient stock for {product.name}")
            product.stock -= item.quantity

            total += item.subtotal
            details.append(
                SaleDetail(
                    id=generate_id(),
                    product_id=item.product_id,
                    position=position,
                    quantity=item.quantity,
                    unit_price=item.unit_price,
                    subtotal=item.subtotal,
                )
            )

        sale = Sale(
            id=generate_id(),
            sale_date=data.sale_date,
            total_amount=total,
            status_id=pending.id,
            status=pending,
        )
        await sales.add(sale, details)
        await db.commit()
    except Exception:
        await db.rollback()
        raise

    logger.info(
        "Created sale %s with %d detail(s), total %s",
        sale.id, len(details), sale.total_amount,
    )
    return _to_response(sale)


async def get_sale(
    db: AsyncSession,
    sale_id: UUID,
) -> SaleResponse:
    """Get a sale with its details."""
    sale = await _get_or_404(SaleRepository(db), sale_id)
    return _to_response(sale)


async def list_sales(db: AsyncSession) -> list[SaleResponse]:
    """List all sales with their details, newest first."""
    sales = await SaleRepository(db).list_all()
    return [_to_response(s) for s in sales]


async def _resolve_status(repository: SaleRepository, data: SaleStatusUpdate) -> SaleStatus:
    if data.status_code is not None:
        status = await repository.get_status_by_code(data.status_code.strip().upper())
        if not status:
            raise DomainError(f"Sale status not found: {data.status_code}")
    else:
        status = await repository.get_status_by_id(data.status_id)
        if not status:
            raise DomainError(f"Sale status not found: {data.status_id}")
    return status


async def update_sale_status(
    db: AsyncSession,
    sale_id: UUID,
    data: SaleStatusUpdate,
) -> SaleResponse:
    """
    Move a sale to another status.

    Stock and totals are left untouched. An unknown status leaves the
    sale's current status in place.
    """
    repository = SaleRepository(db)
    sale = await _get_or_404(repository, sale_id)
    target = await _resolve_status(repository, data)

    current_code = sale.status.code
    if settings.STRICT_STATUS_TRANSITIONS:
        allowed = ALLOWED_STATUS_TRANSITIONS.get(current_code, set())
        if target.code not in allowed:
            raise DomainError(
                f"Sale cannot move from {current_code} to {target.code}"
            )

    sale.status_id = target.id
    sale.status = target
    await db.commit()

    logger.info("Sale %s status %s -> %s", sale.id, current_code, target.code)
    return _to_response(sale)


async def delete_sale(
    db: AsyncSession,
    sale_id: UUID,
) -> None:
    """Delete a sale together with its details."""
    repository = SaleRepository(db)
    sale = await _get_or_404(repository, sale_id)

    await repository.delete(sale)
    await db.commit()
    logger.info("Deleted sale %s", sale_id)


async def list_sale_statuses(db: AsyncSession) -> list[SaleStatusResponse]:
    """List the sale status master data."""
    statuses = await SaleRepository(db).list_statuses()
    return [SaleStatusResponse.model_validate(s) for s in statuses]
