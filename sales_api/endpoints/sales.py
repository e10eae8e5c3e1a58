"""Sale endpoints module.

Provides endpoints for:
- Sale creation with line items (POST /sales)
- Sale lookup and listing
- Status transitions (PUT /sales/{id})
- Sale status master data (GET /sale-statuses)
"""
from uuid import UUID

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from sales_api.database.database import get_db
from sales_api.schemas.sale import (
    SaleCreate,
    SaleResponse,
    SaleStatusResponse,
    SaleStatusUpdate,
)
from sales_api.services.sale_service import (
    create_sale,
    get_sale,
    list_sales,
    update_sale_status,
    delete_sale,
    list_sale_statuses,
)

router = APIRouter(tags=["sales"])


@router.post("/sales", response_model=SaleResponse, status_code=status.HTTP_201_CREATED)
async def create_new_sale(
    data: SaleCreate,
    db: AsyncSession = Depends(get_db),
) -> SaleResponse:
    """
    Create a sale.

    Required fields:
    - **saleDate**: Date of the sale
    - **details**: At least one line item with productId, quantity (>= 1),
      unitPrice (>= 0.01) and subtotal (>= 0.01)

    The sale starts as PENDING and its totalAmount is the sum of the
    subtotals. Stock is decremented; if any product lacks stock the
    whole sale is rejected and nothing is stored.
    """
    return await create_sale(db=db, data=data)


@router.get("/sales", response_model=list[SaleResponse])
async def get_sales(
    db: AsyncSession = Depends(get_db),
) -> list[SaleResponse]:
    """List all sales with their details."""
    return await list_sales(db=db)


@router.get("/sales/{sale_id}", response_model=SaleResponse)
async def get_sale_by_id(
    sale_id: UUID,
    db: AsyncSession = Depends(get_db),
) -> SaleResponse:
    """Get a sale with its details."""
    return await get_sale(db=db, sale_id=sale_id)


@router.put("/sales/{sale_id}", response_model=SaleResponse)
async def update_sale(
    sale_id: UUID,
    data: SaleStatusUpdate,
    db: AsyncSession = Depends(get_db),
) -> SaleResponse:
    """
    Change the status of a sale.

    Accepts either **statusCode** (e.g. PAID) or **statusId**.
    """
    return await update_sale_status(db=db, sale_id=sale_id, data=data)


@router.delete("/sales/{sale_id}", status_code=status.HTTP_200_OK)
async def delete_sale_by_id(
    sale_id: UUID,
    db: AsyncSession = Depends(get_db),
) -> dict:
    """Delete a sale and its details."""
    await delete_sale(db=db, sale_id=sale_id)
    return {"message": "Sale deleted successfully"}


@router.get("/sale-statuses", response_model=list[SaleStatusResponse])
async def get_sale_statuses(
    db: AsyncSession = Depends(get_db),
) -> list[SaleStatusResponse]:
    """List the available sale statuses."""
    return await list_sale_statuses(db=db)
