"""Product CRUD endpoints module."""
from uuid import UUID

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from sales_api.database.database import get_db
from sales_api.schemas.product import ProductCreate, ProductUpdate, ProductResponse
from sales_api.services.product_service import (
    create_product,
    get_product,
    list_products,
    list_products_by_category,
    update_product,
    delete_product,
)

router = APIRouter(prefix="/products", tags=["products"])


@router.post("", response_model=ProductResponse, status_code=status.HTTP_201_CREATED)
async def create_new_product(
    data: ProductCreate,
    db: AsyncSession = Depends(get_db),
) -> ProductResponse:
    """
    Create a product.

    Required fields:
    - **code**: Unique product code
    - **name**: Product name
    - **price**: Unit price, greater than zero
    - **stock**: Units in stock, zero or more
    - **categoryId**: Existing product category

    Optional fields:
    - **description**: Optional description
    """
    return await create_product(db=db, data=data)


@router.get("", response_model=list[ProductResponse])
async def get_products(
    db: AsyncSession = Depends(get_db),
) -> list[ProductResponse]:
    """List all products."""
    return await list_products(db=db)


@router.get("/category/{category_id}", response_model=list[ProductResponse])
async def get_products_by_category(
    category_id: UUID,
    db: AsyncSession = Depends(get_db),
) -> list[ProductResponse]:
    """List the products belonging to a category."""
    return await list_products_by_category(db=db, category_id=category_id)


@router.get("/{product_id}", response_model=ProductResponse)
async def get_product_by_id(
    product_id: UUID,
    db: AsyncSession = Depends(get_db),
) -> ProductResponse:
    """Get a product by ID."""
    return await get_product(db=db, product_id=product_id)


@router.put("/{product_id}", response_model=ProductResponse)
async def update_product_by_id(
    product_id: UUID,
    data: ProductUpdate,
    db: AsyncSession = Depends(get_db),
) -> ProductResponse:
    """
    Update a product.

    Replaces name, description, price, stock and categoryId.
    The product code cannot be changed.
    """
    return await update_product(db=db, product_id=product_id, data=data)


@router.delete("/{product_id}", status_code=status.HTTP_200_OK)
async def delete_product_by_id(
    product_id: UUID,
    db: AsyncSession = Depends(get_db),
) -> dict:
    """Delete a product."""
    await delete_product(db=db, product_id=product_id)
    return {"message": "Product deleted successfully"}
