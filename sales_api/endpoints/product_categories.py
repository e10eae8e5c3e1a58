"""Product category CRUD endpoints module."""
from uuid import UUID

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from sales_api.database.database import get_db
from sales_api.schemas.product_category import (
    ProductCategoryCreate,
    ProductCategoryUpdate,
    ProductCategoryResponse,
)
from sales_api.services.product_category_service import (
    create_category,
    get_category,
    list_categories,
    update_category,
    delete_category,
)

router = APIRouter(prefix="/product-categories", tags=["product-categories"])


@router.post("", response_model=ProductCategoryResponse, status_code=status.HTTP_201_CREATED)
async def create_product_category(
    data: ProductCategoryCreate,
    db: AsyncSession = Depends(get_db),
) -> ProductCategoryResponse:
    """
    Create a product category.

    Required fields:
    - **code**: Unique category code
    - **name**: Category name

    Returns 409 if the code is already taken.
    """
    return await create_category(db=db, data=data)


@router.get("", response_model=list[ProductCategoryResponse])
async def get_product_categories(
    db: AsyncSession = Depends(get_db),
) -> list[ProductCategoryResponse]:
    """List all product categories."""
    return await list_categories(db=db)


@router.get("/{category_id}", response_model=ProductCategoryResponse)
async def get_product_category(
    category_id: UUID,
    db: AsyncSession = Depends(get_db),
) -> ProductCategoryResponse:
    """Get a product category by ID."""
    return await get_category(db=db, category_id=category_id)


@router.put("/{category_id}", response_model=ProductCategoryResponse)
async def update_product_category(
    category_id: UUID,
    data: ProductCategoryUpdate,
    db: AsyncSession = Depends(get_db),
) -> ProductCategoryResponse:
    """Update the name and description of a product category."""
    return await update_category(db=db, category_id=category_id, data=data)


@router.delete("/{category_id}", status_code=status.HTTP_200_OK)
async def delete_product_category(
    category_id: UUID,
    db: AsyncSession = Depends(get_db),
) -> dict:
    """
    Delete a product category.

    Returns 409 while products still reference the category.
    """
    await delete_category(db=db, category_id=category_id)
    return {"message": "Product category deleted successfully"}
