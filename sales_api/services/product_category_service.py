"""Product category service module.

Provides CRUD operations for product categories:
- Category codes are unique and immutable after creation
- A category cannot be deleted while products reference it
"""
import logging
from typing import Optional
from uuid import UUID

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from sales_api.exceptions.api_exception import ConflictError, NotFoundError, ValidationError
from sales_api.models.product_category import ProductCategory
from sales_api.repositories.product_category_repository import ProductCategoryRepository
from sales_api.schemas.product_category import (
    ProductCategoryCreate,
    ProductCategoryUpdate,
    ProductCategoryResponse,
)
from sales_api.services.identifiers import generate_id

logger = logging.getLogger(__name__)


def _require_text(value: Optional[str], field: str) -> str:
    """Return the stripped value, or raise ValidationError when blank."""
    if value is None or not value.strip():
        raise ValidationError(f"{field} must not be empty")
    return value.strip()


async def _get_or_404(repository: ProductCategoryRepository, category_id: UUID) -> ProductCategory:
    category = await repository.get_by_id(category_id)
    if not category:
        raise NotFoundError(f"Product category '{category_id}' not found")
    return category


async def create_category(
    db: AsyncSession,
    data: ProductCategoryCreate,
) -> ProductCategoryResponse:
    """Create a product category with a unique code."""
    code = _require_text(data.code, "code")
    name = _require_text(data.name, "name")

    repository = ProductCategoryRepository(db)
    if await repository.exists_by_code(code):
        raise ConflictError(f"Product category code '{code}' already exists")

    category = ProductCategory(
        id=generate_id(),
        code=code,
        name=name,
        description=data.description,
    )
    try:
        await repository.add(category)
        await db.commit()
    except IntegrityError:
        # lost a race against another insert of the same code
        await db.rollback()
        raise ConflictError(f"Product category code '{code}' already exists")

    logger.info("Created product category %s (%s)", category.id, category.code)
    return ProductCategoryResponse.model_validate(category)


async def get_category(
    db: AsyncSession,
    category_id: UUID,
) -> ProductCategoryResponse:
    """Get a product category by ID."""
    category = await _get_or_404(ProductCategoryRepository(db), category_id)
    return ProductCategoryResponse.model_validate(category)


async def list_categories(db: AsyncSession) -> list[ProductCategoryResponse]:
    """List all product categories."""
    categories = await ProductCategoryRepository(db).list_all()
    return [ProductCategoryResponse.model_validate(c) for c in categories]


async def update_category(
    db: AsyncSession,
    category_id: UUID,
    data: ProductCategoryUpdate,
) -> ProductCategoryResponse:
    """Replace the name and description of a product category."""
    name = _require_text(data.name, "name")

    category = await _get_or_404(ProductCategoryRepository(db), category_id)
    category.name = name
    category.description = data.description

    await db.commit()
    await db.refresh(category)
    return ProductCategoryResponse.model_validate(category)


async def delete_category(
    db: AsyncSession,
    category_id: UUID,
) -> None:
    """Delete a product category that no product references."""
    repository = ProductCategoryRepository(db)
    category = await _get_or_404(repository, category_id)

    if await repository.has_products(category_id):
        raise ConflictError(
            f"Product category '{category.code}' is referenced by products and cannot be deleted"
        )

    await repository.delete(category)
    await db.commit()
    logger.info("Deleted product category %s", category_id)
