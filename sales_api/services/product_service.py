"""Product service module.

Provides CRUD operations for products. Every product belongs to an
existing category; a dangling category reference is a domain error,
not a validation error.
"""
import logging
from uuid import UUID

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from sales_api.exceptions.api_exception import (
    ConflictError,
    DomainError,
    NotFoundError,
    ValidationError,
)
from sales_api.models.product import Product
from sales_api.repositories.product_category_repository import ProductCategoryRepository
from sales_api.repositories.product_repository import ProductRepository
from sales_api.schemas.product import ProductBase, ProductCreate, ProductUpdate, ProductResponse
from sales_api.services.identifiers import generate_id

logger = logging.getLogger(__name__)


def _to_response(product: Product) -> ProductResponse:
    return ProductResponse(
        id=product.id,
        code=product.code,
        name=product.name,
        description=product.description,
        price=product.price,
        stock=product.stock,
        categoryId=product.category_id,
    )


def _validate_fields(data: ProductBase) -> None:
    """Raise ValidationError when name, price, stock or categoryId is out of range."""
    if data.name is None or not data.name.strip():
        raise ValidationError("name must not be empty")
    if data.price is None or data.price <= 0:
        raise ValidationError("price must be greater than zero")
    if data.stock is None or data.stock < 0:
        raise ValidationError("stock must not be negative")
    if not data.category_id:
        raise ValidationError("categoryId is required")


async def _check_category(db: AsyncSession, category_id: UUID) -> None:
    if not await ProductCategoryRepository(db).get_by_id(category_id):
        raise DomainError(f"Product category not found: {category_id}")


async def _get_or_404(repository: ProductRepository, product_id: UUID) -> Product:
    product = await repository.get_by_id(product_id)
    if not product:
        raise NotFoundError(f"Product '{product_id}' not found")
    return product


async def create_product(
    db: AsyncSession,
    data: ProductCreate,
) -> ProductResponse:
    """Create a product under an existing category."""
    code = (data.code or "").strip()
    if not code:
        raise ValidationError("code must not be empty")
    _validate_fields(data)

    await _check_category(db, data.category_id)

    repository = ProductRepository(db)
    if await repository.exists_by_code(code):
        raise ConflictError(f"Product code '{code}' already exists")

    product = Product(
        id=generate_id(),
        code=code,
        name=data.name.strip(),
        description=data.description,
        price=data.price,
        stock=data.stock,
        category_id=data.category_id,
    )
    try:
        await repository.add(product)
        await db.commit()
    except IntegrityError:
        await db.rollback()
        raise ConflictError(f"Product code '{code}' already exists")

    logger.info("Created product %s (%s)", product.id, product.code)
    return _to_response(product)


async def get_product(
    db: AsyncSession,
    product_id: UUID,
) -> ProductResponse:
    """Get a product by ID."""
    product = await _get_or_404(ProductRepository(db), product_id)
    return _to_response(product)


async def list_products(db: AsyncSession) -> list[ProductResponse]:
    """List all products."""
    products = await ProductRepository(db).list_all()
    return [_to_response(p) for p in products]


async def list_products_by_category(
    db: AsyncSession,
    category_id: UUID,
) -> list[ProductResponse]:
    """List the products of one category. Unknown categories yield an empty list."""
    products = await ProductRepository(db).list_by_category(category_id)
    return [_to_response(p) for p in products]


async def update_product(
    db: AsyncSession,
    product_id: UUID,
    data: ProductUpdate,
) -> ProductResponse:
    """Replace name, description, price, stock and category of a product."""
    _validate_fields(data)

    product = await _get_or_404(ProductRepository(db), product_id)
    await _check_category(db, data.category_id)

    product.name = data.name.strip()
    product.description = data.description
    product.price = data.price
    product.stock = data.stock
    product.category_id = data.category_id

    await db.commit()
    await db.refresh(product)
    return _to_response(product)


async def delete_product(
    db: AsyncSession,
    product_id: UUID,
) -> None:
    """Delete a product that no sale references."""
    repository = ProductRepository(db)
    product = await _get_or_404(repository, product_id)

    if await repository.is_sold(product_id):
        raise ConflictError(
            f"Product '{product.code}' is referenced by sales and cannot be deleted"
        )

    await repository.delete(product)
    await db.commit()
    logger.info("Deleted product %s", product_id)
