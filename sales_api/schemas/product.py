"""Product schemas module."""
from decimal import Decimal
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, Field

from sales_api.schemas.money import Money


class ProductBase(BaseModel):
    """Fields shared by product create and update requests."""

    name: str = Field(..., min_length=1, max_length=256, description="Product name")
    description: Optional[str] = Field(None, description="Optional description")
    price: Decimal = Field(..., gt=0, decimal_places=2, description="Unit price")
    stock: int = Field(..., ge=0, description="Units in stock")
    category_id: UUID = Field(
        ...,
        alias="categoryId",
        description="Owning product category",
    )

    class Config:
        populate_by_name = True


class ProductCreate(ProductBase):
    """Request schema for creating a product."""

    code: str = Field(..., min_length=1, max_length=50, description="Unique product code")


class ProductUpdate(ProductBase):
    """Request schema for updating a product (full replace, code excluded)."""

    pass


class ProductResponse(BaseModel):
    """Response schema for a product."""

    id: UUID = Field(..., description="Product UUID")
    code: str = Field(..., description="Unique product code")
    name: str = Field(..., description="Product name")
    description: Optional[str] = Field(None, description="Optional description")
    price: Money = Field(..., description="Unit price")
    stock: int = Field(..., description="Units in stock")
    category_id: UUID = Field(..., alias="categoryId", description="Owning product category")

    class Config:
        populate_by_name = True
        from_attributes = True
