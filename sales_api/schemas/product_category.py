"""Product category schemas module."""
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, Field


class ProductCategoryCreate(BaseModel):
    """Request schema for creating a product category."""

    code: str = Field(..., min_length=1, max_length=50, description="Unique category code")
    name: str = Field(..., min_length=1, max_length=256, description="Category name")
    description: Optional[str] = Field(None, description="Optional description")


class ProductCategoryUpdate(BaseModel):
    """Request schema for updating a product category. The code is immutable."""

    name: str = Field(..., min_length=1, max_length=256, description="Category name")
    description: Optional[str] = Field(None, description="Optional description")


class ProductCategoryResponse(BaseModel):
    """Response schema for a product category."""

    id: UUID = Field(..., description="Category UUID")
    code: str = Field(..., description="Unique category code")
    name: str = Field(..., description="Category name")
    description: Optional[str] = Field(None, description="Optional description")

    class Config:
        from_attributes = True
