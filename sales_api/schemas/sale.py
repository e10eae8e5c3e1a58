"""Sale schemas module."""
from datetime import date
from decimal import Decimal
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, Field, model_validator

from sales_api.schemas.money import Money


class SaleDetailCreate(BaseModel):
    """One line item of a sale creation request."""

    product_id: UUID = Field(..., alias="productId", description="Sold product")
    quantity: int = Field(..., ge=1, description="Units sold")
    unit_price: Decimal = Field(
        ...,
        alias="unitPrice",
        ge=Decimal("0.01"),
        decimal_places=2,
        description="Price per unit",
    )
    subtotal: Decimal = Field(
        ...,
        ge=Decimal("0.01"),
        decimal_places=2,
        description="Line total, taken as given",
    )

    class Config:
        populate_by_name = True


class SaleCreate(BaseModel):
    """Request schema for creating a sale with its line items."""

    sale_date: date = Field(..., alias="saleDate", description="Date of the sale")
    details: list[SaleDetailCreate] = Field(
        ...,
        min_length=1,
        description="Line items, at least one",
    )

    class Config:
        populate_by_name = True


class SaleStatusUpdate(BaseModel):
    """Request schema for moving a sale to another status.

    Either ``statusCode`` or ``statusId`` identifies the target status.
    """

    status_code: Optional[str] = Field(
        None, alias="statusCode", min_length=1, description="Target status code"
    )
    status_id: Optional[UUID] = Field(None, alias="statusId", description="Target status UUID")

    class Config:
        populate_by_name = True

    @model_validator(mode="after")
    def check_target(self) -> "SaleStatusUpdate":
        if self.status_code is None and self.status_id is None:
            raise ValueError("statusCode or statusId is required")
        return self


class SaleStatusResponse(BaseModel):
    """Response schema for a sale status."""

    id: UUID = Field(..., description="Status UUID")
    code: str = Field(..., description="Status code")
    name: str = Field(..., description="Display name")
    description: Optional[str] = Field(None, description="Optional description")

    class Config:
        from_attributes = True


class SaleDetailResponse(BaseModel):
    """Response schema for a sale line item."""

    id: UUID = Field(..., description="Detail UUID")
    product_id: UUID = Field(..., alias="productId", description="Sold product")
    quantity: int = Field(..., description="Units sold")
    unit_price: Money = Field(..., alias="unitPrice", description="Price per unit")
    subtotal: Money = Field(..., description="Line total")

    class Config:
        populate_by_name = True


class SaleResponse(BaseModel):
    """Response schema for a sale with its line items."""

    id: UUID = Field(..., description="Sale UUID")
    sale_date: date = Field(..., alias="saleDate", description="Date of the sale")
    total_amount: Money = Field(..., alias="totalAmount", description="Sum of subtotals")
    status_id: UUID = Field(..., alias="statusId", description="Current status UUID")
    status_code: str = Field(..., alias="statusCode", description="Current status code")
    details: list[SaleDetailResponse] = Field(
        default_factory=list, description="Line items in submission order"
    )

    class Config:
        populate_by_name = True
