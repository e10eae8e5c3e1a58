"""Sale, sale detail and sale status models."""
import uuid
from datetime import date, datetime
from decimal import Decimal

from sqlalchemy import ForeignKey, String, Text, Integer, Date, DateTime, Numeric, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from sales_api.database.database import Base


class SaleStatus(Base):
    """Sale status master data (PENDING, COMPLETED, PAID, CANCELLED)."""

    __tablename__ = "sale_statuses"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True)
    code: Mapped[str] = mapped_column(String(50), nullable=False, unique=True, index=True)
    name: Mapped[str] = mapped_column(String(256), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=True)


class Sale(Base):
    """Sale header. Owns its details."""

    __tablename__ = "sales"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True)
    sale_date: Mapped[date] = mapped_column(Date, nullable=False, index=True)
    total_amount: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)
    status_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("sale_statuses.id", onupdate="CASCADE", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, default=datetime.utcnow
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow
    )

    status: Mapped[SaleStatus] = relationship(lazy="selectin")
    details: Mapped[list["SaleDetail"]] = relationship(
        back_populates="sale",
        cascade="all, delete-orphan",
        order_by="SaleDetail.position",
        lazy="selectin",
    )


class SaleDetail(Base):
    """One product line of a sale. Immutable once created."""

    __tablename__ = "sale_details"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True)
    sale_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("sales.id", onupdate="CASCADE", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    product_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("products.id", onupdate="CASCADE", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )
    # submission order within the sale
    position: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    quantity: Mapped[int] = mapped_column(Integer, nullable=False)
    unit_price: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    subtotal: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, default=datetime.utcnow
    )

    sale: Mapped[Sale] = relationship(back_populates="details")
