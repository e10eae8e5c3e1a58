"""Pytest fixtures for async SQLite test database."""
from decimal import Decimal

import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.pool import StaticPool

from sales_api.app import app
from sales_api.database.database import Base, get_db
from sales_api.database.seed import seed_sale_statuses
from sales_api.models.product import Product
from sales_api.models.product_category import ProductCategory
from sales_api.models.sale import Sale, SaleDetail, SaleStatus  # noqa: F401
from sales_api.services.identifiers import generate_id


@pytest_asyncio.fixture
async def db_session():
    """Create an in-memory SQLite async session with foreign keys enforced."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        echo=False,
        poolclass=StaticPool,
    )

    @event.listens_for(engine.sync_engine, "connect")
    def _enable_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    session_factory = async_sessionmaker(
        engine, class_=AsyncSession, expire_on_commit=False
    )
    async with session_factory() as session:
        yield session
    await engine.dispose()


@pytest_asyncio.fixture
async def sale_statuses(db_session):
    """Seed the sale status master data."""
    await seed_sale_statuses(db_session)


@pytest_asyncio.fixture
async def category(db_session):
    """A product category with code CAT1."""
    category = ProductCategory(id=generate_id(), code="CAT1", name="Cat")
    db_session.add(category)
    await db_session.commit()
    return category


@pytest_asyncio.fixture
async def products(db_session, category):
    """Two products in CAT1: P1 (stock 5) and P2 (stock 1)."""
    items = [
        Product(
            id=generate_id(),
            code="P1",
            name="Widget",
            price=Decimal("9.99"),
            stock=5,
            category_id=category.id,
        ),
        Product(
            id=generate_id(),
            code="P2",
            name="Gadget",
            description="Scarce item",
            price=Decimal("25.00"),
            stock=1,
            category_id=category.id,
        ),
    ]
    db_session.add_all(items)
    await db_session.commit()
    return items


@pytest_asyncio.fixture
async def client(db_session):
    """Async test client sharing the test database session."""

    async def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac
    app.dependency_overrides.clear()
