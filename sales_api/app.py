"""FastAPI application setup module."""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from sales_api.settings import settings
from sales_api.database.database import async_session, engine
from sales_api.database.seed import seed_sale_statuses
from sales_api.middleware import setup_middleware
from sales_api.endpoints.product_categories import router as product_categories_router
from sales_api.endpoints.products import router as products_router
from sales_api.endpoints.sales import router as sales_router

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper()),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if settings.SEED_SALE_STATUSES:
        async with async_session() as session:
            await seed_sale_statuses(session)
    logger.info("Sales API started")
    yield
    await engine.dispose()


app = FastAPI(
    title="Sales API",
    description="Product catalogue and sales management service",
    version="1.0.0",
    debug=settings.DEBUG,
    lifespan=lifespan,
)

setup_middleware(app)

# Include routers
app.include_router(product_categories_router)
app.include_router(products_router)
app.include_router(sales_router)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}
