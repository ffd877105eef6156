"""
Catalog Service - Backend API
Product catalog CRUD service
"""
import logging
import time
from contextlib import asynccontextmanager
from pathlib import Path

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.concurrency import run_in_threadpool
from fastapi.middleware.cors import CORSMiddleware

# Load environment variables
env_path = Path(__file__).parent.parent / '.env'
load_dotenv(env_path)

from app.api import catalog
from app.core.config import settings
from app.core.database import CONNECTION_TIMEOUT, ensure_schema, get_db_connection_with_retry
from app.repositories.catalog_seed import seed_products

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create the catalog table and seed it on startup"""
    if not settings.DATABASE_URL:
        logger.warning("DATABASE_URL not configured - skipping catalog bootstrap")
    else:
        await run_in_threadpool(ensure_schema)
        if settings.SEED_ON_STARTUP:
            await seed_products(catalog.get_product_repository())
    yield


# Create FastAPI application
app = FastAPI(
    title=settings.API_TITLE,
    version=settings.API_VERSION,
    description=settings.API_DESCRIPTION,
    debug=settings.API_DEBUG,
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.get_allowed_origins(),
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["*"],
    expose_headers=["Location"],
)

# Include API routers
app.include_router(catalog.router)


@app.get("/")
async def root():
    """Root endpoint - API status"""
    return {
        "message": "Catalog API",
        "status": "online",
        "version": settings.API_VERSION,
        "description": settings.API_DESCRIPTION
    }


def _check_database():
    # get_db_connection_with_retry already runs SELECT 1
    conn = get_db_connection_with_retry(max_retries=1, retry_delay=0.5)
    conn.close()


@app.get("/health")
async def health():
    """Health check endpoint for monitoring - tests database connectivity"""
    start_time = time.time()

    db_status = "unknown"
    db_latency_ms = None
    db_error = None

    try:
        db_start = time.time()
        await run_in_threadpool(_check_database)
        db_latency_ms = round((time.time() - db_start) * 1000, 2)
        db_status = "connected"
    except Exception as e:
        logger.warning(f"Health check database error: {e}")
        db_status = "disconnected"
        db_error = str(e)

    total_latency_ms = round((time.time() - start_time) * 1000, 2)

    return {
        "status": "healthy" if db_status == "connected" else "degraded",
        "service": "catalog-api",
        "version": settings.API_VERSION,
        "database": {
            "status": db_status,
            "latency_ms": db_latency_ms,
            "error": db_error,
            "connection_timeout_s": CONNECTION_TIMEOUT
        },
        "total_latency_ms": total_latency_ms
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("app.main:app", host=settings.API_HOST, port=settings.API_PORT, reload=settings.API_DEBUG)
