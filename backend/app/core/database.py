"""
PostgreSQL database access

Centralizes every way the service opens a database connection:
- psycopg2 direct connections (raw SQL, dict rows)
- connection with retry for startup and health checks
- schema bootstrap for the catalog table
"""
import time
import logging

import psycopg2
from psycopg2.extras import RealDictCursor

from .config import settings

logger = logging.getLogger(__name__)

CONNECTION_TIMEOUT = 10


CATALOG_SCHEMA = """
    CREATE TABLE IF NOT EXISTS catalog_products (
        id VARCHAR(24) PRIMARY KEY,
        name TEXT NOT NULL,
        category TEXT,
        summary TEXT,
        description TEXT,
        image_file TEXT,
        price NUMERIC(12, 2) NOT NULL DEFAULT 0,
        created_at TIMESTAMPTZ NOT NULL DEFAULT NOW(),
        updated_at TIMESTAMPTZ
    );
    CREATE INDEX IF NOT EXISTS idx_catalog_products_category ON catalog_products (category);
    CREATE INDEX IF NOT EXISTS idx_catalog_products_name ON catalog_products (name);
"""


def _database_url() -> str:
    database_url = settings.DATABASE_URL
    if not database_url:
        raise RuntimeError("DATABASE_URL not configured")
    return database_url


def get_db_connection_dict():
    """
    Get a database connection with RealDictCursor (returns dictionaries)

    Returns:
        psycopg2 connection with RealDictCursor

    Example:
        conn = get_db_connection_dict()
        cursor = conn.cursor()
        cursor.execute("SELECT * FROM catalog_products")
        results = cursor.fetchall()  # Returns list of dicts
        cursor.close()
        conn.close()
    """
    return psycopg2.connect(
        _database_url(),
        cursor_factory=RealDictCursor,
        connect_timeout=CONNECTION_TIMEOUT
    )


def get_db_connection_with_retry(max_retries=None, retry_delay=None):
    """
    Get a psycopg2 connection with automatic retry on connection failures

    Retries failed connections up to max_retries times with exponential
    backoff between attempts. Non-connection errors fail immediately.

    Args:
        max_retries: Maximum number of connection attempts (default: settings.DB_MAX_RETRIES),
            at least one attempt is always made
        retry_delay: Initial delay between retries in seconds (default: settings.DB_RETRY_DELAY)

    Returns:
        psycopg2 connection with RealDictCursor

    Raises:
        psycopg2.OperationalError: If all retry attempts fail
    """
    database_url = _database_url()
    max_retries = max(1, settings.DB_MAX_RETRIES if max_retries is None else max_retries)
    retry_delay = settings.DB_RETRY_DELAY if retry_delay is None else retry_delay

    for attempt in range(1, max_retries + 1):
        try:
            logger.debug(f"Database connection attempt {attempt}/{max_retries}")
            conn = psycopg2.connect(
                database_url,
                cursor_factory=RealDictCursor,
                connect_timeout=CONNECTION_TIMEOUT
            )

            # Test connection with a simple query
            cursor = conn.cursor()
            cursor.execute("SELECT 1")
            cursor.close()

            logger.debug(f"Database connection successful on attempt {attempt}")
            return conn

        except psycopg2.OperationalError as e:
            logger.warning(f"Connection error on attempt {attempt}/{max_retries}: {e}")

            if attempt == max_retries:
                logger.error(f"All {max_retries} connection attempts failed")
                raise

            delay = retry_delay * (2 ** (attempt - 1))
            logger.info(f"Retrying in {delay:.2f} seconds...")
            time.sleep(delay)


def ensure_schema():
    """Create the catalog table and its indexes if they do not exist"""
    conn = get_db_connection_with_retry()
    cursor = conn.cursor()

    try:
        cursor.execute(CATALOG_SCHEMA)
        conn.commit()
        logger.info("Catalog schema ready")
    except Exception:
        conn.rollback()
        raise
    finally:
        cursor.close()
        conn.close()
