"""
Product Repository - Data Access Layer for the catalog

ProductRepository is the interface the catalog controller depends on.
PostgresProductRepository implements it with raw SQL over psycopg2 and
returns Product domain models.
"""
import logging
import secrets
from abc import ABC, abstractmethod
from typing import List, Optional

from fastapi.concurrency import run_in_threadpool

from app.domain.product import Product
from app.core.database import get_db_connection_dict

logger = logging.getLogger(__name__)

PRODUCT_COLUMNS = "id, name, category, summary, description, image_file, price"


def new_product_id() -> str:
    """Generate a 24 hex character product identity"""
    return secrets.token_hex(12)


class ProductRepository(ABC):
    """Repository interface for catalog products."""

    @abstractmethod
    async def get_products(self) -> Optional[List[Product]]:
        """Get every product in the catalog."""

    @abstractmethod
    async def get_product(self, product_id: str) -> Optional[Product]:
        """Get product by ID, or None if it does not exist."""

    @abstractmethod
    async def get_product_by_name(self, name: str) -> List[Product]:
        """Get products with the given name."""

    @abstractmethod
    async def get_products_by_category(self, category: str) -> List[Product]:
        """Get all products in a category."""

    @abstractmethod
    async def create_product(self, product: Product) -> Product:
        """Store a new product and return it with its identity."""

    @abstractmethod
    async def update_product(self, product: Product) -> bool:
        """Replace an existing product. False if the ID is unknown."""

    @abstractmethod
    async def delete_product(self, product_id: str) -> bool:
        """Delete a product. False if the ID is unknown."""


class PostgresProductRepository(ProductRepository):
    """
    PostgreSQL implementation of ProductRepository

    All SQL queries for catalog products are centralized here. Each call
    opens its own connection and runs in the threadpool, so awaiting a
    repository method never blocks the event loop.
    """

    @staticmethod
    def _map_row_to_product(row: dict) -> Product:
        """Map a catalog_products row to the Product domain model"""
        return Product(
            id=row['id'],
            name=row['name'],
            category=row.get('category'),
            summary=row.get('summary'),
            description=row.get('description'),
            image_file=row.get('image_file'),
            price=row['price']
        )

    def _fetch_all(self, query: str, params: tuple = ()) -> List[Product]:
        conn = get_db_connection_dict()
        cursor = conn.cursor()

        try:
            cursor.execute(query, params)
            rows = cursor.fetchall()
            return [self._map_row_to_product(row) for row in rows]

        finally:
            cursor.close()
            conn.close()

    def _fetch_one(self, query: str, params: tuple = ()) -> Optional[Product]:
        conn = get_db_connection_dict()
        cursor = conn.cursor()

        try:
            cursor.execute(query, params)
            row = cursor.fetchone()
            if not row:
                return None

            return self._map_row_to_product(row)

        finally:
            cursor.close()
            conn.close()

    def _write(self, query: str, params: tuple, returning: bool = False):
        """
        Run a write statement inside a transaction

        Returns the first returned row when returning=True,
        otherwise the number of affected rows.
        """
        conn = get_db_connection_dict()
        cursor = conn.cursor()

        try:
            cursor.execute(query, params)
            result = cursor.fetchone() if returning else cursor.rowcount
            conn.commit()
            return result

        except Exception:
            conn.rollback()
            raise

        finally:
            cursor.close()
            conn.close()

    async def get_products(self) -> Optional[List[Product]]:
        return await run_in_threadpool(
            self._fetch_all,
            f"SELECT {PRODUCT_COLUMNS} FROM catalog_products ORDER BY name"
        )

    async def get_product(self, product_id: str) -> Optional[Product]:
        return await run_in_threadpool(
            self._fetch_one,
            f"SELECT {PRODUCT_COLUMNS} FROM catalog_products WHERE id = %s",
            (product_id,)
        )

    async def get_product_by_name(self, name: str) -> List[Product]:
        return await run_in_threadpool(
            self._fetch_all,
            f"SELECT {PRODUCT_COLUMNS} FROM catalog_products WHERE name = %s ORDER BY id",
            (name,)
        )

    async def get_products_by_category(self, category: str) -> List[Product]:
        return await run_in_threadpool(
            self._fetch_all,
            f"SELECT {PRODUCT_COLUMNS} FROM catalog_products WHERE category = %s ORDER BY name",
            (category,)
        )

    async def create_product(self, product: Product) -> Product:
        if not product.id:
            product = product.with_id(new_product_id())

        row = await run_in_threadpool(
            self._write,
            f"""
                INSERT INTO catalog_products
                    (id, name, category, summary, description, image_file, price)
                VALUES (%s, %s, %s, %s, %s, %s, %s)
                RETURNING {PRODUCT_COLUMNS}
            """,
            (
                product.id, product.name, product.category, product.summary,
                product.description, product.image_file, product.price
            ),
            True
        )

        logger.info(f"Created product {product.id}")
        return self._map_row_to_product(row)

    async def update_product(self, product: Product) -> bool:
        if not product.id:
            return False

        updated = await run_in_threadpool(
            self._write,
            """
                UPDATE catalog_products
                SET name = %s, category = %s, summary = %s, description = %s,
                    image_file = %s, price = %s, updated_at = NOW()
                WHERE id = %s
            """,
            (
                product.name, product.category, product.summary,
                product.description, product.image_file, product.price,
                product.id
            )
        )
        return updated > 0

    async def delete_product(self, product_id: str) -> bool:
        deleted = await run_in_threadpool(
            self._write,
            "DELETE FROM catalog_products WHERE id = %s",
            (product_id,)
        )
        return deleted > 0
