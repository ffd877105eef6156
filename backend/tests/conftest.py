"""
Pytest fixtures and configuration for Catalog Service tests

This file provides shared fixtures that can be used across all test modules.
"""
import logging
from decimal import Decimal
from typing import List, Optional

import pytest
from fastapi.testclient import TestClient

from app.api.catalog import CatalogController, get_product_repository
from app.domain.product import Product
from app.repositories.product_repository import ProductRepository


class FakeProductRepository(ProductRepository):
    """
    Hand-written ProductRepository stand-in

    Returns whatever the test configured and records every call
    as (method_name, args) in self.calls.
    """

    def __init__(self):
        self.calls = []
        self.products: Optional[List[Product]] = []
        self.product: Optional[Product] = None
        self.by_name: List[Product] = []
        self.by_category: List[Product] = []
        self.created: Optional[Product] = None
        self.update_result = True
        self.delete_result = True
        self.error: Optional[Exception] = None

    def _record(self, name, *args):
        self.calls.append((name, args))
        if self.error is not None:
            raise self.error

    def calls_to(self, name):
        return [args for called, args in self.calls if called == name]

    async def get_products(self):
        self._record("get_products")
        return self.products

    async def get_product(self, product_id):
        self._record("get_product", product_id)
        return self.product

    async def get_product_by_name(self, name):
        self._record("get_product_by_name", name)
        return self.by_name

    async def get_products_by_category(self, category):
        self._record("get_products_by_category", category)
        return self.by_category

    async def create_product(self, product):
        self._record("create_product", product)
        return self.created if self.created is not None else product

    async def update_product(self, product):
        self._record("update_product", product)
        return self.update_result

    async def delete_product(self, product_id):
        self._record("delete_product", product_id)
        return self.delete_result


@pytest.fixture
def sample_product():
    """A stored catalog product"""
    return Product(
        id="602d2149e773f2a3990b47f5",
        name="IPhone X",
        category="Smart Phone",
        summary="Edge-to-edge OLED display.",
        description="5.8 inch Super Retina display.",
        image_file="product-1.png",
        price=Decimal("950.00")
    )


@pytest.fixture
def sample_products(sample_product):
    """Two stored catalog products"""
    return [
        sample_product,
        Product(
            id="602d2149e773f2a3990b47f6",
            name="Samsung 10",
            category="Smart Phone",
            image_file="product-2.png",
            price=Decimal("840.00")
        ),
    ]


@pytest.fixture
def new_product():
    """A product payload without identity, as sent on create"""
    return Product(
        name="Pixel 8",
        category="Smart Phone",
        summary="Tensor G3.",
        price=Decimal("699.00")
    )


@pytest.fixture
def fake_repository():
    return FakeProductRepository()


@pytest.fixture
def catalog_logger():
    return logging.getLogger("tests.catalog")


@pytest.fixture
def controller(fake_repository, catalog_logger):
    return CatalogController(fake_repository, catalog_logger)


@pytest.fixture
def client(fake_repository):
    """
    TestClient for the FastAPI app with the repository replaced by the fake

    Not used as a context manager, so startup bootstrap does not run.
    """
    from app.main import app

    app.dependency_overrides[get_product_repository] = lambda: fake_repository
    yield TestClient(app)
    app.dependency_overrides.clear()
