"""
Unit tests for the Product domain model
"""
import pytest
from decimal import Decimal
from pydantic import ValidationError

from app.domain.product import Product


class TestProduct:
    """Test Product validation and helpers"""

    def test_minimal_product(self):
        product = Product(name="Pixel 8")

        assert product.id is None
        assert product.price == Decimal("0")
        assert product.category is None

    def test_name_is_required(self):
        with pytest.raises(ValidationError):
            Product(price=Decimal("10"))

    def test_negative_price_rejected(self):
        with pytest.raises(ValidationError):
            Product(name="Pixel 8", price=Decimal("-1"))

    def test_product_is_immutable(self, sample_product):
        with pytest.raises(ValidationError):
            sample_product.name = "Renamed"

    def test_with_id_returns_copy(self, new_product):
        stored = new_product.with_id("65a1f0c2b3d4e5f6a7b8c9d0")

        assert stored.id == "65a1f0c2b3d4e5f6a7b8c9d0"
        assert stored.name == new_product.name
        assert new_product.id is None

    def test_price_serializes_as_number_in_json(self, sample_product):
        assert sample_product.model_dump(mode="json")["price"] == 950.0
        assert sample_product.model_dump()["price"] == Decimal("950.00")
