"""
Product Domain Model

Represents a product entity in the catalog.
This is the single source of truth for product data structure.
"""
from pydantic import BaseModel, Field, ConfigDict, field_serializer
from typing import Optional
from decimal import Decimal


class Product(BaseModel):
    """
    Product domain model - represents a product in the catalog

    Fields:
        id: Product identity (assigned by the repository on create)
        name: Product name
        category: Product category (optional)
        summary: Short one-line summary (optional)
        description: Long product description (optional)
        image_file: Image file name shown by the storefront (optional)
        price: Selling price
    """

    id: Optional[str] = Field(None, description="Product ID")
    name: str = Field(..., description="Product name", min_length=1)
    category: Optional[str] = Field(None, description="Product category")
    summary: Optional[str] = Field(None, description="Short summary")
    description: Optional[str] = Field(None, description="Product description")
    image_file: Optional[str] = Field(None, description="Image file name")
    price: Decimal = Field(Decimal("0"), description="Sale price", ge=0)

    # Snapshots handed out by the repository are read-only
    model_config = ConfigDict(from_attributes=True, frozen=True)

    def with_id(self, product_id: str) -> "Product":
        """Return a copy of this product carrying the given identity"""
        return self.model_copy(update={"id": product_id})

    @field_serializer("price", when_used="json")
    def serialize_price(self, price: Decimal) -> float:
        """Convert Decimal to float for JSON"""
        return float(price)
