"""
Default catalog data

Loaded on startup when the catalog is empty so a fresh deployment
has something to browse.
"""
import logging
from decimal import Decimal
from typing import List

from app.domain.product import Product
from app.repositories.product_repository import ProductRepository

logger = logging.getLogger(__name__)


DEFAULT_PRODUCTS: List[Product] = [
    Product(
        id="602d2149e773f2a3990b47f5",
        name="IPhone X",
        category="Smart Phone",
        summary="Edge-to-edge OLED display with Face ID.",
        description="5.8 inch Super Retina display, dual 12MP cameras and wireless charging.",
        image_file="product-1.png",
        price=Decimal("950.00")
    ),
    Product(
        id="602d2149e773f2a3990b47f6",
        name="Samsung 10",
        category="Smart Phone",
        summary="Infinity-O display with triple rear camera.",
        description="6.1 inch Dynamic AMOLED panel, ultrasonic fingerprint reader and reverse wireless charging.",
        image_file="product-2.png",
        price=Decimal("840.00")
    ),
    Product(
        id="602d2149e773f2a3990b47f7",
        name="Huawei Plus",
        category="White Appliances",
        summary="Large battery and fast charging.",
        description="Long battery life with 40W SuperCharge and a Leica tuned camera system.",
        image_file="product-3.png",
        price=Decimal("650.00")
    ),
    Product(
        id="602d2149e773f2a3990b47f8",
        name="Xiaomi Mi 9",
        category="White Appliances",
        summary="48MP main camera at a mid-range price.",
        description="Snapdragon 855, 6.39 inch AMOLED display and in-display fingerprint sensor.",
        image_file="product-4.png",
        price=Decimal("470.00")
    ),
    Product(
        id="602d2149e773f2a3990b47f9",
        name="HTC U11+ Plus",
        category="Smart Phone",
        summary="Squeezable frame with Edge Sense.",
        description="6 inch Super LCD6, liquid surface design and IP68 water resistance.",
        image_file="product-5.png",
        price=Decimal("380.00")
    ),
    Product(
        id="602d2149e773f2a3990b47fa",
        name="LG G7 ThinQ",
        category="Home Kitchen",
        summary="Boombox speaker and bright FullVision display.",
        description="6.1 inch QHD+ display, AI camera and dedicated Google Assistant key.",
        image_file="product-6.png",
        price=Decimal("240.00")
    ),
]


async def seed_products(repository: ProductRepository) -> int:
    """
    Insert the default products that are not stored yet

    Defaults are matched by ID, so a seed interrupted partway
    is completed on the next run.

    Args:
        repository: Repository to seed

    Returns:
        Number of products inserted (0 when every default is already stored)
    """
    existing = await repository.get_products() or []
    stored_ids = {product.id for product in existing}

    missing = [product for product in DEFAULT_PRODUCTS if product.id not in stored_ids]
    if not missing:
        logger.debug("Default products already stored, skipping seed")
        return 0

    for product in missing:
        await repository.create_product(product)

    logger.info(f"Seeded catalog with {len(missing)} default products")
    return len(missing)
