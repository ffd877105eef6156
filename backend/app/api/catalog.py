"""
Catalog API Endpoints
Product catalog CRUD on top of ProductRepository

Endpoints:
- GET    /api/v1/catalog/                     - List all products
- GET    /api/v1/catalog/{product_id}         - Get product by ID
- GET    /api/v1/catalog/category/{category}  - List products in a category
- POST   /api/v1/catalog/                     - Create product
- PUT    /api/v1/catalog/                     - Update product
- DELETE /api/v1/catalog/{product_id}         - Delete product
"""
import logging
from typing import List

from fastapi import APIRouter, Depends, Request

from app.api.results import ActionResult, CreatedAtRouteResult, NotFoundResult, OkResult
from app.domain.product import Product
from app.repositories.product_repository import ProductRepository, PostgresProductRepository

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/catalog", tags=["Catalog"])


class CatalogController:
    """
    Translates catalog requests into repository calls

    Every operation makes exactly one repository call and maps its
    result to an ActionResult. Repository errors are not caught.
    """

    def __init__(self, repository: ProductRepository, logger: logging.Logger):
        self._repository = repository
        self._logger = logger

    async def get_products(self) -> ActionResult:
        products = await self._repository.get_products()
        if products is None:
            # Kept as 200 with no body until the empty-catalog contract is settled
            self._logger.warning("Product repository returned no product list")
        return OkResult(value=products)

    async def get_product_by_id(self, product_id: str) -> ActionResult:
        product = await self._repository.get_product(product_id)
        if product is None:
            self._logger.error(f"Product with id: {product_id}, not found.")
            return NotFoundResult()
        return OkResult(value=product)

    async def get_product_by_category(self, category: str) -> ActionResult:
        products = await self._repository.get_products_by_category(category)
        return OkResult(value=products)

    async def create_product(self, product: Product) -> ActionResult:
        created = await self._repository.create_product(product)
        return CreatedAtRouteResult(
            route_name="GetProduct",
            route_values={"product_id": created.id},
            value=created
        )

    async def update_product(self, product: Product) -> ActionResult:
        if not await self._repository.update_product(product):
            self._logger.error(f"Product with id: {product.id}, not updated.")
            return NotFoundResult()
        return OkResult()

    async def delete_product_by_id(self, product_id: str) -> ActionResult:
        if not await self._repository.delete_product(product_id):
            self._logger.error(f"Product with id: {product_id}, not deleted.")
            return NotFoundResult()
        return OkResult()


# ============================================================================
# Dependencies
# ============================================================================

def get_product_repository() -> ProductRepository:
    """
    FastAPI dependency providing the product repository

    Override in tests:
        app.dependency_overrides[get_product_repository] = lambda: fake_repository
    """
    return PostgresProductRepository()


def get_catalog_controller(
    repository: ProductRepository = Depends(get_product_repository)
) -> CatalogController:
    return CatalogController(repository, logger)


# ============================================================================
# Routes
# ============================================================================

@router.get("/", name="GetProducts", response_model=List[Product])
async def get_products(
    request: Request,
    controller: CatalogController = Depends(get_catalog_controller)
):
    """Get all products in the catalog"""
    result = await controller.get_products()
    return result.to_response(request)


@router.get("/category/{category}", name="GetProductByCategory", response_model=List[Product])
async def get_product_by_category(
    category: str,
    request: Request,
    controller: CatalogController = Depends(get_catalog_controller)
):
    """Get all products in a category"""
    result = await controller.get_product_by_category(category)
    return result.to_response(request)


@router.get("/{product_id}", name="GetProduct", response_model=Product)
async def get_product_by_id(
    product_id: str,
    request: Request,
    controller: CatalogController = Depends(get_catalog_controller)
):
    """
    Get a single product by ID

    Returns 404 when the product does not exist
    """
    result = await controller.get_product_by_id(product_id)
    return result.to_response(request)


@router.post("/", name="CreateProduct", response_model=Product, status_code=201)
async def create_product(
    product: Product,
    request: Request,
    controller: CatalogController = Depends(get_catalog_controller)
):
    """
    Create a product

    The repository assigns the ID when the payload has none.
    Location header points at GET /api/v1/catalog/{product_id}
    """
    result = await controller.create_product(product)
    return result.to_response(request)


@router.put("/", name="UpdateProduct")
async def update_product(
    product: Product,
    request: Request,
    controller: CatalogController = Depends(get_catalog_controller)
):
    """Replace an existing product, 404 when the ID is unknown"""
    result = await controller.update_product(product)
    return result.to_response(request)


@router.delete("/{product_id}", name="DeleteProduct")
async def delete_product_by_id(
    product_id: str,
    request: Request,
    controller: CatalogController = Depends(get_catalog_controller)
):
    """Delete a product, 404 when the ID is unknown"""
    result = await controller.delete_product_by_id(product_id)
    return result.to_response(request)
