from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import PlainTextResponse
from sqlalchemy.orm import Session
from typing import Dict, List

from app.database import get_db
from app.repositories.product_repository import ProductRepository
from app.services.product_service import ProductService
from app.schemas.product import (
    ProductCreate,
    ProductUpdate,
    ProductResponse,
)

router = APIRouter(prefix="/products", tags=["Products"])


def get_product_service(db: Session = Depends(get_db)) -> ProductService:
    """Build a ProductService bound to the request's database session."""
    return ProductService(ProductRepository(db))


@router.post(
    "/",
    response_model=ProductResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new product",
    description="Create a single product. The response carries the assigned ID."
)
def add_product(
    product_data: ProductCreate,
    service: ProductService = Depends(get_product_service)
):
    """
    Create a new product.

    - **createdDate**: defaults to today when omitted
    - **updatedDate**: always set to today
    """
    return service.save(product_data)


@router.post(
    "/bulk",
    response_model=List[ProductResponse],
    status_code=status.HTTP_201_CREATED,
    summary="Create products in bulk",
    description="Create several products in one batched write."
)
def add_products(
    products_data: List[ProductCreate],
    service: ProductService = Depends(get_product_service)
):
    """Create products in bulk. The response keeps the request order."""
    return service.save_batch(products_data)


@router.get(
    "/",
    response_model=List[ProductResponse],
    summary="List all products"
)
def find_all_products(service: ProductService = Depends(get_product_service)):
    return service.get_all()


@router.get(
    "/search/name/{name}",
    response_model=ProductResponse,
    summary="Get product by name",
    description="Exact, case-sensitive name lookup."
)
def find_product_by_name(
    name: str,
    service: ProductService = Depends(get_product_service)
):
    return service.get_by_name(name)


@router.get(
    "/search/price",
    response_model=List[ProductResponse],
    summary="Search products by price range",
    description="Products whose price lies within [minPrice, maxPrice], bounds included."
)
def find_products_by_price_range(
    min_price: float = Query(..., alias="minPrice", description="Minimum price (inclusive)"),
    max_price: float = Query(..., alias="maxPrice", description="Maximum price (inclusive)"),
    service: ProductService = Depends(get_product_service)
):
    return service.get_by_price_range(min_price, max_price)


@router.get(
    "/search/category/{category}",
    response_model=List[ProductResponse],
    summary="Search products by category",
    description="Case-insensitive category match."
)
def find_products_by_category(
    category: str,
    service: ProductService = Depends(get_product_service)
):
    return service.get_by_category(category)


@router.get(
    "/summary/category",
    response_model=Dict[str, int],
    summary="Product count per category"
)
def get_product_summary_by_category(service: ProductService = Depends(get_product_service)):
    return service.summary_by_category()


@router.get(
    "/summary/stock-value",
    response_model=float,
    summary="Total stock value",
    description="Sum of price * quantity over all products."
)
def get_total_stock_value(service: ProductService = Depends(get_product_service)):
    return service.total_stock_value()


@router.get(
    "/{product_id}",
    response_model=ProductResponse,
    summary="Get product by ID"
)
def find_product_by_id(
    product_id: int,
    service: ProductService = Depends(get_product_service)
):
    return service.get_by_id(product_id)


@router.put(
    "/",
    response_model=ProductResponse,
    summary="Update a product",
    description="Overwrite name, price, description and category of the product identified by `id` in the body."
)
def update_product(
    product_data: ProductUpdate,
    service: ProductService = Depends(get_product_service)
):
    """
    Update a product.

    Quantity, inStock and createdDate are never changed by this endpoint.
    """
    return service.update(product_data)


@router.delete(
    "/{product_id}",
    response_class=PlainTextResponse,
    summary="Delete a product",
    description="Delete a product by ID. Deleting an unknown ID still succeeds."
)
def delete_product(
    product_id: int,
    service: ProductService = Depends(get_product_service)
):
    return service.delete(product_id)


@router.patch(
    "/{product_id}/out-of-stock",
    response_model=ProductResponse,
    summary="Mark a product out of stock",
    description="Sets quantity to 0 and inStock to false."
)
def mark_product_as_out_of_stock(
    product_id: int,
    service: ProductService = Depends(get_product_service)
):
    return service.mark_out_of_stock(product_id)
