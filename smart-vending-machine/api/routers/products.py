"""
Products API Endpoints.

Endpoints for browsing and maintaining the machine's catalog.
"""

from fastapi import APIRouter, Depends, HTTPException, Response

from api.dependencies import get_settings, get_vending_service, to_http_exception
from api.models import (
    error_responses,
    InventoryValueResponse,
    PriceUpdateRequest,
    ProductCreateRequest,
    ProductListResponse,
    ProductResponse,
    RestockRequest,
)
from config.settings import Settings
from domain.errors import VendingError
from services.vending_service import VendingService

router = APIRouter()


@router.get(
    "/products",
    response_model=ProductListResponse,
    summary="List Products",
    description="List catalog entries, optionally only those with stock left."
)
def list_products(
    available_only: bool = False,
    service: VendingService = Depends(get_vending_service),
):
    """
    List products in the catalog.

    **Query parameters:**
    - `available_only`: when true, products with zero stock are left out

    Order of the items is not significant.
    """
    products = service.list_products(available_only=available_only)
    items = [ProductResponse.from_product(product) for product in products]
    return ProductListResponse(items=items, total_count=len(items), available_only=available_only)


@router.post(
    "/products",
    response_model=ProductResponse,
    status_code=201,
    summary="Add Product",
    responses=error_responses(400, 500),
    description="Add a product to the catalog. An existing product with the same name is replaced."
)
def add_product(request: ProductCreateRequest, service: VendingService = Depends(get_vending_service)):
    """
    Add a product.

    **Example request:**
    ```json
    {"name": "A1", "price": 2.50, "stock": 10}
    ```
    """
    try:
        product = service.add_product(request.name, price=request.price, stock=request.stock)
        return ProductResponse.from_product(product)
    except VendingError as e:
        raise to_http_exception(e)
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Failed to add product: {str(e)}")


@router.get(
    "/products/{name}",
    response_model=ProductResponse,
    summary="Get Product",
    responses=error_responses(404)
)
def get_product(name: str, service: VendingService = Depends(get_vending_service)):
    product = service.get_product(name)
    if product is None:
        raise HTTPException(status_code=404, detail=f"Product not found: {name}")
    return ProductResponse.from_product(product)


@router.delete(
    "/products/{name}",
    status_code=204,
    summary="Remove Product",
    responses=error_responses(404)
)
def remove_product(name: str, service: VendingService = Depends(get_vending_service)):
    removed = service.remove_product(name)
    if removed is None:
        raise HTTPException(status_code=404, detail=f"Product not found: {name}")
    return Response(status_code=204)


@router.delete(
    "/products",
    summary="Clear Catalog",
    description="Remove every product from the catalog."
)
def clear_products(service: VendingService = Depends(get_vending_service)):
    removed = service.clear_products()
    return {"removed": removed}


@router.post(
    "/products/{name}/restock",
    response_model=ProductResponse,
    summary="Restock Product",
    responses=error_responses(400, 404, 500)
)
def restock_product(
    name: str,
    request: RestockRequest,
    service: VendingService = Depends(get_vending_service),
):
    """
    Add units to a product's stock.

    Returns 400 for a non-positive quantity and 404 for an unknown product.
    """
    try:
        product = service.restock(name, request.quantity)
        return ProductResponse.from_product(product)
    except VendingError as e:
        raise to_http_exception(e)
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Failed to restock product: {str(e)}")


@router.put(
    "/products/{name}/price",
    response_model=ProductResponse,
    summary="Update Price",
    responses=error_responses(400, 404, 500)
)
def update_price(
    name: str,
    request: PriceUpdateRequest,
    service: VendingService = Depends(get_vending_service),
):
    try:
        product = service.set_price(name, request.price)
        return ProductResponse.from_product(product)
    except VendingError as e:
        raise to_http_exception(e)
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Failed to update price: {str(e)}")


@router.get(
    "/inventory/value",
    response_model=InventoryValueResponse,
    summary="Inventory Value",
    description="Sum of price x stock over the whole catalog."
)
def inventory_value(
    service: VendingService = Depends(get_vending_service),
    settings: Settings = Depends(get_settings),
):
    return InventoryValueResponse(
        total_value=service.get_inventory_value(),
        product_count=len(service.list_products()),
        currency=settings.currency,
    )
