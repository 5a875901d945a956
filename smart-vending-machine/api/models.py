"""
API Request and Response Models.

Pydantic models for validating API requests and serializing responses.

Non-finite numbers (NaN, Infinity) are refused here with a 422. Value checks
(negative prices, blank names, ...) are left to the domain so the API reports
the same errors as any other caller of the service.
"""

from datetime import datetime
from typing import Any, Dict, List

from pydantic import BaseModel, Field

from domain.product import Product
from domain.transaction import Transaction


# ============================================================================
# Product Models
# ============================================================================

class ProductCreateRequest(BaseModel):
    """Request to add (or replace) a catalog entry."""
    name: str = Field(..., description="Product name; surrounding whitespace is trimmed")
    price: float = Field(..., allow_inf_nan=False, description="Unit price, must be >= 0")
    stock: int = Field(0, description="Initial stock, must be >= 0")

    class Config:
        json_schema_extra = {
            "example": {
                "name": "A1",
                "price": 2.50,
                "stock": 10
            }
        }


class RestockRequest(BaseModel):
    """Request to add units to a product's stock."""
    quantity: int = Field(..., description="Units to add, must be > 0")


class PriceUpdateRequest(BaseModel):
    """Request to change a product's price."""
    price: float = Field(..., allow_inf_nan=False, description="New unit price, must be >= 0")


class ProductResponse(BaseModel):
    """Single catalog entry."""
    name: str
    price: float
    stock: int
    available: bool

    @classmethod
    def from_product(cls, product: Product) -> "ProductResponse":
        return cls(
            name=product.name,
            price=product.price,
            stock=product.stock,
            available=product.is_available(),
        )

    class Config:
        json_schema_extra = {
            "example": {
                "name": "A1",
                "price": 2.50,
                "stock": 9,
                "available": True
            }
        }


class ProductListResponse(BaseModel):
    """Response for catalog listing."""
    items: List[ProductResponse]
    total_count: int
    available_only: bool


class InventoryValueResponse(BaseModel):
    """Total value of the stock held by the machine."""
    total_value: float
    product_count: int
    currency: str


# ============================================================================
# Money Models
# ============================================================================

class InsertMoneyRequest(BaseModel):
    """Request to insert money into the machine."""
    amount: float = Field(..., allow_inf_nan=False, description="Amount inserted, must be > 0")

    class Config:
        json_schema_extra = {
            "example": {
                "amount": 5.00
            }
        }


class BalanceResponse(BaseModel):
    """Current balance of the machine."""
    balance: float
    currency: str


class ChangeResponse(BaseModel):
    """Money returned to the customer without a purchase."""
    change: float
    currency: str


# ============================================================================
# Purchase Models
# ============================================================================

class PurchaseRequest(BaseModel):
    """Request to buy one unit of a product with the current balance."""
    product_name: str = Field(..., description="Name of the product to buy")

    class Config:
        json_schema_extra = {
            "example": {
                "product_name": "A1"
            }
        }


class TransactionResponse(BaseModel):
    """A completed purchase."""
    product_name: str
    amount_paid: float
    change_given: float
    total_amount_inserted: float
    has_change: bool
    timestamp: datetime
    currency: str

    @classmethod
    def from_transaction(cls, transaction: Transaction, currency: str) -> "TransactionResponse":
        return cls(
            product_name=transaction.product_name,
            amount_paid=transaction.amount_paid,
            change_given=transaction.change_given,
            total_amount_inserted=transaction.total_amount_inserted,
            has_change=transaction.has_change,
            timestamp=transaction.timestamp,
            currency=currency,
        )

    class Config:
        json_schema_extra = {
            "example": {
                "product_name": "A1",
                "amount_paid": 2.50,
                "change_given": 2.50,
                "total_amount_inserted": 5.00,
                "has_change": True,
                "timestamp": "2025-01-01T12:00:00Z",
                "currency": "USD"
            }
        }


class TransactionListResponse(BaseModel):
    """Transaction log, oldest first."""
    items: List[TransactionResponse]
    total_count: int


# ============================================================================
# Error Models
# ============================================================================

class ErrorResponse(BaseModel):
    """Error body returned with every 4xx/5xx status (FastAPI HTTPException shape)."""
    detail: str

    class Config:
        json_schema_extra = {
            "example": {
                "detail": "Product is out of stock: A1"
            }
        }


def error_responses(*status_codes: int) -> Dict[int, Dict[str, Any]]:
    """OpenAPI `responses=` entries documenting ErrorResponse for the given codes."""
    return {code: {"model": ErrorResponse} for code in status_codes}
