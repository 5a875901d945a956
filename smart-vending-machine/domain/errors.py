"""
Domain: error kinds.

Two kinds cover every rejection:
- InvalidArgumentError: the caller passed a structurally invalid value.
- InvalidStateError: the value is fine but the operation is impossible right now.

Both are raised before any state is touched, so a failed call leaves the
machine exactly as it was.
"""

from __future__ import annotations


class VendingError(Exception):
    """Base class for all vending machine domain errors."""
    pass


class InvalidArgumentError(VendingError, ValueError):
    """Raised when an input value is invalid (blank name, negative amount, ...)."""
    pass


class InvalidStateError(VendingError):
    """Raised when an operation is impossible given the current machine state."""
    pass


class ProductNotFoundError(InvalidStateError):
    """Raised when no catalog entry exists for the requested name."""

    def __init__(self, product_name: str) -> None:
        super().__init__(f"Product not found: {product_name}")
        self.product_name = product_name


class OutOfStockError(InvalidStateError):
    """Raised when the requested product has no stock left."""

    def __init__(self, product_name: str) -> None:
        super().__init__(f"Product is out of stock: {product_name}")
        self.product_name = product_name


class InsufficientFundsError(InvalidStateError):
    """Raised when the balance does not cover the product price."""

    def __init__(self, product_name: str, required: float, available: float) -> None:
        super().__init__(
            f"Insufficient funds for {product_name}. Required: {required:.2f}, Available: {available:.2f}"
        )
        self.product_name = product_name
        self.required = required
        self.available = available
