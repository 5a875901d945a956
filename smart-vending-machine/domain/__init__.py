"""
Pure domain model for the vending machine.

No I/O, no logging, no frameworks. State changes happen only through the
operations defined on the entities here.
"""

from .catalog import ProductCatalog
from .errors import (
    InsufficientFundsError,
    InvalidArgumentError,
    InvalidStateError,
    OutOfStockError,
    ProductNotFoundError,
    VendingError,
)
from .product import Product
from .transaction import Transaction
from .vending_machine import VendingMachine

__all__ = [
    "InsufficientFundsError",
    "InvalidArgumentError",
    "InvalidStateError",
    "OutOfStockError",
    "Product",
    "ProductCatalog",
    "ProductNotFoundError",
    "Transaction",
    "VendingError",
    "VendingMachine",
]
