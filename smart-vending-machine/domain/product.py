"""
Domain: Product.

A Product is a catalog entry of the machine: a name, a unit price and a stock
count.

Invariants enforced here:
- price is never negative.
- stock is never negative; it drops by exactly 1 per sale and grows only by a
  positive restock quantity.
- name is never blank and is always stored trimmed.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

from .errors import InvalidArgumentError, InvalidStateError


def _require_non_negative_price(price: float) -> None:
    if not math.isfinite(price):
        raise InvalidArgumentError("Price must be a finite number")
    if price < 0:
        raise InvalidArgumentError("Price cannot be negative")


@dataclass(slots=True)
class Product:
    """
    Mutable stock-keeping entry owned by a single VendingMachine catalog.

    The name is trimmed on construction; the catalog keys products by this
    trimmed name.
    """

    name: str
    price: float
    stock: int

    def __post_init__(self) -> None:
        _require_non_negative_price(self.price)
        if not math.isfinite(self.stock):
            raise InvalidArgumentError("Stock must be a finite number")
        if self.stock < 0:
            raise InvalidArgumentError("Stock cannot be negative")
        name: Optional[str] = self.name
        if name is None or not name.strip():
            raise InvalidArgumentError("Product name cannot be null or empty")
        self.name = name.strip()

    def reduce_stock(self) -> None:
        """Take one unit out of stock."""

        if self.stock <= 0:
            raise InvalidStateError("Cannot reduce stock: product is out of stock")
        self.stock -= 1

    def restock(self, quantity: int) -> None:
        """Add a positive quantity of units to stock."""

        if not math.isfinite(quantity) or quantity <= 0:
            raise InvalidArgumentError("Restock quantity must be positive")
        self.stock += quantity

    def is_available(self) -> bool:
        return self.stock > 0

    def set_price(self, price: float) -> None:
        _require_non_negative_price(price)
        self.price = price
