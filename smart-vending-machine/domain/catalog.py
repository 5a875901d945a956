"""
Domain: Product catalog.

The catalog maps product names to Product entries. Keys are always derived from
the product itself at insertion time, so a key can never disagree with the
trimmed name of the Product stored under it.

This is not a persistence model; it is a pure in-memory structure.
"""

from __future__ import annotations

from typing import Dict, Iterator, List, Optional

from .errors import InvalidArgumentError
from .product import Product


class ProductCatalog:
    """
    Name-indexed collection of Products.

    Enforces:
    - Uniqueness of names (adding a product with an existing name replaces it).
    - key == product.name for every entry.

    Iteration order is insertion order but callers must not rely on it.
    """

    __slots__ = ("_by_name",)

    def __init__(self) -> None:
        self._by_name: Dict[str, Product] = {}

    def add(self, product: Product) -> None:
        if product is None:
            raise InvalidArgumentError("Product cannot be null")
        self._by_name[product.name] = product

    def get(self, name: str) -> Optional[Product]:
        return self._by_name.get(name)

    def remove(self, name: str) -> Optional[Product]:
        return self._by_name.pop(name, None)

    def clear(self) -> None:
        self._by_name.clear()

    def available(self) -> List[Product]:
        """Products with at least one unit in stock."""

        return [product for product in self._by_name.values() if product.is_available()]

    def total_value(self) -> float:
        """Sum of price x stock over every entry."""

        return sum((product.price * product.stock for product in self._by_name.values()), 0.0)

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def __iter__(self) -> Iterator[Product]:
        return iter(list(self._by_name.values()))

    def __len__(self) -> int:
        return len(self._by_name)
