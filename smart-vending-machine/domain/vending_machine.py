"""
Domain: Vending machine.

Owns a product catalog, the cash balance inserted by the current customer and
the log of completed purchases.

Rules implemented here:
- The balance is never negative. It grows with each insertion and is reset to 0
  by a successful purchase or by returning change.
- A purchase runs an ordered sequence of checks (name, existence, stock, funds)
  and only mutates state once all of them pass.
- The transaction log is append-only and in chronological order.

This module is single-threaded and performs no locking; see
services.vending_service for the guarded entry point.
"""

from __future__ import annotations

import math
from typing import List, Optional

from .catalog import ProductCatalog
from .errors import (
    InsufficientFundsError,
    InvalidArgumentError,
    OutOfStockError,
    ProductNotFoundError,
)
from .product import Product
from .time import Clock, utc_now
from .transaction import Transaction


class VendingMachine:
    """
    In-memory vending machine.

    The clock is injected so purchase timestamps are deterministic under test.
    """

    def __init__(self, clock: Clock = utc_now) -> None:
        self._clock = clock
        self._catalog = ProductCatalog()
        self._balance: float = 0.0
        self._transactions: List[Transaction] = []

    @property
    def catalog(self) -> ProductCatalog:
        return self._catalog

    @property
    def balance(self) -> float:
        return self._balance

    @property
    def current_balance(self) -> float:
        return self._balance

    # ------------------------------------------------------------------
    # Catalog
    # ------------------------------------------------------------------

    def add_product(self, product: Product) -> None:
        """Insert a product, replacing any existing entry with the same name."""

        self._catalog.add(product)

    def has_product(self, product_name: str) -> bool:
        return product_name in self._catalog

    def get_product(self, product_name: str) -> Optional[Product]:
        return self._catalog.get(product_name)

    def remove_product(self, product_name: str) -> Optional[Product]:
        return self._catalog.remove(product_name)

    def clear_products(self) -> None:
        self._catalog.clear()

    def get_all_products(self) -> List[Product]:
        return list(self._catalog)

    def get_available_products(self) -> List[Product]:
        return self._catalog.available()

    def get_product_count(self) -> int:
        return len(self._catalog)

    def get_total_inventory_value(self) -> float:
        return self._catalog.total_value()

    # ------------------------------------------------------------------
    # Money and purchases
    # ------------------------------------------------------------------

    def insert_money(self, amount: float) -> None:
        if not math.isfinite(amount):
            raise InvalidArgumentError("Amount must be a finite number")
        if amount <= 0:
            raise InvalidArgumentError("Amount must be positive")
        self._balance += amount

    def select_product(self, product_name: str) -> Transaction:
        """
        Purchase one unit of the named product with the current balance.

        Checks run in this order and the first failure wins:
        1. blank name              -> InvalidArgumentError
        2. unknown product         -> ProductNotFoundError
        3. no stock                -> OutOfStockError
        4. balance below the price -> InsufficientFundsError

        On success the whole balance is consumed: the difference to the price is
        recorded as change given and the balance goes back to 0.

        Returns:
            The Transaction appended to the log.
        """

        if product_name is None or not product_name.strip():
            raise InvalidArgumentError("Product name cannot be null or empty")
        name = product_name.strip()

        product = self._catalog.get(name)
        if product is None:
            raise ProductNotFoundError(name)

        if not product.is_available():
            raise OutOfStockError(name)

        if self._balance < product.price:
            raise InsufficientFundsError(name, required=product.price, available=self._balance)

        amount_paid = product.price
        change = self._balance - amount_paid

        # Built before any mutation so a missing timestamp leaves the machine untouched.
        transaction = Transaction(
            product_name=name,
            amount_paid=amount_paid,
            change_given=change,
            timestamp=self._clock(),
        )

        product.reduce_stock()
        self._balance = 0.0
        self._transactions.append(transaction)
        return transaction

    def get_change(self) -> float:
        """Return the whole balance to the customer and reset it to 0."""

        change = self._balance
        self._balance = 0.0
        return change

    def get_transaction_history(self) -> List[Transaction]:
        """Copy of the transaction log, oldest first."""

        return list(self._transactions)
