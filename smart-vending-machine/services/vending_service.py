"""
Vending service.

Wraps one VendingMachine for callers that may run concurrently (the HTTP API).

Handles:
- Serialising every operation behind a per-machine lock, so two purchases can
  never both pass the stock and funds checks against the same balance/stock.
- Logging catalog changes, purchases, change returns and rejected purchases.
- Name-based catalog edits (restock, price change) for callers that only hold
  a product name.

Domain errors are logged and re-raised unchanged; the caller decides how to
report them.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import replace
from typing import List, Optional

from domain.errors import ProductNotFoundError, VendingError
from domain.product import Product
from domain.transaction import Transaction
from domain.vending_machine import VendingMachine

logger = logging.getLogger(__name__)


class VendingService:
    """
    Thread-safe facade over a single VendingMachine.

    Example:
        service = VendingService(machine_id="lobby-1")
        service.add_product("A1", price=2.50, stock=2)
        service.insert_money(5.00)
        transaction = service.select_product("A1")
        print(f"Change: {transaction.change_given:.2f}")
    """

    def __init__(self, machine: Optional[VendingMachine] = None, *, machine_id: str = "default") -> None:
        self._machine = machine if machine is not None else VendingMachine()
        self._machine_id = machine_id
        self._lock = threading.Lock()

    @property
    def machine_id(self) -> str:
        return self._machine_id

    @property
    def machine(self) -> VendingMachine:
        return self._machine

    def _require_product(self, product_name: str) -> Product:
        product = self._machine.get_product(product_name)
        if product is None:
            raise ProductNotFoundError(product_name)
        return product

    @staticmethod
    def _snapshot(product: Product) -> Product:
        return replace(product)

    # ------------------------------------------------------------------
    # Catalog
    # ------------------------------------------------------------------

    def add_product(self, name: str, price: float, stock: int) -> Product:
        """
        Create a product and put it in the catalog (replacing a same-named one).

        Returns a copy; the catalog entry itself is only changed through this service.
        """

        product = Product(name=name, price=price, stock=stock)
        with self._lock:
            replaced = self._machine.has_product(product.name)
            self._machine.add_product(product)
            snapshot = self._snapshot(product)
        logger.info(
            "[%s] %s product %s (price=%.2f, stock=%d)",
            self._machine_id,
            "Replaced" if replaced else "Added",
            snapshot.name,
            snapshot.price,
            snapshot.stock,
        )
        return snapshot

    def get_product(self, product_name: str) -> Optional[Product]:
        with self._lock:
            product = self._machine.get_product(product_name)
            return self._snapshot(product) if product is not None else None

    def list_products(self, available_only: bool = False) -> List[Product]:
        with self._lock:
            products = (
                self._machine.get_available_products() if available_only else self._machine.get_all_products()
            )
            return [self._snapshot(product) for product in products]

    def restock(self, product_name: str, quantity: int) -> Product:
        with self._lock:
            product = self._require_product(product_name)
            product.restock(quantity)
            snapshot = self._snapshot(product)
        logger.info("[%s] Restocked %s by %d (stock=%d)", self._machine_id, snapshot.name, quantity, snapshot.stock)
        return snapshot

    def set_price(self, product_name: str, price: float) -> Product:
        with self._lock:
            product = self._require_product(product_name)
            old_price = product.price
            product.set_price(price)
            snapshot = self._snapshot(product)
        logger.info("[%s] Price of %s changed %.2f -> %.2f", self._machine_id, snapshot.name, old_price, price)
        return snapshot

    def remove_product(self, product_name: str) -> Optional[Product]:
        with self._lock:
            removed = self._machine.remove_product(product_name)
        if removed is not None:
            logger.info("[%s] Removed product %s", self._machine_id, removed.name)
        return removed

    def clear_products(self) -> int:
        """Empty the catalog. Returns how many products were removed."""

        with self._lock:
            count = self._machine.get_product_count()
            self._machine.clear_products()
        logger.info("[%s] Cleared catalog (%d products removed)", self._machine_id, count)
        return count

    def get_inventory_value(self) -> float:
        with self._lock:
            return self._machine.get_total_inventory_value()

    # ------------------------------------------------------------------
    # Money and purchases
    # ------------------------------------------------------------------

    def get_balance(self) -> float:
        with self._lock:
            return self._machine.balance

    def insert_money(self, amount: float) -> float:
        """Add money to the balance. Returns the new balance."""

        with self._lock:
            self._machine.insert_money(amount)
            balance = self._machine.balance
        logger.debug("[%s] Inserted %.2f (balance=%.2f)", self._machine_id, amount, balance)
        return balance

    def select_product(self, product_name: str) -> Transaction:
        """
        Purchase one unit of a product.

        The whole check-then-mutate sequence runs under the lock.

        Raises:
            InvalidArgumentError: If the name is blank
            InvalidStateError: If the product is missing, sold out, or unaffordable
        """

        with self._lock:
            balance = self._machine.balance
            try:
                transaction = self._machine.select_product(product_name)
            except VendingError as e:
                logger.warning(
                    "[%s] Purchase of %r rejected (balance=%.2f): %s",
                    self._machine_id,
                    product_name,
                    balance,
                    e,
                )
                raise

        logger.info(
            "[%s] Sold %s for %.2f (change=%.2f)",
            self._machine_id,
            transaction.product_name,
            transaction.amount_paid,
            transaction.change_given,
        )
        return transaction

    def get_change(self) -> float:
        """Return the full balance and reset it to 0 in one step."""

        with self._lock:
            change = self._machine.get_change()
        if change > 0:
            logger.info("[%s] Returned change %.2f", self._machine_id, change)
        return change

    def get_transaction_history(self) -> List[Transaction]:
        with self._lock:
            return self._machine.get_transaction_history()


__all__ = ["VendingService"]
