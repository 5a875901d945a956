"""
Tests for `domain/vending_machine.py`.

Covers:
- Catalog operations (add, lookup, remove, clear, listings, inventory value).
- insert_money validation (including NaN and infinity) and accumulation.
- A NaN balance can never be reached, so no product can be bought for free.
- Naive clocks are accepted; a clock returning None aborts the sale untouched.
- select_product check ordering: name -> existence -> stock -> funds.
- select_product success: stock -1, balance reset to 0, transaction appended.
- Failed operations leave balance, stock and log untouched.
- get_change returns and resets the balance.
- Transaction history is a defensive copy in chronological order.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from domain.errors import (
    InsufficientFundsError,
    InvalidArgumentError,
    InvalidStateError,
    OutOfStockError,
    ProductNotFoundError,
)
from domain.product import Product
from domain.vending_machine import VendingMachine

FIXED_NOW = datetime(2025, 1, 1, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def stocked(machine: VendingMachine) -> VendingMachine:
    machine.add_product(Product("A1", 2.50, 2))
    return machine


# ----------------------------------------------------------------------------
# Catalog
# ----------------------------------------------------------------------------

def test_new_machine_is_empty(machine: VendingMachine) -> None:
    """Verify a fresh machine has no products, zero balance and no transactions."""

    assert machine.balance == 0.0
    assert machine.get_product_count() == 0
    assert machine.get_all_products() == []
    assert machine.get_transaction_history() == []


def test_add_product_rejects_none(machine: VendingMachine) -> None:
    """Verify adding None raises InvalidArgumentError."""

    with pytest.raises(InvalidArgumentError):
        machine.add_product(None)  # type: ignore[arg-type]


def test_add_product_last_write_wins(machine: VendingMachine) -> None:
    """Verify a product with a colliding name replaces the previous entry."""

    machine.add_product(Product("A1", 2.50, 2))
    replacement = Product(" A1 ", 3.00, 7)
    machine.add_product(replacement)

    assert machine.get_product_count() == 1
    assert machine.get_product("A1") is replacement


def test_catalog_lookups(stocked: VendingMachine) -> None:
    """Verify has/get/remove/clear operate on exact keys."""

    assert stocked.has_product("A1") is True
    assert stocked.has_product("Z99") is False
    assert stocked.get_product("Z99") is None

    removed = stocked.remove_product("A1")
    assert removed is not None and removed.name == "A1"
    assert stocked.has_product("A1") is False
    assert stocked.remove_product("A1") is None

    stocked.add_product(Product("B2", 1.00, 1))
    stocked.clear_products()
    assert stocked.get_product_count() == 0


def test_available_products_excludes_out_of_stock(machine: VendingMachine) -> None:
    """Verify only products with stock > 0 are listed as available."""

    machine.add_product(Product("A1", 2.50, 2))
    machine.add_product(Product("B2", 1.00, 0))

    assert [p.name for p in machine.get_available_products()] == ["A1"]
    assert sorted(p.name for p in machine.get_all_products()) == ["A1", "B2"]


def test_total_inventory_value(machine: VendingMachine) -> None:
    """Verify value = sum(price x stock): 1.50x10 + 2.00x5 = 25.00."""

    machine.add_product(Product("Cola", 1.50, 10))
    machine.add_product(Product("Chips", 2.00, 5))

    assert machine.get_total_inventory_value() == pytest.approx(25.00)


# ----------------------------------------------------------------------------
# Money
# ----------------------------------------------------------------------------

def test_insert_money_accumulates(machine: VendingMachine) -> None:
    """Verify inserting 2.00 then 1.50 yields a balance of 3.50."""

    machine.insert_money(2.00)
    machine.insert_money(1.50)

    assert machine.balance == pytest.approx(3.50)
    assert machine.current_balance == machine.balance


@pytest.mark.parametrize("amount", [0, 0.0, -1.00])
def test_insert_money_rejects_non_positive_amount(machine: VendingMachine, amount: float) -> None:
    """Verify non-positive amounts are rejected and the balance is unchanged."""

    machine.insert_money(1.00)

    with pytest.raises(InvalidArgumentError):
        machine.insert_money(amount)
    assert machine.balance == 1.00


@pytest.mark.parametrize("amount", [float("nan"), float("inf"), float("-inf")])
def test_insert_money_rejects_non_finite_amount(machine: VendingMachine, amount: float) -> None:
    """Verify NaN and infinite amounts are rejected and the balance stays finite."""

    machine.insert_money(1.00)

    with pytest.raises(InvalidArgumentError):
        machine.insert_money(amount)
    assert machine.balance == 1.00


def test_nan_money_cannot_buy_a_product(stocked: VendingMachine) -> None:
    """Verify a NaN insertion is refused, so the purchase fails on insufficient funds."""

    with pytest.raises(InvalidArgumentError):
        stocked.insert_money(float("nan"))

    with pytest.raises(InsufficientFundsError):
        stocked.select_product("A1")
    assert stocked.get_product("A1").stock == 2
    assert stocked.get_transaction_history() == []


def test_get_change_returns_balance_and_resets(machine: VendingMachine) -> None:
    """Verify get_change hands back the full balance and leaves 0 behind."""

    machine.insert_money(2.00)
    machine.insert_money(0.25)

    assert machine.get_change() == pytest.approx(2.25)
    assert machine.balance == 0.0
    assert machine.get_change() == 0.0


# ----------------------------------------------------------------------------
# select_product
# ----------------------------------------------------------------------------

@pytest.mark.parametrize("name", [None, "", "   "])
def test_select_product_blank_name_is_invalid_argument(stocked: VendingMachine, name) -> None:
    """Verify blank names fail before touching balance or catalog."""

    stocked.insert_money(5.00)

    with pytest.raises(InvalidArgumentError):
        stocked.select_product(name)

    assert stocked.balance == 5.00
    assert stocked.get_product("A1").stock == 2
    assert stocked.get_transaction_history() == []


def test_select_product_unknown_product(stocked: VendingMachine) -> None:
    """Verify an unknown name raises ProductNotFoundError, an InvalidStateError."""

    stocked.insert_money(5.00)

    with pytest.raises(ProductNotFoundError) as exc_info:
        stocked.select_product("Z99")

    assert isinstance(exc_info.value, InvalidStateError)
    assert stocked.balance == 5.00


def test_select_product_out_of_stock(machine: VendingMachine) -> None:
    """Verify a product with stock 0 raises OutOfStockError."""

    machine.add_product(Product("B2", 1.00, 0))
    machine.insert_money(5.00)

    with pytest.raises(OutOfStockError):
        machine.select_product("B2")
    assert machine.balance == 5.00


def test_select_product_insufficient_funds(stocked: VendingMachine) -> None:
    """Verify a balance below the price raises InsufficientFundsError and changes nothing."""

    stocked.insert_money(1.00)

    with pytest.raises(InsufficientFundsError) as exc_info:
        stocked.select_product("A1")

    assert exc_info.value.required == 2.50
    assert exc_info.value.available == 1.00
    assert stocked.balance == 1.00
    assert stocked.get_product("A1").stock == 2
    assert stocked.get_transaction_history() == []


def test_select_product_out_of_stock_reported_before_insufficient_funds(machine: VendingMachine) -> None:
    """Verify a sold-out and unaffordable product reports out-of-stock, not insufficient funds."""

    machine.add_product(Product("B2", 10.00, 0))
    machine.insert_money(1.00)

    with pytest.raises(OutOfStockError):
        machine.select_product("B2")


def test_select_product_not_found_reported_before_funds(machine: VendingMachine) -> None:
    """Verify an unknown product with zero balance reports not-found."""

    with pytest.raises(ProductNotFoundError):
        machine.select_product("Z99")


def test_select_product_success_end_to_end(stocked: VendingMachine) -> None:
    """Verify A1 @ 2.50 stock 2, insert 5.00: change 2.50, stock 1, balance 0."""

    stocked.insert_money(5.00)
    transaction = stocked.select_product("A1")

    assert transaction.product_name == "A1"
    assert transaction.amount_paid == 2.50
    assert transaction.change_given == pytest.approx(2.50)
    assert transaction.timestamp == FIXED_NOW
    assert stocked.get_product("A1").stock == 1
    assert stocked.balance == 0.0
    assert stocked.get_transaction_history()[-1] == transaction


def test_select_product_trims_requested_name(stocked: VendingMachine) -> None:
    """Verify the requested name is trimmed before lookup and in the record."""

    stocked.insert_money(2.50)
    transaction = stocked.select_product("  A1  ")

    assert transaction.product_name == "A1"
    assert transaction.has_change is False


def test_select_product_exact_payment_gives_no_change(stocked: VendingMachine) -> None:
    """Verify paying the exact price records zero change."""

    stocked.insert_money(2.50)
    transaction = stocked.select_product("A1")

    assert transaction.change_given == 0.0
    assert transaction.total_amount_inserted == 2.50


def test_select_product_until_sold_out(stocked: VendingMachine) -> None:
    """Verify the last unit can be bought and the next attempt is out-of-stock."""

    for _ in range(2):
        stocked.insert_money(3.00)
        stocked.select_product("A1")

    stocked.insert_money(3.00)
    with pytest.raises(OutOfStockError):
        stocked.select_product("A1")

    assert stocked.get_product("A1").stock == 0
    assert stocked.get_available_products() == []
    assert stocked.balance == 3.00


def test_select_product_with_naive_clock() -> None:
    """Verify a clock returning naive local time still records the purchase."""

    local_now = datetime(2025, 1, 1, 12, 0, 0)
    machine = VendingMachine(clock=lambda: local_now)
    machine.add_product(Product("A1", 2.50, 2))
    machine.insert_money(5.00)

    transaction = machine.select_product("A1")

    assert transaction.timestamp == local_now
    assert machine.balance == 0.0
    assert machine.get_product("A1").stock == 1


def test_select_product_with_missing_timestamp_leaves_state_untouched() -> None:
    """Verify a clock returning None aborts the purchase before stock or balance change."""

    machine = VendingMachine(clock=lambda: None)  # type: ignore[arg-type,return-value]
    machine.add_product(Product("A1", 2.50, 2))
    machine.insert_money(5.00)

    with pytest.raises(InvalidArgumentError):
        machine.select_product("A1")

    assert machine.balance == 5.00
    assert machine.get_product("A1").stock == 2
    assert machine.get_transaction_history() == []


# ----------------------------------------------------------------------------
# Transaction history
# ----------------------------------------------------------------------------

def test_transaction_history_is_chronological() -> None:
    """Verify transactions are logged in purchase order with clock timestamps."""

    ticks = iter(FIXED_NOW + timedelta(minutes=i) for i in range(3))
    machine = VendingMachine(clock=lambda: next(ticks))
    machine.add_product(Product("A1", 1.00, 5))
    machine.add_product(Product("B2", 2.00, 5))

    for name in ("A1", "B2", "A1"):
        machine.insert_money(2.00)
        machine.select_product(name)

    history = machine.get_transaction_history()
    assert [t.product_name for t in history] == ["A1", "B2", "A1"]
    assert [t.timestamp for t in history] == sorted(t.timestamp for t in history)
    assert history[0].timestamp.tzinfo == timezone.utc


def test_transaction_history_is_a_copy(stocked: VendingMachine) -> None:
    """Verify mutating the returned list does not affect the machine's log."""

    stocked.insert_money(5.00)
    stocked.select_product("A1")

    history = stocked.get_transaction_history()
    history.clear()

    assert len(stocked.get_transaction_history()) == 1
