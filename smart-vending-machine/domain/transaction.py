"""
Domain: Transaction records.

A Transaction captures one completed purchase. It is created exactly once per
successful sale by the VendingMachine, appended to its log and never changed
afterwards.

All timestamps must be passed explicitly.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import datetime

from .errors import InvalidArgumentError


@dataclass(frozen=True, slots=True)
class Transaction:
    """
    Immutable record of a completed purchase.

    Captures:
    - What was bought (product_name, trimmed)
    - How much the product cost (amount_paid)
    - How much was handed back (change_given)
    - When it happened (timestamp, as supplied by the machine clock)
    """

    product_name: str
    amount_paid: float
    change_given: float
    timestamp: datetime

    def __post_init__(self) -> None:
        if self.product_name is None or not self.product_name.strip():
            raise InvalidArgumentError("Product name cannot be null or empty")
        if not math.isfinite(self.amount_paid) or not math.isfinite(self.change_given):
            raise InvalidArgumentError("Transaction amounts must be finite numbers")
        if self.amount_paid < 0:
            raise InvalidArgumentError("Amount paid cannot be negative")
        if self.change_given < 0:
            raise InvalidArgumentError("Change given cannot be negative")
        if self.timestamp is None:
            raise InvalidArgumentError("Transaction timestamp cannot be null")

        # Frozen dataclass: normalise through object.__setattr__.
        object.__setattr__(self, "product_name", self.product_name.strip())

    @property
    def total_amount_inserted(self) -> float:
        """Money the customer put in for this purchase (price plus change)."""

        return self.amount_paid + self.change_given

    @property
    def has_change(self) -> bool:
        return self.change_given > 0
