# src/payment_optimizer/domain.py
# Ledger entities mutated in place by the optimizer during one run.

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import List, Optional

from .money import ZERO, format_amount, to_decimal


def _non_negative(name, value):
    value = to_decimal(value)
    if value is None:
        raise ValueError(f"{name} is required")
    if value < 0:
        raise ValueError(f"{name} must not be negative: {value}")
    return value


@dataclass
class Order:
    """A customer order awaiting payment.

    ``promotions`` lists the payment method ids that give a discount when
    they pay for the whole order. ``remaining_value_to_pay`` starts at
    ``value`` and drops to exactly zero once the order is paid.
    """

    id: str
    value: Decimal
    promotions: Optional[List[str]] = None
    paid: bool = False
    remaining_value_to_pay: Optional[Decimal] = None

    def __post_init__(self):
        self.value = _non_negative(f"order {self.id} value", self.value)
        if self.promotions is not None:
            self.promotions = list(self.promotions)
        if self.paid:
            self.remaining_value_to_pay = ZERO
        elif self.remaining_value_to_pay is None:
            self.remaining_value_to_pay = self.value
        else:
            self.remaining_value_to_pay = _non_negative(
                f"order {self.id} remaining value", self.remaining_value_to_pay
            )

    def mark_as_paid(self):
        self.paid = True
        self.remaining_value_to_pay = ZERO

    def reset(self):
        self.paid = False
        self.remaining_value_to_pay = self.value


@dataclass
class PaymentMethod:
    """A payment instrument with a spending limit and a discount rate (percent)."""

    id: str
    discount: int
    limit: Decimal
    total_spent: Decimal = ZERO
    # always limit - total_spent at construction
    remaining_limit: Decimal = field(init=False)

    def __post_init__(self):
        if isinstance(self.discount, bool) or not isinstance(self.discount, int):
            raise ValueError(f"method {self.id} discount must be an integer percent")
        if not 0 <= self.discount <= 100:
            raise ValueError(f"method {self.id} discount out of range: {self.discount}")
        self.limit = _non_negative(f"method {self.id} limit", self.limit)
        self.total_spent = _non_negative(f"method {self.id} total spent", self.total_spent)
        if self.total_spent > self.limit:
            raise ValueError(f"method {self.id} total spent exceeds its limit")
        self.remaining_limit = self.limit - self.total_spent

    def deduct_limit(self, amount):
        amount = _non_negative("deducted amount", amount)
        self.remaining_limit -= amount

    def add_spent(self, amount):
        amount = _non_negative("spent amount", amount)
        self.total_spent += amount

    def charge(self, amount):
        """Move ``amount`` from the remaining limit to the spent total."""
        self.deduct_limit(amount)
        self.add_spent(amount)

    def can_cover(self, amount):
        return self.remaining_limit >= amount

    def reset(self):
        self.remaining_limit = self.limit
        self.total_spent = ZERO


@dataclass(frozen=True)
class Result:
    method_id: str
    amount: Decimal = field(default=ZERO)

    @property
    def formatted_amount(self):
        return format_amount(self.amount)

    def __str__(self):
        return f"{self.method_id} {self.formatted_amount}"
