# src/payment_optimizer/optimizer.py
# Greedy allocation of payment methods to orders.
#
#   1) full payments with a discount (points R4, eligible cards R2), pooled
#      across all orders and committed biggest discount first
#   2) remaining orders in input order: points + card at a flat 10% (R3),
#      else one card for the full value
#   3) every order must end up paid
#   4) one result per method that was actually charged

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import List

from .config import DEFAULT_POINTS_METHOD_ID
from .domain import Order, PaymentMethod, Result
from .exceptions import AllocationInfeasible
from .loggers import get_logger
from .money import ZERO, apply_discount, discount_amount, min_amount, percentage

log = get_logger(__name__)

# Points must cover at least this share of the order value to unlock R3
R3_MIN_POINTS_PERCENT = 10
R3_DISCOUNT_PERCENT = 10


@dataclass
class Candidate:
    order: Order
    method: PaymentMethod
    amount_to_pay: Decimal
    discount_amount: Decimal


@dataclass
class AllocationOutcome:
    results: List[Result] = field(default_factory=list)
    unpaid_order_ids: List[str] = field(default_factory=list)

    @property
    def ok(self):
        return not self.unpaid_order_ids

    def raise_for_unpaid(self):
        if self.unpaid_order_ids:
            raise AllocationInfeasible(self.unpaid_order_ids)
        return self.results


class PaymentOptimizer:
    """Pays every order out of the given payment methods, chasing discounts greedily.

    The optimizer works directly on the ``Order`` and ``PaymentMethod``
    objects it is given; no copies are made. Method order matters: the
    first card with enough limit wins every search, so the input sequence
    is kept as the enumeration order. One optimizer handles one run; a
    failed run leaves the entities partially charged.
    """

    def __init__(self, orders, payment_methods, points_method_id=DEFAULT_POINTS_METHOD_ID):
        self.orders = list(orders)
        self.points_method_id = points_method_id

        # dicts keep insertion order
        self.methods = {}
        for pm in payment_methods:
            if pm.id in self.methods:
                raise ValueError(f"Duplicate payment method id: {pm.id}")
            self.methods[pm.id] = pm

        self.points_method = self.methods.get(points_method_id)
        self.card_methods = [pm for pm in self.methods.values() if pm.id != points_method_id]

        if self.points_method is None:
            log.warning("Payment method %r not found; R3 and R4 promotions are unavailable", points_method_id)
        if not self.card_methods:
            log.warning("No card payment methods found; only %r payments are possible", points_method_id)

    # -----------------------------
    # Public API
    # -----------------------------

    def allocate(self):
        """Run all phases and return an ``AllocationOutcome``; never raises for unpaid orders."""
        self._allocate_full_payments_with_discount()
        self._allocate_remaining_payments()
        unpaid = [o.id for o in self.orders if not o.paid]
        results = self._collect_results()
        if unpaid:
            log.error("Allocation left %d order(s) unpaid: %s", len(unpaid), ", ".join(unpaid))
        else:
            log.info("All %d orders paid using %d payment method(s)", len(self.orders), len(results))
        return AllocationOutcome(results=results, unpaid_order_ids=unpaid)

    def optimize(self):
        """Run the allocation and return the results.

        Raises ``AllocationInfeasible`` listing every unpaid order id.
        """
        return self.allocate().raise_for_unpaid()

    # -----------------------------
    # Phase 1: full payment with discount (R4 points, R2 cards)
    # -----------------------------

    def generate_candidates(self):
        candidates = []
        for order in self.orders:
            if order.paid:
                continue
            if self.points_method is not None:
                self._add_candidate(candidates, order, self.points_method)
            for method_id in order.promotions or ():
                if method_id == self.points_method_id:
                    continue
                method = self.methods.get(method_id)
                if method is not None:
                    self._add_candidate(candidates, order, method)
        return candidates

    @staticmethod
    def _add_candidate(candidates, order, method):
        saved = discount_amount(order.value, method.discount)
        if saved > 0:
            candidates.append(Candidate(
                order=order,
                method=method,
                amount_to_pay=apply_discount(order.value, method.discount),
                discount_amount=saved,
            ))

    def _allocate_full_payments_with_discount(self):
        # sorted() is stable with reverse=True: ties keep generation order
        ranked = sorted(self.generate_candidates(), key=lambda c: c.discount_amount, reverse=True)
        for c in ranked:
            if not c.order.paid and c.method.can_cover(c.amount_to_pay):
                c.method.charge(c.amount_to_pay)
                c.order.mark_as_paid()
                log.debug("Order %s paid in full by %s: %s (saved %s)",
                          c.order.id, c.method.id, c.amount_to_pay, c.discount_amount)

    # -----------------------------
    # Phase 2: points + card (R3), else base card payment
    # -----------------------------

    def _allocate_remaining_payments(self):
        for order in self.orders:
            if order.paid:
                continue
            if self._pay_partially_with_points(order):
                continue
            card = self.find_card_with_sufficient_limit(order.value)
            if card is not None:
                card.charge(order.value)
                order.mark_as_paid()
                log.debug("Order %s paid by %s without discount: %s", order.id, card.id, order.value)
            else:
                log.warning("Could not find a payment method for order %s", order.id)

    def _pay_partially_with_points(self, order):
        points = self.points_method
        if points is None:
            return False
        threshold = percentage(order.value, R3_MIN_POINTS_PERCENT)
        if points.remaining_limit < threshold:
            return False

        cost = apply_discount(order.value, R3_DISCOUNT_PERCENT)
        points_portion = min_amount(cost, points.remaining_limit)
        card_portion = cost - points_portion

        card = self.find_card_with_sufficient_limit(card_portion)
        if card is None:
            return False

        points.charge(points_portion)
        card.charge(card_portion)
        order.mark_as_paid()
        log.debug("Order %s split between %s (%s) and %s (%s)",
                  order.id, points.id, points_portion, card.id, card_portion)
        return True

    def find_card_with_sufficient_limit(self, amount):
        """First non-points method, in input order, whose remaining limit covers ``amount``.

        A non-positive ``amount`` never matches, so zero-cost orders stay unpaid.
        """
        if amount <= 0:
            return None
        for pm in self.card_methods:
            if pm.can_cover(amount):
                return pm
        return None

    # -----------------------------
    # Phase 4: results
    # -----------------------------

    def _collect_results(self):
        return [Result(pm.id, pm.total_spent) for pm in self.methods.values() if pm.total_spent > ZERO]
