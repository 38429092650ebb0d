# src/payment_optimizer/exceptions.py


class PaymentOptimizerError(Exception):
    """Base class for errors raised by this package."""


class AllocationInfeasible(PaymentOptimizerError):
    """The greedy allocation left at least one order unpaid.

    This does not prove that no covering assignment exists; it only means
    the strategy did not find one. Entity state is left as mutated.
    """

    def __init__(self, unpaid_order_ids):
        self.unpaid_order_ids = list(unpaid_order_ids)
        super().__init__(
            "Not all orders could be paid. Unpaid orders: "
            + ", ".join(self.unpaid_order_ids)
        )


class DataLoadError(PaymentOptimizerError):
    def __init__(self, path, reason):
        self.path = str(path)
        self.reason = reason
        super().__init__(f"{self.path}: {reason}")
