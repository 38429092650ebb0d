# src/payment_optimizer/__init__.py
from .domain import Order, PaymentMethod, Result
from .exceptions import AllocationInfeasible, DataLoadError, PaymentOptimizerError
from .loader import load_orders, load_payment_methods
from .optimizer import AllocationOutcome, Candidate, PaymentOptimizer

__version__ = "1.0.0"

__all__ = [
    "Order",
    "PaymentMethod",
    "Result",
    "AllocationInfeasible",
    "DataLoadError",
    "PaymentOptimizerError",
    "load_orders",
    "load_payment_methods",
    "AllocationOutcome",
    "Candidate",
    "PaymentOptimizer",
]
