# src/payment_optimizer/cli.py
import argparse
import sys

from .config import LOG_LEVELS, get_settings
from .exceptions import AllocationInfeasible, DataLoadError
from .loader import load_orders, load_payment_methods
from .loggers import get_logger
from .optimizer import PaymentOptimizer


def build_parser():
    p = argparse.ArgumentParser(
        prog="payment-optimizer",
        description="Allocate payment methods to orders, maximizing discounts greedily.",
    )
    p.add_argument("orders", help="path to the orders JSON file")
    p.add_argument("payment_methods", help="path to the payment methods JSON file")
    p.add_argument("--points-id", default=None, help="id of the loyalty points method (default from settings)")
    p.add_argument(
        "--log-level",
        default=None,
        type=str.upper,
        choices=LOG_LEVELS,
        help="logging level (default from settings)",
    )
    return p


def main(argv=None):
    args = build_parser().parse_args(argv)
    settings = get_settings()
    get_logger(level=args.log_level or settings.log_level)

    try:
        orders = load_orders(args.orders)
    except DataLoadError as e:
        print(f"Error reading or parsing orders file: {e}", file=sys.stderr)
        return 1
    try:
        methods = load_payment_methods(args.payment_methods)
    except DataLoadError as e:
        print(f"Error reading or parsing payment methods file: {e}", file=sys.stderr)
        return 1

    try:
        optimizer = PaymentOptimizer(orders, methods, points_method_id=args.points_id or settings.points_method_id)
        results = optimizer.optimize()
    except (AllocationInfeasible, ValueError) as e:
        print(f"Optimization failed: {e}", file=sys.stderr)
        return 1

    for result in results:
        print(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
