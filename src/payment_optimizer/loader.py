# src/payment_optimizer/loader.py
# Reads the two input collections from JSON arrays.
#
#   orders.json          [{"id": "ORDER1", "value": "150.00", "promotions": ["mZysk"]}, ...]
#   paymentmethods.json  [{"id": "PUNKTY", "discount": "15", "limit": "100.00"}, ...]

import json
from decimal import Decimal
from pathlib import Path

from pydantic import ValidationError

from .domain import Order, PaymentMethod
from .exceptions import DataLoadError
from .loggers import get_logger
from .schemas import ORDER_RECORDS, PAYMENT_METHOD_RECORDS

log = get_logger(__name__)


def _read_json(path):
    try:
        with path.open("r", encoding="utf-8") as fh:
            # floats as Decimal so amounts never pass through binary floats
            return json.load(fh, parse_float=Decimal)
    except OSError as e:
        raise DataLoadError(path, f"cannot read file ({e.strerror or e})") from e
    except json.JSONDecodeError as e:
        raise DataLoadError(path, f"invalid JSON: {e}") from e


def _describe(error):
    loc = error["loc"]
    where = f"entry {loc[0]}" if loc and isinstance(loc[0], int) else "top level"
    field = ".".join(str(p) for p in loc[1:])
    return f"{where} {field}: {error['msg']}" if field else f"{where}: {error['msg']}"


def _validate(path, adapter):
    path = Path(path)
    data = _read_json(path)
    try:
        return adapter.validate_python(data)
    except ValidationError as e:
        raise DataLoadError(path, "; ".join(_describe(err) for err in e.errors())) from e


def load_orders(path):
    records = _validate(path, ORDER_RECORDS)
    orders = [Order(id=r.id, value=r.value, promotions=r.promotions) for r in records]
    log.info("Loaded %d orders from %s", len(orders), path)
    return orders


def load_payment_methods(path):
    records = _validate(path, PAYMENT_METHOD_RECORDS)
    methods = [PaymentMethod(id=r.id, discount=r.discount, limit=r.limit) for r in records]
    log.info("Loaded %d payment methods from %s", len(methods), path)
    return methods
