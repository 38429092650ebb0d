# src/payment_optimizer/schemas.py
# Shapes of the input JSON records, validated before entities are built.

from __future__ import annotations

from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, Field, TypeAdapter


class OrderRecord(BaseModel):
    id: str
    value: Decimal = Field(ge=0, allow_inf_nan=False)
    promotions: Optional[List[str]] = None


class PaymentMethodRecord(BaseModel):
    id: str
    # integer percent; numeric strings such as "15" are accepted
    discount: int = Field(ge=0, le=100)
    limit: Decimal = Field(ge=0, allow_inf_nan=False)


ORDER_RECORDS = TypeAdapter(List[OrderRecord])
PAYMENT_METHOD_RECORDS = TypeAdapter(List[PaymentMethodRecord])
