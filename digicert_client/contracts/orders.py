"""
Order list contracts.

Shapes returned by ``GET order/certificate`` and ``GET organization``.
These are decoded from responses only; the client never builds them itself.

https://www.digicert.com/services/v2/documentation/order/order-list
"""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict


class _ResponseModel(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")


# ---------------------------------------------------------------------------
# Embedded references
# ---------------------------------------------------------------------------

class Page(_ResponseModel):
    total: int
    limit: int
    offset: int


class Product(_ResponseModel):
    name_id: str
    name: str
    type: str


class Container(_ResponseModel):
    id: int
    name: str


class Organization(_ResponseModel):
    id: int
    name: str


class Certificate(_ResponseModel):
    common_name: Optional[str] = None
    dns_names: Optional[List[str]] = None
    valid_till: str                      # kept verbatim, e.g. "2027-01-31"
    signature_hash: str


# ---------------------------------------------------------------------------
# Orders
# ---------------------------------------------------------------------------

class Order(_ResponseModel):
    id: int
    certificate: Certificate
    status: str
    date_created: datetime               # ISO-8601
    organization: Organization
    validity_years: int
    container: Container
    product: Product
    price: Optional[float] = None


class Orders(_ResponseModel):
    orders: List[Order]
    page: Page


class Organizations(_ResponseModel):
    organizations: List[Organization]
