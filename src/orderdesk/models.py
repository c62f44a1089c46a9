"""
Domain models for orders
"""

from dataclasses import dataclass
from enum import Enum


class OrderStatus(Enum):
    """Order status enumeration."""

    PROCESSING = "PROCESSING"
    PENDING = "PENDING"
    COMPLETE = "COMPLETE"


@dataclass(frozen=True)
class Order:
    """A single order held by the store.

    ``date`` is always the canonical ISO-8601 date-time string produced by
    :func:`orderdesk.scalars.parse_input`.
    """

    id: str
    date: str
    product: str
    status: OrderStatus


@dataclass(frozen=True)
class OrderInput:
    """Caller-supplied fields for a new order."""

    date: str
    product: str
    status: OrderStatus


@dataclass(frozen=True)
class RemovalResult:
    """Outcome of removing a record from the store."""

    order: Order
    total_before: int
    total_after: int


@dataclass(frozen=True)
class RemoveOrderResult:
    removed: bool
    total_before: int
    total_after: int
    removed_order: Order
