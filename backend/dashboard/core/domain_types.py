"""Domain Types: identity aliases and enums shared across the pipeline.

Invariants:
    - InvoiceId, CustomerId are opaque strings, never parsed
    - InvoiceStatus is the only source of valid invoice states
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

InvoiceId = NewType("InvoiceId", str)
CustomerId = NewType("CustomerId", str)


# ─── Enums ───────────────────────────────────────────────────────

class InvoiceStatus(str, Enum):
    """Invoice states, maps to the `status` column."""
    PENDING = "pending"
    PAID = "paid"


class Entity(str, Enum):
    """Entities the mutation pipeline writes."""
    INVOICE = "invoice"
    CUSTOMER = "customer"


class Operation(str, Enum):
    """Mutation operations, used as log fields."""
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"
