"""Listing Schemas: response rows for the cached invoices and customers views.

Invariants:
    - amount is reported in minor units, exactly as stored
    - date is ISO formatted (YYYY-MM-DD)
"""

import datetime as dt

from pydantic import BaseModel

from dashboard.core.domain_types import InvoiceStatus


class InvoiceRow(BaseModel):
    """One invoice in the invoices listing."""
    id: str
    customer_id: str
    amount: int
    status: InvoiceStatus
    date: dt.date


class CustomerRow(BaseModel):
    """One customer in the customers listing."""
    id: str
    name: str
    email: str
    image_url: str


class InvoiceListing(BaseModel):
    invoices: list[InvoiceRow]


class CustomerListing(BaseModel):
    customers: list[CustomerRow]
