"""Entity Forms: invoice and customer rule sets and their create/update variants.

Invariants:
    - customerId: string with a non-blank character, kept as submitted,
      else "Please select a customer."
    - amount: coerced to Decimal, > 0, at most 2 decimal places,
      else "Please enter an amount greater than $0."
    - status: exactly "pending" or "paid", else "Please select an invoice status."
    - Customer name/email/image_url: any string (empty accepted), absent rejected
    - Create/update variants omit id (and invoice date): both are system-assigned
"""

from datetime import date
from decimal import Decimal
from typing import Annotated

from pydantic import Field, StringConstraints

from dashboard.core.domain_types import InvoiceStatus
from dashboard.schemas.form_validation import FieldRule, FormSchema

INVOICE_FIELDS = {
    "id": FieldRule(str),
    "customerId": FieldRule(
        Annotated[str, StringConstraints(pattern=r"\S")],
        "Please select a customer.",
    ),
    "amount": FieldRule(
        Annotated[Decimal, Field(gt=0, decimal_places=2, allow_inf_nan=False)],
        "Please enter an amount greater than $0.",
    ),
    "status": FieldRule(InvoiceStatus, "Please select an invoice status."),
    "date": FieldRule(date),
}

# Empty strings pass: no minimum length or email format check on customers.
CUSTOMER_FIELDS = {
    "id": FieldRule(str),
    "name": FieldRule(str),
    "email": FieldRule(str),
    "image_url": FieldRule(str),
}

InvoiceForm = FormSchema("InvoiceForm", INVOICE_FIELDS)
CreateInvoice = InvoiceForm.omit("id", "date", name="CreateInvoice")
UpdateInvoice = InvoiceForm.omit("id", "date", name="UpdateInvoice")

CustomerForm = FormSchema("CustomerForm", CUSTOMER_FIELDS)
CreateCustomer = CustomerForm.omit("id", name="CreateCustomer")
UpdateCustomer = CustomerForm.omit("id", name="UpdateCustomer")
