"""Invoice ORM: persists a single invoice for a customer.

Invariants:
    - amount is stored in minor units (cents), always > 0
    - status is "pending" or "paid" (InvoiceStatus values)
    - date is the issue day, stamped on creation and never updated

Design Decisions:
    - customer_id is an indexed plain reference, not a foreign key: customer
      deletion is guarded by the pending-invoice rule, paid invoices may
      outlive their customer
"""

import datetime as dt

from sqlalchemy import CheckConstraint, Date, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from dashboard.db.base import Base
from dashboard.models._ids import new_id


class Invoice(Base):
    """Invoice entity."""
    __tablename__ = "invoices"
    __table_args__ = (
        CheckConstraint("amount > 0", name="ck_invoices_amount_positive"),
        CheckConstraint(
            "status IN ('pending', 'paid')", name="ck_invoices_status",
        ),
    )

    id: Mapped[str] = mapped_column(
        String(36), primary_key=True, default=new_id,
    )
    customer_id: Mapped[str] = mapped_column(
        String(36), nullable=False, index=True,
    )
    amount: Mapped[int] = mapped_column(Integer, nullable=False)
    status: Mapped[str] = mapped_column(String(20), nullable=False)
    date: Mapped[dt.date] = mapped_column(Date, nullable=False)
