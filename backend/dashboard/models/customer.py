"""Customer ORM: persists a billable customer.

Invariants:
    - id is an opaque string primary key (uuid4 text, Python-side default)
    - name, email, image_url are non-nullable (empty strings allowed)
"""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from dashboard.db.base import Base
from dashboard.models._ids import new_id


class Customer(Base):
    """Customer entity, referenced by invoices.customer_id."""
    __tablename__ = "customers"

    id: Mapped[str] = mapped_column(
        String(36), primary_key=True, default=new_id,
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    image_url: Mapped[str] = mapped_column(String(255), nullable=False)
