"""User ORM: dashboard accounts checked by the credentials provider.

Invariants:
    - email is unique
    - password holds a bcrypt hash, never plaintext
"""

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from dashboard.db.base import Base
from dashboard.models._ids import new_id


class User(Base):
    """Dashboard user."""
    __tablename__ = "users"

    id: Mapped[str] = mapped_column(
        String(36), primary_key=True, default=new_id,
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(Text, nullable=False, unique=True)
    password: Mapped[str] = mapped_column(Text, nullable=False)
