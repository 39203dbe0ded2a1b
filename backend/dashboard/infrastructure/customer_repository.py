"""Customer Repository: parameterized statements against the customers table.

Invariants:
    - delete_without_pending removes the row only while the customer has no
      pending invoices; the check is part of the DELETE's own WHERE clause
    - Failures surface as DatabaseError after rollback (sql_execution.execute)
"""

from sqlalchemy import delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from dashboard.core.domain_types import CustomerId, InvoiceStatus
from dashboard.infrastructure.sql_execution import execute
from dashboard.models._ids import new_id
from dashboard.models.customer import Customer
from dashboard.models.invoice import Invoice

_ENTITY = "customer"


def _row(customer: Customer) -> dict:
    return {
        "id": customer.id,
        "name": customer.name,
        "email": customer.email,
        "image_url": customer.image_url,
    }


class SqlCustomerRepository:
    """CustomerRepository backed by an AsyncSession."""

    def __init__(self, session: AsyncSession):
        self._session = session

    async def insert(self, name: str, email: str, image_url: str) -> CustomerId:
        customer_id = new_id()
        await execute(
            self._session,
            insert(Customer).values(
                id=customer_id, name=name, email=email, image_url=image_url,
            ),
            "insert", commit=True, entity=_ENTITY,
        )
        return CustomerId(customer_id)

    async def update(
        self, customer_id: str, name: str, email: str, image_url: str,
    ) -> int:
        result = await execute(
            self._session,
            update(Customer)
            .where(Customer.id == customer_id)
            .values(name=name, email=email, image_url=image_url)
            .execution_options(synchronize_session=False),
            "update", commit=True, entity=_ENTITY,
        )
        return result.rowcount

    async def delete_without_pending(self, customer_id: str) -> int:
        has_pending = (
            select(Invoice.id)
            .where(
                Invoice.customer_id == customer_id,
                Invoice.status == InvoiceStatus.PENDING.value,
            )
            .exists()
        )
        result = await execute(
            self._session,
            delete(Customer).where(Customer.id == customer_id, ~has_pending)
            .execution_options(synchronize_session=False),
            "delete", commit=True, entity=_ENTITY,
        )
        return result.rowcount

    async def get(self, customer_id: str) -> dict | None:
        result = await execute(
            self._session,
            select(Customer).where(Customer.id == customer_id),
            "select", entity=_ENTITY,
        )
        customer = result.scalar_one_or_none()
        return _row(customer) if customer else None

    async def list_all(self) -> list[dict]:
        result = await execute(
            self._session,
            select(Customer).order_by(Customer.name, Customer.id),
            "select", entity=_ENTITY,
        )
        return [_row(c) for c in result.scalars().all()]
