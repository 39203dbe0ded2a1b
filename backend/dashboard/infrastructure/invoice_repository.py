"""Invoice Repository: parameterized statements against the invoices table.

Invariants:
    - insert/update/delete commit on success and return ids / affected rows
    - count_for_customer is a read; it never commits
    - Failures surface as DatabaseError after rollback (sql_execution.execute)
"""

from datetime import date

from sqlalchemy import delete, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from dashboard.core.domain_types import InvoiceId, InvoiceStatus
from dashboard.infrastructure.sql_execution import execute
from dashboard.models._ids import new_id
from dashboard.models.invoice import Invoice

_ENTITY = "invoice"


def _row(invoice: Invoice) -> dict:
    return {
        "id": invoice.id,
        "customer_id": invoice.customer_id,
        "amount": invoice.amount,
        "status": invoice.status,
        "date": invoice.date,
    }


class SqlInvoiceRepository:
    """InvoiceRepository backed by an AsyncSession."""

    def __init__(self, session: AsyncSession):
        self._session = session

    async def insert(
        self, customer_id: str, amount: int, status: InvoiceStatus, issued_on: date,
    ) -> InvoiceId:
        invoice_id = new_id()
        await execute(
            self._session,
            insert(Invoice).values(
                id=invoice_id, customer_id=customer_id, amount=amount,
                status=status.value, date=issued_on,
            ),
            "insert", commit=True, entity=_ENTITY,
        )
        return InvoiceId(invoice_id)

    async def update(
        self, invoice_id: str, customer_id: str, amount: int, status: InvoiceStatus,
    ) -> int:
        result = await execute(
            self._session,
            update(Invoice)
            .where(Invoice.id == invoice_id)
            .values(customer_id=customer_id, amount=amount, status=status.value)
            .execution_options(synchronize_session=False),
            "update", commit=True, entity=_ENTITY,
        )
        return result.rowcount

    async def delete(self, invoice_id: str) -> int:
        result = await execute(
            self._session,
            delete(Invoice).where(Invoice.id == invoice_id)
            .execution_options(synchronize_session=False),
            "delete", commit=True, entity=_ENTITY,
        )
        return result.rowcount

    async def count_for_customer(
        self, customer_id: str, status: InvoiceStatus,
    ) -> int:
        result = await execute(
            self._session,
            select(func.count())
            .select_from(Invoice)
            .where(Invoice.customer_id == customer_id, Invoice.status == status.value),
            "count", entity=_ENTITY,
        )
        return result.scalar_one() or 0

    async def get(self, invoice_id: str) -> dict | None:
        result = await execute(
            self._session,
            select(Invoice).where(Invoice.id == invoice_id),
            "select", entity=_ENTITY,
        )
        invoice = result.scalar_one_or_none()
        return _row(invoice) if invoice else None

    async def list_all(self) -> list[dict]:
        result = await execute(
            self._session,
            select(Invoice).order_by(Invoice.date.desc(), Invoice.id),
            "select", entity=_ENTITY,
        )
        return [_row(i) for i in result.scalars().all()]
