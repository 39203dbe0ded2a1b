"""Invoice Repository: statements against a real (SQLite) invoices table.

Tests cover:
    - insert/get round trip with generated id
    - update rewrites customer/amount/status and keeps date
    - delete reports affected rows
    - count_for_customer filters by customer and status
    - constraint violations surface as DatabaseError and persist nothing
    - driver failures roll back and carry the driver cause
"""

from datetime import date

import pytest
from sqlalchemy.exc import OperationalError

from dashboard.core.domain_types import InvoiceStatus
from dashboard.core.errors import DatabaseError
from dashboard.infrastructure.invoice_repository import SqlInvoiceRepository

ISSUED = date(2026, 10, 16)


@pytest.fixture
def repo(test_db):
    return SqlInvoiceRepository(test_db)


async def test_insert_then_get(repo):
    invoice_id = await repo.insert("c1", 5000, InvoiceStatus.PENDING, ISSUED)

    row = await repo.get(invoice_id)
    assert row == {
        "id": invoice_id, "customer_id": "c1", "amount": 5000,
        "status": "pending", "date": ISSUED,
    }


async def test_update_to_paid_round_trip(repo):
    invoice_id = await repo.insert("c1", 5000, InvoiceStatus.PENDING, ISSUED)

    updated = await repo.update(invoice_id, "c1", 5000, InvoiceStatus.PAID)

    assert updated == 1
    row = await repo.get(invoice_id)
    assert row["status"] == "paid"
    assert row["customer_id"] == "c1"
    assert row["date"] == ISSUED


async def test_update_unknown_id_affects_nothing(repo):
    assert await repo.update("missing", "c1", 100, InvoiceStatus.PAID) == 0


async def test_delete(repo):
    invoice_id = await repo.insert("c1", 5000, InvoiceStatus.PENDING, ISSUED)
    assert await repo.delete(invoice_id) == 1
    assert await repo.get(invoice_id) is None
    assert await repo.delete(invoice_id) == 0


async def test_count_for_customer_filters_status(repo):
    await repo.insert("c1", 100, InvoiceStatus.PENDING, ISSUED)
    await repo.insert("c1", 200, InvoiceStatus.PENDING, ISSUED)
    await repo.insert("c1", 300, InvoiceStatus.PAID, ISSUED)
    await repo.insert("c2", 400, InvoiceStatus.PENDING, ISSUED)

    assert await repo.count_for_customer("c1", InvoiceStatus.PENDING) == 2
    assert await repo.count_for_customer("c1", InvoiceStatus.PAID) == 1
    assert await repo.count_for_customer("c3", InvoiceStatus.PENDING) == 0


async def test_list_all_newest_first(repo):
    await repo.insert("c1", 100, InvoiceStatus.PAID, date(2026, 1, 1))
    await repo.insert("c1", 200, InvoiceStatus.PAID, date(2026, 5, 1))

    rows = await repo.list_all()
    assert [r["amount"] for r in rows] == [200, 100]


async def test_check_constraint_violation_persists_nothing(repo):
    with pytest.raises(DatabaseError) as excinfo:
        await repo.insert("c1", 0, InvoiceStatus.PENDING, ISSUED)

    assert excinfo.value.operation == "insert"
    assert "CHECK constraint failed" in excinfo.value.cause
    assert await repo.list_all() == []


async def test_driver_failure_carries_cause(test_db, monkeypatch):
    async def failing_execute(*args, **kwargs):
        raise OperationalError("DELETE", {}, Exception("database is locked"))

    monkeypatch.setattr(test_db, "execute", failing_execute)

    with pytest.raises(DatabaseError) as excinfo:
        await SqlInvoiceRepository(test_db).delete("inv-1")
    assert excinfo.value.cause == "database is locked"
