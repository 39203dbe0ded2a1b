"""Customer Mutations: create/update and the guarded delete.

Tests cover:
    - create/update redirect to the customers listing and invalidate it
    - pending invoices block deletion with "no se elimino"
    - the pending check runs before any delete statement
    - paid invoices do not block deletion
    - storage failures in either step become a failure message
"""

import pytest

from dashboard.core.outcomes import OutcomeKind
from dashboard.services.customer_mutations import (
    CUSTOMER_DELETED, CUSTOMER_HAS_PENDING_INVOICES, CustomerMutations,
)
from tests.services.fakes import (
    FakeCustomerRepository, FakeInvoiceRepository, RecordingViews,
)

CUSTOMERS = "/dashboard/customers"
FORM = {"name": "Lee Robinson", "email": "lee@robinson.com", "image_url": "/lee.png"}


@pytest.fixture
def invoices():
    return FakeInvoiceRepository()


@pytest.fixture
def customers(invoices):
    return FakeCustomerRepository(invoices)


@pytest.fixture
def views():
    return RecordingViews()


@pytest.fixture
def mutations(customers, invoices, views):
    return CustomerMutations(customers, invoices, views, CUSTOMERS)


# ─── create / update ─────────────────────────────────────────────

async def test_create_inserts_and_redirects(mutations, customers, views):
    outcome = await mutations.create_customers(None, FORM)

    assert outcome.kind == OutcomeKind.REDIRECT
    assert outcome.target == CUSTOMERS
    [row] = customers.rows.values()
    assert row["email"] == "lee@robinson.com"
    assert views.invalidated == [CUSTOMERS]


async def test_create_missing_fields(mutations, customers):
    outcome = await mutations.create_customers(None, {"name": "Lee"})
    assert outcome.kind == OutcomeKind.FAILED
    assert outcome.message == "Missing Fields. Failed to Create Customers."
    assert set(outcome.state.errors) == {"email", "image_url"}
    assert customers.calls == []


async def test_create_storage_failure(invoices, views):
    customers = FakeCustomerRepository(invoices, fail_on={"insert"})
    mutations = CustomerMutations(customers, invoices, views, CUSTOMERS)

    outcome = await mutations.create_customers(None, FORM)

    assert outcome.kind == OutcomeKind.FAILED
    assert outcome.message == (
        "Database Error: Failed to Create Customers. connection refused"
    )
    assert outcome.state.errors is None
    assert customers.rows == {}
    assert views.invalidated == []


async def test_update_rewrites_fields(mutations, customers):
    customers.seed("cus-1")
    outcome = await mutations.update_customers("cus-1", None, FORM)
    assert outcome.kind == OutcomeKind.REDIRECT
    assert customers.rows["cus-1"]["name"] == "Lee Robinson"


async def test_update_storage_failure(invoices, views):
    customers = FakeCustomerRepository(invoices, fail_on={"update"})
    customers.seed("cus-1")
    mutations = CustomerMutations(customers, invoices, views, CUSTOMERS)

    outcome = await mutations.update_customers("cus-1", None, FORM)

    assert outcome.message == (
        "Database Error: Failed to Update Customers. connection refused"
    )
    assert customers.rows["cus-1"]["name"] == "Evil Rabbit"
    assert views.invalidated == []


# ─── guarded delete ──────────────────────────────────────────────

async def test_delete_blocked_by_pending_invoice(mutations, customers, invoices, views):
    customers.seed("cus-1")
    invoices.seed("inv-1", "cus-1", 5000, "pending")

    outcome = await mutations.delete_customers("cus-1")

    assert outcome.kind == OutcomeKind.REJECTED
    assert outcome.message == CUSTOMER_HAS_PENDING_INVOICES == "no se elimino"
    assert "cus-1" in customers.rows
    assert customers.calls == []
    assert views.invalidated == []


async def test_delete_check_precedes_delete(mutations, customers, invoices):
    customers.seed("cus-1")

    await mutations.delete_customers("cus-1")

    assert invoices.calls == ["count"]
    assert customers.calls == ["delete"]


async def test_delete_without_pending_removes_row(mutations, customers, invoices, views):
    customers.seed("cus-1")
    invoices.seed("inv-1", "cus-1", 5000, "paid")

    outcome = await mutations.delete_customers("cus-1")

    assert outcome.kind == OutcomeKind.RESULT
    assert outcome.message == CUSTOMER_DELETED
    assert "cus-1" not in customers.rows
    assert views.invalidated == [CUSTOMERS]


async def test_delete_rejected_when_pending_invoice_appears_mid_delete(
    customers, invoices, views,
):
    customers.seed("cus-1")

    class RacingInvoices(FakeInvoiceRepository):
        """First count sees nothing; a pending invoice lands right after."""
        async def count_for_customer(self, customer_id, status):
            count = await super().count_for_customer(customer_id, status)
            if len(self.calls) == 1:
                self.seed("inv-late", customer_id, 100, "pending")
            return count

    racing = RacingInvoices()
    customers._invoices = racing
    mutations = CustomerMutations(customers, racing, views, CUSTOMERS)

    outcome = await mutations.delete_customers("cus-1")

    assert outcome.kind == OutcomeKind.REJECTED
    assert "cus-1" in customers.rows
    assert views.invalidated == []


async def test_delete_count_failure_is_generic_failure(customers, views):
    invoices = FakeInvoiceRepository(fail_on={"count"})
    customers.seed("cus-1")
    mutations = CustomerMutations(customers, invoices, views, CUSTOMERS)

    outcome = await mutations.delete_customers("cus-1")

    assert outcome.kind == OutcomeKind.FAILED
    assert "Database Error" in outcome.message
    assert customers.calls == []
    assert "cus-1" in customers.rows


async def test_delete_statement_failure_is_generic_failure(invoices, views):
    customers = FakeCustomerRepository(invoices, fail_on={"delete"})
    customers.seed("cus-1")
    mutations = CustomerMutations(customers, invoices, views, CUSTOMERS)

    outcome = await mutations.delete_customers("cus-1")

    assert outcome.kind == OutcomeKind.FAILED
    assert outcome.message.startswith("Database Error: Failed to Delete Customer.")
    assert "cus-1" in customers.rows
    assert views.invalidated == []
