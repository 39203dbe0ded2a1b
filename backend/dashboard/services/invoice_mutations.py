"""Invoice Mutations: create, update, and delete invoices from form submissions.

Invariants:
    - Create stores amount * 100 (minor units) and today's UTC date
    - Update rewrites customer, amount, and status; the issue date is kept
    - Delete is unconditional and never redirects (invoked in place)
    - Each call is stateless; prev_state is accepted for form compatibility only
"""

import logging
from collections.abc import Callable, Mapping
from datetime import date, datetime, timezone
from typing import Any

from dashboard.core.amounts import to_minor_units
from dashboard.core.domain_types import Entity, Operation
from dashboard.core.errors import DatabaseError
from dashboard.core.outcomes import FormState, MutationOutcome
from dashboard.core.repository_protocols import InvoiceRepository, ViewInvalidator
from dashboard.schemas.forms import CreateInvoice, UpdateInvoice
from dashboard.services.mutation_flow import storage_failure, validated_write

logger = logging.getLogger(__name__)

INVOICE_DELETED = "Deleted Invoice."


def utc_today() -> date:
    return datetime.now(timezone.utc).date()


class InvoiceMutations:
    """Coordinator entry points for the invoices table."""

    def __init__(
        self,
        invoices: InvoiceRepository,
        views: ViewInvalidator,
        invoices_path: str,
        today: Callable[[], date] = utc_today,
    ):
        self._invoices = invoices
        self._views = views
        self._invoices_path = invoices_path
        self._today = today

    async def create_invoice(
        self, prev_state: FormState | None, form: Mapping[str, Any],
    ) -> MutationOutcome:
        async def write(data) -> None:
            invoice_id = await self._invoices.insert(
                data.customerId, to_minor_units(data.amount), data.status, self._today(),
            )
            logger.debug(f"Invoice {invoice_id} inserted")

        return await validated_write(
            CreateInvoice, form, write,
            label="Create Invoice", entity=Entity.INVOICE, operation=Operation.CREATE,
            views=self._views, view_path=self._invoices_path,
        )

    async def update_invoice(
        self, invoice_id: str, prev_state: FormState | None, form: Mapping[str, Any],
    ) -> MutationOutcome:
        async def write(data) -> None:
            updated = await self._invoices.update(
                invoice_id, data.customerId, to_minor_units(data.amount), data.status,
            )
            if not updated:
                logger.warning(
                    f"Update matched no invoice {invoice_id}",
                    extra={"record_id": invoice_id},
                )

        return await validated_write(
            UpdateInvoice, form, write,
            label="Update Invoice", entity=Entity.INVOICE, operation=Operation.UPDATE,
            views=self._views, view_path=self._invoices_path,
        )

    async def delete_invoice(self, invoice_id: str) -> MutationOutcome:
        try:
            await self._invoices.delete(invoice_id)
        except DatabaseError as e:
            logger.error(
                f"Delete Invoice: {e.message}",
                extra={
                    "entity": Entity.INVOICE.value, "operation": Operation.DELETE.value,
                    "record_id": invoice_id, "error_code": e.code,
                },
            )
            return storage_failure("Delete Invoice", e)
        self._views.revalidate_path(self._invoices_path)
        return MutationOutcome.result(INVOICE_DELETED)
