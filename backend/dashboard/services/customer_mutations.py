"""Customer Mutations: create, update, and guarded delete of customers.

Invariants:
    - Create/update follow the same validate -> write -> invalidate -> redirect flow as invoices
    - Delete counts pending invoices BEFORE issuing any DELETE statement
    - A customer with >= 1 pending invoice is never deleted: REJECTED, no invalidation
    - The DELETE statement re-checks for pending invoices in its WHERE clause;
      if that guard removes nothing while pending invoices exist, the result is
      the same rejection
"""

import logging
from collections.abc import Mapping
from typing import Any

from dashboard.core.domain_types import Entity, InvoiceStatus, Operation
from dashboard.core.errors import DatabaseError
from dashboard.core.outcomes import FormState, MutationOutcome
from dashboard.core.repository_protocols import (
    CustomerRepository, InvoiceRepository, ViewInvalidator,
)
from dashboard.schemas.forms import CreateCustomer, UpdateCustomer
from dashboard.services.mutation_flow import storage_failure, validated_write

logger = logging.getLogger(__name__)

CUSTOMER_DELETED = "Customer deleted successfully."
CUSTOMER_HAS_PENDING_INVOICES = "no se elimino"


class CustomerMutations:
    """Coordinator entry points for the customers table."""

    def __init__(
        self,
        customers: CustomerRepository,
        invoices: InvoiceRepository,
        views: ViewInvalidator,
        customers_path: str,
    ):
        self._customers = customers
        self._invoices = invoices
        self._views = views
        self._customers_path = customers_path

    async def create_customers(
        self, prev_state: FormState | None, form: Mapping[str, Any],
    ) -> MutationOutcome:
        async def write(data) -> None:
            await self._customers.insert(data.name, data.email, data.image_url)

        return await validated_write(
            CreateCustomer, form, write,
            label="Create Customers", entity=Entity.CUSTOMER, operation=Operation.CREATE,
            views=self._views, view_path=self._customers_path,
        )

    async def update_customers(
        self, customer_id: str, prev_state: FormState | None, form: Mapping[str, Any],
    ) -> MutationOutcome:
        async def write(data) -> None:
            updated = await self._customers.update(
                customer_id, data.name, data.email, data.image_url,
            )
            if not updated:
                logger.warning(
                    f"Update matched no customer {customer_id}",
                    extra={"record_id": customer_id},
                )

        return await validated_write(
            UpdateCustomer, form, write,
            label="Update Customers", entity=Entity.CUSTOMER, operation=Operation.UPDATE,
            views=self._views, view_path=self._customers_path,
        )

    async def delete_customers(self, customer_id: str) -> MutationOutcome:
        log_extra = {
            "entity": Entity.CUSTOMER.value,
            "operation": Operation.DELETE.value,
            "record_id": customer_id,
        }
        try:
            if await self._has_pending_invoices(customer_id):
                logger.warning(
                    "Delete Customer blocked: pending invoices",
                    extra={**log_extra, "outcome": "rejected"},
                )
                return MutationOutcome.rejected(CUSTOMER_HAS_PENDING_INVOICES)

            deleted = await self._customers.delete_without_pending(customer_id)
            if not deleted and await self._has_pending_invoices(customer_id):
                logger.warning(
                    "Delete Customer blocked: invoice created during delete",
                    extra={**log_extra, "outcome": "rejected"},
                )
                return MutationOutcome.rejected(CUSTOMER_HAS_PENDING_INVOICES)
        except DatabaseError as e:
            logger.error(
                f"Delete Customer: {e.message}",
                extra={**log_extra, "error_code": e.code, "outcome": "failed"},
            )
            return storage_failure("Delete Customer", e)

        self._views.revalidate_path(self._customers_path)
        return MutationOutcome.result(CUSTOMER_DELETED)

    async def _has_pending_invoices(self, customer_id: str) -> bool:
        pending = await self._invoices.count_for_customer(
            customer_id, InvoiceStatus.PENDING,
        )
        return pending > 0
