"""Boundary Protocols: contracts between the mutation pipeline and its collaborators.

Invariants:
    - Core NEVER imports from shell; dependency arrows point inward only
    - All IO operations accessed through Protocol types
    - Repositories raise DatabaseError (core/errors.py) on any store failure,
      after rolling back, so callers never observe partial writes
    - Write methods return affected row counts; they never raise on zero rows

Design Decisions:
    - Protocol over ABC: structural subtyping lets tests pass in-memory doubles
    - Async in Protocol: implementations do IO, the coordinator awaits each call
      in sequence
"""

from collections.abc import Mapping
from datetime import date
from typing import Any, Protocol

from dashboard.core.domain_types import CustomerId, InvoiceId, InvoiceStatus


class InvoiceRepository(Protocol):
    """Contract for invoice persistence."""
    async def insert(
        self, customer_id: str, amount: int, status: InvoiceStatus, issued_on: date,
    ) -> InvoiceId: ...
    async def update(
        self, invoice_id: str, customer_id: str, amount: int, status: InvoiceStatus,
    ) -> int: ...
    async def delete(self, invoice_id: str) -> int: ...
    async def count_for_customer(
        self, customer_id: str, status: InvoiceStatus,
    ) -> int: ...
    async def get(self, invoice_id: str) -> dict | None: ...
    async def list_all(self) -> list[dict]: ...


class CustomerRepository(Protocol):
    """Contract for customer persistence."""
    async def insert(self, name: str, email: str, image_url: str) -> CustomerId: ...
    async def update(
        self, customer_id: str, name: str, email: str, image_url: str,
    ) -> int: ...
    async def delete_without_pending(self, customer_id: str) -> int: ...
    async def get(self, customer_id: str) -> dict | None: ...
    async def list_all(self) -> list[dict]: ...


class ViewInvalidator(Protocol):
    """Contract for the cache invalidation signal. Best-effort, no result."""
    def revalidate_path(self, path: str) -> None: ...


class IdentityProvider(Protocol):
    """Contract for the external sign-in call.

    Returns nothing on success. Raises AuthError for classified failures;
    any other exception is unclassified.
    """
    async def sign_in(self, provider: str, credentials: Mapping[str, Any]) -> None: ...
