"""Dependencies: wire repositories, view cache, and settings into services.

Invariants:
    - One AsyncSession per request, shared by every repository in that request
    - Services receive protocol-typed collaborators, never the session itself
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from dashboard.config import get_settings
from dashboard.infrastructure.credentials_provider import CredentialsProvider
from dashboard.infrastructure.customer_repository import SqlCustomerRepository
from dashboard.infrastructure.database import get_db
from dashboard.infrastructure.invoice_repository import SqlInvoiceRepository
from dashboard.infrastructure.view_cache import ViewCache, get_view_cache
from dashboard.services.customer_mutations import CustomerMutations
from dashboard.services.invoice_mutations import InvoiceMutations


def get_invoice_mutations(
    db: AsyncSession = Depends(get_db),
    views: ViewCache = Depends(get_view_cache),
) -> InvoiceMutations:
    return InvoiceMutations(
        SqlInvoiceRepository(db), views, get_settings().invoices_path,
    )


def get_customer_mutations(
    db: AsyncSession = Depends(get_db),
    views: ViewCache = Depends(get_view_cache),
) -> CustomerMutations:
    return CustomerMutations(
        SqlCustomerRepository(db), SqlInvoiceRepository(db),
        views, get_settings().customers_path,
    )


def get_identity_provider(
    db: AsyncSession = Depends(get_db),
) -> CredentialsProvider:
    return CredentialsProvider(db)
