"""Invoice Routes: cached listing plus create/update/delete form endpoints.

Invariants:
    - GET serves the view cache; mutations invalidate it
    - Form bodies are passed to the coordinator untouched (it validates)
"""

from fastapi import APIRouter, Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from dashboard.api.dependencies import get_invoice_mutations
from dashboard.api.outcome_responses import outcome_response
from dashboard.config import get_settings
from dashboard.infrastructure.database import get_db
from dashboard.infrastructure.invoice_repository import SqlInvoiceRepository
from dashboard.infrastructure.view_cache import ViewCache, get_view_cache
from dashboard.schemas.listings import InvoiceListing, InvoiceRow
from dashboard.services.invoice_mutations import InvoiceMutations

router = APIRouter(prefix=get_settings().invoices_path, tags=["invoices"])


@router.get("", response_model=InvoiceListing)
async def list_invoices(
    db: AsyncSession = Depends(get_db),
    views: ViewCache = Depends(get_view_cache),
):
    """Invoices listing, recomputed only after invalidation."""
    async def compute() -> InvoiceListing:
        rows = await SqlInvoiceRepository(db).list_all()
        return InvoiceListing(invoices=[InvoiceRow(**r) for r in rows])

    return await views.get_or_compute(get_settings().invoices_path, compute)


@router.post("")
async def create_invoice(
    request: Request,
    mutations: InvoiceMutations = Depends(get_invoice_mutations),
):
    form = await request.form()
    return outcome_response(await mutations.create_invoice(None, form))


@router.post("/{invoice_id}/edit")
async def update_invoice(
    invoice_id: str,
    request: Request,
    mutations: InvoiceMutations = Depends(get_invoice_mutations),
):
    form = await request.form()
    return outcome_response(await mutations.update_invoice(invoice_id, None, form))


@router.delete("/{invoice_id}")
async def delete_invoice(
    invoice_id: str,
    mutations: InvoiceMutations = Depends(get_invoice_mutations),
):
    return outcome_response(await mutations.delete_invoice(invoice_id))
