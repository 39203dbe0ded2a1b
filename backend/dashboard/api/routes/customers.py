"""Customer Routes: cached listing plus create/update/guarded-delete endpoints."""

from fastapi import APIRouter, Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from dashboard.api.dependencies import get_customer_mutations
from dashboard.api.outcome_responses import outcome_response
from dashboard.config import get_settings
from dashboard.infrastructure.customer_repository import SqlCustomerRepository
from dashboard.infrastructure.database import get_db
from dashboard.infrastructure.view_cache import ViewCache, get_view_cache
from dashboard.schemas.listings import CustomerListing, CustomerRow
from dashboard.services.customer_mutations import CustomerMutations

router = APIRouter(prefix=get_settings().customers_path, tags=["customers"])


@router.get("", response_model=CustomerListing)
async def list_customers(
    db: AsyncSession = Depends(get_db),
    views: ViewCache = Depends(get_view_cache),
):
    async def compute() -> CustomerListing:
        rows = await SqlCustomerRepository(db).list_all()
        return CustomerListing(customers=[CustomerRow(**r) for r in rows])

    return await views.get_or_compute(get_settings().customers_path, compute)


@router.post("")
async def create_customers(
    request: Request,
    mutations: CustomerMutations = Depends(get_customer_mutations),
):
    form = await request.form()
    return outcome_response(await mutations.create_customers(None, form))


@router.post("/{customer_id}/edit")
async def update_customers(
    customer_id: str,
    request: Request,
    mutations: CustomerMutations = Depends(get_customer_mutations),
):
    form = await request.form()
    return outcome_response(
        await mutations.update_customers(customer_id, None, form),
    )


@router.delete("/{customer_id}")
async def delete_customers(
    customer_id: str,
    mutations: CustomerMutations = Depends(get_customer_mutations),
):
    """Guarded delete: 409 while the customer has pending invoices."""
    return outcome_response(await mutations.delete_customers(customer_id))
