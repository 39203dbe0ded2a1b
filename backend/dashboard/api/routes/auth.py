"""Auth Routes: login form submission through the credential exchange.

Invariants:
    - Success -> 303 to the configured post-sign-in page
    - Classified failure -> 401 {message}
    - Unclassified provider errors reach the global catch-all handler
"""

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse, RedirectResponse

from dashboard.api.dependencies import get_identity_provider
from dashboard.config import get_settings
from dashboard.infrastructure.credentials_provider import CredentialsProvider
from dashboard.services.authenticate import authenticate

router = APIRouter(tags=["auth"])


@router.post("/login")
async def login(
    request: Request,
    provider: CredentialsProvider = Depends(get_identity_provider),
):
    form = await request.form()
    message = await authenticate(provider, None, form)
    if message is None:
        return RedirectResponse(
            get_settings().sign_in_redirect, status_code=status.HTTP_303_SEE_OTHER,
        )
    return JSONResponse(
        status_code=status.HTTP_401_UNAUTHORIZED, content={"message": message},
    )
