"""Outcome Responses: map a MutationOutcome onto an HTTP response.

Invariants:
    - REDIRECT -> 303 See Other to the listing path (form POST -> GET)
    - RESULT -> 200 {message}
    - FAILED with field errors -> 400 {errors, message}
    - FAILED without field errors (storage) -> 503 {message}
    - REJECTED (business rule) -> 409 {message}
"""

from fastapi import status
from fastapi.responses import JSONResponse, RedirectResponse, Response

from dashboard.core.outcomes import MutationOutcome, OutcomeKind


def outcome_response(outcome: MutationOutcome) -> Response:
    match outcome.kind:
        case OutcomeKind.REDIRECT:
            return RedirectResponse(
                outcome.target, status_code=status.HTTP_303_SEE_OTHER,
            )
        case OutcomeKind.RESULT:
            code = status.HTTP_200_OK
        case OutcomeKind.REJECTED:
            code = status.HTTP_409_CONFLICT
        case _:
            code = (
                status.HTTP_400_BAD_REQUEST if outcome.state.errors
                else status.HTTP_503_SERVICE_UNAVAILABLE
            )
    return JSONResponse(status_code=code, content=outcome.state.to_dict())
