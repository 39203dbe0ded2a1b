"""Mutation Flow: the validate -> write -> invalidate -> redirect sequence.

Invariants:
    - Validation failure returns FAILED with field errors; storage is never touched
    - DatabaseError from the write returns FAILED with "Database Error: Failed to <label>. <cause>"
    - The view is invalidated only after a successful write
    - A successful create/update always ends in REDIRECT to the listing path
"""

import logging
from collections.abc import Awaitable, Callable, Mapping
from typing import Any

from pydantic import BaseModel

from dashboard.core.domain_types import Entity, Operation
from dashboard.core.errors import DatabaseError
from dashboard.core.outcomes import MutationOutcome
from dashboard.core.repository_protocols import ViewInvalidator
from dashboard.schemas.form_validation import FormSchema

logger = logging.getLogger(__name__)


def storage_failure(label: str, error: DatabaseError) -> MutationOutcome:
    """Message-only failure with the driver cause appended when known."""
    message = f"Database Error: Failed to {label}."
    if error.cause:
        message = f"{message} {error.cause}"
    return MutationOutcome.failed(message)


async def validated_write(
    schema: FormSchema,
    form: Mapping[str, Any],
    write: Callable[[BaseModel], Awaitable[None]],
    *,
    label: str,
    entity: Entity,
    operation: Operation,
    views: ViewInvalidator,
    view_path: str,
) -> MutationOutcome:
    """Run one create/update form submission to its terminal outcome."""
    log_extra = {"entity": entity.value, "operation": operation.value}

    validated = schema.safe_parse(form, message=f"Missing Fields. Failed to {label}.")
    if not validated.success:
        logger.info(
            f"{label}: validation failed on {sorted(validated.errors)}",
            extra={**log_extra, "outcome": "failed"},
        )
        return MutationOutcome.failed(validated.message, validated.errors)

    try:
        await write(validated.data)
    except DatabaseError as e:
        logger.error(
            f"{label}: {e.message}",
            extra={**log_extra, "error_code": e.code, "outcome": "failed"},
        )
        return storage_failure(label, e)

    views.revalidate_path(view_path)
    logger.info(f"{label}: done", extra={**log_extra, "outcome": "redirect"})
    return MutationOutcome.redirect(view_path)
