"""Opaque row identifiers: UUID4 text, generated on insert."""

import uuid


def new_id() -> str:
    return str(uuid.uuid4())
