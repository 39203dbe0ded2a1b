"""Mutation Outcomes: the tagged result every coordinator operation returns.

Invariants:
    - Exactly one of `target` (REDIRECT) or `state` (all other kinds) is set
    - FAILED carries a message and, for validation failures, field errors
    - REJECTED is reserved for business-rule refusals (guarded delete)
    - Outcomes are immutable; the coordinator never mutates one after return

Design Decisions:
    - Redirect is a value, not a raised exception: routes map every kind to a
      response in one place instead of relying on non-local exits
"""

from dataclasses import dataclass
from enum import Enum


class OutcomeKind(str, Enum):
    """Terminal states of a mutation."""
    REDIRECT = "redirect"
    RESULT = "result"
    FAILED = "failed"
    REJECTED = "rejected"


@dataclass(frozen=True)
class FormState:
    """Form state echoed back to the submitting form.

    Mirrors `{errors?: {field: [messages]}, message?: str | None}`.
    """
    errors: dict[str, list[str]] | None = None
    message: str | None = None

    def to_dict(self) -> dict:
        payload: dict = {"message": self.message}
        if self.errors is not None:
            payload["errors"] = self.errors
        return payload


@dataclass(frozen=True)
class MutationOutcome:
    """Tagged outcome: Redirect(target) or Result/Failed/Rejected(state)."""
    kind: OutcomeKind
    target: str | None = None
    state: FormState | None = None

    @classmethod
    def redirect(cls, target: str) -> "MutationOutcome":
        return cls(OutcomeKind.REDIRECT, target=target)

    @classmethod
    def result(cls, message: str) -> "MutationOutcome":
        return cls(OutcomeKind.RESULT, state=FormState(message=message))

    @classmethod
    def failed(
        cls, message: str, errors: dict[str, list[str]] | None = None,
    ) -> "MutationOutcome":
        return cls(OutcomeKind.FAILED, state=FormState(errors=errors, message=message))

    @classmethod
    def rejected(cls, message: str) -> "MutationOutcome":
        return cls(OutcomeKind.REJECTED, state=FormState(message=message))

    @property
    def message(self) -> str | None:
        return self.state.message if self.state else None
