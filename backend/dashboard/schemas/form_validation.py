"""Form Validation: declarative field rules compiled into pydantic models.

Invariants:
    - safe_parse() never raises; every failure becomes a field error
    - Only fields declared by the schema are read from raw input; extras are ignored
    - Absent fields are passed as None so "missing" and "wrong type" fail alike
    - Field error lists keep pydantic's error order, one entry per distinct message

Design Decisions:
    - One FormSchema builder with omit() replaces hand-written create/update
      schema pairs; variants are derived from a single rule set
    - FieldRule.message overrides pydantic's message for every failure on that
      field, so coercion and constraint failures read the same to the user
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, ValidationError, create_model

T = TypeVar("T", bound=BaseModel)


@dataclass(frozen=True)
class FieldRule:
    """A single form field: pydantic annotation plus optional user message."""
    annotation: Any
    message: str | None = None


@dataclass(frozen=True)
class ValidationResult(Generic[T]):
    """Either a typed value or field errors, plus an optional top-level message."""
    data: T | None = None
    errors: dict[str, list[str]] = field(default_factory=dict)
    message: str | None = None

    @property
    def success(self) -> bool:
        return self.data is not None


class FormSchema:
    """Named set of field rules; omit() derives narrower variants."""

    def __init__(
        self,
        name: str,
        rules: Mapping[str, FieldRule],
        omit: Iterable[str] = (),
    ):
        omitted = set(omit)
        unknown = omitted - set(rules)
        if unknown:
            raise ValueError(f"{name}: cannot omit unknown fields {sorted(unknown)}")
        self.name = name
        self._all_rules = dict(rules)
        self.rules = {k: v for k, v in rules.items() if k not in omitted}
        self.model: type[BaseModel] = create_model(
            name,
            __config__=ConfigDict(extra="ignore", frozen=True),
            **{k: (rule.annotation, ...) for k, rule in self.rules.items()},
        )

    def omit(self, *fields: str, name: str | None = None) -> "FormSchema":
        """Derive a schema without `fields` (e.g. system-assigned id/date)."""
        dropped = set(self._all_rules) - set(self.rules) | set(fields)
        return FormSchema(name or self.name, self._all_rules, omit=dropped)

    def safe_parse(
        self, raw: Mapping[str, Any], message: str | None = None,
    ) -> ValidationResult:
        """Validate raw form input. `message` is attached to failed results."""
        payload = {name: raw.get(name) for name in self.rules}
        try:
            data = self.model.model_validate(payload)
        except ValidationError as exc:
            return ValidationResult(
                errors=self._field_errors(exc), message=message,
            )
        return ValidationResult(data=data)

    def _field_errors(self, exc: ValidationError) -> dict[str, list[str]]:
        errors: dict[str, list[str]] = {}
        for err in exc.errors():
            name = str(err["loc"][0]) if err["loc"] else "form"
            rule = self.rules.get(name)
            text = rule.message if rule and rule.message else err["msg"]
            bucket = errors.setdefault(name, [])
            if text not in bucket:
                bucket.append(text)
        return errors
