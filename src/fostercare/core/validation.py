"""Registry-based required-field validation for drafts and wizard steps."""

from __future__ import annotations

from typing import Any, Callable

from pydantic import BaseModel, Field

# Registry of validator functions: name -> callable(value, **params) -> str | None
# Returns an error message string on failure, None on success.
VALIDATORS: dict[str, Callable[..., str | None]] = {}


def register(name: str):
    """Decorator to register a validator function."""
    def decorator(fn):
        VALIDATORS[name] = fn
        return fn
    return decorator


@register("required")
def validate_required(value: Any, **_kwargs: Any) -> str | None:
    if value is None or (isinstance(value, str) and not value.strip()):
        return "This field is required."
    return None


class ValidationResult(BaseModel):
    """Result of validating a set of fields."""

    valid: bool
    errors: dict[str, list[str]] = Field(default_factory=dict)


def validate_fields(
    data: BaseModel | dict[str, Any],
    rules: dict[str, list[str]],
) -> ValidationResult:
    """Run named validators for each field against *data*.

    Args:
        data: A model or plain mapping holding the values.
        rules: Field name -> list of validator names.
    """
    values = data.model_dump() if isinstance(data, BaseModel) else data
    all_errors: dict[str, list[str]] = {}
    for field, names in rules.items():
        value = values.get(field)
        for name in names:
            fn = VALIDATORS.get(name)
            if fn is None:
                continue
            err = fn(value)
            if err:
                all_errors.setdefault(field, []).append(err)
                break
    return ValidationResult(valid=not all_errors, errors=all_errors)


def validate_required_fields(data: BaseModel | dict[str, Any], fields: list[str] | tuple[str, ...]) -> ValidationResult:
    return validate_fields(data, {f: ["required"] for f in fields})
