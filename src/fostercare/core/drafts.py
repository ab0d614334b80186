"""Functional patching of draft records.

Form field edits arrive as (field, value) messages. Applying one never
mutates the draft in place: a new, validated model is returned.
"""

from __future__ import annotations

from typing import Any, TypeVar

from pydantic import BaseModel

ModelT = TypeVar("ModelT", bound=BaseModel)


def resolve_field(model_cls: type[BaseModel], field: str) -> str:
    """Map a field name or its wire alias to the attribute name.

    Raises:
        ValueError: If the model has no such field.
    """
    if field in model_cls.model_fields:
        return field
    for name, info in model_cls.model_fields.items():
        if info.alias == field:
            return name
    raise ValueError(f"{model_cls.__name__} has no field {field!r}")


def patch(draft: ModelT, field: str, value: Any) -> ModelT:
    """Return a copy of *draft* with a single field replaced."""
    name = resolve_field(type(draft), field)
    data = draft.model_dump()
    data[name] = value
    return type(draft).model_validate(data)
