# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Any, NoReturn, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from .base import ValidationError

ModelT = TypeVar("ModelT", bound=BaseModel)


def format_pydantic_errors(exc: PydanticValidationError) -> dict[str, Any]:
    fields_set = set()
    errors_list = []

    for error in exc.errors(include_url=False, include_input=False):
        loc = error.get("loc", ())
        field_path = ".".join(str(part) for part in loc if part is not None)
        if field_path:
            fields_set.add(field_path)
        errors_list.append(
            {"field": field_path or "body", "type": error.get("type", "value_error")}
        )

    return {
        "fields": sorted(fields_set),
        "errors": errors_list,
    }


def raise_validation_error(exc: PydanticValidationError) -> NoReturn:
    context = format_pydantic_errors(exc)
    raise ValidationError(context=context) from exc


def parse_body(model: type[ModelT], payload: Any) -> ModelT:
    """Validate a JSON body against ``model`` or raise a 400 ``bad_request``."""

    if not isinstance(payload, dict):
        raise ValidationError(
            context={"fields": [], "errors": [{"field": "body", "type": "json_object"}]}
        )
    try:
        return model.model_validate(payload)
    except PydanticValidationError as exc:
        raise_validation_error(exc)


__all__ = [
    "format_pydantic_errors",
    "parse_body",
    "raise_validation_error",
]
