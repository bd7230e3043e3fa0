"""Request payload decoding.

Payloads are decoded into typed schemas. Expected validation failures are
returned as data, never raised, and every failing field is reported.
"""

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

ModelT = TypeVar("ModelT", bound=BaseModel)

# Location prefixes added by FastAPI that mean nothing to the client
_REQUEST_LOCATIONS = ("body", "query", "path")


@dataclass
class DecodeResult(Generic[ModelT]):
    """Either a decoded value or the complete list of field errors."""

    value: ModelT | None = None
    errors: list[dict[str, Any]] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors


def format_errors(errors: Sequence[Any]) -> list[dict[str, Any]]:
    """Flatten pydantic error entries into client-facing field errors.

    Args:
        errors: Entries from ``ValidationError.errors()`` or
            ``RequestValidationError.errors()``

    Returns:
        list: Dicts like ``{"field": "email", "message": "...", "type": "..."}``
    """
    formatted = []
    for error in errors:
        loc = list(error.get("loc", ()))
        if loc and loc[0] in _REQUEST_LOCATIONS:
            loc = loc[1:]
        formatted.append(
            {
                "field": ".".join(str(part) for part in loc) or "body",
                "message": error.get("msg", "Invalid value"),
                "type": error.get("type", "value_error"),
            }
        )
    return formatted


def decode(schema: type[ModelT], payload: Any) -> DecodeResult[ModelT]:
    """Validate a raw payload against a schema.

    Args:
        schema: Pydantic model to decode into
        payload: Parsed JSON body

    Returns:
        DecodeResult: ``value`` on success, ``errors`` naming every bad field otherwise
    """
    try:
        value = schema.model_validate(payload)
    except PydanticValidationError as e:
        return DecodeResult(errors=format_errors(e.errors()))
    return DecodeResult(value=value)
