"""Validation rules a provider publishes for its payloads."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, Literal, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from .exceptions import NotificationValidationError

ModelT = TypeVar("ModelT", bound=BaseModel)


@dataclass(frozen=True)
class SchemaSuccess(Generic[ModelT]):
    """Payload matched the schema; ``data`` is the normalized model."""

    data: ModelT
    success: Literal[True] = True


@dataclass(frozen=True)
class SchemaFailure:
    """Payload did not match the schema.

    ``errors`` maps a dotted field path (``recipient.user_id``) to messages;
    errors on the payload as a whole are keyed ``__root__``.
    """

    errors: dict[str, list[str]]
    success: Literal[False] = False


SchemaResult = SchemaSuccess[ModelT] | SchemaFailure


def errors_from_pydantic(exc: PydanticValidationError) -> dict[str, list[str]]:
    """Convert a pydantic ``ValidationError`` into ``{field: [messages]}``."""
    errors: dict[str, list[str]] = {}
    for error in exc.errors():
        loc = ".".join(str(p) for p in error.get("loc", ())) or "__root__"
        msg = error.get("msg", "validation error")
        errors.setdefault(loc, []).append(msg)
    return errors


class Schema(Generic[ModelT]):
    """Validates untrusted payloads against a pydantic model.

    Validation failure is an expected outcome, returned as a value::

        result = schema.safe_parse(payload)
        if result.success:
            notification = result.data
        else:
            reject(result.errors)

    Schemas hold no state and may be shared freely.
    """

    def __init__(self, model: type[ModelT]) -> None:
        self._model = model

    @property
    def model(self) -> type[ModelT]:
        return self._model

    def safe_parse(self, data: Any) -> SchemaResult[ModelT]:
        """Validate *data*, returning success or a structured failure."""
        try:
            return SchemaSuccess(self._model.model_validate(data))
        except PydanticValidationError as exc:
            return SchemaFailure(errors_from_pydantic(exc))

    def parse(self, data: Any) -> ModelT:
        """Validate *data*, raising :class:`NotificationValidationError` on failure."""
        result = self.safe_parse(data)
        if isinstance(result, SchemaFailure):
            raise NotificationValidationError(result.errors)
        return result.data

    def json_schema(self) -> dict[str, Any]:
        """Return the JSON Schema of the wrapped model."""
        return self._model.model_json_schema()

    def __repr__(self) -> str:
        return f"Schema({self._model.__name__})"
