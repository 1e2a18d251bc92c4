"""PayloadSerializer — pydantic TypeAdapter conversion of message bodies."""

from __future__ import annotations

import logging
from typing import Any

from pydantic import PydanticUserError, TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError

from .exceptions import DeserializationError, SerializationError

logger = logging.getLogger("queue_batch.serialization")


class PayloadSerializer:
    """Convert between host payload values and typed application values.

    Host payloads are plain JSON-compatible structures (dicts, lists, strings,
    numbers). Any type pydantic can validate may be used as the body type:
    models, dataclasses, TypedDicts, builtins and their generics.
    """

    def __init__(self, *, strict: bool | None = None) -> None:
        """Configure the serializer.

        Args:
            strict: Reject payloads that only validate through type coercion,
                e.g. the string "1" for an int field. None defers to the body
                type's own pydantic config, which is lax unless it says otherwise.
        """
        self.strict = strict
        self._adapters: dict[Any, TypeAdapter[Any]] = {}

    def adapter_for(self, body_type: Any) -> TypeAdapter[Any]:
        """Return a cached TypeAdapter for *body_type*."""
        try:
            return self._adapters[body_type]
        except (KeyError, TypeError):
            pass
        adapter: TypeAdapter[Any] = TypeAdapter(body_type)
        try:
            self._adapters[body_type] = adapter
        except TypeError:
            # unhashable type expressions are rebuilt each time
            pass
        return adapter

    def load(self, raw: Any, body_type: Any) -> Any:
        """Validate *raw* as *body_type*."""
        return load_with(self.adapter_for(body_type), raw, strict=self.strict)

    def dump(self, value: Any) -> Any:
        """Encode *value* to its JSON-compatible wire representation."""
        try:
            return self.adapter_for(type(value)).dump_python(value, mode="json")
        except (
            PydanticSerializationError,
            PydanticUserError,
            TypeError,
            ValueError,
        ) as e:
            raise SerializationError(str(e)) from e


def load_with(
    adapter: TypeAdapter[Any],
    raw: Any,
    *,
    strict: bool | None = None,
) -> Any:
    """Validate *raw* with an already built adapter.

    Unless *strict* is True, pydantic coerces compatible values such as
    numeric strings.
    """
    try:
        return adapter.validate_python(raw, strict=strict)
    except ValidationError as e:
        logger.debug("Payload failed validation: %s", e)
        raise DeserializationError(
            str(e),
            errors=[dict(err) for err in e.errors(include_url=False)],
        ) from e


default_serializer = PayloadSerializer()
