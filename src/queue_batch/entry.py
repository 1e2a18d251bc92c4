"""Entry accessor — read id, timestamp and body from one opaque host entry."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Any

from .exceptions import FieldAccessError, MissingIdentifierError
from .message import Message
from .ports import IFieldReadable
from .serialization import load_with

if TYPE_CHECKING:
    from pydantic import TypeAdapter

logger = logging.getLogger("queue_batch.entry")


@dataclass(frozen=True)
class FieldKeys:
    """Names of the three fields read from every entry."""

    id: str = "id"
    timestamp: str = "timestamp"
    body: str = "body"


DEFAULT_FIELD_KEYS = FieldKeys()

_MISSING = object()


def read_field(entry: Any, key: str) -> Any:
    """Return field *key* of *entry* or raise FieldAccessError.

    Mappings are read by key, ``IFieldReadable`` entries through
    ``get_field`` and anything else by attribute.
    """
    try:
        if isinstance(entry, Mapping):
            value = entry.get(key, _MISSING)
        elif isinstance(entry, IFieldReadable):
            value = entry.get_field(key)
        else:
            value = getattr(entry, key, _MISSING)
    except KeyError:
        value = _MISSING
    except Exception as e:  # noqa: BLE001
        raise FieldAccessError(key, reason=str(e)) from e
    if value is _MISSING:
        raise FieldAccessError(key, reason="field is absent")
    return value


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def to_datetime(value: Any, field_name: str = "timestamp") -> datetime:
    """Convert a host time value to a datetime.

    Numbers are milliseconds since the Unix epoch. Values without an offset
    are taken as UTC, so every timestamp in a batch is aware and comparable.
    The value is not checked for calendar sanity.
    """
    if isinstance(value, datetime):
        return _as_utc(value)
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        try:
            return datetime.fromtimestamp(value / 1000, tz=timezone.utc)
        except (OverflowError, OSError, ValueError) as e:
            raise FieldAccessError(field_name, reason=str(e)) from e
    if isinstance(value, str):
        try:
            parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
        except ValueError as e:
            raise FieldAccessError(field_name, reason=str(e)) from e
        return _as_utc(parsed)
    raise FieldAccessError(
        field_name,
        reason=f"cannot convert {type(value).__name__} to a time value",
    )


def parse_message(
    entry: Any,
    keys: FieldKeys,
    adapter: TypeAdapter[Any],
    *,
    strict: bool | None = None,
) -> Message[Any]:
    """Decode one entry into a Message.

    Raises:
        FieldAccessError: timestamp or body unreachable, or timestamp unusable.
        MissingIdentifierError: id absent or not a string.
        DeserializationError: body does not validate against the adapter.
    """
    timestamp = to_datetime(read_field(entry, keys.timestamp), keys.timestamp)

    try:
        msg_id = read_field(entry, keys.id)
    except FieldAccessError as e:
        raise MissingIdentifierError() from e
    if not isinstance(msg_id, str):
        raise MissingIdentifierError(type(msg_id).__name__)

    body = load_with(adapter, read_field(entry, keys.body), strict=strict)

    return Message(id=msg_id, timestamp=timestamp, body=body)
