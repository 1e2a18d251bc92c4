"""Exception hierarchy for queue-batch."""

from __future__ import annotations

from typing import Any


class QueueBatchError(Exception):
    """Root exception for the queue-batch package."""


# ── Decode errors (per entry, never raised through iteration) ────────


class DecodeError(QueueBatchError):
    """Base class for failures decoding a single batch entry.

    Instances are returned inside a ``MessageResult`` for the slot that failed;
    the iterator stays usable for the remaining entries.
    """


class MissingIdentifierError(DecodeError):
    """Raised when an entry has no string ``id``."""

    def __init__(self, found_type: str | None = None) -> None:
        self.found_type = found_type
        msg = "Invalid message batch. Failed to get id from message."
        if found_type is not None:
            msg += f" (got {found_type})"
        super().__init__(msg)


class FieldAccessError(DecodeError):
    """Raised when a required field is structurally unreachable on an entry.

    Signals that the host violated its contract, as opposed to a message that
    is itself malformed.
    """

    def __init__(self, field_name: str, reason: str | None = None) -> None:
        self.field_name = field_name
        self.reason = reason
        msg = f"Failed to read field {field_name!r} from message"
        if reason:
            msg += f": {reason}"
        super().__init__(msg)


class DeserializationError(DecodeError):
    """Raised when a payload does not match the requested body type.

    Carries the structured pydantic diagnostics in ``errors``.
    """

    def __init__(
        self,
        message: str,
        errors: list[dict[str, Any]] | None = None,
    ) -> None:
        self.errors = errors or []
        super().__init__(message)


# ── Producer errors ──────────────────────────────────────────────────


class ProducerError(QueueBatchError):
    """Base class for failures on the send path."""


class SerializationError(ProducerError):
    """Raised when an outgoing value cannot be encoded.

    Raised before any host round trip.
    """


class TransportError(ProducerError):
    """Raised when the host transport rejects or fails a submission."""

    def __init__(
        self,
        message: str,
        queue_name: str | None = None,
        sent: int = 0,
    ) -> None:
        self.queue_name = queue_name
        self.sent = sent
        super().__init__(message)


# ── Configuration ────────────────────────────────────────────────────


class BindingError(QueueBatchError):
    """Raised when a named queue binding cannot be resolved."""

    def __init__(self, binding_name: str, reason: str) -> None:
        self.binding_name = binding_name
        super().__init__(f"Binding {binding_name!r}: {reason}")
