"""Decoded message and per-entry result wrappers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Generic, TypeVar

if TYPE_CHECKING:
    from datetime import datetime

    from .exceptions import DecodeError

T = TypeVar("T")


@dataclass(frozen=True)
class Message(Generic[T]):
    """One decoded queue message."""

    id: str
    timestamp: datetime
    body: T


@dataclass(frozen=True)
class MessageResult(Generic[T]):
    """Outcome of decoding a single batch entry.

    Exactly one of ``message`` and ``error`` is set.

    Usage::

        for result in batch.iter():
            if not result.is_ok:
                logger.warning("skipping entry: %s", result.error)
                continue
            handle(result.message)
    """

    message: Message[T] | None = None
    error: DecodeError | None = None

    def __post_init__(self) -> None:
        if (self.message is None) == (self.error is None):
            raise ValueError("MessageResult needs exactly one of message or error")

    @property
    def is_ok(self) -> bool:
        return self.error is None

    # ── Factory methods ──────────────────────────────────────────

    @classmethod
    def success(cls, message: Message[T]) -> MessageResult[T]:
        return cls(message=message)

    @classmethod
    def failure(cls, error: DecodeError) -> MessageResult[T]:
        return cls(error=error)

    # ── Access ───────────────────────────────────────────────────

    def unwrap(self) -> Message[T]:
        """Return the message, or raise the decode error for this entry."""
        if self.error is not None:
            raise self.error
        assert self.message is not None
        return self.message

    def __bool__(self) -> bool:
        return self.is_ok
