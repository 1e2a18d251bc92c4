"""MessageBatch — typed view over one host-delivered batch."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from .entry import DEFAULT_FIELD_KEYS
from .iterator import MessageIterator
from .serialization import default_serializer

if TYPE_CHECKING:
    from collections.abc import Iterator

    from .entry import FieldKeys
    from .message import MessageResult
    from .ports import IMessageBatchSource
    from .serialization import PayloadSerializer

logger = logging.getLogger("queue_batch.batch")

T = TypeVar("T")


class MessageBatch(Generic[T]):
    """A batch of queued messages decoded lazily into ``Message[T]``.

    The entry list is captured once when the batch is built. Entries keep the
    order the host delivered them in; that order is not guaranteed to match
    send order.

    Usage::

        async def on_batch(source: IMessageBatchSource) -> None:
            batch = MessageBatch(source, OrderPlaced)
            for result in batch.iter():
                message = result.unwrap()
                logger.info("%s %s %s", message.id, message.timestamp, message.body)
    """

    def __init__(
        self,
        source: IMessageBatchSource,
        body_type: type[T] | Any = Any,
        *,
        keys: FieldKeys = DEFAULT_FIELD_KEYS,
        serializer: PayloadSerializer | None = None,
    ) -> None:
        """Wrap a host batch.

        Args:
            source: The host batch object.
            body_type: Type every message body is decoded to.
            keys: Field names read from each entry.
            serializer: Provides cached TypeAdapters and the strictness used to
                decode bodies; defaults to the shared lax one.
        """
        self._source = source
        self._entries = tuple(source.messages)
        self._body_type = body_type
        self._keys = keys
        self._serializer = serializer or default_serializer

    @property
    def queue_name(self) -> str:
        """The name of the queue this batch belongs to."""
        return str(self._source.queue)

    def queue(self) -> str:
        """The name of the queue this batch belongs to."""
        return self.queue_name

    @property
    def body_type(self) -> Any:
        return self._body_type

    def retry_all(self) -> None:
        """Mark every message in the batch for redelivery.

        Takes effect after the handler returns; calling it more than once is
        the same as calling it once.
        """
        logger.info(
            "Marking batch from %s for retry (%d messages)",
            self.queue_name,
            len(self._entries),
        )
        self._source.retry_all()

    def iter(self, body_type: Any = None) -> MessageIterator[T]:
        """Return a fresh iterator over every entry.

        Args:
            body_type: Overrides the batch body type for this iterator only.
        """
        target = self._body_type if body_type is None else body_type
        adapter = self._serializer.adapter_for(target)
        return MessageIterator(
            self._entries,
            self._keys,
            adapter,
            strict=self._serializer.strict,
        )

    def __iter__(self) -> Iterator[MessageResult[T]]:
        return self.iter()

    def __reversed__(self) -> Iterator[MessageResult[T]]:
        return reversed(self.iter())

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"<MessageBatch queue={self.queue_name!r} size={len(self._entries)}>"
