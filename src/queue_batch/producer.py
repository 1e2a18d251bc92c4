"""QueueProducer — serialize values and submit them to a host queue."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from .exceptions import TransportError
from .serialization import default_serializer

if TYPE_CHECKING:
    from collections.abc import Iterable

    from .ports import IMessageTransport
    from .serialization import PayloadSerializer

logger = logging.getLogger("queue_batch.producer")


class QueueProducer:
    """Handle onto a named outbound queue.

    Holds no state besides the transport, so one producer can serve any number
    of concurrent sends. Sends are not retried; ordering between in-flight
    sends is up to the host transport.
    """

    def __init__(
        self,
        transport: IMessageTransport,
        *,
        name: str | None = None,
        serializer: PayloadSerializer | None = None,
    ) -> None:
        """Configure the producer.

        Args:
            transport: Host transport for the target queue.
            name: Binding name, used in logs and errors.
            serializer: Encodes outgoing values; defaults to the shared one.
        """
        self._transport = transport
        self._name = name
        self._serializer = serializer or default_serializer

    @property
    def name(self) -> str | None:
        return self._name

    @property
    def transport(self) -> IMessageTransport:
        return self._transport

    async def send(self, value: Any) -> None:
        """Send a message to the queue.

        Raises:
            SerializationError: *value* cannot be encoded. The host is not called.
            TransportError: The host rejected the submission.
        """
        payload = self._serializer.dump(value)
        await self._submit(payload)

    async def send_batch(self, values: Iterable[Any]) -> None:
        """Send several messages, in order.

        Every value is encoded before anything is submitted, so a
        SerializationError means nothing was sent. A TransportError carries
        the number of submissions the host accepted in ``sent``.
        """
        payloads = [self._serializer.dump(value) for value in values]
        for sent, payload in enumerate(payloads):
            await self._submit(payload, sent=sent)
        logger.debug("Sent %d messages to %s", len(payloads), self._name)

    async def _submit(self, payload: Any, *, sent: int = 0) -> None:
        try:
            await self._transport.send(payload)
        except Exception as e:
            logger.warning("Queue %s rejected message: %s", self._name, e)
            raise TransportError(str(e), queue_name=self._name, sent=sent) from e

    def __repr__(self) -> str:
        return f"<QueueProducer name={self._name!r}>"
