"""Env — resolve named queue bindings supplied by the host configuration."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from .exceptions import BindingError
from .ports import IMessageTransport
from .producer import QueueProducer

if TYPE_CHECKING:
    from collections.abc import Mapping

    from .serialization import PayloadSerializer


class Env:
    """Named bindings handed to the application by the host.

    Usage::

        env = Env({"ORDERS": orders_transport})
        producer = env.queue("ORDERS")
        await producer.send(OrderPlaced(order_id="o-1"))
    """

    def __init__(
        self,
        bindings: Mapping[str, Any],
        *,
        serializer: PayloadSerializer | None = None,
    ) -> None:
        self._bindings = dict(bindings)
        self._serializer = serializer

    def get(self, name: str) -> Any:
        """Return the raw binding registered under *name*."""
        try:
            return self._bindings[name]
        except KeyError:
            raise BindingError(name, "no such binding") from None

    def queue(self, name: str) -> QueueProducer:
        """Return a producer for the queue bound as *name*."""
        binding = self.get(name)
        if isinstance(binding, QueueProducer):
            return binding
        if not isinstance(binding, IMessageTransport):
            raise BindingError(
                name,
                f"expected a queue transport, got {type(binding).__name__}",
            )
        return QueueProducer(binding, name=name, serializer=self._serializer)

    def __contains__(self, name: object) -> bool:
        return name in self._bindings
