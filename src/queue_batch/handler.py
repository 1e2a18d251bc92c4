"""BatchHandler — adapt an application callback to raw host batches."""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from .batch import MessageBatch
from .entry import DEFAULT_FIELD_KEYS

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from .entry import FieldKeys
    from .ports import IMessageBatchSource

logger = logging.getLogger("queue_batch.handler")

T = TypeVar("T")


class BatchHandler(Generic[T]):
    """Wraps each host batch in a MessageBatch and awaits the callback.

    Extra positional and keyword arguments (environment, execution context)
    are forwarded unchanged.
    """

    def __init__(
        self,
        handler: Callable[..., Awaitable[Any]],
        body_type: type[T] | Any = Any,
        *,
        keys: FieldKeys = DEFAULT_FIELD_KEYS,
    ) -> None:
        self._handler = handler
        self._body_type = body_type
        self._keys = keys

    @property
    def handler(self) -> Callable[..., Awaitable[Any]]:
        return self._handler

    async def __call__(
        self,
        source: IMessageBatchSource,
        *args: Any,
        **kwargs: Any,
    ) -> Any:
        batch: MessageBatch[T] = MessageBatch(
            source, self._body_type, keys=self._keys
        )
        name = getattr(self._handler, "__name__", type(self._handler).__name__)
        logger.info(
            "Handling batch of %d from %s with %s",
            len(batch),
            batch.queue_name,
            name,
        )
        start = time.perf_counter()
        try:
            result = await self._handler(batch, *args, **kwargs)
        except Exception:
            elapsed = (time.perf_counter() - start) * 1000
            logger.exception("%s failed after %.2fms", name, elapsed)
            raise
        elapsed = (time.perf_counter() - start) * 1000
        logger.info("%s completed in %.2fms", name, elapsed)
        return result


def queue_handler(
    body_type: type[T] | Any = Any,
    *,
    keys: FieldKeys = DEFAULT_FIELD_KEYS,
) -> Callable[[Callable[..., Awaitable[Any]]], BatchHandler[T]]:
    """Decorator turning ``async def fn(batch, ...)`` into a BatchHandler.

    Usage::

        @queue_handler(OrderPlaced)
        async def on_orders(batch: MessageBatch[OrderPlaced], env: Env) -> None:
            for result in batch:
                ...
    """

    def decorator(fn: Callable[..., Awaitable[Any]]) -> BatchHandler[T]:
        return BatchHandler(fn, body_type, keys=keys)

    return decorator
