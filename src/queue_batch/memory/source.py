"""In-memory batch source and entry — stand-ins for host batch objects."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ..ports import IFieldReadable, IMessageBatchSource

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence


class InMemoryEntry(IFieldReadable):
    """Entry whose fields are read through ``get_field`` like a host object."""

    def __init__(self, **fields: Any) -> None:
        self._fields = fields

    def get_field(self, name: str) -> Any:
        return self._fields[name]

    def __repr__(self) -> str:
        return f"InMemoryEntry({self._fields!r})"


class InMemoryBatchSource(IMessageBatchSource):
    """Batch source holding entries in a list and recording retry requests.

    ``retry_requested`` is what a host would consult after the handler
    returns; ``retry_calls`` counts calls for assertions.
    """

    def __init__(self, queue: str, messages: Iterable[Any] = ()) -> None:
        self._queue = queue
        self._messages = list(messages)
        self.retry_calls = 0

    @property
    def queue(self) -> str:
        return self._queue

    @property
    def messages(self) -> Sequence[Any]:
        return self._messages

    def retry_all(self) -> None:
        self.retry_calls += 1

    @property
    def retry_requested(self) -> bool:
        return self.retry_calls > 0
