"""MessageIterator — lazy, double-ended, per-entry fallible decoding."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Generic, TypeVar, overload

from .entry import parse_message
from .exceptions import DecodeError
from .message import MessageResult

if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence

    from pydantic import TypeAdapter

    from .entry import FieldKeys

logger = logging.getLogger("queue_batch.iterator")

T = TypeVar("T")
D = TypeVar("D")


class MessageIterator(Generic[T]):
    """Decodes the entries in ``[low, high)`` one at a time, from either end.

    Every step yields a :class:`MessageResult`; an entry that fails to decode
    yields a failed result and the remaining entries are still reachable.
    Once ``low == high`` the iterator stays exhausted. Create a new one from
    the batch to traverse again.
    """

    __slots__ = ("_entries", "_keys", "_adapter", "_strict", "_low", "_high")

    def __init__(
        self,
        entries: Sequence[Any],
        keys: FieldKeys,
        adapter: TypeAdapter[T],
        *,
        strict: bool | None = None,
    ) -> None:
        self._entries = entries
        self._keys = keys
        self._adapter = adapter
        self._strict = strict
        self._low = 0
        self._high = len(entries)

    def _decode(self, index: int) -> MessageResult[T]:
        try:
            message = parse_message(
                self._entries[index],
                self._keys,
                self._adapter,
                strict=self._strict,
            )
        except DecodeError as e:
            logger.debug("Entry %d failed to decode: %s", index, e)
            return MessageResult.failure(e)
        return MessageResult.success(message)

    def __iter__(self) -> MessageIterator[T]:
        return self

    def __next__(self) -> MessageResult[T]:
        if self._low >= self._high:
            raise StopIteration
        index = self._low
        self._low += 1
        return self._decode(index)

    @overload
    def next_back(self) -> MessageResult[T]: ...

    @overload
    def next_back(self, default: D) -> MessageResult[T] | D: ...

    def next_back(self, *default: Any) -> Any:
        """Decode the last remaining entry.

        Like the builtin ``next``, returns *default* when exhausted if one is
        given, otherwise raises StopIteration.
        """
        if self._low >= self._high:
            if default:
                return default[0]
            raise StopIteration
        self._high -= 1
        return self._decode(self._high)

    def __reversed__(self) -> Iterator[MessageResult[T]]:
        """Drain this iterator from the back.

        Shares the cursor, so forward steps taken meanwhile are not repeated.
        """
        while self._low < self._high:
            yield self.next_back()

    @property
    def remaining(self) -> int:
        return self._high - self._low

    def __len__(self) -> int:
        return self._high - self._low

    def __length_hint__(self) -> int:
        return self._high - self._low

    def __repr__(self) -> str:
        return f"<MessageIterator remaining={self.remaining}>"
