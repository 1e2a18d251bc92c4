"""InMemoryTransport — IMessageTransport with assertion helpers for tests."""

from __future__ import annotations

from typing import Any

from ..ports import IMessageTransport


class InMemoryTransport(IMessageTransport):
    """Records every accepted payload.

    Set ``reject_with`` to an exception to make subsequent sends fail the way
    a host rejection would; nothing is recorded for rejected sends.
    """

    def __init__(self, *, reject_with: BaseException | None = None) -> None:
        self._sent: list[Any] = []
        self.reject_with = reject_with
        self.attempts = 0

    async def send(self, payload: Any) -> None:
        """Accept *payload*, or raise ``reject_with`` if set."""
        self.attempts += 1
        if self.reject_with is not None:
            raise self.reject_with
        self._sent.append(payload)

    def get_sent(self) -> list[Any]:
        """Return all accepted payloads in submission order."""
        return list(self._sent)

    def assert_sent(self, count: int) -> None:
        """Assert that exactly `count` payloads were accepted."""
        assert len(self._sent) == count, (
            f"Expected {count} payload(s), got {len(self._sent)}: {self._sent!r}"
        )

    def clear(self) -> None:
        """Forget accepted payloads (for test teardown)."""
        self._sent.clear()
        self.attempts = 0
