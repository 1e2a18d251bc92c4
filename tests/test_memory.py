"""Tests for the in-memory host fakes."""

from __future__ import annotations

import pytest

from queue_batch.memory import InMemoryBatchSource, InMemoryEntry, InMemoryTransport
from queue_batch.ports import IFieldReadable, IMessageBatchSource, IMessageTransport


def test_protocol_compliance() -> None:
    assert isinstance(InMemoryEntry(id="a"), IFieldReadable)
    assert isinstance(InMemoryBatchSource("q"), IMessageBatchSource)
    assert isinstance(InMemoryTransport(), IMessageTransport)


def test_entry_missing_field_raises_key_error() -> None:
    with pytest.raises(KeyError):
        InMemoryEntry(id="a").get_field("body")


def test_source_counts_retries() -> None:
    source = InMemoryBatchSource("q", [{"id": "a"}])
    assert source.queue == "q"
    assert len(source.messages) == 1
    source.retry_all()
    source.retry_all()
    assert source.retry_calls == 2
    assert source.retry_requested


@pytest.mark.asyncio
async def test_transport_records_and_clears() -> None:
    transport = InMemoryTransport()
    await transport.send({"a": 1})
    transport.assert_sent(1)
    with pytest.raises(AssertionError):
        transport.assert_sent(2)
    transport.clear()
    transport.assert_sent(0)
    assert transport.attempts == 0
