"""In-memory host fakes for testing."""

from __future__ import annotations

from .source import InMemoryBatchSource, InMemoryEntry
from .transport import InMemoryTransport

__all__ = [
    "InMemoryBatchSource",
    "InMemoryEntry",
    "InMemoryTransport",
]
