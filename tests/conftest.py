"""Pytest fixtures for queue-batch tests."""

from __future__ import annotations

import sys
from datetime import datetime, timezone
from pathlib import Path

import pytest
from pydantic import BaseModel

# Ensure the package is importable when running pytest from a checkout
# without an editable install
_src = Path(__file__).resolve().parent.parent / "src"
if _src.is_dir() and str(_src) not in sys.path:
    sys.path.insert(0, str(_src))

from queue_batch.memory import InMemoryBatchSource, InMemoryTransport  # noqa: E402

T1_MS = 1_700_000_000_000
T2_MS = 1_700_000_060_000


class Point(BaseModel):
    """Body type used across the tests."""

    x: int


@pytest.fixture
def t1() -> datetime:
    return datetime.fromtimestamp(T1_MS / 1000, tz=timezone.utc)


@pytest.fixture
def well_formed_source() -> InMemoryBatchSource:
    return InMemoryBatchSource(
        "points",
        [
            {"id": f"m{i}", "timestamp": T1_MS + i, "body": {"x": i}}
            for i in range(5)
        ],
    )


@pytest.fixture
def mixed_source() -> InMemoryBatchSource:
    return InMemoryBatchSource(
        "points",
        [
            {"id": "a", "timestamp": T1_MS, "body": {"x": 1}},
            {"id": "b", "timestamp": T2_MS, "body": "not-an-x"},
        ],
    )


@pytest.fixture
def transport() -> InMemoryTransport:
    return InMemoryTransport()
