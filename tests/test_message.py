"""Tests for Message and MessageResult."""

from __future__ import annotations

import dataclasses
from datetime import datetime, timezone

import pytest

from queue_batch.exceptions import MissingIdentifierError
from queue_batch.message import Message, MessageResult

NOW = datetime(2024, 1, 1, tzinfo=timezone.utc)


def test_message_is_immutable() -> None:
    message = Message(id="a", timestamp=NOW, body={"x": 1})
    with pytest.raises(dataclasses.FrozenInstanceError):
        message.id = "b"  # type: ignore[misc]


def test_success_result() -> None:
    message = Message(id="a", timestamp=NOW, body=1)
    result = MessageResult.success(message)
    assert result.is_ok
    assert result
    assert result.unwrap() is message


def test_failure_result() -> None:
    error = MissingIdentifierError()
    result: MessageResult[int] = MessageResult.failure(error)
    assert not result.is_ok
    assert result.error is error
    with pytest.raises(MissingIdentifierError):
        result.unwrap()


def test_result_needs_exactly_one_side() -> None:
    with pytest.raises(ValueError):
        MessageResult()
    with pytest.raises(ValueError):
        MessageResult(
            message=Message(id="a", timestamp=NOW, body=1),
            error=MissingIdentifierError(),
        )
