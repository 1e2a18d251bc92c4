"""Tests for PayloadSerializer."""

from __future__ import annotations

from dataclasses import dataclass

import pytest

from queue_batch.exceptions import DeserializationError, SerializationError
from queue_batch.serialization import PayloadSerializer

from .conftest import Point


@dataclass
class Pair:
    left: str
    right: int


def test_adapter_is_cached() -> None:
    ser = PayloadSerializer()
    assert ser.adapter_for(Point) is ser.adapter_for(Point)


def test_load_model_and_dataclass() -> None:
    ser = PayloadSerializer()
    assert ser.load({"x": 5}, Point) == Point(x=5)
    assert ser.load({"left": "a", "right": 1}, Pair) == Pair("a", 1)
    assert ser.load([1, 2], list[int]) == [1, 2]


def test_load_invalid_carries_errors() -> None:
    ser = PayloadSerializer()
    with pytest.raises(DeserializationError) as exc_info:
        ser.load({"x": "not-a-number"}, Point)
    errors = exc_info.value.errors
    assert errors
    assert errors[0]["loc"] == ("x",)


def test_dump_model_and_dataclass() -> None:
    ser = PayloadSerializer()
    assert ser.dump(Point(x=1)) == {"x": 1}
    assert ser.dump(Pair("a", 2)) == {"left": "a", "right": 2}


def test_dump_failure_wraps_cause() -> None:
    ser = PayloadSerializer()

    class Bad:
        pass

    with pytest.raises(SerializationError) as exc_info:
        ser.dump({"key": Bad()})
    assert exc_info.value.__cause__ is not None


def test_dump_type_pydantic_cannot_describe_wraps_cause() -> None:
    ser = PayloadSerializer()

    class Opaque:
        pass

    with pytest.raises(SerializationError) as exc_info:
        ser.dump(Opaque())
    assert exc_info.value.__cause__ is not None


def test_load_is_lax_by_default() -> None:
    assert PayloadSerializer().load({"x": "1"}, Point) == Point(x=1)


def test_load_strict_rejects_coercion() -> None:
    ser = PayloadSerializer(strict=True)
    assert ser.load({"x": 1}, Point) == Point(x=1)
    with pytest.raises(DeserializationError) as exc_info:
        ser.load({"x": "1"}, Point)
    assert exc_info.value.errors[0]["loc"] == ("x",)
