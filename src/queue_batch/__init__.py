"""queue-batch — typed consumption of host-delivered message batches and queue producers.

Pydantic is used for body validation and serialization.
"""

from __future__ import annotations

from .batch import MessageBatch
from .bindings import Env
from .entry import DEFAULT_FIELD_KEYS, FieldKeys, parse_message, read_field
from .exceptions import (
    BindingError,
    DecodeError,
    DeserializationError,
    FieldAccessError,
    MissingIdentifierError,
    ProducerError,
    QueueBatchError,
    SerializationError,
    TransportError,
)
from .handler import BatchHandler, queue_handler
from .iterator import MessageIterator
from .message import Message, MessageResult
from .ports import IFieldReadable, IMessageBatchSource, IMessageTransport
from .producer import QueueProducer
from .serialization import PayloadSerializer

__all__ = [
    "DEFAULT_FIELD_KEYS",
    "BatchHandler",
    "BindingError",
    "DecodeError",
    "DeserializationError",
    "Env",
    "FieldAccessError",
    "FieldKeys",
    "IFieldReadable",
    "IMessageBatchSource",
    "IMessageTransport",
    "Message",
    "MessageBatch",
    "MessageIterator",
    "MessageResult",
    "MissingIdentifierError",
    "PayloadSerializer",
    "ProducerError",
    "QueueBatchError",
    "QueueProducer",
    "SerializationError",
    "TransportError",
    "parse_message",
    "queue_handler",
    "read_field",
]
