"""Narrow ports onto the host platform.

Host runtimes provide concrete objects; ``queue_batch.memory`` provides fakes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Sequence


@runtime_checkable
class IFieldReadable(Protocol):
    """
    An opaque host entry with fields reachable by name.

    Plain mappings and objects exposing the fields as attributes are
    accepted too; see :func:`queue_batch.entry.read_field`.
    """

    def get_field(self, name: str) -> Any:
        """
        Return the value of field *name*.

        Raises:
            KeyError: If the entry has no such field.
        """
        ...


@runtime_checkable
class IMessageBatchSource(Protocol):
    """
    The batch object handed over by the host for one invocation.
    """

    @property
    def queue(self) -> str:
        """Name of the queue the batch was delivered from."""
        ...

    @property
    def messages(self) -> Sequence[Any]:
        """Entries in delivery order. Fixed length for the batch lifetime."""
        ...

    def retry_all(self) -> None:
        """Ask the host to redeliver the whole batch once the handler returns."""
        ...


@runtime_checkable
class IMessageTransport(Protocol):
    """
    Port for submitting a payload to a named outbound queue.
    """

    async def send(self, payload: Any) -> None:
        """
        Submit *payload* and wait for the host to acknowledge it.

        Raises:
            Exception: Any exception signals the host rejected the submission.
        """
        ...
