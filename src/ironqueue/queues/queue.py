"""
Module: queue.py
Description: Queue operations against the hosted queue service.

Translates push, get, delete and clear into transport requests and
decodes the responses into Message objects.

Key Components:
- Queue: Immutable handle binding a queue name, a transport and a page size
- Batching: push() sends one envelope per call, ids aligned with input
- Empty results: get() returns [] and get_one() returns None when the
  queue is empty; neither is an error

Dependencies: typing, urllib
"""

from typing import List, Optional, Sequence, Union
from urllib.parse import quote

from ironqueue.models.envelope import MessageBatch, decode_ids, decode_messages
from ironqueue.models.message import Message, new_message
from ironqueue.transport.protocols import Transport
from ironqueue.utils.logger import get_logger

logger = get_logger(__name__)

DEFAULT_MAX_PER_GET = 100


class Queue:
    """
    A named queue bound to a transport.

    The handle holds no mutable state, so one instance can be shared
    across threads. Use with_max_per_get() for a different page size.

    Attributes:
        name: Queue name
        max_per_get: Number of messages fetched by get() without a limit

    Example:
        >>> queue = client.queue("jobs")
        >>> ids = queue.push([new_message("a"), new_message("b")])
        >>> for message in queue.get():
        ...     queue.delete_message(message)
    """

    __slots__ = ("_name", "_transport", "_max_per_get")

    def __init__(self, name: str, transport: Transport, max_per_get: int = DEFAULT_MAX_PER_GET):
        """
        Initialize a queue handle.

        Args:
            name: Queue name
            transport: Transport requests are sent through
            max_per_get: Default number of messages fetched per get()

        Raises:
            ValueError: If name is empty or max_per_get is not positive
        """
        if not name or not isinstance(name, str):
            raise ValueError("name must be a non-empty string")
        _check_limit(max_per_get, "max_per_get")

        self._name = name
        self._transport = transport
        self._max_per_get = max_per_get

    @property
    def name(self) -> str:
        return self._name

    @property
    def max_per_get(self) -> int:
        return self._max_per_get

    def with_max_per_get(self, max_per_get: int) -> "Queue":
        """Return a handle on the same queue with a different default page size."""
        return Queue(self._name, self._transport, max_per_get)

    def get(self, limit: Optional[int] = None) -> List[Message]:
        """
        Retrieve up to limit messages from the queue.

        Args:
            limit: Maximum number of messages, defaults to max_per_get

        Returns:
            Messages in service order, empty list when none are available

        Raises:
            ValueError: If limit is not positive
            HTTPError: If the service returns a non-success status
            DecodeError: If the response is not a message batch
        """
        if limit is None:
            limit = self._max_per_get
        _check_limit(limit, "limit")

        body = self._transport.get(f"{self._messages_path()}?n={limit}")
        messages = decode_messages(body)

        if len(messages) > limit:
            logger.warning(
                "Service returned more messages than requested",
                queue=self._name,
                limit=limit,
                count=len(messages)
            )
            messages = messages[:limit]

        logger.debug("Messages fetched", queue=self._name, limit=limit, count=len(messages))
        return messages

    def get_one(self) -> Optional[Message]:
        """
        Retrieve a single message.

        Returns:
            The next message, or None if the queue is empty
        """
        messages = self.get(1)
        if not messages:
            return None
        return messages[0]

    def push(self, messages: Sequence[Message]) -> List[str]:
        """
        Push a batch of messages.

        The batch is sent as one request with no size checking; a batch
        over the service's request limit fails with an HTTPError. A failed
        request means none of the batch was enqueued.

        Args:
            messages: Messages to enqueue, ids are ignored

        Returns:
            Assigned ids, ids[i] belongs to messages[i]

        Raises:
            ValueError: If messages is empty
            HTTPError: If the service returns a non-success status
            DecodeError: If the response is not an id list for the batch
        """
        messages = list(messages)
        if not messages:
            raise ValueError("messages must be a non-empty sequence")

        for message in messages:
            if not isinstance(message, Message):
                raise ValueError("messages must contain only Message instances")

        body = self._transport.post(self._messages_path(), MessageBatch(messages=messages).to_wire())
        ids = decode_ids(body, expected=len(messages))

        logger.info("Messages pushed", queue=self._name, count=len(ids))
        return ids

    def push_message(self, message: Message) -> str:
        """Push one message and return its id."""
        return self.push([message])[0]

    def push_body(self, body: str, timeout: int = 0, delay: int = 0, expires_in: int = 0) -> str:
        """
        Push one message built from a body string.

        Args:
            body: Message payload
            timeout: Reservation timeout in seconds
            delay: Delivery delay in seconds
            expires_in: Expiration offset in seconds

        Returns:
            The new message's id
        """
        return self.push_message(new_message(body, timeout=timeout, delay=delay, expires_in=expires_in))

    def delete_message(self, id_or_message: Union[str, Message]) -> None:
        """
        Delete a message from the queue.

        Deleting an unknown or already deleted id raises whatever error the
        service returns.

        Args:
            id_or_message: Message id, or a Message carrying one

        Raises:
            ValueError: If the id is empty
            HTTPError: If the service returns a non-success status
        """
        message_id = id_or_message.id if isinstance(id_or_message, Message) else id_or_message
        if not message_id or not isinstance(message_id, str):
            raise ValueError("message id must be a non-empty string")

        self._transport.delete(f"{self._messages_path()}/{quote(message_id, safe='')}")
        logger.debug("Message deleted", queue=self._name, message_id=message_id)

    def clear(self) -> None:
        """
        Remove every message from the queue.

        Raises:
            HTTPError: If the service returns a non-success status
        """
        self._transport.post(f"queues/{quote(self._name, safe='')}/clear")
        logger.info("Queue cleared", queue=self._name)

    def _messages_path(self) -> str:
        return f"queues/{quote(self._name, safe='')}/messages"

    def __repr__(self) -> str:
        return f"Queue(name={self._name!r}, max_per_get={self._max_per_get})"


def _check_limit(value: int, field: str) -> None:
    # bool is an int subclass
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise ValueError(f"{field} must be a positive integer")
