"""
Module: client.py
Description: Entry point binding credentials and a cloud to queue handles.

Key Components:
- Client: Owns the transport and hands out Queue handles
- Client.from_settings(): Build a client from IRON_* environment settings

Dependencies: typing
"""

from typing import Optional

from ironqueue.config.clouds import IRON_AWS_US_EAST, Cloud
from ironqueue.config.settings import Settings, get_settings
from ironqueue.queues.queue import DEFAULT_MAX_PER_GET, Queue
from ironqueue.transport.http import HttpTransport
from ironqueue.transport.protocols import Transport
from ironqueue.utils.logger import configure_logging, get_logger

logger = get_logger(__name__)


class Client:
    """
    Client for one project on the hosted queue service.

    Example:
        >>> with Client("project-id", "token") as client:
        ...     queue = client.queue("jobs")
        ...     queue.push_body("hello")
    """

    def __init__(
        self,
        project_id: str,
        token: str,
        cloud: Cloud = IRON_AWS_US_EAST,
        timeout_seconds: int = 10,
        api_version: str = "1",
        max_per_get: int = DEFAULT_MAX_PER_GET,
        transport: Optional[Transport] = None
    ):
        """
        Initialize the client.

        Args:
            project_id: Project the queues belong to
            token: OAuth token for the project
            cloud: Endpoint to send requests to
            timeout_seconds: HTTP timeout in seconds
            api_version: API version path segment
            max_per_get: Default page size for queues handed out by queue()
            transport: Transport to use instead of an HttpTransport

        Raises:
            ValueError: If project_id or token is empty
        """
        if not project_id or not isinstance(project_id, str):
            raise ValueError("project_id must be a non-empty string")
        if not token or not isinstance(token, str):
            raise ValueError("token must be a non-empty string")

        self.project_id = project_id
        self.cloud = cloud
        self.default_max_per_get = max_per_get
        self._owns_transport = transport is None
        self.transport = transport if transport is not None else HttpTransport(
            project_id,
            token,
            cloud,
            api_version=api_version,
            timeout_seconds=timeout_seconds
        )

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "Client":
        """
        Build a client from settings, configuring logging on the way.

        Args:
            settings: Settings to use, defaults to the environment settings
        """
        if settings is None:
            settings = get_settings()

        configure_logging(settings.log_level)
        client = cls(
            settings.project_id,
            settings.token,
            cloud=settings.resolve_cloud(),
            timeout_seconds=settings.timeout,
            api_version=settings.api_version,
            max_per_get=settings.max_per_get
        )
        return client

    def queue(self, name: str, max_per_get: Optional[int] = None) -> Queue:
        """
        Get a handle on a named queue.

        Args:
            name: Queue name
            max_per_get: Default page size for get(), defaults to the
                client's configured value

        Raises:
            ValueError: If name is empty or max_per_get is not positive
        """
        if max_per_get is None:
            max_per_get = self.default_max_per_get
        return Queue(name, self.transport, max_per_get)

    def close(self) -> None:
        """Close the transport if this client created it."""
        if self._owns_transport:
            self.transport.close()

    def __enter__(self) -> "Client":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
