"""
Module: http.py
Description: HTTP transport for the hosted queue service.

Sends authenticated JSON requests relative to a project's API root and
maps failures onto the client's error types.

Key Components:
- HttpTransport: httpx based implementation of the Transport protocol
- Status handling: non-2xx responses raise HTTPError
- Network handling: httpx timeouts and connection errors raise TransportError

Dependencies: httpx, typing
"""

from typing import Optional

import httpx

from ironqueue.config.clouds import Cloud
from ironqueue.errors import HTTPError, TransportError
from ironqueue.utils.logger import get_logger
from ironqueue.version import __version__

logger = get_logger(__name__)

USER_AGENT = f"ironqueue-python/{__version__}"


class HttpTransport:
    """
    HTTP client bound to one project on one cloud.

    Attributes:
        base_url: Project API root, e.g.
            https://mq-aws-us-east-1.iron.io:443/1/projects/<project_id>/

    Example:
        >>> with HttpTransport("proj", "token", IRON_AWS_US_EAST) as transport:
        ...     transport.get("queues/jobs/messages?n=1")
    """

    def __init__(
        self,
        project_id: str,
        token: str,
        cloud: Cloud,
        api_version: str = "1",
        timeout_seconds: int = 10,
        client: Optional[httpx.Client] = None
    ):
        """
        Initialize the transport.

        Args:
            project_id: Project the queues belong to
            token: OAuth token for the project
            cloud: Endpoint to send requests to
            api_version: API version path segment
            timeout_seconds: HTTP timeout in seconds
            client: Preconfigured httpx.Client to send requests with

        Raises:
            ValueError: If project_id or token is empty
        """
        if not project_id or not isinstance(project_id, str):
            raise ValueError("project_id must be a non-empty string")
        if not token or not isinstance(token, str):
            raise ValueError("token must be a non-empty string")

        self.base_url = f"{cloud.base_url}/{api_version}/projects/{project_id}/"
        self._client = client if client is not None else httpx.Client(
            timeout=httpx.Timeout(timeout_seconds, connect=timeout_seconds)
        )
        self._headers = {
            'Authorization': f'OAuth {token}',
            'Content-Type': 'application/json',
            'Accept': 'application/json',
            'User-Agent': USER_AGENT,
        }

        logger.info(
            "HTTP transport initialized",
            base_url=self.base_url,
            timeout_seconds=timeout_seconds
        )

    def get(self, path: str) -> str:
        return self._request("GET", path)

    def post(self, path: str, body: Optional[str] = None) -> str:
        # The service expects a JSON document on every POST
        return self._request("POST", path, body if body is not None else "{}")

    def delete(self, path: str) -> str:
        return self._request("DELETE", path)

    def _request(self, method: str, path: str, body: Optional[str] = None) -> str:
        """
        Send one request and return the response body.

        Raises:
            HTTPError: If the service returns a non-2xx status
            TransportError: If no response was received
        """
        url = self.base_url + path

        logger.debug("Sending queue request", method=method, url=url)

        try:
            response = self._client.request(
                method,
                url,
                content=body,
                headers=self._headers
            )

        except httpx.TimeoutException as e:
            logger.warning("Queue request timeout", method=method, url=url)
            raise TransportError(f"{method} {path} timed out") from e

        except httpx.HTTPError as e:
            logger.warning(
                "Queue request network error",
                method=method,
                url=url,
                error=str(e)
            )
            raise TransportError(f"{method} {path} failed: {e}") from e

        if not response.is_success:
            logger.warning(
                "Queue request HTTP error",
                method=method,
                url=url,
                status_code=response.status_code,
                response=response.text[:500]
            )
            raise HTTPError(response.status_code, response.text)

        logger.debug(
            "Queue request completed",
            method=method,
            url=url,
            status_code=response.status_code
        )
        return response.text

    def close(self) -> None:
        """Release the underlying HTTP connections."""
        self._client.close()

    def __enter__(self) -> "HttpTransport":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
