"""HTTP client abstraction for dependency injection and testability."""

from typing import Any

import requests

from .exceptions import TransportInitError


class HttpClient:
    """
    HTTP client wrapper for making requests.

    This abstraction enables:
    - Dependency injection for testing
    - Easy mocking in unit tests
    - Centralized transport settings (timeout, TLS verification)

    Each call goes through ``requests.get``/``requests.post``, which open and
    close their own session, so no connection is reused between calls.
    """

    def __init__(self, timeout: float | None = None, verify: bool = True):
        """
        Args:
            timeout: Request timeout in seconds (None waits indefinitely)
            verify: Whether TLS certificates are verified

        Raises:
            TransportInitError: If a setting is unusable
        """
        if timeout is not None and (
            isinstance(timeout, bool) or not isinstance(timeout, int | float) or timeout <= 0
        ):
            raise TransportInitError(f"timeout must be a positive number or None, got {timeout!r}")

        self.timeout = timeout
        self.verify = verify

    def get(
        self,
        url: str,
        headers: dict[str, str] | None = None,
        stream: bool = True,
        **kwargs,
    ) -> requests.Response:
        """
        Send a GET request.

        Args:
            url: URL to request
            headers: Optional HTTP headers
            stream: Defer downloading the body until it is iterated
            **kwargs: Additional arguments to pass to requests.get()

        Returns:
            requests.Response object
        """
        return requests.get(
            url,
            headers=headers,
            stream=stream,
            timeout=self.timeout,
            verify=self.verify,
            allow_redirects=False,
            **kwargs,
        )

    def post(
        self,
        url: str,
        headers: dict[str, str] | None = None,
        data: Any | None = None,
        stream: bool = True,
        **kwargs,
    ) -> requests.Response:
        """
        Send a POST request.

        Args:
            url: URL to request
            headers: Optional HTTP headers
            data: Body to send (bytes or a sized iterable of bytes)
            stream: Defer downloading the body until it is iterated
            **kwargs: Additional arguments to pass to requests.post()

        Returns:
            requests.Response object
        """
        return requests.post(
            url,
            headers=headers,
            data=data,
            stream=stream,
            timeout=self.timeout,
            verify=self.verify,
            allow_redirects=False,
            **kwargs,
        )
