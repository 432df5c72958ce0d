"""
Custom exceptions for httphelper
"""


class HttpHelperError(Exception):
    """Base exception for all httphelper errors"""

    pass


class UrlConstructionError(HttpHelperError):
    """
    Raised when a request URL cannot be built from its parts.

    This includes:
    - Port outside the 0-65535 range (or not an integer)
    - Resulting URL longer than the configured maximum length
    """

    def __init__(
        self,
        message: str,
        host: str | None = None,
        port: int | None = None,
        path: str | None = None,
    ):
        self.host = host
        self.port = port
        self.path = path
        super().__init__(message)


class UrlParseError(HttpHelperError):
    """
    Raised when a URL string cannot be decomposed.

    No partially parsed values are exposed when this is raised.
    """

    def __init__(self, message: str, url: str | None = None):
        self.url = url
        if url is not None:
            super().__init__(f"Cannot parse URL '{url}': {message}")
        else:
            super().__init__(f"Cannot parse URL: {message}")


class ResponseBufferError(HttpHelperError):
    """Raised when the response buffer fails to grow"""

    def __init__(self, message: str, size: int | None = None):
        self.size = size
        super().__init__(message)


class TransportInitError(HttpHelperError):
    """Raised when a transport handle could not be created"""

    pass


class ConfigurationError(HttpHelperError):
    """
    Raised when configuration values are missing or invalid.
    """

    def __init__(self, message: str, config_key: str | None = None):
        self.config_key = config_key
        if config_key:
            super().__init__(f"Configuration error for '{config_key}': {message}")
        else:
            super().__init__(f"Configuration error: {message}")
