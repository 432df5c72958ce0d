"""
Request executor: one blocking GET or POST per call

The response body is streamed into a ResponseBuffer chunk by chunk and
returned together with the transport result code. Transport failures are
reported through the result code, never raised.
"""

from collections.abc import Iterator

import requests

from . import transport
from .buffer import ResponseBuffer
from .config import Config, config
from .exceptions import ConfigurationError, ResponseBufferError, TransportInitError
from .http_client import HttpClient
from .logging_config import get_module_logger
from .request_body import DEFAULT_CHUNK_SIZE, RequestBodyReader
from .result_codes import ResultCode, from_exception
from .url_builder import build_url
from .url_parser import with_scheme

logger = get_module_logger("executor")

DEFAULT_MAX_URL_LENGTH = 8192

# Sent on every POST, whatever the body holds. The "charsets" header
# name is sent verbatim.
JSON_HEADERS = {
    "Accept": "application/json",
    "Content-Type": "application/json",
    "charsets": "utf-8",
}


class TransferResult:
    """
    Outcome of one transfer.

    Unpacks as ``(status, body)``. ``body`` is always a bytes object of its
    own, empty when the transfer failed.
    """

    def __init__(
        self,
        status: ResultCode,
        body: bytes = b"",
        http_status: int | None = None,
        error: BaseException | None = None,
    ):
        self.status = status
        self.body = body
        self.http_status = http_status
        self.error = error

    @property
    def ok(self) -> bool:
        return self.status == ResultCode.OK

    @property
    def text(self) -> str:
        return self.body.decode("utf-8", errors="replace")

    def __iter__(self) -> Iterator:
        return iter((self.status, self.body))

    def __repr__(self) -> str:
        return (
            f"TransferResult(status={self.status.name}, http_status={self.http_status}, "
            f"body={len(self.body)} bytes)"
        )


def get(
    host: str,
    port: int,
    path: str,
    http_client: HttpClient | None = None,
    config_obj: Config | None = None,
) -> TransferResult:
    """
    Send a GET request to ``<host>:<port>/<path>``.

    Args:
        host: Host name, optionally with a scheme
        port: Port number
        path: Request path; leading slashes are ignored
        http_client: HTTP client for making requests (optional, uses the
                     shared transport client if None)
        config_obj: Config object (optional, uses global config if None)

    Returns:
        TransferResult with the result code and the response body

    Raises:
        UrlConstructionError: If the URL cannot be built
        ConfigurationError: If transport.chunk_size is unusable
    """
    return _perform("GET", host, port, path, None, http_client, config_obj)


def post(
    host: str,
    port: int,
    path: str,
    json_body: str | bytes,
    http_client: HttpClient | None = None,
    config_obj: Config | None = None,
) -> TransferResult:
    """
    Send ``json_body`` as a JSON POST to ``<host>:<port>/<path>``.

    The body is passed through untouched (str is UTF-8 encoded) and its
    exact length is declared up front.

    Args:
        host: Host name, optionally with a scheme
        port: Port number
        path: Request path; leading slashes are ignored
        json_body: JSON document as text or bytes (may be empty)
        http_client: HTTP client for making requests (optional, uses the
                     shared transport client if None)
        config_obj: Config object (optional, uses global config if None)

    Returns:
        TransferResult with the result code and the response body

    Raises:
        UrlConstructionError: If the URL cannot be built
        ConfigurationError: If transport.chunk_size is unusable
    """
    return _perform("POST", host, port, path, json_body, http_client, config_obj)


def _perform(
    method: str,
    host: str,
    port: int,
    path: str,
    body: str | bytes | None,
    http_client: HttpClient | None,
    config_obj: Config | None,
) -> TransferResult:
    if config_obj is None:
        config_obj = config

    url = build_url(
        host,
        port,
        path,
        max_length=config_obj.get("transport.max_url_length", DEFAULT_MAX_URL_LENGTH),
    )
    target = with_scheme(url)
    chunk_size = config_obj.get("transport.chunk_size", DEFAULT_CHUNK_SIZE)
    if isinstance(chunk_size, bool) or not isinstance(chunk_size, int) or chunk_size <= 0:
        raise ConfigurationError(
            f"must be a positive integer, got {chunk_size!r}", config_key="transport.chunk_size"
        )

    if http_client is None:
        try:
            http_client = transport.get_client(config_obj)
        except TransportInitError as e:
            logger.error(f"{method} {target}: could not initialize transport: {e}")
            return TransferResult(ResultCode.FAILED_INIT, error=e)

    buffer = ResponseBuffer()
    logger.debug(f"{method} {target}")

    try:
        if method == "POST":
            reader = RequestBodyReader(body, chunk_size=chunk_size)
            # An empty stream would be sent chunked; plain b"" declares length 0
            data = reader if len(reader) else b""
            response = http_client.post(target, headers=dict(JSON_HEADERS), data=data)
        else:
            response = http_client.get(target)

        try:
            for chunk in response.iter_content(chunk_size=chunk_size):
                consumed = buffer.write(chunk)
                if consumed != len(chunk):
                    error = ResponseBufferError(
                        f"Response buffer consumed {consumed} of {len(chunk)} bytes",
                        size=buffer.size,
                    )
                    logger.error(f"{method} {target} aborted: {error}")
                    buffer.clear()
                    return TransferResult(
                        ResultCode.WRITE_ERROR, http_status=response.status_code, error=error
                    )
        finally:
            response.close()

    except (requests.exceptions.RequestException, MemoryError) as e:
        code = from_exception(e)
        logger.error(f"{method} {target} failed: {code.describe()}: {e}")
        return TransferResult(code, error=e)

    logger.debug(f"{method} {target} -> HTTP {response.status_code}, {buffer.size} bytes")
    return TransferResult(ResultCode.OK, buffer.getvalue(), http_status=response.status_code)
