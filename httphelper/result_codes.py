"""
Transport result codes

Every transfer ends with one of these codes. ``OK`` means the transfer
completed, whatever the HTTP status of the response was.
"""

from enum import IntEnum
from http.client import IncompleteRead

import requests
from urllib3.exceptions import ReadTimeoutError


class ResultCode(IntEnum):
    OK = 0
    UNSUPPORTED_PROTOCOL = 1
    FAILED_INIT = 2
    URL_MALFORMAT = 3
    COULDNT_RESOLVE_PROXY = 5
    COULDNT_RESOLVE_HOST = 6
    COULDNT_CONNECT = 7
    PARTIAL_FILE = 18
    WRITE_ERROR = 23
    READ_ERROR = 26
    OUT_OF_MEMORY = 27
    OPERATION_TIMEDOUT = 28
    SSL_CONNECT_ERROR = 35
    TOO_MANY_REDIRECTS = 47
    GOT_NOTHING = 52
    SEND_ERROR = 55
    RECV_ERROR = 56

    def describe(self) -> str:
        """Short human readable description of the code"""
        return _DESCRIPTIONS[self]


_DESCRIPTIONS = {
    ResultCode.OK: "No error",
    ResultCode.UNSUPPORTED_PROTOCOL: "Unsupported protocol",
    ResultCode.FAILED_INIT: "Failed initialization",
    ResultCode.URL_MALFORMAT: "URL using bad/illegal format or missing URL",
    ResultCode.COULDNT_RESOLVE_PROXY: "Couldn't resolve proxy name",
    ResultCode.COULDNT_RESOLVE_HOST: "Couldn't resolve host name",
    ResultCode.COULDNT_CONNECT: "Couldn't connect to server",
    ResultCode.PARTIAL_FILE: "Transferred a partial file",
    ResultCode.WRITE_ERROR: "Failed writing received data to disk/application",
    ResultCode.READ_ERROR: "Failed to open/read local data from file/application",
    ResultCode.OUT_OF_MEMORY: "Out of memory",
    ResultCode.OPERATION_TIMEDOUT: "Timeout was reached",
    ResultCode.SSL_CONNECT_ERROR: "SSL connect error",
    ResultCode.TOO_MANY_REDIRECTS: "Number of redirects hit maximum amount",
    ResultCode.GOT_NOTHING: "Server returned nothing (no headers, no data)",
    ResultCode.SEND_ERROR: "Failed sending data to the peer",
    ResultCode.RECV_ERROR: "Failure when receiving data from the peer",
}

# Name fragments of the underlying errors that signal a failed name lookup
_RESOLVE_MARKERS = (
    "NameResolutionError",
    "Name or service not known",
    "nodename nor servname",
    "getaddrinfo failed",
    "Temporary failure in name resolution",
    "No address associated with hostname",
)


def _caused_by(error: BaseException, cause: type | tuple[type, ...]) -> bool:
    """True if ``cause`` appears among the wrapped arguments of ``error``"""
    pending = [error]
    seen = 0
    while pending and seen < 8:
        current = pending.pop()
        seen += 1
        if isinstance(current, cause):
            return True
        if isinstance(current, BaseException):
            pending.extend(arg for arg in current.args if isinstance(arg, BaseException))
    return False


def from_exception(error: BaseException) -> ResultCode:
    """
    Map a ``requests`` exception onto a result code.

    Order matters: several ``requests`` exceptions subclass each other
    (``SSLError`` and ``ConnectTimeout`` are ``ConnectionError``s).
    """
    if isinstance(error, MemoryError):
        return ResultCode.OUT_OF_MEMORY
    if isinstance(error, requests.exceptions.SSLError):
        return ResultCode.SSL_CONNECT_ERROR
    if isinstance(error, requests.exceptions.ProxyError):
        return ResultCode.COULDNT_RESOLVE_PROXY
    if isinstance(error, requests.exceptions.Timeout):
        return ResultCode.OPERATION_TIMEDOUT
    if isinstance(error, requests.exceptions.ConnectionError):
        text = f"{error!r} {error}"
        # A read timeout while streaming the body arrives as a plain ConnectionError
        if _caused_by(error, ReadTimeoutError) or "Read timed out" in text:
            return ResultCode.OPERATION_TIMEDOUT
        if any(marker in text for marker in _RESOLVE_MARKERS):
            return ResultCode.COULDNT_RESOLVE_HOST
        if "RemoteDisconnected" in text or "BadStatusLine" in text:
            return ResultCode.GOT_NOTHING
        if "Connection aborted" in text or "Connection reset" in text:
            return ResultCode.RECV_ERROR
        return ResultCode.COULDNT_CONNECT
    if isinstance(error, requests.exceptions.ChunkedEncodingError) and (
        _caused_by(error, IncompleteRead) or "IncompleteRead" in f"{error!r} {error}"
    ):
        return ResultCode.PARTIAL_FILE
    if isinstance(error, requests.exceptions.ChunkedEncodingError | requests.exceptions.ContentDecodingError):
        return ResultCode.RECV_ERROR
    if isinstance(error, requests.exceptions.TooManyRedirects):
        return ResultCode.TOO_MANY_REDIRECTS
    if isinstance(error, requests.exceptions.InvalidSchema):
        return ResultCode.UNSUPPORTED_PROTOCOL
    if isinstance(
        error,
        requests.exceptions.MissingSchema
        | requests.exceptions.InvalidURL
        | requests.exceptions.URLRequired
        | requests.exceptions.InvalidHeader,
    ):
        return ResultCode.URL_MALFORMAT
    if isinstance(error, requests.exceptions.StreamConsumedError):
        return ResultCode.READ_ERROR
    return ResultCode.SEND_ERROR
