"""
httphelper - blocking GET/POST helpers and a URL parser built on requests
"""

from .exceptions import (
    ConfigurationError,
    HttpHelperError,
    ResponseBufferError,
    TransportInitError,
    UrlConstructionError,
    UrlParseError,
)
from .executor import JSON_HEADERS, TransferResult, get, post
from .result_codes import ResultCode
from .transport import cleanup, init, is_initialized
from .url_builder import build_url
from .url_parser import ParsedUrl, parse_url

__version__ = "1.0.0"

__all__ = [
    "JSON_HEADERS",
    "ConfigurationError",
    "HttpHelperError",
    "ParsedUrl",
    "ResponseBufferError",
    "ResultCode",
    "TransferResult",
    "TransportInitError",
    "UrlConstructionError",
    "UrlParseError",
    "build_url",
    "cleanup",
    "get",
    "init",
    "is_initialized",
    "parse_url",
    "post",
]
