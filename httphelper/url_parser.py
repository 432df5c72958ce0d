"""
URL parsing for httphelper

Splits a URL string into host, port, path and query. URLs without a
scheme are accepted; the scheme is guessed from the host name.
"""

import re
from typing import NamedTuple
from urllib.parse import urlsplit

from .config import Config, config
from .exceptions import UrlParseError

DEFAULT_PORT = 80
DEFAULT_PATH = "/"
DEFAULT_SUPPORTED_SCHEMES = ("http", "https")

_SCHEME_RE = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*://")

# Host name prefixes that imply a scheme other than http
_SCHEME_PREFIXES = {
    "ftp.": "ftp",
    "dict.": "dict",
    "ldap.": "ldap",
    "imap.": "imap",
    "smtp.": "smtp",
    "pop3.": "pop3",
}


class ParsedUrl(NamedTuple):
    host: str
    port: int
    path: str
    query: str


def has_scheme(url: str) -> bool:
    """Return True if the URL starts with ``<scheme>://``"""
    return _SCHEME_RE.match(url) is not None


def guess_scheme(url: str) -> str:
    """
    Guess the scheme of a URL that does not carry one.

    ``ftp.example.com`` guesses ftp (likewise dict, ldap, imap, smtp, pop3);
    everything else guesses http.
    """
    authority = re.split(r"[/?#]", url, maxsplit=1)[0]
    host = authority.rpartition("@")[2].lower()
    for prefix, scheme in _SCHEME_PREFIXES.items():
        if host.startswith(prefix):
            return scheme
    return "http"


def with_scheme(url: str) -> str:
    """Prefix a guessed scheme if the URL has none"""
    if has_scheme(url):
        return url
    return f"{guess_scheme(url)}://{url}"


def parse_url(url: str, default_port: int | None = None, config_obj: Config | None = None) -> ParsedUrl:
    """
    Decompose a URL into host, port, path and query.

    Args:
        url: URL string, scheme optional (e.g. "wikipedia.com")
        default_port: Port reported when the URL names none.
                      Defaults to config value (80).
        config_obj: Config object (optional, uses global config if None)

    Returns:
        ParsedUrl; path is "/" and query is "" when absent

    Raises:
        UrlParseError: If the URL is malformed or its scheme is unsupported

    Example:
        >>> parse_url("http://wikipedia.com/elo321/123elo?build_id=johnny&name=john")
        ParsedUrl(host='wikipedia.com', port=80, path='/elo321/123elo', query='build_id=johnny&name=john')
    """
    if config_obj is None:
        config_obj = config
    if default_port is None:
        default_port = config_obj.get("parser.default_port", DEFAULT_PORT)

    if not isinstance(url, str):
        raise UrlParseError(f"expected a string, got {type(url).__name__}")
    if not url:
        raise UrlParseError("URL is empty", url=url)
    if any(ch.isspace() or ord(ch) < 0x20 or ord(ch) == 0x7F for ch in url):
        raise UrlParseError("URL contains whitespace or control characters", url=url)

    try:
        parts = urlsplit(with_scheme(url))
        port = parts.port
    except ValueError as e:
        raise UrlParseError(str(e), url=url) from e

    supported = config_obj.get("parser.supported_schemes", DEFAULT_SUPPORTED_SCHEMES)
    scheme = parts.scheme.lower()
    if scheme not in supported:
        raise UrlParseError(f"unsupported scheme '{scheme}'", url=url)

    host = parts.hostname
    if not host:
        raise UrlParseError("no host name", url=url)

    return ParsedUrl(
        host=host,
        port=port if port is not None else default_port,
        path=parts.path or DEFAULT_PATH,
        query=parts.query,
    )
