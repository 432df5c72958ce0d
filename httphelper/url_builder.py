"""Build request URLs from a host/port/path triple."""

from .exceptions import UrlConstructionError

MAX_PORT = 65535


def build_url(host: str, port: int, path: str, max_length: int | None = None) -> str:
    """
    Join host, port and path into ``<host>:<port>/<path>``.

    Leading slashes of ``path`` are stripped, so ``//a/b`` becomes ``a/b``.
    No scheme is added or checked: a host of ``http://example.com`` gives
    ``http://example.com:<port>/<path>``.

    Args:
        host: Host name, optionally already carrying a scheme
        port: Port number (0-65535)
        path: Request path, with or without leading slashes
        max_length: Longest URL allowed (None for no limit)

    Returns:
        The joined URL

    Raises:
        UrlConstructionError: If the port is invalid or the URL is too long
    """
    if isinstance(port, bool) or not isinstance(port, int) or not 0 <= port <= MAX_PORT:
        raise UrlConstructionError(
            f"Port must be an integer between 0 and {MAX_PORT}, got {port!r}",
            host=host,
            port=port,
            path=path,
        )

    url = f"{host}:{port}/{path.lstrip('/')}"

    if max_length is not None and len(url) > max_length:
        raise UrlConstructionError(
            f"URL is {len(url)} characters long, limit is {max_length}",
            host=host,
            port=port,
            path=path,
        )

    return url
