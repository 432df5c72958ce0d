"""
Process-wide transport state

``init()`` builds the shared HttpClient from configuration and
``cleanup()`` drops it. Both are idempotent and safe to call in any order.
"""

import threading

from .config import Config, config
from .http_client import HttpClient
from .logging_config import get_module_logger

logger = get_module_logger("transport")

_lock = threading.Lock()
_client: HttpClient | None = None


def _create_client(config_obj: Config) -> HttpClient:
    return HttpClient(
        timeout=config_obj.get("transport.timeout"),
        verify=config_obj.get("transport.verify", True),
    )


def init(config_obj: Config | None = None) -> None:
    """
    Set up the shared transport state once.

    Calling init() again before cleanup() does nothing.

    Raises:
        TransportInitError: If the configured transport settings are unusable
    """
    global _client

    with _lock:
        if _client is not None:
            logger.debug("Transport already initialized")
            return
        _client = _create_client(config_obj if config_obj is not None else config)
        logger.debug("Transport initialized")


def cleanup() -> None:
    """Tear down the shared transport state; a no-op if it is not set up"""
    global _client

    with _lock:
        if _client is None:
            return
        _client = None
        logger.debug("Transport cleaned up")


def is_initialized() -> bool:
    return _client is not None


def get_client(config_obj: Config | None = None) -> HttpClient:
    """
    Return the shared HttpClient, initializing the transport if needed.

    Raises:
        TransportInitError: If the transport cannot be initialized
    """
    client = _client
    if client is not None:
        return client

    logger.debug("Transport used before init(), initializing implicitly")
    init(config_obj)
    # cleanup() may run between init() and this read on another thread
    client = _client
    if client is None:
        return _create_client(config_obj if config_obj is not None else config)
    return client
