"""Growable buffer that accumulates a streamed response body."""

from .logging_config import get_module_logger

logger = get_module_logger("buffer")


class ResponseBuffer:
    """
    Append-only byte buffer fed chunk by chunk by the executor.

    ``size`` is authoritative; the data is binary-safe and carries no
    terminator.
    """

    def __init__(self):
        self._data = bytearray()

    @property
    def size(self) -> int:
        return len(self._data)

    def write(self, chunk: bytes) -> int:
        """
        Append a chunk and return the number of bytes consumed.

        Returns 0 if the buffer could not grow; the caller must treat any
        count short of ``len(chunk)`` as a fatal write error.
        """
        try:
            self._data += chunk
        except MemoryError:
            logger.error(f"Could not grow response buffer beyond {self.size} bytes")
            return 0
        return len(chunk)

    def getvalue(self) -> bytes:
        """Return an independent copy of the accumulated bytes"""
        return bytes(self._data)

    def clear(self) -> None:
        self._data = bytearray()

    def __len__(self) -> int:
        return self.size
