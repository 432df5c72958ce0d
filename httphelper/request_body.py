"""Chunked reader for POST bodies with a declared length."""

from collections.abc import Iterator

DEFAULT_CHUNK_SIZE = 16384


class RequestBodyReader:
    """
    Hands a request body to the transport in chunks.

    ``len()`` reports the exact body length so the transport declares it
    up front (``Content-Length``) instead of switching to chunked encoding.
    Iteration never yields more than that many bytes.
    """

    def __init__(self, body: str | bytes | None, chunk_size: int = DEFAULT_CHUNK_SIZE):
        if body is None:
            body = b""
        elif isinstance(body, str):
            body = body.encode("utf-8")
        if chunk_size <= 0:
            raise ValueError(f"chunk_size must be positive, got {chunk_size}")

        self._data = memoryview(bytes(body))
        self._offset = 0
        self.chunk_size = chunk_size

    def __len__(self) -> int:
        return len(self._data)

    @property
    def remaining(self) -> int:
        return len(self._data) - self._offset

    def read(self, size: int | None = -1) -> bytes:
        """
        Copy up to ``size`` bytes; returns b"" once the body is exhausted.

        A negative or missing size reads everything that is left.
        """
        if size is None or size < 0:
            count = self.remaining
        else:
            count = min(size, self.remaining)
        chunk = self._data[self._offset : self._offset + count].tobytes()
        self._offset += count
        return chunk

    def __iter__(self) -> Iterator[bytes]:
        while True:
            chunk = self.read(self.chunk_size)
            if not chunk:
                return
            yield chunk
