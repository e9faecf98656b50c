"""Base protocols and shared types for I/O layer."""

from typing import Protocol, runtime_checkable


class RangeNotSupportedError(IOError):
    """Raised when server rejects Range and file size > RANGE_FALLBACK_MAX."""


RANGE_FALLBACK_MAX = 10 * 1024 * 1024  # 10 MB
HTTP_TIMEOUT = 30  # seconds


@runtime_checkable
class ByteSource(Protocol):
    """Seekable binary source: the subset of ``io.BufferedIOBase`` the range reader needs."""

    def seekable(self) -> bool:
        ...

    def seek(self, offset: int, whence: int = 0) -> int:
        ...

    def read(self, size: int = -1) -> bytes:
        """Return up to `size` bytes; ``b""`` at end of source."""
        ...

    def close(self) -> None:
        ...
