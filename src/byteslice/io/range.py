"""Bounded view of a seekable source."""

from __future__ import annotations

import logging
import os
from contextlib import contextmanager
from typing import Iterator

from ..core.model import ByteRange, RangeError
from .base import ByteSource

logger = logging.getLogger(__name__)


class BoundedReader:
    """Read at most ``byte_range.length`` bytes starting at ``byte_range.offset``.

    The source is positioned once, on construction. Nothing beyond a single
    ``read`` call is buffered, so large slices stream.
    """

    def __init__(self, source: ByteSource, byte_range: ByteRange):
        self._source = source
        self.byte_range = byte_range
        self.bytes_read = 0
        self._remaining = byte_range.length if byte_range.bounded else None
        self._seek(byte_range.offset)

    def _seek(self, offset: int) -> None:
        if not self._source.seekable():
            raise RangeError(f"could not seek to offset 0x{offset:X}, reason: source is not seekable")
        try:
            size = self._source.seek(0, os.SEEK_END)
            if offset > size:
                raise RangeError(
                    f"could not seek to offset 0x{offset:X}, reason: source is only {size} bytes"
                )
            self._source.seek(offset, os.SEEK_SET)
        except OSError as e:
            raise RangeError(f"could not seek to offset 0x{offset:X}, reason: {e}") from e
        logger.debug("positioned at 0x%X of %d bytes, length=%d", offset, size, self.byte_range.length)

    def read(self, size: int = -1) -> bytes:
        if self._remaining is not None:
            if self._remaining == 0:
                return b""
            size = self._remaining if size is None or size < 0 else min(size, self._remaining)
        data = self._source.read(size) or b""
        self.bytes_read += len(data)
        if self._remaining is not None:
            self._remaining -= len(data)
        return data


@contextmanager
def open_range(source, byte_range: ByteRange) -> Iterator[BoundedReader]:
    """Open ``source`` (path, URL or binary file object) bounded to ``byte_range``.

    Whatever this opens is closed on exit, including when seeking fails.
    A file object handed in by the caller is left open.
    """
    from . import open_source

    owns = not hasattr(source, "read")
    handle = open_source(source)
    try:
        yield BoundedReader(handle, byte_range)
    finally:
        if owns:
            handle.close()
