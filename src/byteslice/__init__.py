"""byteslice - extract a byte range from a binary source and render it."""

import logging
from io import BytesIO
from typing import BinaryIO

from .core.model import (                                             # re-export
    ArgumentError, ByteRange, ByteSliceError, RangeError, SeekError, UnknownFormatError,
)
from .core.registry import DEFAULT_FORMAT, resolve
from .io import open_range

logger = logging.getLogger(__name__)


def extract(source, out: BinaryIO, *, offset: int = 0, length: int = -1,
            fmt: str = DEFAULT_FORMAT, **encoder_options) -> int:
    """Encode ``length`` bytes of ``source`` starting at ``offset`` into ``out``.

    ``source`` is a path, an http(s) URL, or a seekable binary file object.
    Returns the number of input bytes consumed.
    """
    encoder = resolve(fmt)
    byte_range = ByteRange(offset, length)
    with open_range(source, byte_range) as reader:
        encoder.encode(out, reader, **encoder_options)
        logger.debug("%s consumed %d byte(s)", encoder.name, reader.bytes_read)
        return reader.bytes_read


def encode_bytes(data: bytes, fmt: str = DEFAULT_FORMAT, **encoder_options) -> bytes:
    """Render an in-memory buffer with the named encoder."""
    out = BytesIO()
    resolve(fmt).encode(out, BytesIO(data), **encoder_options)
    return out.getvalue()


__all__ = [
    "extract", "encode_bytes", "resolve",
    "ByteRange", "ByteSliceError", "ArgumentError", "RangeError", "SeekError",
    "UnknownFormatError", "DEFAULT_FORMAT",
]
