from __future__ import annotations

import logging
from typing import BinaryIO, ClassVar

from ..core.encoder_base import Encoder, ByteStream, iter_chunks
from ..core.escape import SEGMENT_BREAK, SplitState, fold_fragments, hex_escape

logger = logging.getLogger(__name__)

CSTRING_CHUNK_SIZE = 512


class CStringEncoder(Encoder):
    """Every byte as ``\\xHH``: verbose, but never ambiguous."""

    name: ClassVar = "cstring"
    description: ClassVar = "C string literal, every byte as \\xHH"

    @classmethod
    def encode(cls, out: BinaryIO, src: ByteStream, **options) -> None:
        out.write(b'"')
        for chunk in iter_chunks(src, CSTRING_CHUNK_SIZE):
            out.write("".join(hex_escape(b) for b in chunk).encode("ascii"))
        out.write(b'"\n')


class CStringSafeEncoder(Encoder):
    """Shortest C string literal that still parses back to the same bytes.

    Printable characters are written as-is and the named control characters
    use their short escapes. Everything else becomes ``\\xHH``. A plain
    character right after a hex escape starts a new adjacent literal;
    named escapes such as ``\\n`` follow it directly.
    """

    name: ClassVar = "cstringSafe"
    description: ClassVar = "C string literal, printable bytes kept, split after hex escapes"

    @classmethod
    def encode(cls, out: BinaryIO, src: ByteStream, *, legacy_printable: bool = False, **options) -> None:
        state = SplitState()
        splits = 0
        out.write(b'"')
        for chunk in iter_chunks(src, CSTRING_CHUNK_SIZE):
            state, text = fold_fragments(chunk, state, legacy_printable=legacy_printable)
            splits += text.count(SEGMENT_BREAK)
            out.write(text.encode("ascii"))
        out.write(b'"\n')
        logger.debug("cstringSafe: %d literal split(s)", splits)
