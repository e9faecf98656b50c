"""Debug-literal renderings of the whole slice.

Both encoders need the complete content before writing, so they read the
bounded stream into memory.
"""

from __future__ import annotations

from typing import BinaryIO, ClassVar

from ..core.encoder_base import Encoder, ByteStream, iter_chunks
from ..core.escape import C_ESCAPES, PRINTABLE_MIN, PRINTABLE_MAX, hex_escape

# lone bytes that are not valid UTF-8 come back from surrogateescape as U+DC80..U+DCFF
_SURROGATE_BASE = 0xDC00


def _read_all(src: ByteStream) -> bytes:
    return b"".join(iter_chunks(src))


def array_literal(data: bytes) -> str:
    return "[" + ", ".join(f"0x{b:02x}" for b in data) + "]"


def _escape_char(ch: str) -> str:
    cp = ord(ch)
    if cp < 0x80:
        if cp in C_ESCAPES:
            return C_ESCAPES[cp]
        if PRINTABLE_MIN <= cp <= PRINTABLE_MAX:
            return ch
        return hex_escape(cp)
    if 0xDC80 <= cp <= 0xDCFF:
        return hex_escape(cp - _SURROGATE_BASE)
    if ch.isprintable():
        return ch
    if cp <= 0xFFFF:
        return f"\\u{cp:04x}"
    return f"\\U{cp:08x}"


def string_literal(data: bytes) -> str:
    """Quote ``data`` as a double-quoted debug string.

    Valid UTF-8 is kept as text. ``\\xHH`` always stands for a single raw
    byte, while ``\\uXXXX``/``\\UXXXXXXXX`` stand for the UTF-8 encoding of a
    non-printable code point, so every byte sequence has exactly one reading.
    """
    text = data.decode("utf-8", errors="surrogateescape")
    return '"' + "".join(_escape_char(ch) for ch in text) + '"'


class ArrayLiteralEncoder(Encoder):
    name: ClassVar = "arrayLiteral"
    description: ClassVar = "bracketed list of 0xHH byte values"

    @classmethod
    def encode(cls, out: BinaryIO, src: ByteStream, **options) -> None:
        out.write((array_literal(_read_all(src)) + "\n").encode("ascii"))


class StringLiteralEncoder(Encoder):
    name: ClassVar = "stringLiteral"
    description: ClassVar = "quoted debug string (UTF-8 text, escaped bytes)"

    @classmethod
    def encode(cls, out: BinaryIO, src: ByteStream, **options) -> None:
        out.write((string_literal(_read_all(src)) + "\n").encode("utf-8"))
