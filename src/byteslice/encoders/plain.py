from __future__ import annotations

import base64
from typing import BinaryIO, ClassVar

from ..core.encoder_base import Encoder, ByteStream, iter_chunks


class RawEncoder(Encoder):
    """Copy the bytes through untouched."""

    name: ClassVar = "raw"
    description: ClassVar = "bytes as-is (default)"

    @classmethod
    def encode(cls, out: BinaryIO, src: ByteStream, **options) -> None:
        for chunk in iter_chunks(src):
            out.write(chunk)


class HexEncoder(Encoder):
    """Lowercase hex digits, no separators, newline at the end."""

    name: ClassVar = "hex"
    description: ClassVar = "continuous lowercase hex"

    @classmethod
    def encode(cls, out: BinaryIO, src: ByteStream, **options) -> None:
        for chunk in iter_chunks(src):
            out.write(chunk.hex().encode("ascii"))
        out.write(b"\n")


class Base64Encoder(Encoder):
    """Standard base64 on a single line."""

    name: ClassVar = "base64"
    description: ClassVar = "standard base64, single line"

    @classmethod
    def encode(cls, out: BinaryIO, src: ByteStream, **options) -> None:
        pending = b""
        for chunk in iter_chunks(src):
            pending += chunk
            # only whole 3-byte groups can be encoded without padding
            cut = len(pending) - len(pending) % 3
            if cut:
                out.write(base64.b64encode(pending[:cut]))
                pending = pending[cut:]
        if pending:
            out.write(base64.b64encode(pending))
        out.write(b"\n")
