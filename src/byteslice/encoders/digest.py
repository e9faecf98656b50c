from __future__ import annotations

import hashlib
from typing import BinaryIO, ClassVar

from ..core.encoder_base import Encoder, ByteStream, iter_chunks


class DigestEncoder(Encoder):
    """Hash the whole slice and print the hex digest once input is exhausted."""

    algorithm: ClassVar[str]

    @classmethod
    def encode(cls, out: BinaryIO, src: ByteStream, **options) -> None:
        h = hashlib.new(cls.algorithm)
        for chunk in iter_chunks(src):
            h.update(chunk)
        out.write(h.hexdigest().encode("ascii") + b"\n")


class MD5Encoder(DigestEncoder):
    name: ClassVar = "md5"
    description: ClassVar = "MD5 digest, hex"
    algorithm: ClassVar = "md5"


class SHA256Encoder(DigestEncoder):
    name: ClassVar = "sha256"
    description: ClassVar = "SHA-256 digest, hex"
    algorithm: ClassVar = "sha256"
