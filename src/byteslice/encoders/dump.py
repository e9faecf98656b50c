from __future__ import annotations

from typing import BinaryIO, ClassVar

from ..core.encoder_base import Encoder, ByteStream, iter_chunks

DUMP_LINE_WIDTH = 16
_HEX_COLUMN_WIDTH = DUMP_LINE_WIDTH * 3 + 1       # "xx " per byte + gap after byte 8


def _ascii_char(b: int) -> str:
    return chr(b) if 0x20 <= b <= 0x7E else "."


def format_dump_line(offset: int, line: bytes) -> str:
    """Render one canonical dump line (at most 16 bytes), newline included."""
    cells = []
    for i, b in enumerate(line):
        cells.append(f"{b:02x} ")
        if i == 7:
            cells.append(" ")
    hex_col = "".join(cells).ljust(_HEX_COLUMN_WIDTH)
    ascii_col = "".join(_ascii_char(b) for b in line)
    return f"{offset:08x}  {hex_col} |{ascii_col}|\n"


class DumpEncoder(Encoder):
    """Canonical hex+ASCII dump, 16 bytes per line."""

    name: ClassVar = "dump"
    description: ClassVar = "canonical hex dump with ASCII column"

    @classmethod
    def encode(cls, out: BinaryIO, src: ByteStream, **options) -> None:
        offset = 0
        pending = b""
        for chunk in iter_chunks(src):
            pending += chunk
            lines = []
            pos = 0
            while len(pending) - pos >= DUMP_LINE_WIDTH:
                lines.append(format_dump_line(offset, pending[pos:pos + DUMP_LINE_WIDTH]))
                pos += DUMP_LINE_WIDTH
                offset += DUMP_LINE_WIDTH
            pending = pending[pos:]
            if lines:
                out.write("".join(lines).encode("ascii"))
        if pending:
            out.write(format_dump_line(offset, pending).encode("ascii"))
