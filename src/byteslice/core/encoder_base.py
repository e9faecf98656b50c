from abc import ABC, abstractmethod
from typing import BinaryIO, ClassVar, Iterator, Protocol

READ_CHUNK_SIZE = 64 * 1024


class ByteStream(Protocol):
    def read(self, size: int = -1) -> bytes: ...


def iter_chunks(src: ByteStream, chunk_size: int = READ_CHUNK_SIZE) -> Iterator[bytes]:
    """Yield successive non-empty reads from ``src`` until end-of-stream."""
    while True:
        chunk = src.read(chunk_size)
        if not chunk:
            return
        yield chunk


class Encoder(ABC):
    # --- required by subclasses ---
    name: ClassVar[str]                 # format name used on the command line
    description: ClassVar[str] = ""

    @classmethod
    @abstractmethod
    def encode(cls, out: BinaryIO, src: ByteStream, **options) -> None:
        """Consume ``src`` once and write the rendering to ``out``."""
        ...
