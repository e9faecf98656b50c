from __future__ import annotations
from dataclasses import dataclass


class ByteSliceError(RuntimeError):
    """Base class for every error raised by byteslice."""
    pass


class UnknownFormatError(ByteSliceError):
    """Raised when no encoder is registered under a given format name."""
    pass


class RangeError(ByteSliceError):
    """Raised when the source cannot be positioned at the requested offset."""
    pass


SeekError = RangeError


class ArgumentError(ByteSliceError, ValueError):
    """Raised for a malformed invocation (argument count, numeric options)."""
    pass


@dataclass(frozen=True, slots=True)
class ByteRange:
    offset: int = 0
    length: int = -1           # -1 = read to end of source

    def __post_init__(self) -> None:
        if self.offset < 0:
            raise ArgumentError(f"offset cannot be negative, got {self.offset}")
        if self.length < -1:
            raise ArgumentError(f"length must be -1 or non-negative, got {self.length}")

    @property
    def bounded(self) -> bool:
        return self.length != -1
