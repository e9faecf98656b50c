"""I/O layer for byteslice - seekable sources and the bounded range reader."""

# Re-export these for import convenience
from .base import ByteSource, RangeNotSupportedError
from .local import open_local_source
from .http import open_http_source
from .range import BoundedReader, open_range


def open_source(source):
    """Factory function to create the appropriate seekable source for ``source``."""
    if hasattr(source, 'read'):  # BinaryIO
        return open_local_source(source)

    source_str = str(source)
    if source_str.startswith(('http://', 'https://')):
        return open_http_source(source_str)
    else:
        return open_local_source(source)


__all__ = [
    "ByteSource", "RangeNotSupportedError", "BoundedReader",
    "open_source", "open_range", "open_local_source", "open_http_source",
]
