"""Local file sources."""

import logging
from pathlib import Path
from typing import BinaryIO, Union

logger = logging.getLogger(__name__)


def open_local_source(source: Union[Path, str, BinaryIO]) -> BinaryIO:
    """Open a local path for binary reading, or pass a file object through."""
    if hasattr(source, "read"):
        return source
    try:
        fh = open(source, "rb")
    except OSError as e:
        raise IOError(f"could not open file, reason: {e}") from e
    logger.debug("opened %s", source)
    return fh
