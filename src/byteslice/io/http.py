"""Seekable HTTP byte source using requests Range GETs."""

import logging
import os
import requests
from typing import Optional

from .base import RangeNotSupportedError, RANGE_FALLBACK_MAX, HTTP_TIMEOUT

logger = logging.getLogger(__name__)

# Module-level session for connection pooling
_session = None


def _get_session():
    """Get or create the global requests session."""
    global _session
    if _session is None:
        _session = requests.Session()
    return _session


def _decide_full_get(content_length: Optional[int], accept_ranges: bool) -> bool:
    """Return True only when not accept_ranges and content_length and content_length < RANGE_FALLBACK_MAX."""
    return (not accept_ranges and
            content_length is not None and
            content_length < RANGE_FALLBACK_MAX)


class HTTPByteSource:
    """File-like view of a remote resource; each ``read`` is one Range request."""

    def __init__(self, url: str):
        self.url = url
        self.bytes_fetched = 0
        self.requests_made = 0
        self.content_length: Optional[int] = None
        self._accept_ranges = False
        self._full_content: Optional[bytes] = None
        self._pos = 0
        self._session = _get_session()

        # Perform HEAD request immediately
        self._perform_head()

    def _perform_head(self):
        """Perform HEAD request to check capabilities."""
        try:
            response = self._session.head(self.url, timeout=HTTP_TIMEOUT, allow_redirects=True)
            self.requests_made += 1
            if response.status_code >= 400:
                raise IOError(f"HEAD request failed with status {response.status_code}")

            content_length_header = response.headers.get('content-length')
            if content_length_header:
                self.content_length = int(content_length_header)

            accept_ranges = response.headers.get('accept-ranges', '').lower()
            self._accept_ranges = accept_ranges == 'bytes'

        except requests.RequestException as e:
            raise IOError(f"HEAD request failed: {e}")
        logger.debug("HEAD %s: length=%s ranges=%s", self.url, self.content_length, self._accept_ranges)

    def _fetch_full_content(self):
        """Download entire file content for small files without range support."""
        if self._full_content is not None:
            return

        try:
            response = self._session.get(self.url, timeout=HTTP_TIMEOUT * 2)
            self.requests_made += 1
            if response.status_code >= 400:
                raise IOError(f"GET request failed with status {response.status_code}")

            self._full_content = response.content
            self.bytes_fetched = len(self._full_content)

        except requests.RequestException as e:
            raise IOError(f"GET request failed: {e}")

    def _fetch_range(self, start: int, length: int, retry_count: int = 0) -> bytes:
        """Fetch a specific byte range."""
        end = start + length - 1
        headers = {'Range': f'bytes={start}-{end}'}
        logger.debug("GET %s Range: bytes=%d-%d", self.url, start, end)

        try:
            response = self._session.get(self.url, headers=headers, timeout=HTTP_TIMEOUT)
            self.requests_made += 1

            if response.status_code == 200:
                # Server ignored the Range header and sent everything
                if len(response.content) >= RANGE_FALLBACK_MAX:
                    raise RangeNotSupportedError("Server doesn't support ranges and file is too large")
                self._full_content = response.content
                self.bytes_fetched = len(self._full_content)
                return self._full_content[start:start + length]

            elif response.status_code == 206:
                data = response.content
                self.bytes_fetched += len(data)

                # Server might return less than requested - ask once more for the rest
                if 0 < len(data) < length and retry_count == 0:
                    data += self._fetch_range(start + len(data), length - len(data), retry_count + 1)

                return data

            elif response.status_code == 416:
                return b""

            else:
                raise IOError(f"Range request failed with status {response.status_code}")

        except requests.RequestException as e:
            if retry_count == 0:
                # One automatic retry
                return self._fetch_range(start, length, retry_count + 1)
            raise IOError(f"Range request failed: {e}")

    def _fetch(self, start: int, length: int) -> bytes:
        if self._full_content is not None:
            return self._full_content[start:start + length]

        if _decide_full_get(self.content_length, self._accept_ranges):
            self._fetch_full_content()
            return self._full_content[start:start + length]

        if not self._accept_ranges:
            raise RangeNotSupportedError("Server doesn't support ranges and file is too large")

        return self._fetch_range(start, length)

    # --- file-like surface used by BoundedReader ---
    def seekable(self) -> bool:
        return self.content_length is not None

    def seek(self, offset: int, whence: int = os.SEEK_SET) -> int:
        if self.content_length is None:
            raise IOError(f"cannot seek {self.url}: server did not report a content length")
        if whence == os.SEEK_SET:
            pos = offset
        elif whence == os.SEEK_CUR:
            pos = self._pos + offset
        elif whence == os.SEEK_END:
            pos = self.content_length + offset
        else:
            raise ValueError(f"invalid whence {whence}")
        if pos < 0:
            raise IOError(f"negative seek position {pos}")
        self._pos = pos
        return pos

    def tell(self) -> int:
        return self._pos

    def read(self, size: int = -1) -> bytes:
        remaining = max(self.content_length - self._pos, 0) if self.content_length is not None else -1
        if remaining == 0:
            return b""
        if size is None or size < 0:
            if remaining < 0:
                raise IOError(f"cannot read {self.url} to end: unknown content length")
            size = remaining
        elif remaining > 0:
            size = min(size, remaining)
        if size == 0:
            return b""
        data = self._fetch(self._pos, size)
        self._pos += len(data)
        return data

    def close(self):
        # Session is shared, nothing to release here
        pass

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()


def open_http_source(url: str) -> HTTPByteSource:
    """Create an HTTP byte source."""
    return HTTPByteSource(url)
