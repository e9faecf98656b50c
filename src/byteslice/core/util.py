from __future__ import annotations

from .model import ArgumentError


def parse_int_option(name: str, text: str) -> int:
    """Parse a numeric option: 0x/0o/0b prefixes, a bare leading 0 for octal, ``_`` separators, or decimal."""
    s = (text or "").strip().replace("_", "")
    digits = s.lstrip("+-")
    try:
        if len(digits) > 1 and digits[0] == "0" and digits[1].isdigit():
            return int(s, 8)
        return int(s, 0)
    except ValueError:
        raise ArgumentError(f"could not parse {name}, reason: invalid integer {text!r}") from None
