"""C string-literal escaping.

``classify`` turns one byte into the fragment that represents it inside a
double-quoted literal. ``split_step`` threads a one-bit state through a
sequence of such fragments and closes the current literal (``" "``) whenever
a ``\\xHH`` escape would otherwise be followed by a literal character, since a
C compiler keeps consuming hex digits after ``\\x``. Named escapes start with
a backslash and need no break.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, Tuple

PRINTABLE_MIN = 0x20
PRINTABLE_MAX = 0x7E
# Lower bound used by the original tool: decimal 20, not 0x20.
LEGACY_PRINTABLE_MIN = 20

SEGMENT_BREAK = '" "'

C_ESCAPES: dict[int, str] = {
    0x07: "\\a",
    0x08: "\\b",
    0x0C: "\\f",
    0x0A: "\\n",
    0x0D: "\\r",
    0x09: "\\t",
    0x0B: "\\v",
    0x5C: "\\\\",
    0x22: '\\"',
}


@dataclass(frozen=True, slots=True)
class EscapeDecision:
    text: str
    is_hex_escape: bool


@dataclass(frozen=True, slots=True)
class SplitState:
    last_was_hex: bool = False


def hex_escape(b: int) -> str:
    return f"\\x{b:02x}"


def classify(b: int, *, legacy_printable: bool = False) -> EscapeDecision:
    """Return how byte ``b`` is written inside a C string literal."""
    escaped = C_ESCAPES.get(b)
    if escaped is not None:
        return EscapeDecision(escaped, False)

    lo = LEGACY_PRINTABLE_MIN if legacy_printable else PRINTABLE_MIN
    if lo <= b <= PRINTABLE_MAX:
        return EscapeDecision(chr(b), False)
    return EscapeDecision(hex_escape(b), True)


def split_step(state: SplitState, decision: EscapeDecision) -> Tuple[SplitState, str]:
    """Advance the splitter by one fragment, returning the new state and text to emit."""
    if state.last_was_hex and not decision.is_hex_escape and not decision.text.startswith("\\"):
        text = SEGMENT_BREAK + decision.text
    else:
        text = decision.text
    return SplitState(decision.is_hex_escape), text


def fold_fragments(
    data: Iterable[int], state: SplitState = SplitState(), *, legacy_printable: bool = False
) -> Tuple[SplitState, str]:
    """Render ``data`` starting from ``state``; the returned state feeds the next chunk."""
    parts: list[str] = []
    for b in data:
        state, text = split_step(state, classify(b, legacy_printable=legacy_printable))
        parts.append(text)
    return state, "".join(parts)
