"""Placeholder scanner for commit message templates.

The scanner walks a template once, left to right, and splits it into
segments: literal text, name tokens and number tokens. Nothing is resolved
here; the expander turns tokens into text.

Number tokens look like ``XNUM<spec>X`` where ``<spec>`` is one of::

    ""      -> [1, 999]
    "D"     -> [1, D]
    ","     -> [1, 999]
    ",B"    -> [1, B]
    "A,"    -> [A, 999]
    "A,B"   -> [A, B]

Anything else between the prefix and the closing ``X`` leaves the prefix as
literal text.
"""
from typing import List, Optional, Tuple

from ..models import (
    DEFAULT_HIGH,
    DEFAULT_LOW,
    NAME_MARKERS,
    NUMBER_PREFIX,
    NUMBER_SUFFIX,
    Literal,
    NameToken,
    NumberToken,
    Segment,
)

_SPEC_CHARS = frozenset("0123456789,")


def normalize_range(low: int, high: int) -> Tuple[int, int]:
    """Widen an inverted range to ``[low, low * 2]``."""
    if low > high:
        high = low * 2
    return low, high


def parse_range_spec(spec: str) -> Optional[Tuple[int, int]]:
    """Parse the text between ``XNUM`` and ``X`` into a normalized range.

    Args:
        spec: Range spec, possibly empty

    Returns:
        Optional[Tuple[int, int]]: Inclusive ``(low, high)``, or None if the
        spec is not made of digits and at most one comma
    """
    if any(char not in _SPEC_CHARS for char in spec):
        return None
    if spec.count(",") > 1:
        return None

    low, high = DEFAULT_LOW, DEFAULT_HIGH
    try:
        if "," in spec:
            start, end = spec.split(",")
            if start:
                low = int(start)
            if end:
                high = int(end)
        elif spec:
            high = int(spec)
        low, high = normalize_range(low, high)
        # Every draw must also convert back to a decimal string
        str(high)
    except ValueError:
        # More digits than int/str conversion allows
        return None

    return low, high


def _match_name(template: str, pos: int) -> Optional[NameToken]:
    for case, marker in NAME_MARKERS.items():
        if template.startswith(marker, pos):
            return NameToken(case=case, raw=marker)
    return None


def _match_number(template: str, pos: int) -> Optional[NumberToken]:
    if not template.startswith(NUMBER_PREFIX, pos):
        return None

    spec_start = pos + len(NUMBER_PREFIX)
    end = template.find(NUMBER_SUFFIX, spec_start)
    if end == -1:
        return None

    bounds = parse_range_spec(template[spec_start:end])
    if bounds is None:
        return None

    low, high = bounds
    return NumberToken(low=low, high=high, raw=template[pos:end + len(NUMBER_SUFFIX)])


def scan(template: str) -> List[Segment]:
    """Split a template into literal and token segments.

    Malformed markers never raise; they stay in the literal text. A
    rejected ``XNUM`` prefix is consumed as literal on its own, so markers
    that follow it are still recognized.
    """
    segments: List[Segment] = []
    literal: List[str] = []

    def flush() -> None:
        if literal:
            segments.append(Literal("".join(literal)))
            literal.clear()

    pos = 0
    while pos < len(template):
        token = _match_name(template, pos) or _match_number(template, pos)
        if token is not None:
            flush()
            segments.append(token)
            pos += len(token.raw)
        elif template.startswith(NUMBER_PREFIX, pos):
            literal.append(NUMBER_PREFIX)
            pos += len(NUMBER_PREFIX)
        else:
            literal.append(template[pos])
            pos += 1

    flush()
    return segments
