"""Swift identifier character classes.

Ranges follow the identifier grammar in "The Swift Programming Language"
(Lexical Structure > Identifiers). Each table is a sorted tuple of
inclusive ``(first, last)`` code point ranges.
"""

from __future__ import annotations

from bisect import bisect_right
from typing import Tuple

Ranges = Tuple[Tuple[int, int], ...]

IDENTIFIER_HEAD_RANGES: Ranges = (
    (0x41, 0x5A),
    (0x5F, 0x5F),
    (0x61, 0x7A),
    (0xA8, 0xA8),
    (0xAA, 0xAA),
    (0xAD, 0xAD),
    (0xAF, 0xAF),
    (0xB2, 0xB5),
    (0xB7, 0xBA),
    (0xBC, 0xBE),
    (0xC0, 0xD6),
    (0xD8, 0xF6),
    (0xF8, 0xFF),
    (0x100, 0x2FF),
    (0x370, 0x167F),
    (0x1681, 0x180D),
    (0x180F, 0x1DBF),
    (0x1E00, 0x1FFF),
    (0x200B, 0x200D),
    (0x202A, 0x202E),
    (0x203F, 0x2040),
    (0x2054, 0x2054),
    (0x2060, 0x206F),
    (0x2070, 0x20CF),
    (0x2100, 0x218F),
    (0x2460, 0x24FF),
    (0x2776, 0x2793),
    (0x2C00, 0x2DFF),
    (0x2E80, 0x2FFF),
    (0x3004, 0x3007),
    (0x3021, 0x302F),
    (0x3031, 0x303F),
    (0x3040, 0xD7FF),
    (0xF900, 0xFD3D),
    (0xFD40, 0xFDCF),
    (0xFDF0, 0xFE1F),
    (0xFE30, 0xFE44),
    (0xFE47, 0xFFFD),
    (0x10000, 0x1FFFD),
    (0x20000, 0x2FFFD),
    (0x30000, 0x3FFFD),
    (0x40000, 0x4FFFD),
    (0x50000, 0x5FFFD),
    (0x60000, 0x6FFFD),
    (0x70000, 0x7FFFD),
    (0x80000, 0x8FFFD),
    (0x90000, 0x9FFFD),
    (0xA0000, 0xAFFFD),
    (0xB0000, 0xBFFFD),
    (0xC0000, 0xCFFFD),
    (0xD0000, 0xDFFFD),
    (0xE0000, 0xEFFFD),
)

# Admitted after the first character only: decimal digits and combining marks.
IDENTIFIER_CONTINUATION_RANGES: Ranges = (
    (0x30, 0x39),
    (0x300, 0x36F),
    (0x1DC0, 0x1DFF),
    (0x20D0, 0x20FF),
    (0xFE20, 0xFE2F),
)

_HEAD_STARTS = tuple(first for first, _ in IDENTIFIER_HEAD_RANGES)
_CONTINUATION_STARTS = tuple(first for first, _ in IDENTIFIER_CONTINUATION_RANGES)


def _in_ranges(code_point: int, ranges: Ranges, starts: Tuple[int, ...]) -> bool:
    index = bisect_right(starts, code_point) - 1
    return index >= 0 and code_point <= ranges[index][1]


def is_identifier_head(char: str) -> bool:
    """True if ``char`` may start a Swift identifier."""
    return _in_ranges(ord(char), IDENTIFIER_HEAD_RANGES, _HEAD_STARTS)


def is_identifier_continuation(char: str) -> bool:
    """True if ``char`` may appear after the first character of an identifier."""
    code_point = ord(char)
    return (
        _in_ranges(code_point, IDENTIFIER_CONTINUATION_RANGES, _CONTINUATION_STARTS)
        or _in_ranges(code_point, IDENTIFIER_HEAD_RANGES, _HEAD_STARTS)
    )
