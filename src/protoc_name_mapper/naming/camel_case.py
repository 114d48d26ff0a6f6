"""Schema name -> Swift camel-case conversion.

Words are split on case changes, digit runs, underscores and any other
character. Runs of upper-case letters form a single word (``HTTPServer`` is
one word). Characters that cannot appear in a Swift identifier are escaped
as ``_u<decimal code point>``.
"""

from __future__ import annotations

from enum import Enum, auto
from typing import AbstractSet, List

from protoc_name_mapper.config import DEFAULT_ABBREVIATIONS
from protoc_name_mapper.naming.identifier_chars import (
    is_identifier_continuation,
    is_identifier_head,
)


class CharKind(Enum):
    DIGIT = auto()
    LOWER = auto()
    UPPER = auto()
    UNDERSCORE = auto()
    OTHER = auto()


def char_kind(char: str) -> CharKind:
    if "0" <= char <= "9":
        return CharKind.DIGIT
    if "a" <= char <= "z":
        return CharKind.LOWER
    if "A" <= char <= "Z":
        return CharKind.UPPER
    if char == "_":
        return CharKind.UNDERSCORE
    return CharKind.OTHER


def upper_char(char: str) -> str:
    """Upper-case a single character, leaving it alone if that would expand it."""
    upper = char.upper()
    return upper if len(upper) == 1 else char


def upper_first(word: str) -> str:
    if not word:
        return word
    return upper_char(word[0]) + word[1:]


def transform(
    name: str,
    initial_upper_case: bool,
    abbreviations: AbstractSet[str] = DEFAULT_ABBREVIATIONS,
) -> str:
    """Convert ``name`` into a camel-cased Swift identifier.

    With ``initial_upper_case`` False the first word is kept as written
    (lower-case for ordinary member names).
    """
    result: List[str] = []
    current: List[str] = []
    last_kind = CharKind.OTHER
    underscore_run = 0

    def add_current() -> None:
        if not current:
            return
        word = "".join(current)
        if not result and not initial_upper_case:
            pass
        elif word.lower() in abbreviations:
            word = word.upper()
        else:
            word = upper_first(word)
        result.append(word)
        current.clear()

    for char in name:
        kind = char_kind(char)

        if kind is CharKind.DIGIT:
            if last_kind is not CharKind.DIGIT:
                add_current()
            current.append(char)
        elif kind is CharKind.UPPER:
            if last_kind is not CharKind.UPPER:
                add_current()
            current.append(char.lower())
        elif kind is CharKind.LOWER:
            if last_kind not in (CharKind.LOWER, CharKind.UPPER):
                add_current()
            current.append(char)
        elif kind is CharKind.UNDERSCORE:
            add_current()
            underscore_run += 1
            # A doubled underscore leaves a single visible "_"; longer runs add nothing more.
            if underscore_run == 2:
                result.append("_")
        else:
            add_current()
            if result:
                valid = is_identifier_continuation(char)
            else:
                valid = is_identifier_head(char)
            if valid:
                current.append(char)
            else:
                result.append(f"_u{ord(char)}")

        if kind is not CharKind.UNDERSCORE:
            underscore_run = 0
        last_kind = kind

    add_current()

    if last_kind is CharKind.UNDERSCORE:
        result.append("_")

    output = "".join(result)
    if output and "0" <= output[0] <= "9":
        output = "_" + output
    return output


def to_upper_camel_case(
    name: str, abbreviations: AbstractSet[str] = DEFAULT_ABBREVIATIONS
) -> str:
    """Type-style name: ``http_status`` -> ``HTTPStatus``."""
    return transform(name, True, abbreviations)


def to_lower_camel_case(
    name: str, abbreviations: AbstractSet[str] = DEFAULT_ABBREVIATIONS
) -> str:
    """Member-style name: ``http_status`` -> ``httpStatus``."""
    return transform(name, False, abbreviations)
