from __future__ import annotations

import unicodedata
from typing import List, Optional

from protoc_name_mapper.naming.camel_case import upper_char


def type_prefix(package: str, prefix_override: Optional[str] = None) -> str:
    """Derive the Swift type prefix for top-level types of a file.

    An explicit ``swift_prefix`` option wins as-is. Otherwise each package
    component and each ``_``-separated word is capitalized, components are
    joined with ``_`` and a trailing ``_`` is added: ``foo.bar_baz`` ->
    ``Foo_BarBaz_``.
    """
    if prefix_override:
        return prefix_override
    if not package:
        return ""

    chars: List[str] = []
    make_upper = True
    for char in package:
        if char == "_":
            make_upper = True
        elif char == ".":
            make_upper = True
            chars.append("_")
        else:
            if not chars and unicodedata.category(char).startswith("N"):
                chars.append("_")
            if make_upper:
                chars.append(upper_char(char))
                make_upper = False
            else:
                chars.append(char)
    chars.append("_")
    return "".join(chars)
