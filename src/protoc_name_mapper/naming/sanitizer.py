"""Reserved-word disambiguation for generated type names.

A generated name that collides with a Swift keyword, a common Swift type or
a name the SwiftProtobuf runtime already uses gets a kind-specific suffix.
Names that already end in that suffix are processed recursively so that a
schema type called ``TypeMessage`` cannot clash with the escaped ``Type``.
"""

from __future__ import annotations

from enum import Enum
from typing import FrozenSet


class EntityKind(Enum):
    """Kind of generated entity; the value is its disambiguation suffix."""

    MESSAGE = "Message"
    ENUM = "Enum"
    ONEOF = "Oneof"


SWIFT_PROTOBUF_RESERVED_NAMES: FrozenSet[str] = frozenset({
    "SwiftProtobuf", "Extensions", "Message", "Enum",
    "protoMessageName", "decodeMessage", "traverse", "isInitialized",
    "unknownFields", "debugDescription", "description", "dynamicType",
    "hashValue", "Type", "Protocol",
})

SWIFT_KEYWORDS_USED_IN_DECLARATIONS: FrozenSet[str] = frozenset({
    "associatedtype", "class", "deinit", "enum", "extension",
    "fileprivate", "func", "import", "init", "inout", "internal",
    "let", "open", "operator", "private", "protocol", "public",
    "static", "struct", "subscript", "typealias", "var",
})

SWIFT_KEYWORDS_USED_IN_STATEMENTS: FrozenSet[str] = frozenset({
    "break", "case", "continue", "default", "defer", "do", "else",
    "fallthrough", "for", "guard", "if", "in", "repeat", "return",
    "switch", "where", "while",
})

SWIFT_KEYWORDS_USED_IN_EXPRESSIONS_AND_TYPES: FrozenSet[str] = frozenset({
    "as", "Any", "catch", "false", "is", "nil", "rethrows", "super",
    "self", "Self", "throw", "throws", "true", "try",
})

SWIFT_COMMON_TYPES: FrozenSet[str] = frozenset({
    "Bool", "Data", "Double", "Float", "Int", "Int32", "Int64",
    "String", "UInt", "UInt32", "UInt64",
})

SWIFT_SPECIAL_VARIABLES: FrozenSet[str] = frozenset({
    "__COLUMN__", "__FILE__", "__FUNCTION__", "__LINE__",
})

RESERVED_NAMES: FrozenSet[str] = (
    SWIFT_PROTOBUF_RESERVED_NAMES
    | SWIFT_KEYWORDS_USED_IN_DECLARATIONS
    | SWIFT_KEYWORDS_USED_IN_STATEMENTS
    | SWIFT_KEYWORDS_USED_IN_EXPRESSIONS_AND_TYPES
    | SWIFT_COMMON_TYPES
    | SWIFT_SPECIAL_VARIABLES
)


def _is_all_underscore(name: str) -> bool:
    return bool(name) and all(c == "_" for c in name)


def sanitize_type_name(name: str, kind: EntityKind) -> str:
    """Append ``kind``'s suffix to ``name`` if it would collide.

    A trailing suffix is stripped and the remainder checked again; every
    stripped suffix is put back on the result. Each pass shortens ``name``,
    so the loop ends after at most ``len(name) // len(suffix)`` passes.
    """
    suffix = kind.value
    stripped = 0
    while True:
        if name in RESERVED_NAMES or _is_all_underscore(name):
            return name + suffix * (stripped + 1)
        if name.endswith(suffix):
            name = name[: -len(suffix)]
            stripped += 1
            continue
        return name + suffix * stripped


def sanitize_message_name(name: str) -> str:
    return sanitize_type_name(name, EntityKind.MESSAGE)


def sanitize_enum_name(name: str) -> str:
    return sanitize_type_name(name, EntityKind.ENUM)


def sanitize_oneof_name(name: str) -> str:
    return sanitize_type_name(name, EntityKind.ONEOF)
