"""Schema declaration tree consumed by the name resolver."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Union


@dataclass
class SchemaFile:
    """One schema (.proto) file: package, prefix override and top-level types."""

    name: str
    package: str = ""
    prefix_override: Optional[str] = None
    messages: List[MessageDecl] = field(default_factory=list)
    enums: List[EnumDecl] = field(default_factory=list)


@dataclass
class MessageDecl:
    """A message declaration, possibly containing nested types and oneofs.

    ``position`` is the declaration index among the sibling messages and
    enums of the same parent message.
    """

    name: str
    parent: Union[SchemaFile, MessageDecl] = field(repr=False, compare=False)
    position: int = 0
    nested_messages: List[MessageDecl] = field(default_factory=list)
    nested_enums: List[EnumDecl] = field(default_factory=list)
    oneofs: List[OneofDecl] = field(default_factory=list)


@dataclass
class EnumDecl:
    name: str
    parent: Union[SchemaFile, MessageDecl] = field(repr=False, compare=False)
    position: int = 0


@dataclass
class OneofDecl:
    name: str
    parent: MessageDecl = field(repr=False, compare=False)


@dataclass(frozen=True)
class NameRecord:
    """A schema full name paired with its generated identifier."""

    schema_name: str
    generated_name: str


def schema_full_name(node: Union[MessageDecl, EnumDecl, OneofDecl]) -> str:
    """Dotted schema name, e.g. ``pkg.Outer.Inner`` (no leading dot)."""
    parts = [node.name]
    parent = node.parent
    while not isinstance(parent, SchemaFile):
        parts.append(parent.name)
        parent = parent.parent
    if parent.package:
        parts.append(parent.package)
    return ".".join(reversed(parts))
