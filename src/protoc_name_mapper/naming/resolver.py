"""Generated Swift names for messages, enums and oneofs.

Top-level types get the file's type prefix glued on directly (the prefix
already ends in ``_``); nested types and oneofs are dotted onto the
generated name of their containing message.
"""

from __future__ import annotations

from typing import Union

from protoc_name_mapper.config import DEFAULT_CONFIG, NamingConfig
from protoc_name_mapper.models import EnumDecl, MessageDecl, OneofDecl, SchemaFile
from protoc_name_mapper.naming.camel_case import to_upper_camel_case
from protoc_name_mapper.naming.sanitizer import EntityKind, sanitize_type_name
from protoc_name_mapper.naming.type_prefix import type_prefix

ONEOF_PREFIX = "OneOf_"


def file_type_prefix(file: SchemaFile) -> str:
    return type_prefix(file.package, file.prefix_override)


def _relative_name(
    node: Union[MessageDecl, EnumDecl], kind: EntityKind, config: NamingConfig
) -> str:
    camel_case = to_upper_camel_case(node.name, config.abbreviations)
    return sanitize_type_name(camel_case, kind)


def _full_name(
    node: Union[MessageDecl, EnumDecl], kind: EntityKind, config: NamingConfig
) -> str:
    relative_name = _relative_name(node, kind, config)
    if isinstance(node.parent, MessageDecl):
        return full_name_of_message(node.parent, config) + "." + relative_name
    return file_type_prefix(node.parent) + relative_name


def full_name_of_message(message: MessageDecl, config: NamingConfig = DEFAULT_CONFIG) -> str:
    """Generated name of ``message``, e.g. ``Foo_Bar_Outer.Inner``."""
    return _full_name(message, EntityKind.MESSAGE, config)


def full_name_of_enum(enum: EnumDecl, config: NamingConfig = DEFAULT_CONFIG) -> str:
    return _full_name(enum, EntityKind.ENUM, config)


def relative_name_of_oneof(oneof: OneofDecl, config: NamingConfig = DEFAULT_CONFIG) -> str:
    camel_case = to_upper_camel_case(oneof.name, config.abbreviations)
    return sanitize_type_name(ONEOF_PREFIX + camel_case, EntityKind.ONEOF)


def full_name_of_oneof(oneof: OneofDecl, config: NamingConfig = DEFAULT_CONFIG) -> str:
    """Generated name of the enum Swift emits for ``oneof``: ``Outer.OneOf_Choice``."""
    return full_name_of_message(oneof.parent, config) + "." + relative_name_of_oneof(oneof, config)


def full_name_of(
    node: Union[MessageDecl, EnumDecl, OneofDecl], config: NamingConfig = DEFAULT_CONFIG
) -> str:
    if isinstance(node, MessageDecl):
        return full_name_of_message(node, config)
    if isinstance(node, EnumDecl):
        return full_name_of_enum(node, config)
    return full_name_of_oneof(node, config)
