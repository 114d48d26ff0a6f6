"""Transform protobuf descriptors into the application's declaration tree."""

from __future__ import annotations

from typing import Dict, Iterable, List, Tuple, Union

from google.protobuf import descriptor, descriptor_database, descriptor_pb2, descriptor_pool

from protoc_name_mapper.models import EnumDecl, MessageDecl, OneofDecl, SchemaFile

# Field numbers used in SourceCodeInfo location paths.
_FILE_MESSAGE_TYPE = 4
_MESSAGE_NESTED_TYPE = 3
_MESSAGE_ENUM_TYPE = 4

_POOL_ERRORS = (
    TypeError,
    KeyError,
    ValueError,
    descriptor.Error,
    descriptor_database.Error,
)

Path = Tuple[int, ...]


class DescriptorError(Exception):
    """Raised when a requested file cannot be resolved from the descriptor set."""


def load_schema_files(
    proto_files: Iterable[descriptor_pb2.FileDescriptorProto],
) -> List[SchemaFile]:
    """Resolve ``proto_files`` in a descriptor pool and transform each of them.

    Files must be supplied in dependency order, as protoc does.
    Raises DescriptorError for missing dependencies, unresolved type
    references or conflicting definitions.
    """
    proto_files = list(proto_files)
    pool = descriptor_pool.DescriptorPool()
    for file_proto in proto_files:
        try:
            pool.Add(file_proto)
        except _POOL_ERRORS as e:
            raise DescriptorError(
                f"Cannot add '{file_proto.name}' to the descriptor pool: {e}"
            ) from e

    schema_files: List[SchemaFile] = []
    for file_proto in proto_files:
        try:
            pool.FindFileByName(file_proto.name)
        except _POOL_ERRORS as e:
            raise DescriptorError(
                f"Cannot find '{file_proto.name}' in the descriptor set: {e}"
            ) from e
        schema_files.append(transform_file(file_proto))
    return schema_files


def transform_file(file_proto: descriptor_pb2.FileDescriptorProto) -> SchemaFile:
    """Build a SchemaFile from a FileDescriptorProto.

    Top-level messages keep their order, as do top-level enums; nested
    messages and enums are interleaved in source order when the descriptor
    carries source info.
    """
    spans = _declaration_spans(file_proto)
    schema = SchemaFile(
        name=file_proto.name,
        package=file_proto.package,
        prefix_override=file_proto.options.swift_prefix or None,
    )
    for index, message_proto in enumerate(file_proto.message_type):
        schema.messages.append(
            _transform_message(
                message_proto, schema, (_FILE_MESSAGE_TYPE, index), index, spans
            )
        )
    for index, enum_proto in enumerate(file_proto.enum_type):
        schema.enums.append(EnumDecl(name=enum_proto.name, parent=schema, position=index))
    return schema


def _declaration_spans(
    file_proto: descriptor_pb2.FileDescriptorProto,
) -> Dict[Path, Tuple[int, int]]:
    """Map each location path to its (start line, start column)."""
    spans: Dict[Path, Tuple[int, int]] = {}
    for location in file_proto.source_code_info.location:
        if len(location.span) >= 2:
            spans.setdefault(tuple(location.path), (location.span[0], location.span[1]))
    return spans


def _child_order(
    message_proto: descriptor_pb2.DescriptorProto,
    path: Path,
    spans: Dict[Path, Tuple[int, int]],
) -> List[Tuple[int, int]]:
    """Return ``(field number, index)`` pairs for nested types in declaration order."""
    children = [(_MESSAGE_NESTED_TYPE, i) for i in range(len(message_proto.nested_type))]
    children += [(_MESSAGE_ENUM_TYPE, i) for i in range(len(message_proto.enum_type))]
    if all(path + child in spans for child in children):
        children.sort(key=lambda child: spans[path + child])
    return children


def _transform_message(
    message_proto: descriptor_pb2.DescriptorProto,
    parent: Union[SchemaFile, MessageDecl],
    path: Path,
    position: int,
    spans: Dict[Path, Tuple[int, int]],
) -> MessageDecl:
    message = MessageDecl(name=message_proto.name, parent=parent, position=position)

    # proto3 `optional` fields each get a oneof that no generator declares.
    synthetic = {
        f.oneof_index
        for f in message_proto.field
        if f.proto3_optional and f.HasField("oneof_index")
    }
    for index, oneof_proto in enumerate(message_proto.oneof_decl):
        if index in synthetic:
            continue
        message.oneofs.append(OneofDecl(name=oneof_proto.name, parent=message))

    for child_position, (field_number, index) in enumerate(
        _child_order(message_proto, path, spans)
    ):
        if field_number == _MESSAGE_NESTED_TYPE:
            nested_proto = message_proto.nested_type[index]
            if nested_proto.options.map_entry:
                continue
            message.nested_messages.append(
                _transform_message(
                    nested_proto, message, path + (field_number, index), child_position, spans
                )
            )
        else:
            message.nested_enums.append(
                EnumDecl(
                    name=message_proto.enum_type[index].name,
                    parent=message,
                    position=child_position,
                )
            )
    return message
