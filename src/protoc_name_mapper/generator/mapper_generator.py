from __future__ import annotations

from pathlib import Path
from typing import Iterable, List

from jinja2 import Environment, FileSystemLoader

from protoc_name_mapper.config import DEFAULT_CONFIG, NamingConfig
from protoc_name_mapper.models import (
    MessageDecl,
    NameRecord,
    SchemaFile,
    schema_full_name,
)
from protoc_name_mapper.naming.resolver import (
    full_name_of_enum,
    full_name_of_message,
    full_name_of_oneof,
)

MAPPER_FILE_NAME = "mapper.txt"


def _get_template_env() -> Environment:
    template_dir = Path(__file__).parent.parent / "templates"
    return Environment(
        loader=FileSystemLoader(str(template_dir)),
        keep_trailing_newline=True,
    )


def _message_records(message: MessageDecl, config: NamingConfig) -> List[NameRecord]:
    """Records for ``message``, its oneofs, then its nested types depth-first."""
    records = [NameRecord(schema_full_name(message), full_name_of_message(message, config))]
    for oneof in message.oneofs:
        records.append(NameRecord(schema_full_name(oneof), full_name_of_oneof(oneof, config)))

    children = sorted(
        [*message.nested_messages, *message.nested_enums],
        key=lambda child: child.position,
    )
    for child in children:
        if isinstance(child, MessageDecl):
            records.extend(_message_records(child, config))
        else:
            records.append(NameRecord(schema_full_name(child), full_name_of_enum(child, config)))
    return records


def collect_records(
    files: Iterable[SchemaFile],
    config: NamingConfig = DEFAULT_CONFIG,
) -> List[NameRecord]:
    """Build the name table for ``files`` in output order.

    Per file: every top-level message (with its oneofs and nested types),
    then the top-level enums.
    """
    records: List[NameRecord] = []
    for file in files:
        for message in file.messages:
            records.extend(_message_records(message, config))
        for enum in file.enums:
            records.append(NameRecord(schema_full_name(enum), full_name_of_enum(enum, config)))
    return records


def render_mapper(records: List[NameRecord]) -> str:
    """Render the ``mapper.txt`` content: one ``<schema name> <swift name>`` line per record."""
    env = _get_template_env()
    template = env.get_template("mapper.txt.j2")
    return template.render(records=records)
