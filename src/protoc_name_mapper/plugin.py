"""protoc plugin envelope: CodeGeneratorRequest in, CodeGeneratorResponse out."""

from __future__ import annotations

import sys
from typing import Dict, Optional, TextIO

from google.protobuf.compiler import plugin_pb2
from google.protobuf.message import DecodeError

from protoc_name_mapper.config import NamingConfig
from protoc_name_mapper.generator.mapper_generator import (
    MAPPER_FILE_NAME,
    collect_records,
    render_mapper,
)
from protoc_name_mapper.parser.descriptor_transform import load_schema_files


class PluginError(Exception):
    """Raised when the plugin request is malformed."""


def parse_request(data: bytes) -> plugin_pb2.CodeGeneratorRequest:
    request = plugin_pb2.CodeGeneratorRequest()
    try:
        request.ParseFromString(data)
    except DecodeError as e:
        raise PluginError(f"Cannot decode CodeGeneratorRequest: {e}") from e
    return request


def _parse_parameters(parameter: str) -> Dict[str, str]:
    result: Dict[str, str] = {}
    for part in parameter.split(","):
        if not part.strip():
            continue
        if "=" in part:
            key, value = part.split("=", 1)
            result[key.strip()] = value.strip()
        else:
            result[part.strip()] = ""
    return result


def parse_config(parameter: str) -> NamingConfig:
    """Build a NamingConfig from the plugin parameter string.

    Supported: ``abbreviations=url:http:https:id`` (colon-separated words,
    matched case-insensitively).
    """
    config = NamingConfig()
    for key, value in _parse_parameters(parameter).items():
        if key == "abbreviations":
            words = frozenset(w.strip().lower() for w in value.split(":") if w.strip())
            config = NamingConfig(abbreviations=words)
        else:
            raise PluginError(f"Unknown plugin parameter '{key}'")
    return config


def build_response(content: str) -> plugin_pb2.CodeGeneratorResponse:
    response = plugin_pb2.CodeGeneratorResponse()
    response.supported_features = plugin_pb2.CodeGeneratorResponse.FEATURE_PROTO3_OPTIONAL
    out = response.file.add()
    out.name = MAPPER_FILE_NAME
    out.content = content
    return response


def run(data: bytes, log: Optional[TextIO] = None) -> bytes:
    """Turn a serialized request into a serialized response.

    The name table is echoed to ``log`` (stderr by default) once it is
    complete.
    """
    if log is None:
        log = sys.stderr
    request = parse_request(data)
    config = parse_config(request.parameter)
    schema_files = load_schema_files(request.proto_file)
    records = collect_records(schema_files, config)

    for record in records:
        print(f"{record.schema_name} {record.generated_name}", file=log)

    response = build_response(render_mapper(records))
    return response.SerializeToString()
