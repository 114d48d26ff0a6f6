import io
import sys

import pytest
from google.protobuf import descriptor_pb2
from google.protobuf.compiler import plugin_pb2

from protoc_name_mapper.main import main
from protoc_name_mapper.parser.descriptor_transform import DescriptorError
from protoc_name_mapper.plugin import PluginError, parse_config, run

FDP = descriptor_pb2.FieldDescriptorProto


def _build_request(parameter: str = "") -> plugin_pb2.CodeGeneratorRequest:
    """a.b.Foo { oneof bar_baz; message Inner } plus a top-level enum."""
    request = plugin_pb2.CodeGeneratorRequest(parameter=parameter)
    request.file_to_generate.append("foo.proto")
    file_proto = request.proto_file.add(name="foo.proto", package="a.b", syntax="proto3")
    foo = file_proto.message_type.add(name="Foo")
    foo.nested_type.add(name="Inner")
    foo.oneof_decl.add(name="bar_baz")
    foo.field.add(
        name="text", number=1, type=FDP.TYPE_STRING,
        label=FDP.LABEL_OPTIONAL, oneof_index=0,
    )
    status = file_proto.enum_type.add(name="http_status")
    status.value.add(name="HTTP_STATUS_UNSPECIFIED", number=0)
    return request


EXPECTED_TABLE = (
    "a.b.Foo A_B_Foo\n"
    "a.b.Foo.bar_baz A_B_Foo.OneOf_BarBaz\n"
    "a.b.Foo.Inner A_B_Foo.Inner\n"
    "a.b.http_status A_B_HTTPStatus\n"
)


def _decode_response(data: bytes) -> plugin_pb2.CodeGeneratorResponse:
    response = plugin_pb2.CodeGeneratorResponse()
    response.ParseFromString(data)
    return response


class TestRun:
    def test_response_contains_mapper_file(self):
        log = io.StringIO()
        response = _decode_response(run(_build_request().SerializeToString(), log))

        assert not response.error
        assert len(response.file) == 1
        assert response.file[0].name == "mapper.txt"
        assert response.file[0].content == EXPECTED_TABLE
        assert response.supported_features & plugin_pb2.CodeGeneratorResponse.FEATURE_PROTO3_OPTIONAL

    def test_table_is_echoed_to_log(self):
        log = io.StringIO()
        run(_build_request().SerializeToString(), log)
        assert log.getvalue() == EXPECTED_TABLE

    def test_identical_input_identical_output(self):
        data = _build_request().SerializeToString()
        assert run(data, io.StringIO()) == run(data, io.StringIO())

    def test_empty_request(self):
        response = _decode_response(run(b"", io.StringIO()))
        assert response.file[0].name == "mapper.txt"
        assert response.file[0].content == ""

    def test_abbreviation_parameter(self):
        log = io.StringIO()
        response = _decode_response(
            run(_build_request("abbreviations=url:https").SerializeToString(), log)
        )
        assert "a.b.http_status A_B_HttpStatus\n" in response.file[0].content

    def test_truncated_request(self):
        with pytest.raises(PluginError):
            run(b"\x0a\x05ab", io.StringIO())

    def test_unknown_parameter(self):
        with pytest.raises(PluginError):
            run(_build_request("verbose=1").SerializeToString(), io.StringIO())

    def test_dangling_dependency(self):
        request = _build_request()
        request.proto_file[0].dependency.append("missing.proto")
        log = io.StringIO()
        with pytest.raises(DescriptorError):
            run(request.SerializeToString(), log)
        assert log.getvalue() == ""


class TestParseConfig:
    def test_default(self):
        assert parse_config("").abbreviations == frozenset({"url", "http", "https", "id"})

    def test_abbreviations_are_lower_cased(self):
        config = parse_config("abbreviations=UUID:Api")
        assert config.abbreviations == frozenset({"uuid", "api"})

    def test_empty_abbreviations(self):
        assert parse_config("abbreviations=").abbreviations == frozenset()


class TestMain:
    def _patch_stdio(self, monkeypatch, data: bytes) -> io.TextIOWrapper:
        stdout = io.TextIOWrapper(io.BytesIO())
        monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BytesIO(data)))
        monkeypatch.setattr(sys, "stdout", stdout)
        return stdout

    def test_writes_response_to_stdout(self, monkeypatch, capsys):
        stdout = self._patch_stdio(monkeypatch, _build_request().SerializeToString())
        main()

        response = _decode_response(stdout.buffer.getvalue())
        assert response.file[0].content == EXPECTED_TABLE
        assert capsys.readouterr().err == EXPECTED_TABLE

    def test_bad_input_exits_non_zero(self, monkeypatch, capsys):
        stdout = self._patch_stdio(monkeypatch, b"\x0a\x05ab")
        with pytest.raises(SystemExit) as exc_info:
            main()

        assert exc_info.value.code == 1
        assert stdout.buffer.getvalue() == b""
        assert capsys.readouterr().err.startswith("FATAL: ")
