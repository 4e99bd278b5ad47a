"""
Tests for the fieldcase-generator command line interface.
"""

import pytest

from fieldcase_generator.cli import build_parser, main


pytestmark = pytest.mark.usefixtures("restore_root_logging")


def run_cli(*argv):
    main(["--no-color", *argv])


def test_render_with_transform(capsys):
    run_cli("render", "AVeryLong5Variant", "--transform", "c Cc")

    assert capsys.readouterr().out == "aVeryLong5Variant\n"


def test_render_with_override(capsys):
    run_cli("render", "access_token", "--name", "accessToken")

    assert capsys.readouterr().out == "accessToken\n"


def test_render_verbatim(capsys):
    run_cli("render", "id")

    assert capsys.readouterr().out == "id\n"


def test_render_malformed_expression_exits_with_diagnostic(capsys):
    with pytest.raises(SystemExit) as excinfo:
        run_cli("render", "AVeryLongVariant", "-t", "1__ c")

    assert excinfo.value.code == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "MALFORMED_EXPRESSION" in captured.err
    assert "'c'" in captured.err


def test_split(capsys):
    run_cli("split", "HTTP2Server")

    assert capsys.readouterr().out.splitlines() == ["HTTP\talpha", "2\tdigit", "Server\talpha"]


def test_generate(write_definition_file, definition_types, tmp_path, capsys):
    output = tmp_path / "out" / "accessors.py"
    config_path = write_definition_file(definition_types, output_file=output)

    run_cli("generate", "-c", str(config_path))

    namespace: dict = {}
    exec(output.read_text(encoding="utf-8"), namespace)
    assert namespace["Token"].fields() == ("accessToken", "refreshToken", "expires_in")
    assert namespace["Variant"].variants() == (
        "A_Very_Long2_Variant",
        "LasT*-*vERy*-*lONg*-*7*-*VarianT",
        "Plain",
    )
    assert "Accessors module written to" in capsys.readouterr().err


def test_generate_output_override_and_no_format(write_definition_file, definition_types, tmp_path):
    config_path = write_definition_file(definition_types, format_code=True)
    output = tmp_path / "override.py"

    run_cli("-v", "generate", "-c", str(config_path), "-o", str(output), "--no-format")

    code = output.read_text(encoding="utf-8")
    assert "'accessToken'" in code  # ast.unparse quoting, Black would use double quotes


def test_generate_missing_definition_file(tmp_path, capsys):
    with pytest.raises(SystemExit) as excinfo:
        run_cli("generate", "-c", str(tmp_path / "nope.yaml"))

    assert excinfo.value.code == 1
    assert "CONFIG_ERROR" in capsys.readouterr().err


def test_generate_requires_config():
    with pytest.raises(SystemExit) as excinfo:
        build_parser().parse_args(["generate"])

    assert excinfo.value.code == 2


def test_command_is_required():
    with pytest.raises(SystemExit):
        build_parser().parse_args([])
