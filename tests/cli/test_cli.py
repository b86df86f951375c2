"""Tests for the Tally CLI."""

import io
import json
import logging

import pytest

from tally.cli import build_parser, main
from tally.cli.errors import CLIError, CLIInputError, format_cli_error
from tally.errors import TallySyntaxError


def test_compile_file_to_stdout(source_file, capsys):
    assert main(["compile", str(source_file)]) == 0

    assert capsys.readouterr().out == "MOV x, 5\nPRINT x\n"


def test_compile_sample(capsys):
    assert main(["compile", "--sample"]) == 0

    assert capsys.readouterr().out == "MOV hello, wow, this works?\nPRINT hello\n"


def test_compile_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("log y;"))

    assert main(["compile", "-"]) == 0
    assert capsys.readouterr().out == "PRINT y\n"


def test_compile_to_output_file(source_file, tmp_path, capsys):
    out = tmp_path / "program.asm"

    assert main(["compile", str(source_file), "-o", str(out)]) == 0
    assert out.read_text(encoding="utf-8") == "MOV x, 5\nPRINT x\n"
    assert capsys.readouterr().out == ""


def test_missing_file_exits_with_input_error(tmp_path, capsys):
    assert main(["compile", str(tmp_path / "nope.tly")]) == 1

    err = capsys.readouterr().err
    assert "CLI_INPUT_ERROR" in err
    assert "hint:" in err


def test_syntax_error_exits_non_zero(tmp_path, capsys):
    path = tmp_path / "bad.tly"
    path.write_text("x : constant number = 5;", encoding="utf-8")

    assert main(["compile", str(path)]) == 1

    err = capsys.readouterr().err
    assert "SYNTAX_ERROR" in err
    assert "Expected: COMMA" in err


def test_positional_flag_accepts_malformed_statement(tmp_path, capsys):
    path = tmp_path / "bad.tly"
    path.write_text("x : constant number = 5;", encoding="utf-8")

    assert main(["compile", "--positional", str(path)]) == 0
    assert capsys.readouterr().out == "MOV x, ;\n"


def test_tokens_command(capsys):
    assert main(["tokens", "--sample"]) == 0

    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "1:1\tWORD\thello"
    assert "STRING\twow, this works?" in lines[6]
    assert len(lines) == 11


def test_ast_command(source_file, capsys):
    assert main(["ast", str(source_file)]) == 0

    payload = json.loads(capsys.readouterr().out)
    assert payload == {
        "type": "Program",
        "body": [
            {
                "type": "VariableDeclaration",
                "identifier": "x",
                "kind": "constant",
                "value_type": "number",
                "value": "5",
            },
            {"type": "LogStatement", "argument": "x"},
        ],
    }


def test_log_level_flag_configures_logger():
    assert main(["--log-level", "debug", "compile", "--sample"]) == 0

    assert logging.getLogger("tally").level == logging.DEBUG


def test_command_is_required():
    with pytest.raises(SystemExit) as exc_info:
        build_parser().parse_args([])

    assert exc_info.value.code == 2


class TestFormatCliError:
    def test_cli_error_with_hint(self):
        text = format_cli_error(CLIInputError("Source file not found: a.tly", hint="check the path"))

        assert text == "error[CLI_INPUT_ERROR]: Source file not found: a.tly\n  hint: check the path"

    def test_cli_error_without_hint(self):
        assert format_cli_error(CLIError("boom", code="X")) == "error[X]: boom"

    def test_compiler_error(self):
        text = format_cli_error(TallySyntaxError("Unexpected token", line=1, column=3))

        assert text.startswith("error: Line 1:3 | [SYNTAX_ERROR] Unexpected token")

    def test_other_exceptions(self):
        assert format_cli_error(ValueError("bad")) == "error: ValueError: bad"
