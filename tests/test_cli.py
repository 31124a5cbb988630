"""Command-line interface tests driven through click's CliRunner."""

import pytest
from click.testing import CliRunner

from monkey import __version__
from monkey.cli.main import cli


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def write_program(tmp_path):
    def _write(source, name="prog.mk"):
        path = tmp_path / name
        path.write_text(source, encoding="utf-8")
        return str(path)
    return _write


def test_version(runner):
    result = runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_run_prints_final_value(runner, write_program):
    path = write_program("let add = fn(a, b) { a + b }; add(2, 3)")
    result = runner.invoke(cli, ["run", path])
    assert result.exit_code == 0
    assert result.output.strip() == "5"


def test_run_puts_output_then_null_result(runner, write_program):
    path = write_program('puts("hello"); puts(len("abc"))')
    result = runner.invoke(cli, ["run", path])
    assert result.exit_code == 0
    assert result.output == "hello\n3\n"


def test_run_reports_evaluation_error(runner, write_program):
    path = write_program("5 + true;")
    result = runner.invoke(cli, ["run", path])
    assert result.exit_code == 1
    assert "type missmatch: INTEGER + BOOLEAN" in result.output


def test_run_reports_parser_errors(runner, write_program):
    path = write_program("let = 5;")
    result = runner.invoke(cli, ["run", path])
    assert result.exit_code == 1
    assert "Parser Errors:" in result.output
    assert "Expected next token to be IDENT" in result.output


def test_run_reports_syntax_error(runner, write_program):
    path = write_program('let s = "open')
    result = runner.invoke(cli, ["run", path])
    assert result.exit_code == 1
    assert "Unterminated" in result.output


def test_run_missing_file(runner, tmp_path):
    result = runner.invoke(cli, ["run", str(tmp_path / "nope.mk")])
    assert result.exit_code == 2


def test_eval_command(runner):
    result = runner.invoke(cli, ["eval", '{"a": [1, 2]}["a"]'])
    assert result.exit_code == 0
    assert result.output.strip() == "[1, 2]"


def test_eval_command_error_exit_code(runner):
    result = runner.invoke(cli, ["eval", "foobar"])
    assert result.exit_code == 1
    assert "identifier not found: `foobar`" in result.output


def test_check_valid_and_invalid(runner, write_program):
    ok = runner.invoke(cli, ["check", write_program("let x = 1;", "ok.mk")])
    assert ok.exit_code == 0
    assert "Syntax is valid!" in ok.output

    bad = runner.invoke(cli, ["check", write_program("let x 1;", "bad.mk")])
    assert bad.exit_code == 1
    assert "Parser Errors:" in bad.output


def test_ast_shows_canonical_source(runner, write_program):
    result = runner.invoke(cli, ["ast", write_program("1 + 2 * 3")])
    assert result.exit_code == 0
    assert "Abstract Syntax Tree" in result.output
    assert "(1 + (2 * 3))" in result.output


def test_tokens_table(runner, write_program):
    result = runner.invoke(cli, ["tokens", write_program("let x = 1;")])
    assert result.exit_code == 0
    assert "LET" in result.output
    assert "IDENT" in result.output


def test_repl_keeps_bindings_between_lines(runner):
    result = runner.invoke(cli, ["repl"], input="let x = 40;\nx + 2\nexit\n")
    assert result.exit_code == 0
    assert "Monkey REPL" in result.output
    assert "42" in result.output


def test_repl_survives_errors_and_eof(runner):
    result = runner.invoke(cli, ["repl"], input="1 + true\nlet = ;\n")
    assert result.exit_code == 0
    assert "type missmatch: INTEGER + BOOLEAN" in result.output
    assert "Parser Errors:" in result.output
    assert "Goodbye!" in result.output


def test_debug_flag_enables_evaluator_logging(runner):
    from monkey.config import config

    result = runner.invoke(cli, ["--debug", "eval", "1"])
    assert result.exit_code == 0
    assert config.enable_debug_logs is True
