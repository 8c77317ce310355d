from __future__ import annotations

from pathlib import Path

from typer.testing import CliRunner

from yamldelta import __version__
from yamldelta.cli import app

runner = CliRunner()

OLD = """\
Mary:
  Height:
    cm: 168
  Pets: [dog, bear, cat]
"""

CURRENT = """\
Mary:
  Height:
    cm: 168
  Weight:
    kg: 52
  Pets: [dog, bear, mouse, cat]
"""

EXPECTED = """\
~ Mary:
    ~ Pets:
        (2 unchanged items)
        + - mouse
        (1 unchanged item)
    + Weight:
    +     kg: 52
"""


def _documents(tmp_path: Path) -> tuple[Path, Path]:
    old = tmp_path / "old.yml"
    current = tmp_path / "current.yml"
    old.write_text(OLD, encoding="utf-8")
    current.write_text(CURRENT, encoding="utf-8")
    return old, current


def test_cli_diff_prints_report_and_exits_with_changes(tmp_path: Path) -> None:
    old, current = _documents(tmp_path)

    result = runner.invoke(app, ["diff", str(old), str(current)], env={"COLOR": "false"})

    assert result.exit_code == 1
    assert result.stdout == EXPECTED


def test_cli_diff_identical_documents_exit_zero(tmp_path: Path) -> None:
    old, _ = _documents(tmp_path)

    result = runner.invoke(app, ["diff", str(old), str(old), "--summary"], env={"COLOR": "false"})

    assert result.exit_code == 0
    assert result.stdout == "No changes.\n"


def test_cli_diff_summary_counts(tmp_path: Path) -> None:
    old, current = _documents(tmp_path)

    result = runner.invoke(app, ["diff", str(old), str(current), "--summary"], env={"COLOR": "false"})

    assert result.exit_code == 1
    assert result.stdout.endswith("2 added, 0 removed, 0 changed\n")


def test_cli_diff_reads_old_document_from_stdin(tmp_path: Path) -> None:
    _, current = _documents(tmp_path)

    result = runner.invoke(app, ["diff", "-", str(current)], input=OLD, env={"COLOR": "false"})

    assert result.exit_code == 1
    assert result.stdout == EXPECTED


def test_cli_diff_rejects_two_stdin_documents() -> None:
    result = runner.invoke(app, ["diff", "-", "-"], input="a: 1\n")

    assert result.exit_code == 2
    assert "only one document can be read from stdin" in result.output


def test_cli_diff_color_env_var_styles_output(tmp_path: Path) -> None:
    old, current = _documents(tmp_path)

    styled = runner.invoke(app, ["diff", str(old), str(current)], env={"COLOR": "true"})
    plain = runner.invoke(app, ["diff", str(old), str(current), "--no-color"], env={"COLOR": "true"})

    assert styled.exit_code == 1
    assert "\x1b[" in styled.stdout
    assert plain.stdout == EXPECTED


def test_cli_diff_writes_output_file(tmp_path: Path) -> None:
    old, current = _documents(tmp_path)
    out = tmp_path / "reports" / "diff.txt"

    result = runner.invoke(app, ["diff", str(old), str(current), "--output", str(out)], env={"COLOR": "false"})

    assert result.exit_code == 1
    assert out.read_text(encoding="utf-8") == EXPECTED
    assert "+ - mouse" not in result.stdout
    assert "Wrote diff to" in result.output


def test_cli_diff_reports_parse_errors(tmp_path: Path) -> None:
    old, _ = _documents(tmp_path)
    broken = tmp_path / "broken.yml"
    broken.write_text("Mary: [unclosed\n", encoding="utf-8")

    result = runner.invoke(app, ["diff", str(old), str(broken)], env={"COLOR": "false"})

    assert result.exit_code == 2
    assert "ERROR: Unable to parse" in result.output
    assert "`yamldelta diff --help`" in result.output


def test_cli_diff_reports_missing_files(tmp_path: Path) -> None:
    old, _ = _documents(tmp_path)

    result = runner.invoke(app, ["diff", str(old), str(tmp_path / "missing.yml")], env={"COLOR": "false"})

    assert result.exit_code == 2
    assert "ERROR:" in result.output


def test_cli_version() -> None:
    result = runner.invoke(app, ["--version"])

    assert result.exit_code == 0
    assert f"yamldelta {__version__}" in result.output


def test_cli_diff_reports_undecodable_files_as_parse_errors(tmp_path: Path) -> None:
    old, _ = _documents(tmp_path)
    binary = tmp_path / "binary.yml"
    binary.write_bytes(b"a: \xff\xfe\n")

    result = runner.invoke(app, ["diff", str(old), str(binary)], env={"COLOR": "false"})

    assert result.exit_code == 2
    assert "ERROR: Unable to parse" in result.output
    assert "invalid UTF-8" in result.output


def test_cli_diff_reports_undecodable_stdin_as_parse_error(tmp_path: Path) -> None:
    _, current = _documents(tmp_path)

    result = runner.invoke(app, ["diff", "-", str(current)], input=b"a: \xff\xfe\n", env={"COLOR": "false"})

    assert result.exit_code == 2
    assert "ERROR: Unable to parse <stdin>" in result.output


def test_cli_diff_output_file_follows_color_env_var(tmp_path: Path) -> None:
    old, current = _documents(tmp_path)
    styled = tmp_path / "styled.txt"
    plain = tmp_path / "plain.txt"

    runner.invoke(app, ["diff", str(old), str(current), "--output", str(styled)], env={"COLOR": "true"})
    runner.invoke(app, ["diff", str(old), str(current), "--output", str(plain)], env={"COLOR": None})

    assert "\x1b[" in styled.read_text(encoding="utf-8")
    assert plain.read_text(encoding="utf-8") == EXPECTED
