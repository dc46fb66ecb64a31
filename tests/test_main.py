"""Test the command line entry point."""
import io
from pathlib import Path
import sys
import zipfile

import pytest

from smart_calculator.main import main, parse_args


def test_parse_args_interactive() -> None:
    assert parse_args([]).file_path is None


def test_parse_args_missing_file(tmp_path: Path) -> None:
    """A script path that does not exist is a usage error."""
    with pytest.raises(SystemExit):
        parse_args([str(tmp_path / "missing.txt")])


def test_main_runs_script(tmp_path: Path, capsys: pytest.CaptureFixture) -> None:
    script = tmp_path / "ops.txt"
    script.write_text("x = 3\nx * x\n")

    main([str(script)])

    results = tmp_path / "ops_txt_results.txt"
    assert results.read_text().splitlines() == ["x = 3 -> OK", "x * x = 9"]
    assert str(results) in capsys.readouterr().out


def test_main_interactive(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture) -> None:
    monkeypatch.delenv("SMART_CALCULATOR_PROMPT", raising=False)
    monkeypatch.setattr("sys.stdin", io.StringIO("2 + 2\n/exit\n"))
    main([])
    assert capsys.readouterr().out.splitlines() == ["4", "Bye!"]


def test_main_rejects_invalid_configuration(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SMART_CALCULATOR_MAX_EXPONENT", "-5")
    with pytest.raises(SystemExit):
        main([])


@pytest.mark.skipif(not hasattr(sys, "get_int_max_str_digits"), reason="no int/str conversion limit")
def test_main_keeps_int_conversion_limit(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture) -> None:
    """Long results are printed without lifting the interpreter-wide conversion limit."""
    limit = sys.get_int_max_str_digits()
    monkeypatch.setattr("sys.stdin", io.StringIO("2 ^ 20000\n/exit\n"))

    main([])

    assert sys.get_int_max_str_digits() == limit
    assert len(capsys.readouterr().out.splitlines()[0]) == 6021


def test_main_reports_archive_member(tmp_path: Path, capsys: pytest.CaptureFixture) -> None:
    archive = tmp_path / "ops.zip"
    with zipfile.ZipFile(archive, "w") as zf:
        zf.writestr("ops.txt", "6 / 4\n")

    main([str(archive)])

    assert "Statements read from ops.txt in ops.zip" in capsys.readouterr().out
    assert (tmp_path / "ops_zip_results.txt").read_text() == "6 / 4 = 1\n"
