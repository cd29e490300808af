import json
from pathlib import Path

import pytest

from vault_parser import __version__
from vault_parser.parsing import vault_reader
from vault_parser.helpers import parse_options
from vault_parser.main import run


def _run(*argv: str) -> int | str:
    with pytest.raises(SystemExit) as exc_info:
        run(list(argv))
    return exc_info.value.code


def test_parse_options():
    args = parse_options("test", ["vault.xml", "-o", "out.csv", "-a", "-vv"])

    assert args.vault == "vault.xml"
    assert args.output == "out.csv"
    assert args.extract_all is True
    assert args.verbose == 2


def test_version(capsys):
    assert _run("--version") == 0
    assert __version__ in capsys.readouterr().out


def test_table_on_stdout(vault_file: Path, capsys, monkeypatch):
    monkeypatch.setenv("COLUMNS", "300")

    assert _run(str(vault_file)) == 0

    out = capsys.readouterr().out
    assert "PasswordCM" in out
    assert "https://example.com" in out


def test_json_report(vault_file: Path, tmp_path: Path):
    output = tmp_path / "report.json"

    assert _run(str(vault_file), "-a", "-o", str(output)) == 0

    rows = json.loads(output.read_text(encoding="utf-8"))
    assert [row["ID"] for row in rows] == ["1001", "1002", "1003"]
    assert rows[0]["UserNameCM"] == "No UserName"
    assert rows[0]["PasswordCM"] == "CBC"
    assert rows[0]["PasswordIVHex"]
    assert rows[0]["PasswordCTHex"]


def test_missing_vault_is_fatal(tmp_path: Path):
    output = tmp_path / "report.csv"

    assert _run(str(tmp_path / "missing.xml"), "-o", str(output)) == 1
    assert not output.exists()


def test_unsupported_extension_is_fatal(vault_file: Path, tmp_path: Path):
    output = tmp_path / "report.txt"

    assert _run(str(vault_file), "-o", str(output)) == 1
    assert not output.exists()


def test_malformed_vault_is_fatal(tmp_path: Path):
    vault = tmp_path / "broken.xml"
    vault.write_text("<response>")

    assert _run(str(vault)) == 1


def test_invalid_sort_column_is_fatal(vault_file: Path, tmp_path: Path, monkeypatch):
    monkeypatch.setenv("VAULT_PARSER_SORT_COLUMN", "Nope")
    output = tmp_path / "report.csv"

    code = _run(str(vault_file), "-o", str(output))

    assert "Invalid configuration" in code
    assert not output.exists()


def test_unreadable_vault_is_fatal(vault_file: Path, tmp_path: Path, monkeypatch):
    def deny(*args, **kwargs):
        raise PermissionError(13, "Permission denied")

    monkeypatch.setattr(vault_reader.DefusedET, "parse", deny)
    output = tmp_path / "report.json"

    assert _run(str(vault_file), "-o", str(output)) == 1
    assert not output.exists()


def test_table_with_brackets_in_url(tmp_path: Path, capsys, monkeypatch):
    monkeypatch.setenv("COLUMNS", "300")
    url = "https://x.example/[/x]"
    vault = tmp_path / "vault.xml"
    vault.write_text(
        f'<response><accounts><account id="1" url="{url.encode().hex()}"/></accounts></response>'
    )

    assert _run(str(vault)) == 0
    assert url in capsys.readouterr().out
