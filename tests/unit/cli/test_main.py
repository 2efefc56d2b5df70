"""Unit tests for CLI command handling."""

from __future__ import annotations

import pytest

from cli.main import main
from tests.fixture_paths import fixture_path

_SNAPSHOT = str(fixture_path("catalog_snapshot.json"))


def test_cli_schema_version_prints_integer(capsys) -> None:
    """CLI should print the schema version."""
    exit_code = main(["--snapshot", _SNAPSHOT, "schema-version"])
    output = capsys.readouterr().out.strip()

    assert exit_code == 0 and output == "42"


def test_cli_databases_prints_one_line_per_database(capsys) -> None:
    """CLI should list databases in bucket order."""
    exit_code = main(["--snapshot", _SNAPSHOT, "databases"])
    lines = capsys.readouterr().out.strip().splitlines()

    assert exit_code == 0
    assert lines == ["1\ttest\tutf8mb4\tutf8mb4_bin", "2\tmysql\t-\t-"]


def test_cli_database_returns_one_for_missing_id(capsys) -> None:
    """CLI should report absent databases with exit code one."""
    exit_code = main(["--snapshot", _SNAPSHOT, "database", "--id", "404"])
    output = capsys.readouterr().out.strip()

    assert exit_code == 1 and output == "database_not_found=404"


def test_cli_tables_reports_skipped_fields(capsys) -> None:
    """CLI should print tables and report skipped fields on stderr."""
    exit_code = main(["--snapshot", _SNAPSHOT, "tables", "--database-id", "1"])
    captured = capsys.readouterr()

    assert exit_code == 0
    assert captured.out.strip() == "10\tt1\t2"
    assert "skipped_field=Table:12" in captured.err


def test_cli_uses_snapshot_path_from_environment(
    monkeypatch: pytest.MonkeyPatch,
    capsys,
) -> None:
    """CLI should fall back to KVCATALOG_SNAPSHOT_PATH."""
    monkeypatch.setenv("KVCATALOG_SNAPSHOT_PATH", _SNAPSHOT)

    exit_code = main(["database", "--id", "2"])
    output = capsys.readouterr().out.strip()

    assert exit_code == 0 and output == "2\tmysql\t-\t-"


def test_cli_prints_catalog_errors_without_traceback(tmp_path, capsys) -> None:
    """CLI should print a friendly error for missing snapshots."""
    exit_code = main(["--snapshot", str(tmp_path / "missing.json"), "databases"])
    output = capsys.readouterr().out.strip()

    assert exit_code == 1 and output.startswith("catalog_error=")
