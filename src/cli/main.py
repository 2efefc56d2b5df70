"""kvcatalog CLI entry points.
This module exposes read-only catalog queries over a snapshot fixture.
It maps argparse commands onto CatalogReader calls.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Any, Sequence

from catalog.catalog_reader import CatalogReader
from core.config import CatalogConfig
from core.errors import CatalogError
from core.logging_config import configure_log_level
from core.types import DatabaseInfo, SkippedRecord
from store.snapshot_fixture import load_snapshot_fixture


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(prog="kvcatalog", description="Read-only schema catalog CLI")
    parser.add_argument("--snapshot", help="Override KVCATALOG_SNAPSHOT_PATH for this command")
    subparsers = parser.add_subparsers(dest="command", required=True)
    _add_schema_version_command(subparsers)
    _add_databases_command(subparsers)
    _add_database_command(subparsers)
    _add_tables_command(subparsers)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the kvcatalog CLI.

    Args:
        argv: Optional argument vector.

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        config = CatalogConfig.from_env()
        configure_log_level(config.log_level)
        reader = _build_reader(config, args.snapshot)
        if args.command == "schema-version":
            return _run_schema_version_command(reader)
        if args.command == "databases":
            return _run_databases_command(reader)
        if args.command == "database":
            return _run_database_command(reader, args)
        if args.command == "tables":
            return _run_tables_command(reader, args)
    except CatalogError as error:
        print(f"catalog_error={error}")
        return 1
    parser.error(f"Unsupported command: {args.command}")
    return 2


def _build_reader(config: CatalogConfig, snapshot_path: str | None) -> CatalogReader:
    """Build a reader over the configured or overridden snapshot fixture.

    Args:
        config: Runtime configuration.
        snapshot_path: Optional override path.

    Returns:
        Catalog reader bound to the loaded snapshot.
    """
    path = Path(snapshot_path).expanduser().resolve() if snapshot_path else config.snapshot_path
    return CatalogReader(load_snapshot_fixture(path))


def _run_schema_version_command(reader: CatalogReader) -> int:
    print(reader.get_schema_version())
    return 0


def _run_databases_command(reader: CatalogReader) -> int:
    for database in reader.list_databases():
        print(_format_database(database))
    return 0


def _run_database_command(reader: CatalogReader, args: argparse.Namespace) -> int:
    database = reader.get_database(args.id)
    if database is None:
        print(f"database_not_found={args.id}")
        return 1
    print(_format_database(database))
    return 0


def _run_tables_command(reader: CatalogReader, args: argparse.Namespace) -> int:
    """Handle tables command.

    Args:
        reader: Catalog reader.
        args: Parsed CLI args.

    Returns:
        Exit code.
    """
    tables = reader.list_tables(args.database_id, on_skip=_print_skipped)
    for table in tables:
        print(f"{table.id}\t{table.name}\t{len(table.columns)}")
    return 0


def _print_skipped(record: SkippedRecord) -> None:
    field_key = record.field_key.decode("utf-8", errors="replace")
    print(f"skipped_field={field_key}", file=sys.stderr)


def _format_database(database: DatabaseInfo) -> str:
    return f"{database.id}\t{database.name}\t{database.charset or '-'}\t{database.collate or '-'}"


def _add_schema_version_command(subparsers: Any) -> None:
    """Register schema-version subcommand."""
    subparsers.add_parser("schema-version", help="Print the latest schema version")


def _add_databases_command(subparsers: Any) -> None:
    """Register databases subcommand."""
    subparsers.add_parser("databases", help="List all databases")


def _add_database_command(subparsers: Any) -> None:
    """Register database subcommand."""
    parser = subparsers.add_parser("database", help="Show one database by id")
    parser.add_argument("--id", type=int, required=True, help="Database id")


def _add_tables_command(subparsers: Any) -> None:
    """Register tables subcommand."""
    parser = subparsers.add_parser("tables", help="List tables of a database")
    parser.add_argument("--database-id", type=int, required=True, help="Database id")
