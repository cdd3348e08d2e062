"""SQLite storage for accounts, zones and records."""

from __future__ import annotations

import os
import sqlite3
from dataclasses import dataclass
from datetime import datetime
from types import TracebackType
from typing import Any

from hipforge.models import Account, Record, RecordType

DEFAULT_PATH = "db/hip-forge.db"

_SCHEMA = (
    """CREATE TABLE IF NOT EXISTS accounts (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        created_at DATETIME,
        updated_at DATETIME,
        deleted_at DATETIME,
        name TEXT,
        token TEXT,
        zone_id INTEGER
    )""",
    "CREATE INDEX IF NOT EXISTS idx_accounts_deleted_at ON accounts (deleted_at)",
    """CREATE TABLE IF NOT EXISTS records (
        id TEXT PRIMARY KEY,
        name TEXT,
        ttl INTEGER,
        type TEXT,
        value TEXT,
        created DATETIME,
        updated DATETIME,
        zone_id INTEGER,
        account_id INTEGER,
        hidden NUMERIC DEFAULT 1
    )""",
    """CREATE TABLE IF NOT EXISTS zones (
        id TEXT PRIMARY KEY,
        name TEXT,
        ttl INTEGER,
        registrar TEXT,
        legacy_dns_host TEXT,
        created DATETIME,
        verified DATETIME,
        modified DATETIME,
        project TEXT,
        owner TEXT,
        permission TEXT,
        status TEXT,
        paused NUMERIC,
        is_secondary_dns NUMERIC,
        account_id INTEGER,
        zone_type_id INTEGER
    )""",
    """CREATE TABLE IF NOT EXISTS zone_types (
        id TEXT PRIMARY KEY,
        name TEXT,
        description TEXT,
        prices TEXT
    )""",
    "CREATE TABLE IF NOT EXISTS nameservers (name TEXT PRIMARY KEY)",
    """CREATE TABLE IF NOT EXISTS zones_nameservers (
        zone_id TEXT,
        nameserver_name TEXT,
        PRIMARY KEY (zone_id, nameserver_name)
    )""",
    """CREATE TABLE IF NOT EXISTS zones_legacy_nameservers (
        zone_id TEXT,
        nameserver_name TEXT,
        PRIMARY KEY (zone_id, nameserver_name)
    )""",
)


def _parse_time(value: Any) -> datetime | None:
    if not value:
        return None
    if isinstance(value, datetime):
        return value
    return datetime.fromisoformat(str(value))


def _record_type(value: Any) -> RecordType | str:
    text = value or ""
    try:
        return RecordType(text)
    except ValueError:
        return text


def _account(row: sqlite3.Row) -> Account:
    return Account(
        id=row["id"],
        name=row["name"] or "",
        token=row["token"] or "",
        zone_id=row["zone_id"] or 0,
        created_at=_parse_time(row["created_at"]),
        updated_at=_parse_time(row["updated_at"]),
        deleted_at=_parse_time(row["deleted_at"]),
    )


def _record(row: sqlite3.Row) -> Record:
    return Record(
        id=row["id"],
        name=row["name"] or "",
        ttl=row["ttl"] or 0,
        type=_record_type(row["type"]),
        value=row["value"] or "",
        created=_parse_time(row["created"]),
        updated=_parse_time(row["updated"]),
        zone_id=row["zone_id"] or 0,
        account_id=row["account_id"] or 0,
        hidden=bool(row["hidden"]),
    )


@dataclass
class Database:
    """An open connection to the application database."""

    connection: sqlite3.Connection

    def migrate(self) -> None:
        """Create any missing tables."""
        with self.connection:
            for statement in _SCHEMA:
                self.connection.execute(statement)

    def accounts(self) -> list[Account]:
        """All accounts that have not been deleted."""
        rows = self.connection.execute(
            "SELECT * FROM accounts WHERE deleted_at IS NULL ORDER BY id"
        )
        return [_account(row) for row in rows]

    def records(self, account_id: int = 0, hidden: bool = False) -> list[Record]:
        """Records matching the given account and hidden flag.

        A zero account_id or a false hidden flag places no condition.
        """
        conditions = []
        params: list[Any] = []
        if account_id:
            conditions.append("account_id = ?")
            params.append(account_id)
        if hidden:
            conditions.append("hidden = ?")
            params.append(1)
        query = "SELECT * FROM records"
        if conditions:
            query += " WHERE " + " AND ".join(conditions)
        query += " ORDER BY rowid"
        return [_record(row) for row in self.connection.execute(query, params)]

    def close(self) -> None:
        """Close the connection."""
        self.connection.close()

    def __enter__(self) -> Database:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        self.close()


def open_database(path: str | os.PathLike[str] = DEFAULT_PATH) -> Database:
    """Open the database at path and bring its schema up to date."""
    connection = sqlite3.connect(os.fspath(path), check_same_thread=False)
    connection.row_factory = sqlite3.Row
    database = Database(connection)
    try:
        database.migrate()
    except sqlite3.Error:
        connection.close()
        raise
    return database