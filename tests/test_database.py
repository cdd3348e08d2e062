import sqlite3

import pytest

from hipforge.database import open_database
from hipforge.models import RecordType


@pytest.fixture
def db(tmp_path):
    database = open_database(tmp_path / "app.db")
    yield database
    database.close()


def _tables(db):
    rows = db.connection.execute("SELECT name FROM sqlite_master WHERE type = 'table'")
    return {row["name"] for row in rows}


def test_open_creates_all_tables(db):
    expected = {
        "accounts",
        "records",
        "zones",
        "zone_types",
        "nameservers",
        "zones_nameservers",
        "zones_legacy_nameservers",
    }
    assert expected <= _tables(db)


def test_migrate_is_idempotent(db):
    before = _tables(db)
    db.migrate()
    assert _tables(db) == before


def test_open_in_missing_directory_fails(tmp_path):
    with pytest.raises(sqlite3.OperationalError):
        open_database(tmp_path / "missing" / "app.db")


def test_accounts_skip_deleted(db):
    with db.connection:
        db.connection.execute("INSERT INTO accounts (name, token) VALUES ('home', 'token')")
        db.connection.execute(
            "INSERT INTO accounts (name, token, deleted_at) VALUES ('gone', 'token', '2024-01-01 00:00:00')"
        )
    accounts = db.accounts()
    assert [account.name for account in accounts] == ["home"]
    assert accounts[0].token == "token"
    assert accounts[0].deleted_at is None


def test_accounts_empty(db):
    assert db.accounts() == []


def test_record_hidden_defaults_to_true(db):
    with db.connection:
        db.connection.execute("INSERT INTO records (id, name, account_id) VALUES ('r1', 'www', 5)")
    records = db.records(5, True)
    assert [record.id for record in records] == ["r1"]
    assert records[0].hidden is True


def test_records_filter_by_account_and_flag(db):
    with db.connection:
        db.connection.executemany(
            "INSERT INTO records (id, name, type, account_id, hidden) VALUES (?, ?, ?, ?, ?)",
            [
                ("a", "one", "A", 1, 1),
                ("b", "two", "AAAA", 1, 0),
                ("c", "three", "TXT", 2, 1),
            ],
        )
    assert [r.id for r in db.records(1, True)] == ["a"]
    assert [r.id for r in db.records(1, False)] == ["a", "b"]
    assert [r.id for r in db.records(0, True)] == ["a", "c"]
    assert [r.id for r in db.records()] == ["a", "b", "c"]


def test_records_keep_known_and_unknown_types(db):
    with db.connection:
        db.connection.execute("INSERT INTO records (id, type, account_id) VALUES ('a', 'MX', 1)")
        db.connection.execute("INSERT INTO records (id, type, account_id) VALUES ('b', 'ODD', 1)")
    types = [record.type for record in db.records(1)]
    assert types == [RecordType.MX, "ODD"]


def test_context_manager_closes(tmp_path):
    with open_database(tmp_path / "ctx.db") as database:
        assert database.accounts() == []
    with pytest.raises(sqlite3.ProgrammingError):
        database.accounts()


def test_data_survives_reopen(tmp_path):
    path = tmp_path / "persist.db"
    with open_database(path) as database, database.connection:
        database.connection.execute("INSERT INTO accounts (name) VALUES ('kept')")
    with open_database(path) as database:
        assert [account.name for account in database.accounts()] == ["kept"]