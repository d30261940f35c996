import sqlite3
import sys
from datetime import datetime, timedelta, timezone

import pytest

from kfpwd.store import PasswordRecord, PasswordStore, StoreError, default_db_path


@pytest.fixture
def store(tmp_path):
    with PasswordStore(tmp_path / "passwords.db") as opened:
        yield opened


def test_list_empty(store):
    assert store.list() == []


def test_save_and_list_round_trip(store):
    password = "password"
    store.save("mail", password, "https://example.com")
    records = store.list()
    assert len(records) == 1
    record = records[0]
    assert isinstance(record, PasswordRecord)
    assert record.name == "mail"
    assert record.value == password
    assert record.url == "https://example.com"


def test_created_at_is_recent_utc(store):
    store.save("mail", "password", "")
    record = store.list()[0]
    assert record.created_at.tzinfo is not None
    now = datetime.now(timezone.utc)
    assert abs(now - record.created_at) < timedelta(minutes=5)


def test_empty_url_preserved(store):
    store.save("mail", "password")
    assert store.list()[0].url == ""


def test_ids_are_distinct(store):
    store.save("a", "password")
    store.save("b", "password")
    records = store.list()
    assert len({r.id for r in records}) == 2
    assert {r.name for r in records} == {"a", "b"}


def test_delete_removes_record(store):
    store.save("a", "password")
    store.save("b", "password")
    target = next(r for r in store.list() if r.name == "a")
    store.delete(target.id)
    assert [r.name for r in store.list()] == ["b"]


def test_delete_missing_raises(store):
    with pytest.raises(StoreError, match="未找到ID为42的密码记录"):
        store.delete(42)


def test_delete_twice_raises(store):
    store.save("a", "password")
    record_id = store.list()[0].id
    store.delete(record_id)
    with pytest.raises(StoreError):
        store.delete(record_id)


def test_persistence_across_connections(tmp_path):
    path = tmp_path / "passwords.db"
    with PasswordStore(path) as first:
        first.save("mail", "password", "https://example.com")
    with PasswordStore(path) as second:
        names = [r.name for r in second.list()]
    assert names == ["mail"]


def test_list_orders_newest_first(tmp_path):
    path = tmp_path / "passwords.db"
    PasswordStore(path).close()
    conn = sqlite3.connect(path)
    with conn:
        conn.execute(
            "INSERT INTO passwords (name, value, url, created_at) VALUES (?, ?, ?, ?)",
            ("old", "password", "", "2020-01-01 10:00:00"),
        )
        conn.execute(
            "INSERT INTO passwords (name, value, url, created_at) VALUES (?, ?, ?, ?)",
            ("new", "password", "", "2024-06-01 10:00:00"),
        )
    conn.close()
    with PasswordStore(path) as store:
        records = store.list()
    assert [r.name for r in records] == ["new", "old"]
    assert records[0].created_at.year == 2024


def test_operations_after_close_raise(tmp_path):
    store = PasswordStore(tmp_path / "passwords.db")
    store.close()
    with pytest.raises(StoreError, match="保存密码失败"):
        store.save("a", "password")


def test_open_in_missing_directory_raises(tmp_path):
    with pytest.raises(StoreError):
        PasswordStore(tmp_path / "missing" / "dir" / "passwords.db")


def test_default_db_path_next_to_program(tmp_path, monkeypatch):
    monkeypatch.setattr(sys, "argv", [str(tmp_path / "kfpwd")])
    assert default_db_path() == tmp_path.resolve() / "passwords.db"