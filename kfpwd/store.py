"""SQLite-backed storage for saved passwords."""

from __future__ import annotations

import os
import sqlite3
import sys
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path

DB_NAME = "passwords.db"

_CREATE_TABLE = """
    CREATE TABLE IF NOT EXISTS passwords (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        name TEXT NOT NULL,
        value TEXT NOT NULL,
        url TEXT,
        created_at DATETIME DEFAULT CURRENT_TIMESTAMP
    )
"""


@dataclass(frozen=True)
class PasswordRecord:
    """One saved password entry."""

    id: int
    name: str
    value: str
    url: str
    created_at: datetime


class StoreError(Exception):
    """Raised when the password database cannot complete an operation."""


def default_db_path() -> Path:
    """Return the database path next to the running program."""
    program_dir = Path(sys.argv[0]).resolve().parent
    return program_dir / DB_NAME


def _parse_timestamp(raw: object) -> datetime:
    if isinstance(raw, datetime):
        moment = raw
    else:
        moment = datetime.fromisoformat(str(raw))
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return moment


class PasswordStore:
    """A connection to the password database, creating its table on open."""

    def __init__(self, path: str | os.PathLike[str]) -> None:
        try:
            self._conn = sqlite3.connect(os.fspath(path))
        except sqlite3.Error as exc:
            raise StoreError(f"连接数据库失败: {exc}") from exc
        try:
            with self._conn:
                self._conn.execute(_CREATE_TABLE)
        except sqlite3.Error as exc:
            self._conn.close()
            raise StoreError(f"创建表失败: {exc}") from exc

    def close(self) -> None:
        """Close the underlying connection."""
        self._conn.close()

    def __enter__(self) -> PasswordStore:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def save(self, name: str, password: str, url: str = "") -> None:
        """Insert a new password entry."""
        try:
            with self._conn:
                self._conn.execute(
                    "INSERT INTO passwords (name, value, url) VALUES (?, ?, ?)",
                    (name, password, url),
                )
        except sqlite3.Error as exc:
            raise StoreError(f"保存密码失败: {exc}") from exc

    def list(self) -> list[PasswordRecord]:
        """Return every saved entry, newest first."""
        try:
            rows = self._conn.execute(
                "SELECT id, name, value, url, created_at FROM passwords "
                "ORDER BY created_at DESC"
            ).fetchall()
        except sqlite3.Error as exc:
            raise StoreError(f"查询密码失败: {exc}") from exc

        records = []
        for record_id, name, value, url, created_at in rows:
            try:
                moment = _parse_timestamp(created_at)
            except (TypeError, ValueError) as exc:
                raise StoreError(f"读取密码记录失败: {exc}") from exc
            records.append(
                PasswordRecord(
                    id=record_id,
                    name=name,
                    value=value,
                    url=url or "",
                    created_at=moment,
                )
            )
        return records

    def delete(self, record_id: int) -> None:
        """Delete the entry with the given id; raise if there is none."""
        try:
            with self._conn:
                cursor = self._conn.execute(
                    "DELETE FROM passwords WHERE id = ?", (record_id,)
                )
        except sqlite3.Error as exc:
            raise StoreError(f"删除密码失败: {exc}") from exc
        if cursor.rowcount == 0:
            raise StoreError(f"未找到ID为{record_id}的密码记录")