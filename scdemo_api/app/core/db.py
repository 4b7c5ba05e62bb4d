"""
SQLite storage for the person slice.

``get_connection`` opens a connection to the file named by
``settings.database_url``; ``get_cursor`` wraps one in a commit/close
context manager.  ``init_db`` runs at application startup and brings
the schema up to date from ``MIGRATIONS``: each entry is a
``(version, script)`` pair, applied once and recorded in the
``migrations`` table.  New schema changes are appended with the next
version number, never edited in place.
"""

import logging
import os
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, List, Tuple

from .config import settings

logger = logging.getLogger(__name__)

MIGRATIONS: List[Tuple[int, str]] = [
    # 1: person table.  Email and identity number are unique per person.
    (
        1,
        """
        CREATE TABLE IF NOT EXISTS person (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            name TEXT NOT NULL,
            identity TEXT NOT NULL,
            birth TEXT NOT NULL,
            address TEXT NOT NULL,
            email TEXT NOT NULL,
            phone TEXT NOT NULL,
            gender TEXT NOT NULL DEFAULT 'NONE',
            created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
        );

        CREATE UNIQUE INDEX IF NOT EXISTS idx_person_email ON person(email);
        CREATE UNIQUE INDEX IF NOT EXISTS idx_person_identity ON person(identity);
        CREATE INDEX IF NOT EXISTS idx_person_phone ON person(phone);
        CREATE INDEX IF NOT EXISTS idx_person_name ON person(name);
        """,
    ),
]


def get_database_path() -> str:
    """Absolute path of the SQLite file; relative settings resolve under ``scdemo_api/``."""
    db_path = settings.database_url
    if os.path.isabs(db_path):
        return db_path
    package_dir = Path(__file__).resolve().parents[2]
    return str(package_dir / db_path)


def get_connection() -> sqlite3.Connection:
    """Open a connection whose rows are addressable by column name.

    Dates travel as ISO strings and are parsed by the repository, so
    type detection stays off.
    """
    conn = sqlite3.connect(get_database_path())
    conn.row_factory = sqlite3.Row
    conn.execute("PRAGMA foreign_keys = ON")
    return conn


@contextmanager
def get_cursor() -> Iterator[sqlite3.Cursor]:
    """Yield a cursor; commit when the block succeeds, always close."""
    conn = get_connection()
    try:
        yield conn.cursor()
        conn.commit()
    finally:
        conn.close()


def _schema_version(cursor: sqlite3.Cursor) -> int:
    cursor.execute("CREATE TABLE IF NOT EXISTS migrations (version INTEGER PRIMARY KEY)")
    row = cursor.execute("SELECT MAX(version) AS version FROM migrations").fetchone()
    return row["version"] or 0


def init_db() -> None:
    """Apply every migration newer than the recorded schema version."""
    with get_cursor() as cursor:
        version = _schema_version(cursor)
        pending = [(v, script) for v, script in MIGRATIONS if v > version]
        for next_version, script in pending:
            cursor.executescript(script)
            cursor.execute("INSERT INTO migrations (version) VALUES (?)", (next_version,))
            logger.info("Applied migration %s", next_version)
        if not pending:
            logger.debug("Database schema up to date at version %s", version)
