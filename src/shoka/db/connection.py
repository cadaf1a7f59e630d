# ABOUTME: SQLite database connection management for the Shoka catalog.
# ABOUTME: Opens or creates the catalog file and creates the books table on first use.

import sqlite3
from pathlib import Path

from shoka.db.schema import SCHEMA_V1

DEFAULT_DB_PATH = Path.home() / ".shoka" / "catalog.db"


def _ensure_schema(conn: sqlite3.Connection) -> None:
    """Create the tables and indexes unless the catalog already has them."""
    cursor = conn.execute(
        "SELECT 1 FROM sqlite_master WHERE type='table' AND name='schema_version'"
    )
    if cursor.fetchone() is None:
        conn.executescript(SCHEMA_V1)


def open_catalog(path: Path | None = None) -> sqlite3.Connection:
    """Open or create a Shoka catalog database.

    Missing parent directories are created. Rows come back as
    ``sqlite3.Row`` so columns can be read by name, and the journal runs in
    WAL mode.

    Args:
        path: Database file. Defaults to ``~/.shoka/catalog.db``.
    """
    db_path = path or DEFAULT_DB_PATH
    db_path.parent.mkdir(parents=True, exist_ok=True)

    conn = sqlite3.connect(str(db_path))
    conn.row_factory = sqlite3.Row
    conn.execute("PRAGMA journal_mode=WAL")
    _ensure_schema(conn)
    return conn
