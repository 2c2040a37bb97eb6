"""SQLite connection helper."""

import sqlite3
from pathlib import Path


def connect(db_path: str | Path) -> sqlite3.Connection:
    """Open a connection with foreign key enforcement enabled.

    SQLite only honours ``PRAGMA foreign_keys`` for the connection that set
    it, so every manager opens its connections through here.
    """
    conn = sqlite3.connect(db_path)
    conn.execute("PRAGMA foreign_keys = ON")
    return conn
