"""Repository for persisted user preferences."""

import sqlite3


def get_preference(conn: sqlite3.Connection, key: str) -> str | None:
    row = conn.execute(
        "SELECT value FROM preferences WHERE key = ?", (key,)
    ).fetchone()
    if row is None:
        return None
    return row[0]


def set_preference(conn: sqlite3.Connection, key: str, value: str) -> None:
    """Store a value, replacing any previous one for the key."""
    conn.execute(
        "INSERT INTO preferences (key, value, updated_at) VALUES (?, ?, CURRENT_TIMESTAMP) "
        "ON CONFLICT(key) DO UPDATE SET value = excluded.value, updated_at = CURRENT_TIMESTAMP",
        (key, value),
    )
    conn.commit()


def delete_preference(conn: sqlite3.Connection, key: str) -> bool:
    cursor = conn.execute("DELETE FROM preferences WHERE key = ?", (key,))
    conn.commit()
    return cursor.rowcount > 0
