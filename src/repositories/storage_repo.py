"""Key-value storage repository for database operations."""

import sqlite3


class StorageRepository:
    """Repository holding string values under string keys, one row per key."""

    def __init__(self, conn: sqlite3.Connection):
        """
        Initialize the repository with a database connection.

        Args:
            conn: SQLite database connection
        """
        self._conn = conn
        self._conn.row_factory = sqlite3.Row

    def create_table(self) -> None:
        """Create the Storage table if it doesn't exist."""
        cursor = self._conn.cursor()
        cursor.execute(
            """
            CREATE TABLE IF NOT EXISTS Storage (
                Key TEXT PRIMARY KEY,
                Value TEXT NOT NULL
            )
        """
        )
        self._conn.commit()

    def get_item(self, key: str) -> str | None:
        """
        Read the value stored under a key.

        Args:
            key: The key to look up

        Returns:
            The stored value, or None if the key is absent
        """
        cursor = self._conn.cursor()
        cursor.execute("SELECT Value FROM Storage WHERE Key = ?", (key,))
        row = cursor.fetchone()

        if row is None:
            return None

        return row["Value"]

    def set_item(self, key: str, value: str) -> None:
        """
        Store a value, replacing whatever the key held before.

        The replacement is a single statement, so readers see either the old
        value or the new one.

        Args:
            key: The key to write
            value: The value to store
        """
        cursor = self._conn.cursor()
        cursor.execute(
            """
            INSERT INTO Storage (Key, Value) VALUES (?, ?)
            ON CONFLICT(Key) DO UPDATE SET Value = excluded.Value
        """,
            (key, value),
        )
        self._conn.commit()

