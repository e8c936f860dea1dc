"""SQLite-backed store of git identity profiles.

The database lives in a single file (``~/.gitsu/db.sqlite`` by default) and
holds one table keyed by profile name. The store is opened at the start of
every command and closed when the command finishes.
"""

import logging
import sqlite3
from pathlib import Path

from gitsu.errors import DuplicateName, InvalidProfile, NotFound, StorageUnavailable
from gitsu.models import Profile

logger = logging.getLogger(__name__)

SCHEMA = """
CREATE TABLE IF NOT EXISTS users (
    name  TEXT PRIMARY KEY CHECK (name <> ''),
    email TEXT NOT NULL CHECK (email <> '')
)
"""


def ensure_schema(conn: sqlite3.Connection) -> None:
    """Create the profiles table if missing (non-destructive)."""
    with conn:
        conn.execute(SCHEMA)


class ProfileStore:
    """Persists profiles to a SQLite database file.

    Use ProfileStore.open() rather than the constructor so the backing file,
    its directory and the schema are created on first use.
    """

    def __init__(self, conn: sqlite3.Connection, db_path: Path):
        self._conn = conn
        self.db_path = db_path

    @classmethod
    def open(cls, db_path: Path) -> "ProfileStore":
        """Open (creating if needed) the profile database.

        Args:
            db_path: Path to the SQLite file.

        Returns:
            A ready-to-use ProfileStore.

        Raises:
            StorageUnavailable: If the directory cannot be created or the
                database cannot be opened or initialized.
        """
        try:
            db_path.parent.mkdir(parents=True, exist_ok=True)
            conn = sqlite3.connect(db_path)
        except (OSError, sqlite3.Error) as e:
            raise StorageUnavailable(db_path, e) from e

        conn.row_factory = sqlite3.Row
        try:
            ensure_schema(conn)
        except sqlite3.Error as e:
            conn.close()
            raise StorageUnavailable(db_path, e) from e

        logger.debug("Opened profile store at %s", db_path)
        return cls(conn, db_path)

    def close(self) -> None:
        """Close the underlying connection."""
        self._conn.close()

    def __enter__(self) -> "ProfileStore":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def create_profile(self, name: str, email: str) -> Profile:
        """Insert a new profile.

        Values are stored exactly as given.

        Raises:
            InvalidProfile: If name or email is empty.
            DuplicateName: If a profile with this name already exists.
        """
        if not name:
            raise InvalidProfile("profile name must not be empty")
        if not email:
            raise InvalidProfile("profile email must not be empty")

        try:
            with self._conn:
                self._conn.execute(
                    "INSERT INTO users (name, email) VALUES (?, ?)",
                    (name, email),
                )
        except sqlite3.IntegrityError as e:
            raise DuplicateName(name) from e
        except sqlite3.Error as e:
            raise StorageUnavailable(self.db_path, e) from e

        logger.debug("Created profile %r", name)
        return Profile(name=name, email=email)

    def list_profiles(self) -> list[Profile]:
        """Return all profiles, sorted by name."""
        try:
            rows = self._conn.execute("SELECT name, email FROM users ORDER BY name").fetchall()
        except sqlite3.Error as e:
            raise StorageUnavailable(self.db_path, e) from e
        return [Profile.from_row(row) for row in rows]

    def find_profile(self, name: str) -> Profile:
        """Look up a profile by exact name.

        Raises:
            NotFound: If no profile has this name.
        """
        try:
            row = self._conn.execute(
                "SELECT name, email FROM users WHERE name = ?", (name,)
            ).fetchone()
        except sqlite3.Error as e:
            raise StorageUnavailable(self.db_path, e) from e
        if row is None:
            raise NotFound(name)
        return Profile.from_row(row)

    def delete_profile(self, name: str) -> bool:
        """Remove a profile by name.

        Returns:
            True if a row was removed, False if no profile had this name.
        """
        try:
            with self._conn:
                cur = self._conn.execute("DELETE FROM users WHERE name = ?", (name,))
        except sqlite3.Error as e:
            raise StorageUnavailable(self.db_path, e) from e
        deleted = cur.rowcount > 0
        logger.debug("Delete profile %r: %s", name, "removed" if deleted else "absent")
        return deleted

    def count(self) -> int:
        """Number of stored profiles."""
        try:
            row = self._conn.execute("SELECT COUNT(*) FROM users").fetchone()
        except sqlite3.Error as e:
            raise StorageUnavailable(self.db_path, e) from e
        return row[0]
