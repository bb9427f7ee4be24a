"""
Persistence for per-user point counters.

A single ``users`` table keyed by the Discord user id (stored as text, since
snowflakes can exceed SQLite's signed integer range) with one integer counter.
"""

from pathlib import Path
from typing import Optional, Union

import aiosqlite

from .logging import logger


class UserPointsStore:
    """Async SQLite store for the user/points record."""

    def __init__(self, db_path: Union[str, Path]) -> None:
        self.db_path = str(db_path)

    async def initialize(self) -> None:
        """Create the users table if it does not exist."""
        if self.db_path != ":memory:":
            Path(self.db_path).parent.mkdir(parents=True, exist_ok=True)
        async with aiosqlite.connect(self.db_path) as db:
            await db.execute(
                """
                CREATE TABLE IF NOT EXISTS users (
                    id TEXT PRIMARY KEY NOT NULL,
                    points INTEGER NOT NULL DEFAULT 0
                )
                """
            )
            await db.commit()
        logger.info(f"Database ready at {self.db_path}")

    async def get_points(self, user_id: Union[int, str]) -> Optional[int]:
        """Return the user's counter, or None if the user has no record."""
        async with aiosqlite.connect(self.db_path) as db:
            cursor = await db.execute("SELECT points FROM users WHERE id = ?", (str(user_id),))
            row = await cursor.fetchone()
            return row[0] if row else None

    async def ensure_user(self, user_id: Union[int, str]) -> None:
        """Create a zeroed record for the user if none exists."""
        async with aiosqlite.connect(self.db_path) as db:
            await db.execute(
                "INSERT INTO users (id, points) VALUES (?, 0) ON CONFLICT (id) DO NOTHING",
                (str(user_id),)
            )
            await db.commit()

    async def add_points(self, user_id: Union[int, str], amount: int) -> int:
        """Add ``amount`` to the user's counter, creating the record if needed.

        Returns:
            The updated counter value.
        """
        async with aiosqlite.connect(self.db_path) as db:
            await db.execute(
                """
                INSERT INTO users (id, points) VALUES (?, ?)
                ON CONFLICT (id) DO UPDATE SET points = points + excluded.points
                """,
                (str(user_id), amount)
            )
            await db.commit()
            cursor = await db.execute("SELECT points FROM users WHERE id = ?", (str(user_id),))
            row = await cursor.fetchone()
            return row[0]
