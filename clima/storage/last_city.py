"""Async store for the last successfully searched city."""

import asyncio
import logging
import sqlite3
from pathlib import Path

from clima.models.result import Err, ErrorKind, Ok, Outcome, error_message
from clima.storage import preferences_repo
from clima.storage.database import connect, run_migrations

logger = logging.getLogger(__name__)

LAST_CITY_KEY = "lastCity"


class LastCityStore:
    """One key in the preferences table, accessed off the event loop.

    Each call opens its own connection inside the worker thread.
    """

    def __init__(self, db_path: str | Path):
        self.db_path = Path(db_path)

    async def read(self) -> Outcome[str | None]:
        try:
            value = await asyncio.to_thread(self._read_sync)
        except (sqlite3.Error, OSError) as e:
            logger.warning("Could not read last city from %s: %s", self.db_path, e)
            return Err(ErrorKind.STORAGE, error_message(e))
        return Ok(value)

    async def write(self, city: str) -> Outcome[None]:
        try:
            await asyncio.to_thread(self._write_sync, city)
        except (sqlite3.Error, OSError) as e:
            logger.warning("Could not persist last city to %s: %s", self.db_path, e)
            return Err(ErrorKind.STORAGE, error_message(e))
        return Ok(None)

    async def clear(self) -> Outcome[bool]:
        try:
            removed = await asyncio.to_thread(self._clear_sync)
        except (sqlite3.Error, OSError) as e:
            logger.warning("Could not clear last city in %s: %s", self.db_path, e)
            return Err(ErrorKind.STORAGE, error_message(e))
        return Ok(removed)

    def _open(self) -> sqlite3.Connection:
        conn = connect(self.db_path)
        run_migrations(conn)
        return conn

    def _read_sync(self) -> str | None:
        conn = self._open()
        try:
            return preferences_repo.get_preference(conn, LAST_CITY_KEY)
        finally:
            conn.close()

    def _write_sync(self, city: str) -> None:
        conn = self._open()
        try:
            preferences_repo.set_preference(conn, LAST_CITY_KEY, city)
        finally:
            conn.close()

    def _clear_sync(self) -> bool:
        conn = self._open()
        try:
            return preferences_repo.delete_preference(conn, LAST_CITY_KEY)
        finally:
            conn.close()
