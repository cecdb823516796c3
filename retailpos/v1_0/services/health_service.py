from datetime import datetime

from retailpos.core.logger import logger
from retailpos.storage.database import Database


class DatabaseUnavailable(Exception):
    """The store did not answer a round trip."""


class HealthService:
    def __init__(self, database: Database) -> None:
        self.database = database

    async def check_database(self) -> dict:
        """
        Round trip to the store. Returns the server clock on success.

        Raises:
            DatabaseUnavailable: the store could not be reached.
        """
        try:
            now = await self.database.ping()
        except Exception as e:
            logger.error("[HealthService] database ping failed: %s", e)
            raise DatabaseUnavailable(str(e)) from e
        server_time = now.isoformat() if isinstance(now, datetime) else str(now)
        return {"message": "Database connection OK.", "server_time": server_time}
