import logging
from dataclasses import dataclass, field
from typing import Any, Optional, Sequence

from asyncpg.exceptions import PostgresSyntaxError
from sqlalchemy import text

from moderation_api.base import BaseAccessor, translate_store_errors
from moderation_api.base.errors import StoreError
from moderation_api.store.database import db
from moderation_api.system.params import coerce_params

# registers both tables on the shared metadata
from moderation_api.players.models import PlayerModel  # noqa: F401
from moderation_api.moderations.models import ModerationModel

logger = logging.getLogger(__name__)

MULTIPLE_COMMANDS = "cannot insert multiple commands into a prepared statement"


@dataclass
class QueryResult:
    rows: list[dict[str, Any]] = field(default_factory=list)
    row_count: Optional[int] = None


def row_count_from_status(status: Optional[str]) -> Optional[int]:
    """Parse the row count out of a command tag such as ``UPDATE 3``."""
    if not status:
        return None
    tail = status.rsplit(" ", 1)[-1]
    return int(tail) if tail.isdigit() else None


def _create_schema(connection) -> None:
    db.metadata.create_all(connection, checkfirst=True)
    # create_all skips indexes of tables that already exist
    for index in ModerationModel.__table__.indexes:
        index.create(connection, checkfirst=True)


class SystemAccessor(BaseAccessor):
    @translate_store_errors
    async def init_schema(self) -> None:
        async with self.app.database.engine.begin() as connection:
            await connection.execute(text('CREATE EXTENSION IF NOT EXISTS "uuid-ossp"'))
            await connection.run_sync(_create_schema)

        logger.info("Database schema initialized")

    @translate_store_errors
    async def execute_raw(self, query: str, params: Sequence[Any] = ()) -> QueryResult:
        logger.info("Executing query: %s", query)
        logger.info("Parameters: %s", list(params))

        async with self.app.database.engine.connect() as connection:
            raw_connection = await connection.get_raw_connection()
            driver_connection = raw_connection.driver_connection

            # positional $n placeholders go straight to asyncpg
            try:
                statement = await driver_connection.prepare(query)
            except PostgresSyntaxError as e:
                if params or MULTIPLE_COMMANDS not in str(e):
                    raise
                # scripts run over the simple protocol, which returns no rows
                status = await driver_connection.execute(query)
                return QueryResult(rows=[], row_count=row_count_from_status(status))

            try:
                arguments = coerce_params(statement.get_parameters(), params)
            except (TypeError, ValueError, ArithmeticError) as e:
                raise StoreError(f"invalid input for query argument: {e}") from e

            records = await statement.fetch(*arguments)
            status = statement.get_statusmsg()

        return QueryResult(rows=[dict(record) for record in records],
                           row_count=row_count_from_status(status))
