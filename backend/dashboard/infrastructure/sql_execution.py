"""SQL Execution: run one parameterized statement and map driver failures.

Invariants:
    - Values reach the driver only as bound parameters (SQLAlchemy constructs)
    - Any SQLAlchemyError rolls the session back and becomes DatabaseError
    - Writes commit immediately; reads leave the transaction open so a
      following write in the same session shares it
"""

import logging

from sqlalchemy.engine import Result
from sqlalchemy.exc import DBAPIError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql import Executable

from dashboard.core.errors import DatabaseError, ErrorContext

logger = logging.getLogger(__name__)


def describe_cause(exc: SQLAlchemyError) -> str:
    """Driver message without SQLAlchemy's statement/parameter dump."""
    if isinstance(exc, DBAPIError) and exc.orig is not None:
        return str(exc.orig)
    return str(exc).split("\n", 1)[0]


async def execute(
    session: AsyncSession,
    statement: Executable,
    operation: str,
    *,
    commit: bool = False,
    entity: str | None = None,
) -> Result:
    try:
        result = await session.execute(statement)
        if commit:
            await session.commit()
        return result
    except SQLAlchemyError as e:
        await session.rollback()
        cause = describe_cause(e)
        logger.error(
            f"DB {operation} failed: {cause}",
            extra={"operation": operation, "entity": entity},
        )
        raise DatabaseError(cause, operation, ErrorContext(entity=entity)) from e
