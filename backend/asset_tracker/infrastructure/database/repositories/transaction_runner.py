"""SQLAlchemy implementation of the TransactionRunner port."""

import logging
from collections.abc import Awaitable, Callable
from typing import TypeVar

from sqlalchemy.exc import IntegrityError, OperationalError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm.exc import StaleDataError

from asset_tracker.application.interfaces import TransactionRunner
from asset_tracker.domain.exceptions import TransactionConflictError

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Errors the store raises when a concurrent writer got there first:
# unique-constraint violations, optimistic version mismatches, lock timeouts
# and serialization failures.
_CONFLICT_ERRORS = (IntegrityError, StaleDataError, OperationalError)


class SQLAlchemyTransactionRunner(TransactionRunner):
    """Commits the request session after ``work`` or rolls everything back."""

    def __init__(self, session: AsyncSession):
        self._session = session

    async def run(self, work: Callable[[], Awaitable[T]]) -> T:
        try:
            result = await work()
            await self._session.commit()
        except _CONFLICT_ERRORS as exc:
            await self._session.rollback()
            logger.warning("Transaction rolled back on conflict: %s", type(exc).__name__)
            raise TransactionConflictError() from exc
        except Exception:
            await self._session.rollback()
            raise
        return result
