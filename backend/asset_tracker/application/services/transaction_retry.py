"""Conflict retry for transactional use cases."""

import asyncio
import logging
from collections.abc import Awaitable, Callable
from typing import TypeVar

from asset_tracker.application.interfaces import TransactionRunner
from asset_tracker.domain.exceptions import TransactionConflictError

logger = logging.getLogger(__name__)

T = TypeVar("T")


async def run_with_retry(
    runner: TransactionRunner,
    work: Callable[[], Awaitable[T]],
    *,
    operation: str,
    max_retries: int = 2,
    backoff_seconds: float = 0.05,
) -> T:
    """Run ``work`` in a transaction, retrying aborted attempts with backoff.

    Retrying is safe because an aborted attempt commits nothing. Once the
    retries are used up the last TransactionConflictError is re-raised
    with a generic message.
    """
    attempt = 0
    while True:
        try:
            return await runner.run(work)
        except TransactionConflictError as exc:
            if attempt >= max_retries:
                logger.error(
                    "%s aborted after %d attempt(s): %s", operation, attempt + 1, exc
                )
                raise TransactionConflictError() from exc
            delay = backoff_seconds * (2 ** attempt)
            attempt += 1
            logger.warning(
                "%s hit a write conflict, retry %d/%d in %.3fs",
                operation,
                attempt,
                max_retries,
                delay,
            )
            await asyncio.sleep(delay)
