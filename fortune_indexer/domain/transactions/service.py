"""Idempotency guard keyed by transaction hash."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from fortune_indexer.infrastructure.database.repositories.transaction_repository import (
    SqlProcessedTransactionRepository,
)

from .repository import ProcessedTransactionRepository

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ProcessedTransactionService:
    repository: ProcessedTransactionRepository

    @classmethod
    def with_session(cls, session: AsyncSession) -> "ProcessedTransactionService":
        return cls(SqlProcessedTransactionRepository(session))

    async def already_processed(self, transaction_hash: str) -> bool:
        return await self.repository.get_by_hash(transaction_hash) is not None

    async def mark_processed(self, transaction_hash: str) -> bool:
        """Record the marker; ``False`` means another delivery got there first.

        A duplicate marker leaves the session unusable, so the pending work of
        this delivery is rolled back with it.
        """
        try:
            await self.repository.add(transaction_hash)
        except IntegrityError:
            await self.repository.rollback()
            logger.info("Transaction %s was marked processed concurrently, discarding", transaction_hash)
            return False
        return True
