"""SQLAlchemy repository for processed transaction markers."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from fortune_indexer.db.models import ProcessedTransaction


class SqlProcessedTransactionRepository:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_by_hash(self, transaction_hash: str) -> ProcessedTransaction | None:
        stmt = select(ProcessedTransaction).where(ProcessedTransaction.transaction_hash == transaction_hash)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    async def add(self, transaction_hash: str) -> ProcessedTransaction:
        model = ProcessedTransaction(transaction_hash=transaction_hash)
        self._session.add(model)
        await self._session.flush()
        return model

    async def rollback(self) -> None:
        await self._session.rollback()
