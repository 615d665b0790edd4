"""Repository protocol for processed transaction markers."""

from __future__ import annotations

from typing import Protocol

from fortune_indexer.db.models import ProcessedTransaction


class ProcessedTransactionRepository(Protocol):
    async def get_by_hash(self, transaction_hash: str) -> ProcessedTransaction | None:
        ...

    async def add(self, transaction_hash: str) -> ProcessedTransaction:
        ...

    async def rollback(self) -> None:
        ...
