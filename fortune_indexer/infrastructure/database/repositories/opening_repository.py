"""SQLAlchemy repository for ticket openings."""

from __future__ import annotations

from typing import Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from fortune_indexer.db.models import Opening


class SqlOpeningRepository:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def add_opening(
        self,
        *,
        token_id: str,
        opener: str,
        transaction_hash: str,
        token_type: str,
    ) -> Opening:
        model = Opening(
            token_id=token_id,
            opener=opener,
            transaction_hash=transaction_hash,
            token_type=token_type,
        )
        self._session.add(model)
        await self._session.flush()
        return model

    async def list_by_tokens(self, token_ids: Sequence[str]) -> list[Opening]:
        if not token_ids:
            return []
        stmt = (
            select(Opening)
            .where(Opening.token_id.in_(list(token_ids)))
            .order_by(Opening.timestamp.desc(), Opening.id.desc())
        )
        result = await self._session.execute(stmt)
        return list(result.scalars().all())
