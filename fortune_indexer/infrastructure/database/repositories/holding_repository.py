"""SQLAlchemy repository for NFT ownership, one instance per token class table."""

from __future__ import annotations

from typing import Union

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from fortune_indexer.db.models import Erc404NftHolding, Erc721Holding

HoldingModel = Union[type[Erc404NftHolding], type[Erc721Holding]]


class SqlHoldingRepository:
    def __init__(self, session: AsyncSession, model: HoldingModel) -> None:
        self._session = session
        self._model = model

    @classmethod
    def erc404(cls, session: AsyncSession) -> "SqlHoldingRepository":
        return cls(session, Erc404NftHolding)

    @classmethod
    def erc721(cls, session: AsyncSession) -> "SqlHoldingRepository":
        return cls(session, Erc721Holding)

    async def get_owner(self, token_id: str) -> str | None:
        stmt = select(self._model.owner).where(self._model.token_id == token_id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    async def delete_token(self, token_id: str) -> int:
        stmt = delete(self._model).where(self._model.token_id == token_id)
        result = await self._session.execute(stmt)
        return result.rowcount or 0

    async def add_holding(self, token_id: str, owner: str) -> None:
        self._session.add(self._model(token_id=token_id, owner=owner))
        await self._session.flush()

    async def list_token_ids(self, owner: str) -> list[str]:
        stmt = select(self._model.token_id).where(self._model.owner == owner).order_by(self._model.id)
        result = await self._session.execute(stmt)
        return list(result.scalars().all())

    async def list_owners(self) -> list[str]:
        stmt = select(self._model.owner).distinct().order_by(self._model.owner)
        result = await self._session.execute(stmt)
        return list(result.scalars().all())
