"""SQLAlchemy repository for minting details and their levels."""

from __future__ import annotations

from typing import Iterable, Optional, Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from fortune_indexer.db.models import MintingDetails, MintingLevel


class SqlMintingDetailsRepository:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_by_token(self, token_id: str) -> MintingDetails | None:
        stmt = select(MintingDetails).where(MintingDetails.token_id == token_id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    async def create(self, token_id: str, transaction_hash: str) -> MintingDetails:
        model = MintingDetails(token_id=token_id, transaction_hash=transaction_hash, levels=[])
        self._session.add(model)
        await self._session.flush()
        return model

    async def append_levels(self, model: MintingDetails, levels: Iterable[tuple[str, int]]) -> MintingDetails:
        position = len(model.levels)
        for win_amount, roll_number in levels:
            model.levels.append(MintingLevel(position=position, win_amount=win_amount, roll_number=str(roll_number)))
            position += 1
        await self._session.flush()
        return model

    async def set_resolution(self, model: MintingDetails, *, roll_result: int, payout: str) -> MintingDetails:
        model.roll_result = str(roll_result)
        model.payout = payout
        await self._session.flush()
        return model

    async def list_details(self, token_ids: Optional[Sequence[str]] = None) -> list[MintingDetails]:
        stmt = select(MintingDetails).order_by(MintingDetails.timestamp.desc(), MintingDetails.id.desc())
        if token_ids is not None:
            if not token_ids:
                return []
            stmt = stmt.where(MintingDetails.token_id.in_(list(token_ids)))
        result = await self._session.execute(stmt)
        return list(result.scalars().all())
