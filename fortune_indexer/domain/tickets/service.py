"""Domain service for the ticket lifecycle: mint, open, resolve."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Optional, Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from fortune_indexer.db.models import MintingDetails as MintingDetailsModel
from fortune_indexer.infrastructure.database.repositories.minting_repository import SqlMintingDetailsRepository
from fortune_indexer.infrastructure.database.repositories.opening_repository import SqlOpeningRepository

from .models import MintingDetails, MintingLevel, Opening
from .repository import MintingDetailsRepository, OpeningRepository

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class TicketService:
    openings: OpeningRepository
    minting: MintingDetailsRepository

    @classmethod
    def with_session(cls, session: AsyncSession) -> "TicketService":
        return cls(SqlOpeningRepository(session), SqlMintingDetailsRepository(session))

    async def record_opening(
        self,
        *,
        token_id: str,
        opener: str,
        transaction_hash: str,
        token_class: str,
    ) -> Opening:
        model = await self.openings.add_opening(
            token_id=token_id,
            opener=opener.lower(),
            transaction_hash=transaction_hash,
            token_type=token_class,
        )
        return Opening.from_orm(model)

    async def _load_or_create(self, token_id: str, transaction_hash: str) -> MintingDetailsModel:
        model = await self.minting.get_by_token(token_id)
        if model is None:
            model = await self.minting.create(token_id, transaction_hash)
        return model

    async def upsert_minting_levels(
        self,
        *,
        token_id: str,
        transaction_hash: str,
        levels: Iterable[MintingLevel],
    ) -> MintingDetails:
        """Append ``levels`` to the ticket's record; earlier levels are kept."""
        model = await self._load_or_create(token_id, transaction_hash)
        model = await self.minting.append_levels(
            model, [(level.win_amount, level.roll_number) for level in levels]
        )
        logger.debug("Token %s now has %d levels", token_id, len(model.levels))
        return MintingDetails.from_orm(model)

    async def record_resolution(
        self,
        *,
        token_id: str,
        transaction_hash: str,
        roll_result: int,
        win_amount: str,
    ) -> MintingDetails:
        """Overwrite roll result and payout; the latest resolution wins."""
        model = await self._load_or_create(token_id, transaction_hash)
        model = await self.minting.set_resolution(model, roll_result=roll_result, payout=win_amount)
        return MintingDetails.from_orm(model)

    async def list_openings(self, token_ids: Sequence[str]) -> list[Opening]:
        rows = await self.openings.list_by_tokens(token_ids)
        return [Opening.from_orm(row) for row in rows]

    async def get_minting_details(self, token_id: str) -> Optional[MintingDetails]:
        model = await self.minting.get_by_token(token_id)
        return MintingDetails.from_orm(model) if model else None

    async def list_minting_details(self, token_ids: Optional[Sequence[str]] = None) -> list[MintingDetails]:
        rows = await self.minting.list_details(token_ids)
        return [MintingDetails.from_orm(row) for row in rows]
