"""Repository protocols for ticket openings and minting details."""

from __future__ import annotations

from typing import Iterable, Optional, Protocol, Sequence

from fortune_indexer.db.models import MintingDetails as MintingDetailsModel, Opening as OpeningModel


class OpeningRepository(Protocol):
    async def add_opening(
        self,
        *,
        token_id: str,
        opener: str,
        transaction_hash: str,
        token_type: str,
    ) -> OpeningModel:
        ...

    async def list_by_tokens(self, token_ids: Sequence[str]) -> Sequence[OpeningModel]:
        ...


class MintingDetailsRepository(Protocol):
    async def get_by_token(self, token_id: str) -> MintingDetailsModel | None:
        ...

    async def create(self, token_id: str, transaction_hash: str) -> MintingDetailsModel:
        ...

    async def append_levels(
        self, model: MintingDetailsModel, levels: Iterable[tuple[str, int]]
    ) -> MintingDetailsModel:
        ...

    async def set_resolution(
        self, model: MintingDetailsModel, *, roll_result: int, payout: str
    ) -> MintingDetailsModel:
        ...

    async def list_details(self, token_ids: Optional[Sequence[str]] = None) -> Sequence[MintingDetailsModel]:
        ...
