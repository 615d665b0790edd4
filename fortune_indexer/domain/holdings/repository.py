"""Repository protocols for balances and NFT ownership."""

from __future__ import annotations

from typing import Protocol, Sequence

from fortune_indexer.db.models import Erc404FungibleBalance


class BalanceRepository(Protocol):
    async def get_balance(self, address: str) -> Erc404FungibleBalance | None:
        ...

    async def create_balance(self, address: str) -> Erc404FungibleBalance:
        ...

    async def set_balance(self, model: Erc404FungibleBalance, balance: str) -> Erc404FungibleBalance:
        ...

    async def list_nonzero(self) -> Sequence[Erc404FungibleBalance]:
        ...


class HoldingRepository(Protocol):
    async def get_owner(self, token_id: str) -> str | None:
        ...

    async def delete_token(self, token_id: str) -> int:
        ...

    async def add_holding(self, token_id: str, owner: str) -> None:
        ...

    async def list_token_ids(self, owner: str) -> list[str]:
        ...

    async def list_owners(self) -> list[str]:
        ...
