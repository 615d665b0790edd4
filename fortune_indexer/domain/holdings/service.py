"""Domain service applying transfers to balances and NFT ownership."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Union

from sqlalchemy.ext.asyncio import AsyncSession

from fortune_indexer.core.config import ZERO_ADDRESS
from fortune_indexer.infrastructure.database.repositories.balance_repository import SqlBalanceRepository
from fortune_indexer.infrastructure.database.repositories.holding_repository import SqlHoldingRepository

from .exceptions import UnknownTokenTypeError
from .models import (
    ERC404,
    ERC721,
    HOLDER_ERC404_FUNGIBLE,
    HOLDER_ERC404_NFT,
    HOLDER_ERC721,
    FungibleBalance,
    Holdings,
    TokenClass,
)
from .repository import BalanceRepository, HoldingRepository

logger = logging.getLogger(__name__)


def is_zero_address(address: str) -> bool:
    return address.lower() == ZERO_ADDRESS


@dataclass(slots=True)
class HoldingService:
    balances: BalanceRepository
    erc404_nfts: HoldingRepository
    erc721_tokens: HoldingRepository

    @classmethod
    def with_session(cls, session: AsyncSession) -> "HoldingService":
        return cls(
            balances=SqlBalanceRepository(session),
            erc404_nfts=SqlHoldingRepository.erc404(session),
            erc721_tokens=SqlHoldingRepository.erc721(session),
        )

    def _holdings_for(self, token_class: TokenClass) -> HoldingRepository:
        if token_class == ERC721:
            return self.erc721_tokens
        if token_class == ERC404:
            return self.erc404_nfts
        raise UnknownTokenTypeError(token_class)

    async def apply_token_transfer(
        self,
        token_class: TokenClass,
        token_id: str,
        from_address: str,
        to_address: str,
    ) -> None:
        """Move ``token_id`` to ``to_address``, leaving exactly one owner record."""
        repository = self._holdings_for(token_class)
        if not is_zero_address(from_address):
            await repository.delete_token(token_id)
        elif await repository.get_owner(token_id) is not None:
            # ERC404 re-mints ids that were burned to the zero address
            logger.warning("%s token %s minted while an owner record exists, replacing it", token_class, token_id)
            await repository.delete_token(token_id)
        await repository.add_holding(token_id, to_address.lower())

    async def apply_fungible_transfer(self, from_address: str, to_address: str, amount: int) -> None:
        if not is_zero_address(from_address):
            await self.adjust_balance(from_address, -amount)
        await self.adjust_balance(to_address, amount)

    async def adjust_balance(self, address: str, delta: int) -> str:
        address = address.lower()
        model = await self.balances.get_balance(address)
        if model is None:
            model = await self.balances.create_balance(address)

        updated = int(model.balance or "0") + delta
        if updated < 0:
            logger.warning("Balance of %s drops below zero: %s", address, updated)
        await self.balances.set_balance(model, str(updated))
        return model.balance

    async def get_balance(self, address: str) -> str:
        model = await self.balances.get_balance(address.lower())
        return model.balance if model is not None else "0"

    async def get_holdings(self, address: str) -> Holdings:
        address = address.lower()
        return Holdings(
            address=address,
            fungible=await self.get_balance(address),
            erc404_nfts=await self.erc404_nfts.list_token_ids(address),
            erc721_tokens=await self.erc721_tokens.list_token_ids(address),
        )

    async def owned_token_ids(self, address: str, *token_classes: TokenClass) -> list[str]:
        address = address.lower()
        token_ids: list[str] = []
        for token_class in token_classes or (ERC721, ERC404):
            for token_id in await self._holdings_for(token_class).list_token_ids(address):
                if token_id not in token_ids:
                    token_ids.append(token_id)
        return token_ids

    async def list_holders(self, token_type: str) -> Union[list[FungibleBalance], list[str]]:
        if token_type == HOLDER_ERC404_FUNGIBLE:
            rows = await self.balances.list_nonzero()
            return [FungibleBalance.from_orm(row) for row in rows if int(row.balance) > 0]
        if token_type == HOLDER_ERC404_NFT:
            return await self.erc404_nfts.list_owners()
        if token_type == HOLDER_ERC721:
            return await self.erc721_tokens.list_owners()
        raise UnknownTokenTypeError(token_type)
