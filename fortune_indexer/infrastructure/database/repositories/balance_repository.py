"""SQLAlchemy repository for ERC404 fungible balances."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from fortune_indexer.db.models import Erc404FungibleBalance


class SqlBalanceRepository:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_balance(self, address: str) -> Erc404FungibleBalance | None:
        stmt = select(Erc404FungibleBalance).where(Erc404FungibleBalance.address == address)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    async def create_balance(self, address: str) -> Erc404FungibleBalance:
        model = Erc404FungibleBalance(address=address, balance="0")
        self._session.add(model)
        await self._session.flush()
        return model

    async def set_balance(self, model: Erc404FungibleBalance, balance: str) -> Erc404FungibleBalance:
        model.balance = balance
        await self._session.flush()
        return model

    async def list_nonzero(self) -> list[Erc404FungibleBalance]:
        stmt = (
            select(Erc404FungibleBalance)
            .where(Erc404FungibleBalance.balance != "0")
            .order_by(Erc404FungibleBalance.address)
        )
        result = await self._session.execute(stmt)
        return list(result.scalars().all())
