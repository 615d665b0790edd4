"""Reusable FastAPI dependencies."""

from __future__ import annotations

from collections.abc import AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.requests import HTTPConnection

from fortune_indexer.core.container import ApplicationContainer


def get_container(connection: HTTPConnection) -> ApplicationContainer:
    return connection.app.state.container


async def get_db_session(
    container: ApplicationContainer = Depends(get_container),
) -> AsyncGenerator[AsyncSession, None]:
    container.init_infrastructure()
    assert container.session_factory is not None  # for mypy
    async with container.session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


__all__ = [
    "get_container",
    "get_db_session",
]
