"""Simple dependency container for wiring core services."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from fortune_indexer.core.config import Settings
from fortune_indexer.domain.events import EventDecoder
from fortune_indexer.infrastructure.database.session import build_engine, build_session_factory, init_db
from fortune_indexer.websocket.manager import ConnectionManager


@dataclass(slots=True)
class ApplicationContainer:
    """Process-wide context built once at startup and handed to every component."""

    settings: Settings
    notifier: ConnectionManager = field(default_factory=ConnectionManager)
    decoder: EventDecoder = field(default_factory=EventDecoder)
    engine: Optional[AsyncEngine] = None
    session_factory: Optional[async_sessionmaker[AsyncSession]] = None

    def init_infrastructure(self) -> None:
        """Ensure the database engine and session factory exist."""
        if self.engine is None:
            self.engine = build_engine(self.settings)
        if self.session_factory is None:
            self.session_factory = build_session_factory(self.engine)

    async def startup(self) -> None:
        self.init_infrastructure()
        assert self.engine is not None  # for mypy
        await init_db(self.engine)

    async def shutdown(self) -> None:
        if self.engine is not None:
            await self.engine.dispose()


def build_container(settings: Settings) -> ApplicationContainer:
    container = ApplicationContainer(settings=settings)
    container.init_infrastructure()
    return container


__all__ = ["ApplicationContainer", "build_container"]
