import logging

import pytest
from fastapi.testclient import TestClient

from fortune_indexer.core.config import DatabaseSettings, Settings
from fortune_indexer.infrastructure.database.session import build_engine, build_session_factory, init_db
from fortune_indexer.main import create_app


@pytest.fixture(scope="session", autouse=True)
def _set_indexer_logging():
    """
    Set the logging level to DEBUG for the test run
    """
    logging.getLogger("fortune_indexer").setLevel(logging.DEBUG)


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        _env_file=None,
        environment="test",
        database=DatabaseSettings(url=f"sqlite+aiosqlite:///{tmp_path / 'indexer.db'}"),
    )


@pytest.fixture
async def engine(settings):
    engine = build_engine(settings)
    await init_db(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
async def session(engine):
    factory = build_session_factory(engine)
    async with factory() as session:
        yield session


class RecordingNotifier:
    def __init__(self) -> None:
        self.messages: list[dict] = []

    async def publish(self, event_type: str, data: dict) -> int:
        self.messages.append({"type": event_type, "data": data})
        return 1


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture
def client(settings):
    app = create_app(settings)
    with TestClient(app) as test_client:
        yield test_client
