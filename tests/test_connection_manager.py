import json

from fortune_indexer.websocket.manager import ConnectionManager


class FakeSocket:
    def __init__(self, fail: bool = False) -> None:
        self.fail = fail
        self.accepted = False
        self.sent: list[dict] = []

    async def accept(self) -> None:
        self.accepted = True

    async def send_text(self, text: str) -> None:
        if self.fail:
            raise RuntimeError("connection reset")
        self.sent.append(json.loads(text))


async def test_publish_reaches_every_client():
    manager = ConnectionManager()
    first, second = FakeSocket(), FakeSocket()
    await manager.connect(first)
    await manager.connect(second)

    delivered = await manager.publish("MINTING_DETAILS_UPDATED", {"tokenId": "1"})

    assert delivered == 2
    assert first.accepted and second.accepted
    assert first.sent == second.sent == [{"type": "MINTING_DETAILS_UPDATED", "data": {"tokenId": "1"}}]


async def test_failed_client_is_dropped():
    manager = ConnectionManager()
    healthy = FakeSocket()
    await manager.connect(healthy)
    await manager.connect(FakeSocket(fail=True))

    assert await manager.publish("MINTING_DETAILS_UPDATED", {"tokenId": "1"}) == 1
    assert manager.get_online_count() == 1
    assert len(healthy.sent) == 1


async def test_disconnect_is_idempotent():
    manager = ConnectionManager()
    client_id = await manager.connect(FakeSocket())

    await manager.disconnect(client_id)
    await manager.disconnect(client_id)

    assert manager.get_online_count() == 0
    assert await manager.publish("MINTING_DETAILS_UPDATED", {}) == 0
