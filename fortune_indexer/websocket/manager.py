"""Connection manager fanning state change notifications out to web clients."""
import json
import logging
import uuid
from typing import Any, Dict

from fastapi import WebSocket

logger = logging.getLogger(__name__)


class ConnectionManager:
    """Observer set for the push channel.

    Delivery is best effort: there is no acknowledgement or replay, and a client
    whose send fails is dropped from the set.
    """

    def __init__(self) -> None:
        self.connections: Dict[str, WebSocket] = {}

    async def connect(self, websocket: WebSocket) -> str:
        await websocket.accept()
        return self.register(websocket)

    def register(self, websocket: WebSocket) -> str:
        client_id = uuid.uuid4().hex
        self.connections[client_id] = websocket
        logger.info("Client %s connected (%d online)", client_id, len(self.connections))
        return client_id

    async def disconnect(self, client_id: str) -> None:
        if self.connections.pop(client_id, None) is not None:
            logger.info("Client %s disconnected", client_id)

    async def send_message(self, client_id: str, message: dict) -> bool:
        websocket = self.connections.get(client_id)
        if websocket is None:
            return False
        try:
            await websocket.send_text(json.dumps(message))
            return True
        except Exception as exc:  # pylint: disable=broad-except
            logger.error("Sending to client %s failed: %s", client_id, exc)
            await self.disconnect(client_id)
            return False

    async def publish(self, event_type: str, data: Any) -> int:
        """Send ``{type, data}`` to every connected client, returning the delivered count."""
        logger.info("Broadcasting %s: %s", event_type, data)
        message = {"type": event_type, "data": data}
        delivered = 0
        for client_id in list(self.connections.keys()):
            if await self.send_message(client_id, message):
                delivered += 1
        return delivered

    def get_online_count(self) -> int:
        return len(self.connections)
