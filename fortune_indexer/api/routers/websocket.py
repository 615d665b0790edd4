"""WebSocket push channel for UI clients."""
import logging

from fastapi import APIRouter, WebSocket, WebSocketDisconnect

from fortune_indexer.core.container import ApplicationContainer

logger = logging.getLogger(__name__)

router = APIRouter()


@router.websocket("/ws")
async def updates_socket(websocket: WebSocket) -> None:
    container: ApplicationContainer = websocket.app.state.container
    manager = container.notifier
    client_id = await manager.connect(websocket)
    try:
        while True:
            # clients only listen; anything they send is dropped
            await websocket.receive_text()
    except WebSocketDisconnect:
        logger.info("Client %s closed the connection", client_id)
    finally:
        await manager.disconnect(client_id)
