"""Stream webhook receiver."""
import logging

from fastapi import APIRouter, Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from fortune_indexer.api.deps import get_container, get_db_session
from fortune_indexer.core.container import ApplicationContainer
from fortune_indexer.domain.webhooks import ERROR_SUPPRESSED, INVALID_PAYLOAD, WebhookProcessor
from fortune_indexer.schemas import MessageResponse, WebhookPayload

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/webhook", response_model=MessageResponse, summary="Receive a stream delivery")
async def receive_webhook(
    request: Request,
    db: AsyncSession = Depends(get_db_session),
    container: ApplicationContainer = Depends(get_container),
) -> MessageResponse:
    # the sender retries anything but 200, so every outcome below answers 200
    try:
        payload = WebhookPayload.model_validate(await request.json())
    except ValueError as exc:
        logger.warning("Invalid webhook payload: %s", exc)
        return MessageResponse(message=INVALID_PAYLOAD)

    processor = WebhookProcessor.from_settings(db, container.settings, container.notifier, container.decoder)
    try:
        result = await processor.process(payload)
    except Exception:  # pylint: disable=broad-except
        logger.exception("Error processing webhook")
        await db.rollback()
        return MessageResponse(message=ERROR_SUPPRESSED)
    return MessageResponse(message=result.message)
