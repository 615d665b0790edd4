"""Ticket openings and minting details lookups."""
import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from fortune_indexer.api.deps import get_db_session
from fortune_indexer.domain.holdings import ERC721, HoldingService
from fortune_indexer.domain.tickets import MintingDetails, Opening, TicketService
from fortune_indexer.schemas import MintingDetailsResponse, MintingLevelResponse, OpeningResponse

logger = logging.getLogger(__name__)

router = APIRouter()


def _opening_to_schema(opening: Opening) -> OpeningResponse:
    return OpeningResponse(
        id=opening.id,
        token_id=opening.token_id,
        timestamp=opening.timestamp,
        transaction_hash=opening.transaction_hash,
        token_type=opening.token_type,
        opener=opening.opener,
    )


def _details_to_schema(details: MintingDetails) -> MintingDetailsResponse:
    # a zero roll result reads as "not rolled yet" to clients, same as an empty payout
    return MintingDetailsResponse(
        token_id=details.token_id,
        levels=[
            MintingLevelResponse(win_amount=level.win_amount, roll_number=level.roll_number)
            for level in details.levels
        ],
        roll_result=details.roll_result or None,
        payout=details.payout or None,
        timestamp=details.timestamp,
        transaction_hash=details.transaction_hash,
    )


def _server_error(detail: str, exc: Exception) -> HTTPException:
    logger.error("%s: %s", detail, exc)
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=detail)


@router.get("/openings/{token_id}", response_model=list[OpeningResponse], summary="Openings of a token")
async def list_token_openings(token_id: str, db: AsyncSession = Depends(get_db_session)) -> list[OpeningResponse]:
    try:
        openings = await TicketService.with_session(db).list_openings([token_id])
    except SQLAlchemyError as exc:
        raise _server_error("Error fetching openings", exc) from exc
    return [_opening_to_schema(opening) for opening in openings]


@router.get(
    "/address/{address}/openings",
    response_model=list[OpeningResponse],
    summary="Openings of every token an address holds",
)
async def list_address_openings(address: str, db: AsyncSession = Depends(get_db_session)) -> list[OpeningResponse]:
    try:
        token_ids = await HoldingService.with_session(db).owned_token_ids(address)
        openings = await TicketService.with_session(db).list_openings(token_ids)
    except SQLAlchemyError as exc:
        raise _server_error("Error fetching openings", exc) from exc
    return [_opening_to_schema(opening) for opening in openings]


@router.get(
    "/minting-details/{token_id}",
    response_model=Optional[MintingDetailsResponse],
    response_model_exclude_none=True,
    summary="Minting details of a token",
)
async def get_minting_details(
    token_id: str, db: AsyncSession = Depends(get_db_session)
) -> Optional[MintingDetailsResponse]:
    try:
        details = await TicketService.with_session(db).get_minting_details(token_id)
    except SQLAlchemyError as exc:
        raise _server_error("Error fetching minting details", exc) from exc
    return _details_to_schema(details) if details else None


@router.get(
    "/address/{address}/minting-details",
    response_model=list[MintingDetailsResponse],
    response_model_exclude_none=True,
    summary="Minting details of the ERC721 tickets an address holds",
)
async def list_address_minting_details(
    address: str, db: AsyncSession = Depends(get_db_session)
) -> list[MintingDetailsResponse]:
    logger.info("Fetching minting details for address: %s", address)
    try:
        token_ids = await HoldingService.with_session(db).owned_token_ids(address, ERC721)
        details = await TicketService.with_session(db).list_minting_details(token_ids)
    except SQLAlchemyError as exc:
        raise _server_error("Error fetching minting details", exc) from exc
    logger.info("Found %d minting details for %d tokens", len(details), len(token_ids))
    return [_details_to_schema(item) for item in details]


@router.get(
    "/minting-details",
    response_model=list[MintingDetailsResponse],
    response_model_exclude_none=True,
    summary="All minting details",
)
async def list_minting_details(db: AsyncSession = Depends(get_db_session)) -> list[MintingDetailsResponse]:
    try:
        details = await TicketService.with_session(db).list_minting_details()
    except SQLAlchemyError as exc:
        raise _server_error("Error fetching minting details", exc) from exc
    return [_details_to_schema(item) for item in details]
