"""Holdings and holders lookups."""
import logging
from typing import Union

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from fortune_indexer.api.deps import get_db_session
from fortune_indexer.domain.holdings import FungibleBalance, HoldingService, UnknownTokenTypeError
from fortune_indexer.schemas import Erc404Holdings, FungibleHolderResponse, HoldingsResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/holdings/{address}", response_model=HoldingsResponse, summary="Holdings of an address")
async def get_holdings(address: str, db: AsyncSession = Depends(get_db_session)) -> HoldingsResponse:
    service = HoldingService.with_session(db)
    try:
        holdings = await service.get_holdings(address)
    except SQLAlchemyError as exc:
        logger.exception("Error fetching holdings for %s", address)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Error fetching holdings") from exc
    return HoldingsResponse(
        erc404=Erc404Holdings(fungible=holdings.fungible, nfts=holdings.erc404_nfts),
        erc721=holdings.erc721_tokens,
    )


@router.get(
    "/holders/{token_type}",
    response_model=list[Union[FungibleHolderResponse, str]],
    summary="Holders of erc404-fungible, erc404-nft or erc721",
)
async def list_holders(token_type: str, db: AsyncSession = Depends(get_db_session)):
    service = HoldingService.with_session(db)
    try:
        holders = await service.list_holders(token_type)
    except UnknownTokenTypeError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid token type") from exc
    except SQLAlchemyError as exc:
        logger.exception("Error fetching holders of %s", token_type)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Error fetching holders") from exc
    return [
        FungibleHolderResponse(address=holder.address, balance=holder.balance)
        if isinstance(holder, FungibleBalance)
        else holder
        for holder in holders
    ]
