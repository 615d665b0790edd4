"""Pydantic schemas used across the project."""
import logging
from datetime import datetime, timezone
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, ValidationInfo, field_serializer, field_validator
from pydantic.alias_generators import to_camel

logger = logging.getLogger(__name__)


def isoformat_utc(value: datetime) -> str:
    """Millisecond ISO-8601 in UTC with a ``Z`` suffix."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    value = value.astimezone(timezone.utc)
    return value.strftime("%Y-%m-%dT%H:%M:%S.") + f"{value.microsecond // 1000:03d}Z"


class StreamModel(BaseModel):
    """Inbound stream payload pieces; unknown keys are ignored and numbers read as text."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore", coerce_numbers_to_str=True)


class NftTransferPayload(StreamModel):
    contract: Optional[str] = None
    token_id: Optional[str] = Field(None, alias="tokenId")
    from_address: Optional[str] = Field(None, alias="from")
    to_address: Optional[str] = Field(None, alias="to")
    transaction_hash: Optional[str] = Field(None, alias="transactionHash")


class Erc20TransferPayload(StreamModel):
    contract: Optional[str] = None
    from_address: Optional[str] = Field(None, alias="from")
    to_address: Optional[str] = Field(None, alias="to")
    value: Optional[str] = None
    transaction_hash: Optional[str] = Field(None, alias="transactionHash")


class StreamLogPayload(StreamModel):
    address: Optional[str] = None
    data: Optional[str] = None
    topic0: Optional[str] = None
    topic1: Optional[str] = None
    topic2: Optional[str] = None
    topic3: Optional[str] = None
    transaction_hash: Optional[str] = Field(None, alias="transactionHash")
    log_index: Optional[str] = Field(None, alias="logIndex")


STREAM_ENTRY_MODELS: dict[str, type[StreamModel]] = {
    "nft_transfers": NftTransferPayload,
    "erc20_transfers": Erc20TransferPayload,
    "logs": StreamLogPayload,
}


class WebhookPayload(StreamModel):
    confirmed: bool = False
    nft_transfers: list[NftTransferPayload] = Field(default_factory=list, alias="nftTransfers")
    erc20_transfers: list[Erc20TransferPayload] = Field(default_factory=list, alias="erc20Transfers")
    block: Optional[dict[str, Any]] = None
    logs: list[StreamLogPayload] = Field(default_factory=list)

    @field_validator("nft_transfers", "erc20_transfers", "logs", mode="before")
    @classmethod
    def _drop_malformed_entries(cls, value: Any, info: ValidationInfo) -> list:
        """A null list reads as empty; entries that do not parse are logged and left out."""
        if value is None:
            return []
        if not isinstance(value, list):
            logger.info("Ignoring %s, expected a list: %r", info.field_name, value)
            return []
        entry_model = STREAM_ENTRY_MODELS[info.field_name]
        entries = []
        for item in value:
            try:
                entries.append(entry_model.model_validate(item))
            except ValidationError as exc:
                logger.info("Skipping malformed %s entry %r: %s", info.field_name, item, exc)
        return entries


class ApiModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class MessageResponse(BaseModel):
    message: str


class HealthResponse(BaseModel):
    status: str = "ok"


class Erc404Holdings(ApiModel):
    fungible: str = "0"
    nfts: list[str] = Field(default_factory=list)


class HoldingsResponse(ApiModel):
    erc404: Erc404Holdings
    erc721: list[str] = Field(default_factory=list)


class FungibleHolderResponse(ApiModel):
    address: str
    balance: str


class OpeningResponse(ApiModel):
    id: int
    token_id: str
    timestamp: datetime
    transaction_hash: str
    token_type: str
    opener: str

    @field_serializer("timestamp")
    def _serialize_timestamp(self, value: datetime) -> str:
        return isoformat_utc(value)


class MintingLevelResponse(ApiModel):
    win_amount: str
    roll_number: int


class MintingDetailsResponse(ApiModel):
    token_id: str
    levels: list[MintingLevelResponse] = Field(default_factory=list)
    roll_result: Optional[int] = None
    payout: Optional[str] = None
    timestamp: datetime
    transaction_hash: str

    @field_serializer("timestamp")
    def _serialize_timestamp(self, value: datetime) -> str:
        return isoformat_utc(value)
