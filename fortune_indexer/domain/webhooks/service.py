"""Apply one stream webhook delivery to the holding and ticket stores."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional, Protocol

from sqlalchemy.ext.asyncio import AsyncSession

from fortune_indexer.core.config import Settings
from fortune_indexer.domain.events import (
    POOL_DEPOSITED,
    POOL_WITHDRAWN,
    REWARD_PAID,
    TICKET_MINTED,
    TICKET_OPENING_INITIATED,
    TICKET_RESOLVED,
    EventDecoder,
    Matched,
    RawLog,
)
from fortune_indexer.domain.events.decoder import default_decoder
from fortune_indexer.domain.holdings import ERC404, ERC721, HoldingService, TokenClass
from fortune_indexer.domain.tickets import MINTING_DETAILS_UPDATED, MintingLevel, TicketService
from fortune_indexer.domain.transactions import ProcessedTransactionService
from fortune_indexer.schemas import (
    Erc20TransferPayload,
    NftTransferPayload,
    StreamLogPayload,
    WebhookPayload,
)

logger = logging.getLogger(__name__)

SKIPPED_CONFIRMED = "Skipped confirmed transaction"
NO_TRANSACTION_HASH = "No transaction hash found"
ALREADY_PROCESSED = "Transaction already processed"
CONTRACTS_NOT_CONFIGURED = "Contract addresses not configured"
HOLDINGS_UPDATED = "Holdings updated successfully"
ERROR_SUPPRESSED = "Error occurred but returning 200 to prevent retries"
INVALID_PAYLOAD = "Invalid webhook payload"


class Notifier(Protocol):
    async def publish(self, event_type: str, data: dict) -> int:
        ...


@dataclass(slots=True)
class WebhookResult:
    message: str
    transaction_hash: Optional[str] = None
    updated_tokens: list[str] = field(default_factory=list)


class WebhookProcessor:
    """Runs the per-delivery pipeline.

    Order: confirmed check, idempotency check, NFT transfers, fungible
    transfers, contract logs, processed marker, commit, notifications.
    """

    def __init__(
        self,
        session: AsyncSession,
        *,
        erc721_address: str,
        erc404_address: str,
        notifier: Notifier,
        decoder: EventDecoder = default_decoder,
    ) -> None:
        self.session = session
        self.erc721_address = (erc721_address or "").lower()
        self.erc404_address = (erc404_address or "").lower()
        self.notifier = notifier
        self.decoder = decoder
        self.holdings = HoldingService.with_session(session)
        self.tickets = TicketService.with_session(session)
        self.transactions = ProcessedTransactionService.with_session(session)

    @classmethod
    def from_settings(
        cls,
        session: AsyncSession,
        settings: Settings,
        notifier: Notifier,
        decoder: EventDecoder = default_decoder,
    ) -> "WebhookProcessor":
        return cls(
            session,
            erc721_address=settings.erc721_address,
            erc404_address=settings.erc404_address,
            notifier=notifier,
            decoder=decoder,
        )

    def token_class_for(self, address: Optional[str]) -> Optional[TokenClass]:
        if not address:
            return None
        address = address.lower()
        if address == self.erc721_address:
            return ERC721
        if address == self.erc404_address:
            return ERC404
        return None

    @staticmethod
    def transaction_hash_of(payload: WebhookPayload) -> Optional[str]:
        if payload.nft_transfers and payload.nft_transfers[0].transaction_hash:
            return payload.nft_transfers[0].transaction_hash
        if payload.erc20_transfers and payload.erc20_transfers[0].transaction_hash:
            return payload.erc20_transfers[0].transaction_hash
        return None

    async def process(self, payload: WebhookPayload) -> WebhookResult:
        if payload.confirmed:
            logger.info("Skipping confirmed transaction")
            return WebhookResult(SKIPPED_CONFIRMED)

        transaction_hash = self.transaction_hash_of(payload)
        if not transaction_hash:
            logger.info("No transaction hash found in transfers")
            return WebhookResult(NO_TRANSACTION_HASH)

        if await self.transactions.already_processed(transaction_hash):
            logger.info("Transaction already processed: %s", transaction_hash)
            return WebhookResult(ALREADY_PROCESSED, transaction_hash)

        if not self.erc721_address or not self.erc404_address:
            logger.warning("Contract addresses not configured")
            return WebhookResult(CONTRACTS_NOT_CONFIGURED, transaction_hash)

        await self.apply_nft_transfers(payload.nft_transfers)
        await self.apply_erc20_transfers(payload.erc20_transfers)
        updated_tokens = await self.apply_logs(payload.logs, transaction_hash)

        if not await self.transactions.mark_processed(transaction_hash):
            return WebhookResult(ALREADY_PROCESSED, transaction_hash)
        await self.session.commit()
        logger.info("Transaction processed successfully: %s", transaction_hash)

        for token_id in updated_tokens:
            await self.notifier.publish(MINTING_DETAILS_UPDATED, {"tokenId": token_id})
        return WebhookResult(HOLDINGS_UPDATED, transaction_hash, updated_tokens)

    async def apply_nft_transfers(self, transfers: list[NftTransferPayload]) -> None:
        # repeated ids within one delivery are dropped for the ERC404 class only
        seen_erc404_ids: set[str] = set()
        for transfer in transfers:
            if not (transfer.contract and transfer.token_id and transfer.from_address and transfer.to_address):
                logger.info("Invalid transfer data: %s", transfer.model_dump(by_alias=True))
                continue

            token_class = self.token_class_for(transfer.contract)
            if token_class is None:
                logger.debug("Ignoring NFT transfer on untracked contract %s", transfer.contract)
                continue
            if token_class == ERC404:
                if transfer.token_id in seen_erc404_ids:
                    logger.info("Skipping duplicate token ID: %s", transfer.token_id)
                    continue
                seen_erc404_ids.add(transfer.token_id)

            logger.info(
                "%s NFT Transfer: Token %s from %s to %s",
                token_class,
                transfer.token_id,
                transfer.from_address,
                transfer.to_address,
            )
            await self.holdings.apply_token_transfer(
                token_class, transfer.token_id, transfer.from_address, transfer.to_address
            )

    async def apply_erc20_transfers(self, transfers: list[Erc20TransferPayload]) -> None:
        for transfer in transfers:
            if not (transfer.contract and transfer.from_address and transfer.to_address and transfer.value):
                logger.info("Invalid transfer data: %s", transfer.model_dump(by_alias=True))
                continue
            if self.token_class_for(transfer.contract) != ERC404:
                continue
            try:
                amount = int(transfer.value)
            except ValueError:
                logger.info("Invalid transfer amount: %s", transfer.value)
                continue

            logger.info(
                "ERC404 Fungible Transfer: %s from %s to %s", amount, transfer.from_address, transfer.to_address
            )
            await self.holdings.apply_fungible_transfer(transfer.from_address, transfer.to_address, amount)

    async def apply_logs(self, logs: list[StreamLogPayload], transaction_hash: str) -> list[str]:
        """Decode and apply contract logs, returning token ids whose minting details changed."""
        updated_tokens: list[str] = []
        for entry in logs:
            try:
                if not entry.topic0:
                    logger.info("Log has no event signature: %s", entry.model_dump(by_alias=True))
                    continue

                token_class = self.token_class_for(entry.address)
                if token_class is None:
                    logger.info("Unknown contract for event: %s", entry.address)
                    continue

                result = self.decoder.decode(
                    RawLog.from_slots(
                        address=entry.address or "",
                        data=entry.data,
                        topic0=entry.topic0,
                        topic1=entry.topic1,
                        topic2=entry.topic2,
                        topic3=entry.topic3,
                        transaction_hash=entry.transaction_hash,
                    )
                )
                if not isinstance(result, Matched):
                    logger.debug("Could not decode log %s: %s", entry.topic0, result.reason)
                    continue

                # a failed write rolls back to this savepoint only, the rest of the delivery stays
                async with self.session.begin_nested():
                    token_id = await self.apply_event(result, transaction_hash, token_class)
                if token_id is not None:
                    updated_tokens.append(token_id)
            except Exception:  # pylint: disable=broad-except
                logger.exception("Error processing log")
                continue
        return updated_tokens

    async def apply_event(self, event: Matched, transaction_hash: str, token_class: TokenClass) -> Optional[str]:
        args = event.args
        if event.event_name == TICKET_MINTED:
            token_id = str(args["tokenId"])
            levels = [
                MintingLevel(win_amount=str(level.win_amount), roll_number=int(level.roll_number))
                for level in args["levels"]
            ]
            logger.info("Ticket Minted Event: Token %s with %d levels", token_id, len(levels))
            await self.tickets.upsert_minting_levels(
                token_id=token_id, transaction_hash=transaction_hash, levels=levels
            )
            return token_id

        if event.event_name == TICKET_OPENING_INITIATED:
            token_id = str(args["tokenId"])
            logger.info("Opening Event: Token %s by %s", token_id, args["opener"])
            await self.tickets.record_opening(
                token_id=token_id,
                opener=args["opener"],
                transaction_hash=transaction_hash,
                token_class=token_class,
            )
            return None

        if event.event_name in (TICKET_RESOLVED, REWARD_PAID):
            token_id = str(args["tokenId"])
            if event.event_name == TICKET_RESOLVED:
                roll_result, win_amount = int(args["rollResult"]), str(args["winAmount"])
            else:
                roll_result, win_amount = 0, str(args["amount"])
            logger.info(
                "%s Event: Token %s Roll %s Amount %s", event.event_name, token_id, roll_result, win_amount
            )
            await self.tickets.record_resolution(
                token_id=token_id,
                transaction_hash=transaction_hash,
                roll_result=roll_result,
                win_amount=win_amount,
            )
            return token_id

        if event.event_name in (POOL_DEPOSITED, POOL_WITHDRAWN):
            logger.info("%s Event: Amount %s", event.event_name, args["amount"])
        return None
