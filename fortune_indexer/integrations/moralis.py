"""Moralis Streams definition for the two ticket contracts."""

from __future__ import annotations

from typing import Any

from fortune_indexer.core.config import Settings
from fortune_indexer.domain.events import TICKET_EVENTS
from fortune_indexer.domain.events.catalog import ERC20_TRANSFER, ERC721_TRANSFER

CHAIN_IDS = {
    "eth": "0x1",
    "sepolia": "0xaa36a7",
    "polygon": "0x89",
    "bsc": "0x38",
    "base": "0x2105",
    "arbitrum": "0xa4b1",
}

STREAM_EVENTS = (ERC721_TRANSFER, ERC20_TRANSFER, *TICKET_EVENTS)


def chain_id(chain: str) -> str:
    if chain.startswith("0x"):
        return chain
    try:
        return CHAIN_IDS[chain.lower()]
    except KeyError as exc:
        raise ValueError(f"Unknown chain name: {chain}") from exc


def build_stream_config(settings: Settings) -> dict[str, Any]:
    """Stream definition as accepted by ``PUT /streams/evm``, plus the addresses to attach."""
    return {
        "chainIds": [chain_id(chain) for chain in settings.contracts.chains],
        "description": settings.moralis.description,
        "tag": settings.moralis.tag,
        "webhookUrl": settings.webhook_url,
        "abi": [event.to_abi() for event in STREAM_EVENTS],
        # the two Transfer variants share one signature
        "topic0": sorted({event.signature for event in STREAM_EVENTS}),
        "includeNativeTxs": False,
        "includeContractLogs": True,
        "includeAllTxLogs": False,
        "allAddresses": False,
        "contractAddresses": [settings.erc721_address, settings.erc404_address],
    }
