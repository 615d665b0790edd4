"""Builders for stream webhook payloads and encoded contract logs."""

from __future__ import annotations

from typing import Any, Iterable, Optional

from eth_abi import encode
from eth_utils import encode_hex

from fortune_indexer.core.config import ZERO_ADDRESS, ContractSettings
from fortune_indexer.domain.events import (
    POOL_DEPOSITED,
    REWARD_PAID,
    TICKET_MINTED,
    TICKET_OPENING_INITIATED,
    TICKET_RESOLVED,
    get_event,
)

ERC721_ADDRESS = ContractSettings().erc721_address
ERC404_ADDRESS = ContractSettings().erc404_address
OTHER_CONTRACT = "0x3333333333333333333333333333333333333333"

ALICE = "0xaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaa"
BOB = "0xbbbbbbbbbbbbbbbbbbbbbbbbbbbbbbbbbbbbbbbb"
CAROL = "0xcccccccccccccccccccccccccccccccccccccccc"
ZERO = ZERO_ADDRESS

TX_HASH = "0x" + "ab" * 32
OTHER_TX_HASH = "0x" + "cd" * 32


def topic(name: str) -> str:
    return get_event(name).topic


def address_topic(address: str) -> str:
    return encode_hex(encode(["address"], [address]))


def uint_topic(value: int) -> str:
    return encode_hex(encode(["uint256"], [value]))


def log_entry(address: str, topics: Iterable[Optional[str]], data: str = "0x", **extra: Any) -> dict[str, Any]:
    slots = list(topics) + [None] * 4
    entry = {
        "address": address,
        "data": data,
        "topic0": slots[0],
        "topic1": slots[1],
        "topic2": slots[2],
        "topic3": slots[3],
        "transactionHash": TX_HASH,
        "logIndex": "0",
    }
    entry.update(extra)
    return entry


def minted_log(token_id: int, levels: list[tuple[int, int, int]], to: str = ALICE,
               contract: str = ERC721_ADDRESS) -> dict[str, Any]:
    data = encode_hex(encode(["bool", "(uint256,uint256,uint256)[]"], [True, levels]))
    return log_entry(contract, [topic(TICKET_MINTED), address_topic(to), uint_topic(token_id)], data)


def opening_log(token_id: int, opener: str = ALICE, contract: str = ERC721_ADDRESS) -> dict[str, Any]:
    return log_entry(contract, [topic(TICKET_OPENING_INITIATED), uint_topic(token_id), address_topic(opener)])


def resolved_log(token_id: int, roll_result: int, win_amount: int, contract: str = ERC721_ADDRESS) -> dict[str, Any]:
    data = encode_hex(encode(["uint256", "uint256"], [roll_result, win_amount]))
    return log_entry(contract, [topic(TICKET_RESOLVED), uint_topic(token_id)], data)


def reward_log(token_id: int, amount: int, winner: str = ALICE, contract: str = ERC721_ADDRESS) -> dict[str, Any]:
    data = encode_hex(encode(["uint256"], [amount]))
    return log_entry(contract, [topic(REWARD_PAID), address_topic(winner), uint_topic(token_id)], data)


def pool_log(amount: int, depositor: str = ALICE, contract: str = ERC404_ADDRESS,
             name: str = POOL_DEPOSITED) -> dict[str, Any]:
    data = encode_hex(encode(["uint256"], [amount]))
    return log_entry(contract, [topic(name), address_topic(depositor)], data)


def nft_transfer(token_id: str, from_address: str, to_address: str, contract: str = ERC721_ADDRESS,
                 transaction_hash: str = TX_HASH) -> dict[str, Any]:
    return {
        "contract": contract,
        "tokenId": token_id,
        "from": from_address,
        "to": to_address,
        "transactionHash": transaction_hash,
    }


def erc20_transfer(value: str, from_address: str, to_address: str, contract: str = ERC404_ADDRESS,
                   transaction_hash: str = TX_HASH) -> dict[str, Any]:
    return {
        "contract": contract,
        "from": from_address,
        "to": to_address,
        "value": value,
        "transactionHash": transaction_hash,
    }


def webhook(*, confirmed: bool = False, nft_transfers=None, erc20_transfers=None, logs=None) -> dict[str, Any]:
    return {
        "confirmed": confirmed,
        "block": {"number": "19000000", "hash": "0x" + "01" * 32, "timestamp": "1700000000"},
        "nftTransfers": nft_transfers or [],
        "erc20Transfers": erc20_transfers or [],
        "logs": logs or [],
    }
