"""Domain models for token holdings."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

from fortune_indexer.db import models as orm

TokenClass = Literal["ERC721", "ERC404"]

ERC721: TokenClass = "ERC721"
ERC404: TokenClass = "ERC404"

HOLDER_ERC404_FUNGIBLE = "erc404-fungible"
HOLDER_ERC404_NFT = "erc404-nft"
HOLDER_ERC721 = "erc721"
HOLDER_TOKEN_TYPES = (HOLDER_ERC404_FUNGIBLE, HOLDER_ERC404_NFT, HOLDER_ERC721)


@dataclass(slots=True)
class FungibleBalance:
    address: str
    balance: str

    @classmethod
    def from_orm(cls, instance: orm.Erc404FungibleBalance) -> "FungibleBalance":
        return cls(address=instance.address, balance=instance.balance or "0")


@dataclass(slots=True)
class Holdings:
    """Everything a single address holds across both token classes."""

    address: str
    fungible: str = "0"
    erc404_nfts: list[str] = field(default_factory=list)
    erc721_tokens: list[str] = field(default_factory=list)
