"""Balances and NFT ownership for the two ticket token classes."""

from .exceptions import HoldingError, UnknownTokenTypeError
from .models import (
    ERC404,
    ERC721,
    HOLDER_ERC404_FUNGIBLE,
    HOLDER_ERC404_NFT,
    HOLDER_ERC721,
    HOLDER_TOKEN_TYPES,
    FungibleBalance,
    Holdings,
    TokenClass,
)
from .service import HoldingService, is_zero_address

__all__ = [
    "ERC404",
    "ERC721",
    "HOLDER_ERC404_FUNGIBLE",
    "HOLDER_ERC404_NFT",
    "HOLDER_ERC721",
    "HOLDER_TOKEN_TYPES",
    "FungibleBalance",
    "Holdings",
    "TokenClass",
    "HoldingService",
    "HoldingError",
    "UnknownTokenTypeError",
    "is_zero_address",
]
