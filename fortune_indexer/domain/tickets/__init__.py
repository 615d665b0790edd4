"""Ticket openings and minting details."""

from .models import MINTING_DETAILS_UPDATED, MintingDetails, MintingLevel, Opening
from .service import TicketService

__all__ = [
    "MINTING_DETAILS_UPDATED",
    "MintingDetails",
    "MintingLevel",
    "Opening",
    "TicketService",
]
