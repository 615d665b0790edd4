"""Ticket contract event catalog and log decoder."""

from .catalog import (
    POOL_DEPOSITED,
    POOL_WITHDRAWN,
    REWARD_PAID,
    TICKET_EVENTS,
    TICKET_MINTED,
    TICKET_OPENING_INITIATED,
    TICKET_RESOLVED,
    EventDefinition,
    EventInput,
    get_event,
)
from .decoder import EventDecoder, decode_log
from .models import DecodeResult, Matched, MintedLevel, RawLog, Unmatched

__all__ = [
    "POOL_DEPOSITED",
    "POOL_WITHDRAWN",
    "REWARD_PAID",
    "TICKET_EVENTS",
    "TICKET_MINTED",
    "TICKET_OPENING_INITIATED",
    "TICKET_RESOLVED",
    "EventDefinition",
    "EventInput",
    "get_event",
    "EventDecoder",
    "decode_log",
    "DecodeResult",
    "Matched",
    "MintedLevel",
    "RawLog",
    "Unmatched",
]
