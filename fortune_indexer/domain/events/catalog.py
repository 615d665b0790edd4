"""Catalog of the ticket contract events understood by the indexer."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from eth_utils import encode_hex, keccak

TICKET_MINTED = "TicketMinted"
TICKET_OPENING_INITIATED = "TicketOpeningInitiated"
TICKET_RESOLVED = "TicketResolved"
REWARD_PAID = "RewardPaid"
POOL_DEPOSITED = "PoolDeposited"
POOL_WITHDRAWN = "PoolWithdrawn"
TRANSFER = "Transfer"


@dataclass(slots=True, frozen=True)
class EventInput:
    name: str
    type: str
    indexed: bool = False
    components: Optional[tuple["EventInput", ...]] = None

    @property
    def abi_type(self) -> str:
        """Canonical type string, expanding tuple components."""
        if self.components is None:
            return self.type
        inner = ",".join(component.abi_type for component in self.components)
        return f"({inner})" + self.type[len("tuple"):]

    def to_abi(self) -> dict[str, Any]:
        entry: dict[str, Any] = {"indexed": self.indexed, "name": self.name, "type": self.type}
        if self.components is not None:
            entry["components"] = [
                {"name": component.name, "type": component.type} for component in self.components
            ]
        return entry


@dataclass(slots=True, frozen=True)
class EventDefinition:
    name: str
    inputs: tuple[EventInput, ...] = field(default_factory=tuple)

    @property
    def signature(self) -> str:
        return f"{self.name}({','.join(item.abi_type for item in self.inputs)})"

    @property
    def topic(self) -> str:
        return encode_hex(keccak(text=self.signature))

    @property
    def indexed_inputs(self) -> tuple[EventInput, ...]:
        return tuple(item for item in self.inputs if item.indexed)

    @property
    def data_inputs(self) -> tuple[EventInput, ...]:
        return tuple(item for item in self.inputs if not item.indexed)

    def to_abi(self) -> dict[str, Any]:
        return {
            "anonymous": False,
            "inputs": [item.to_abi() for item in self.inputs],
            "name": self.name,
            "type": "event",
        }


LEVEL_COMPONENTS = (
    EventInput("rollNumber", "uint256"),
    EventInput("winPercentage", "uint256"),
    EventInput("winAmount", "uint256"),
)

TICKET_EVENTS: tuple[EventDefinition, ...] = (
    EventDefinition(
        TICKET_MINTED,
        (
            EventInput("to", "address", indexed=True),
            EventInput("tokenId", "uint256", indexed=True),
            EventInput("isETHVersion", "bool"),
            EventInput("levels", "tuple[]", components=LEVEL_COMPONENTS),
        ),
    ),
    EventDefinition(
        TICKET_OPENING_INITIATED,
        (
            EventInput("tokenId", "uint256", indexed=True),
            EventInput("opener", "address", indexed=True),
        ),
    ),
    EventDefinition(
        TICKET_RESOLVED,
        (
            EventInput("tokenId", "uint256", indexed=True),
            EventInput("rollResult", "uint256"),
            EventInput("winAmount", "uint256"),
        ),
    ),
    EventDefinition(
        REWARD_PAID,
        (
            EventInput("winner", "address", indexed=True),
            EventInput("tokenId", "uint256", indexed=True),
            EventInput("amount", "uint256"),
        ),
    ),
    EventDefinition(
        POOL_DEPOSITED,
        (
            EventInput("depositor", "address", indexed=True),
            EventInput("amount", "uint256"),
        ),
    ),
    EventDefinition(
        POOL_WITHDRAWN,
        (
            EventInput("withdrawer", "address", indexed=True),
            EventInput("amount", "uint256"),
        ),
    ),
)

# Both token classes emit Transfer; the stream needs each variant registered
ERC721_TRANSFER = EventDefinition(
    TRANSFER,
    (
        EventInput("from", "address", indexed=True),
        EventInput("to", "address", indexed=True),
        EventInput("tokenId", "uint256", indexed=True),
    ),
)
ERC20_TRANSFER = EventDefinition(
    TRANSFER,
    (
        EventInput("from", "address", indexed=True),
        EventInput("to", "address", indexed=True),
        EventInput("amount", "uint256"),
    ),
)

EVENTS_BY_NAME = {event.name: event for event in TICKET_EVENTS}


def get_event(name: str) -> EventDefinition:
    return EVENTS_BY_NAME[name]
