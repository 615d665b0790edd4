"""Decoded event value objects."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional, Union


@dataclass(slots=True, frozen=True)
class RawLog:
    """A log entry as delivered by the stream: address, data and up to four topics."""

    address: str
    data: str
    topics: tuple[str, ...]
    transaction_hash: Optional[str] = None

    @classmethod
    def from_slots(
        cls,
        *,
        address: str,
        data: Optional[str],
        topic0: Optional[str],
        topic1: Optional[str] = None,
        topic2: Optional[str] = None,
        topic3: Optional[str] = None,
        transaction_hash: Optional[str] = None,
    ) -> "RawLog":
        topics = tuple(topic for topic in (topic0, topic1, topic2, topic3) if topic)
        return cls(address=address, data=data or "0x", topics=topics, transaction_hash=transaction_hash)


@dataclass(slots=True, frozen=True)
class MintedLevel:
    roll_number: int
    win_percentage: int
    win_amount: int


@dataclass(slots=True, frozen=True)
class Matched:
    event_name: str
    args: dict[str, Any] = field(default_factory=dict)


@dataclass(slots=True, frozen=True)
class Unmatched:
    reason: str = "no matching event signature"


DecodeResult = Union[Matched, Unmatched]
