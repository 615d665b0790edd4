"""Ticket lifecycle domain models."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from fortune_indexer.db import models as orm

MINTING_DETAILS_UPDATED = "MINTING_DETAILS_UPDATED"


@dataclass(slots=True)
class Opening:
    id: int
    token_id: str
    timestamp: datetime
    transaction_hash: str
    token_type: str
    opener: str

    @classmethod
    def from_orm(cls, instance: orm.Opening) -> "Opening":
        return cls(
            id=int(instance.id),
            token_id=instance.token_id,
            timestamp=instance.timestamp,
            transaction_hash=instance.transaction_hash,
            token_type=instance.token_type,
            opener=instance.opener,
        )


@dataclass(slots=True)
class MintingLevel:
    win_amount: str
    roll_number: int


@dataclass(slots=True)
class MintingDetails:
    """Accumulated mint, open and resolve data for a single ticket."""

    token_id: str
    transaction_hash: str
    timestamp: datetime
    levels: list[MintingLevel] = field(default_factory=list)
    roll_result: Optional[int] = None
    payout: Optional[str] = None

    @classmethod
    def from_orm(cls, instance: orm.MintingDetails) -> "MintingDetails":
        return cls(
            token_id=instance.token_id,
            transaction_hash=instance.transaction_hash,
            timestamp=instance.timestamp,
            levels=[
                MintingLevel(win_amount=level.win_amount, roll_number=int(level.roll_number))
                for level in instance.levels
            ],
            roll_result=int(instance.roll_result) if instance.roll_result is not None else None,
            payout=instance.payout,
        )
