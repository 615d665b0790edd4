"""SQLAlchemy-backed repository implementations."""

from .balance_repository import SqlBalanceRepository
from .holding_repository import SqlHoldingRepository
from .minting_repository import SqlMintingDetailsRepository
from .opening_repository import SqlOpeningRepository
from .transaction_repository import SqlProcessedTransactionRepository

__all__ = [
    "SqlBalanceRepository",
    "SqlHoldingRepository",
    "SqlMintingDetailsRepository",
    "SqlOpeningRepository",
    "SqlProcessedTransactionRepository",
]
