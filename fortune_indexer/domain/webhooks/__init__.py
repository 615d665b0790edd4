"""Stream webhook processing."""

from .service import (
    ALREADY_PROCESSED,
    CONTRACTS_NOT_CONFIGURED,
    ERROR_SUPPRESSED,
    HOLDINGS_UPDATED,
    INVALID_PAYLOAD,
    NO_TRANSACTION_HASH,
    SKIPPED_CONFIRMED,
    WebhookProcessor,
    WebhookResult,
)

__all__ = [
    "ALREADY_PROCESSED",
    "CONTRACTS_NOT_CONFIGURED",
    "ERROR_SUPPRESSED",
    "HOLDINGS_UPDATED",
    "INVALID_PAYLOAD",
    "NO_TRANSACTION_HASH",
    "SKIPPED_CONFIRMED",
    "WebhookProcessor",
    "WebhookResult",
]
