"""Processed transaction markers."""

from .service import ProcessedTransactionService

__all__ = ["ProcessedTransactionService"]
