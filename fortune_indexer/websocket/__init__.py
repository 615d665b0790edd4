"""Push channel for UI clients."""

from .manager import ConnectionManager

__all__ = ["ConnectionManager"]
