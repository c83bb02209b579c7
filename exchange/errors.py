"""
Exception types for the DEX order client.
"""

from __future__ import annotations
from typing import Optional


class DexError(Exception):
    """Base class for all DEX client errors."""


class MarketNotFoundError(DexError, LookupError):
    def __init__(self, symbol: str):
        super().__init__(f"No market found by symbol {symbol}")
        self.symbol = symbol


class SubmissionError(DexError):
    """The transport rejected or failed to push a transaction."""

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.cause = cause


class DexApiError(DexError):
    def __init__(self, message: str, status: Optional[int] = None):
        super().__init__(message)
        self.status = status
