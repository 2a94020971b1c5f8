"""
Exception hierarchy for territorial lookups.

Lookups report "not found" through failure envelopes, never through
exceptions. These types cover the remaining hard failures: a broken
dataset, and callers explicitly unwrapping a failed envelope.
"""

from __future__ import annotations


class TerritoryError(Exception):
    """Base exception for all territory failures."""

    def __init__(self, code: str, message: str, details: dict | None = None):
        self.code = code
        self.details = details or {}
        super().__init__(message)


class TerritoryLookupError(TerritoryError):
    """A failed result envelope was unwrapped."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("LOOKUP_FAILED", message, details)


class DatasetLoadError(TerritoryError):
    """The reference dataset is missing or malformed."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("DATASET_LOAD_FAILED", message, details)
