"""
Process-lifetime memo table for materialized lookups.

No eviction, no TTL, no size bound: entries live until ``clear()`` or until
the owning accessor goes away. Memory grows with the number of distinct
queries, which is bounded by the size of the dataset times the option sets
callers use.
"""

from __future__ import annotations

from typing import Any, Optional

from .models import SearchOptions


def make_cache_key(
    operation: str, query: str, options: Optional[SearchOptions] = None
) -> str:
    """Build ``<operation>:<query>:<canonical options>``.

    Example:
        make_cache_key("state", "Zulia") → "state:Zulia:{}"
    """
    canonical = (options or SearchOptions()).canonical()
    return f"{operation}:{query}:{canonical}"


class CacheStore:
    """Unbounded in-memory key/value store owned by one accessor."""

    def __init__(self) -> None:
        self._entries: dict[str, Any] = {}

    def get(self, key: str) -> Any | None:
        return self._entries.get(key)

    def set(self, key: str, value: Any) -> None:
        self._entries[key] = value

    def has(self, key: str) -> bool:
        return key in self._entries

    def clear(self) -> None:
        self._entries.clear()

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)
