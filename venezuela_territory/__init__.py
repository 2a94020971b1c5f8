"""
Venezuela Territory — cached, typed access to Venezuelan administrative divisions.

Hierarchy: states (estados) → municipalities (municipios) → parishes (parroquias).
Every lookup returns a SearchResult envelope; nothing raises on "not found".
"""

from .cache import CacheStore, make_cache_key
from .exceptions import DatasetLoadError, TerritoryError, TerritoryLookupError
from .models import (
    Language,
    Municipality,
    Parish,
    ParishType,
    SearchOptions,
    SearchResult,
    SearchResults,
    TerritorialStats,
    VenezuelaConfig,
    VenezuelanState,
)
from .provider import TerritoryDataProvider
from .territory import VenezuelaTerritory, create_territory

__version__ = "1.0.0"

__all__ = [
    "__version__",
    "CacheStore",
    "DatasetLoadError",
    "Language",
    "Municipality",
    "Parish",
    "ParishType",
    "SearchOptions",
    "SearchResult",
    "SearchResults",
    "TerritorialStats",
    "TerritoryDataProvider",
    "TerritoryError",
    "TerritoryLookupError",
    "VenezuelaConfig",
    "VenezuelaTerritory",
    "VenezuelanState",
    "create_territory",
    "make_cache_key",
]
