"""
Territory accessor — cached, typed view over the raw data provider.

Flow for every single-entity lookup:
  ┌──────────────┐
  │  cache key   │   operation:query:options
  └──────┬───────┘
         │ hit (cache enabled)
         ├──────────────────────────► success envelope, fresh timestamp
         │ miss
  ┌──────▼───────┐
  │   provider   │   flat lookup by exact name
  └──────┬───────┘
         │ no record ─────────────► failure envelope "<Kind> '<name>' not found"
  ┌──────▼───────┐
  │ materialize  │   state → municipalities → parishes
  └──────┬───────┘
         │
  ┌──────▼───────┐
  │ store + wrap │
  └──────────────┘

Only the top-level key is memoized. Child lists are always pulled fresh on a
miss; when the provider fails on one of them the list is left empty and the
parent is flagged incomplete instead of failing the whole lookup. Such a
partial entity is cached like any other.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Optional

from .cache import CacheStore, make_cache_key
from .models import (
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
from .provider import (
    MunicipalityRecord,
    ParishRecord,
    StateRecord,
    TerritoryDataProvider,
    TerritoryProvider,
)
from .search import search_territory
from .stats import compute_stats

logger = logging.getLogger(__name__)

ALL_STATES_KEY = "all-states"


class VenezuelaTerritory:
    """Facade over Venezuelan states, municipalities and parishes.

    Usage:
        territory = VenezuelaTerritory()
        result = territory.get_state("Zulia")
        if result.success:
            print(result.data.capital, len(result.data.municipalities))
        else:
            print(result.error)

    Each instance owns its cache; two accessors never share entries unless
    the same CacheStore is passed to both.
    """

    def __init__(
        self,
        config: VenezuelaConfig | None = None,
        *,
        provider: TerritoryProvider | None = None,
        cache: CacheStore | None = None,
    ):
        self.config = config or VenezuelaConfig()
        self._provider: TerritoryProvider = (
            provider if provider is not None else TerritoryDataProvider()
        )
        self._cache = cache if cache is not None else CacheStore()

    @property
    def cache(self) -> CacheStore:
        return self._cache

    @property
    def provider(self) -> TerritoryProvider:
        return self._provider

    # ─── Single-entity lookups ──────────────────────────────────────

    def get_state(
        self, name: str, options: Optional[SearchOptions] = None
    ) -> SearchResult[VenezuelanState]:
        """Look up a state with all its municipalities and their parishes."""
        return self._lookup(
            "state", "State", name, options,
            self._provider.lookup_state, self._build_state,
        )

    def get_municipality(
        self, name: str, options: Optional[SearchOptions] = None
    ) -> SearchResult[Municipality]:
        """Look up a municipality with its parishes.

        The owning state comes from the provider's record, so for names shared
        by several states this is whichever the provider returns first.
        """
        return self._lookup(
            "municipality", "Municipality", name, options,
            self._provider.lookup_municipality, self._build_municipality,
        )

    def get_parish(
        self, name: str, options: Optional[SearchOptions] = None
    ) -> SearchResult[Parish]:
        return self._lookup(
            "parish", "Parish", name, options,
            self._provider.lookup_parish, self._build_parish,
        )

    # ─── Bulk operations ────────────────────────────────────────────

    def get_all_states(self) -> SearchResult[tuple[VenezuelanState, ...]]:
        """Every state with its full hierarchy, in provider order."""
        if self.config.cache_enabled and self._cache.has(ALL_STATES_KEY):
            logger.debug("Cache hit for %s", ALL_STATES_KEY)
            return SearchResult.ok(self._cache.get(ALL_STATES_KEY))

        try:
            states = tuple(self._build_state(record) for record in self._provider.list_states())
        except Exception as e:
            logger.error("Listing all states failed: %s", e)
            return SearchResult.fail(str(e) or "Unknown error")

        if self.config.cache_enabled:
            self._cache.set(ALL_STATES_KEY, states)
        return SearchResult.ok(states)

    def get_stats(self) -> SearchResult[TerritorialStats]:
        """Fold state/municipality/parish counts over ``get_all_states``.

        Returns a failure envelope when the state list cannot be obtained.
        Use ``.unwrap()`` for a hard failure instead.
        """
        all_states = self.get_all_states()
        if not all_states.success or all_states.data is None:
            logger.error("Cannot compute statistics: %s", all_states.error)
            return SearchResult.fail("Failed to get territorial statistics")

        return SearchResult.ok(compute_stats(all_states.data))

    def search(
        self, query: str, options: Optional[SearchOptions] = None
    ) -> SearchResults:
        """Exact-name probe of ``query`` as a state, municipality and parish."""
        return search_territory(self, query, options)

    def clear_cache(self) -> None:
        logger.info("Clearing %d cached entries", len(self._cache))
        self._cache.clear()

    # ─── Lookup protocol ────────────────────────────────────────────

    def _lookup(
        self,
        operation: str,
        kind: str,
        name: str,
        options: Optional[SearchOptions],
        fetch: Callable[[str], Any],
        build: Callable[[Any], Any],
    ) -> SearchResult[Any]:
        key = make_cache_key(operation, name, options)

        if self.config.cache_enabled and self._cache.has(key):
            logger.debug("Cache hit for %s", key)
            return SearchResult.ok(self._cache.get(key))

        try:
            record = fetch(name)
            if record is None:
                return SearchResult.fail(f"{kind} '{name}' not found")
            payload = build(record)
        except Exception as e:
            logger.error("%s lookup for '%s' failed: %s", kind, name, e)
            return SearchResult.fail(str(e) or "Unknown error")

        if self.config.cache_enabled:
            logger.debug("Caching %s", key)
            self._cache.set(key, payload)
        return SearchResult.ok(payload)

    # ─── Materialization ────────────────────────────────────────────

    def _build_state(self, record: StateRecord) -> VenezuelanState:
        municipalities, complete = self._municipalities_for(record.name)
        return VenezuelanState(
            name=record.name,
            capital=record.capital,
            municipalities=municipalities,
            iso=record.iso,
            municipalities_complete=complete,
        )

    def _build_municipality(
        self, record: MunicipalityRecord, state: Optional[str] = None
    ) -> Municipality:
        owner = state if state is not None else record.state
        parishes, complete = self._parishes_for(record.name, owner)
        return Municipality(
            name=record.name,
            state=owner,
            parishes=parishes,
            capital=record.capital,
            parishes_complete=complete,
        )

    def _build_parish(self, record: ParishRecord) -> Parish:
        # The dataset does not tell civil and ecclesiastical parishes apart
        return Parish(
            name=record.name,
            municipality=record.municipality,
            state=record.state,
            type=ParishType.CIVIL,
        )

    def _municipalities_for(
        self, state_name: str
    ) -> tuple[tuple[Municipality, ...], bool]:
        try:
            records = self._provider.list_municipalities(state_name)
        except Exception as e:
            logger.warning("Error getting municipalities for state %s: %s", state_name, e)
            return (), False

        if records is None:
            logger.warning("No municipality list returned for state %s", state_name)
            return (), False

        return tuple(self._build_municipality(r, state=state_name) for r in records), True

    def _parishes_for(
        self, municipality_name: str, state_name: str
    ) -> tuple[tuple[Parish, ...], bool]:
        try:
            records = self._provider.list_parishes(municipality_name, state_name)
        except Exception as e:
            logger.warning(
                "Error getting parishes for municipality %s (%s): %s",
                municipality_name, state_name, e,
            )
            return (), False

        if records is None:
            logger.warning(
                "No parish list returned for municipality %s (%s)",
                municipality_name, state_name,
            )
            return (), False

        parishes = tuple(
            Parish(
                name=r.name,
                municipality=municipality_name,
                state=state_name,
                type=ParishType.CIVIL,
            )
            for r in records
        )
        return parishes, True


def create_territory(
    config: VenezuelaConfig | None = None,
    *,
    provider: TerritoryProvider | None = None,
    **overrides: Any,
) -> VenezuelaTerritory:
    """Factory: ``create_territory(cache_enabled=False, language="en")``."""
    if overrides:
        base = config.model_dump() if config is not None else {}
        config = VenezuelaConfig(**{**base, **overrides})
    return VenezuelaTerritory(config, provider=provider)
