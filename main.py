#!/usr/bin/env python3
"""
Venezuela Territory — Entry Point
==================================

Walks through the accessor: a state, a municipality, a search, the full
state list, statistics, and a cached vs. uncached lookup.

Usage:
    python main.py                                # Defaults (cache on)
    VENEZUELA_CACHE_ENABLED=false python main.py  # Every call hits the provider
"""

from __future__ import annotations

import sys
import time

from dotenv import load_dotenv

from venezuela_territory.config import load_settings
from venezuela_territory.provider import TerritoryDataProvider
from venezuela_territory.territory import VenezuelaTerritory

# ─── Load .env if present ────────────────────────────────────────────
load_dotenv()


# ─── ANSI Color Constants ───────────────────────────────────────────

_RED = "\033[91m"
_GREEN = "\033[92m"
_CYAN = "\033[96m"
_DIM = "\033[2m"
_BOLD = "\033[1m"
_RESET = "\033[0m"
_WIDTH = 72


# ─── Pretty Printer Helpers ─────────────────────────────────────────


def _header(title: str) -> None:
    print(f"\n{'=' * _WIDTH}")
    print(f"{_BOLD}{_CYAN}  {title}{_RESET}")
    print(f"{'─' * _WIDTH}")


def _error(message: str | None) -> None:
    print(f"  {_RED}Error: {message}{_RESET}")


def show_state(territory: VenezuelaTerritory, name: str) -> None:
    _header(f"STATE: {name}")
    result = territory.get_state(name)
    if not result.success or result.data is None:
        _error(result.error)
        return

    state = result.data
    print(f"  State:           {_BOLD}{state.name}{_RESET} {_DIM}({state.iso or 'no ISO code'}){_RESET}")
    print(f"  Capital:         {state.capital}")
    print(f"  Municipalities:  {len(state.municipalities)}")
    print(f"  Total parishes:  {state.parish_count}")


def show_municipality(territory: VenezuelaTerritory, name: str) -> None:
    _header(f"MUNICIPALITY: {name}")
    result = territory.get_municipality(name)
    if not result.success or result.data is None:
        _error(result.error)
        return

    municipality = result.data
    print(f"  Municipality:    {_BOLD}{municipality.name}{_RESET}")
    print(f"  State:           {municipality.state}")
    print(f"  Parishes:        {len(municipality.parishes)}")
    print(f"  Capital:         {municipality.capital or 'N/A'}")


def show_search(territory: VenezuelaTerritory, query: str) -> None:
    _header(f'SEARCH: "{query}"')
    results = territory.search(query)

    print(f"  States found:          {len(results.states)}")
    print(f"  Municipalities found:  {len(results.municipalities)}")
    print(f"  Parishes found:        {len(results.parishes)}")

    for state in results.states:
        print(f"    • State: {state.name} (Capital: {state.capital})")
    for municipality in results.municipalities:
        print(f"    • Municipality: {municipality.name} in {municipality.state}")
    for parish in results.parishes[:3]:
        print(f"    • Parish: {parish.name} in {parish.municipality}, {parish.state}")
    if len(results.parishes) > 3:
        print(f"    • ... and {len(results.parishes) - 3} more")


def show_all_states(territory: VenezuelaTerritory) -> None:
    _header("ALL STATES")
    result = territory.get_all_states()
    if not result.success or result.data is None:
        _error(result.error)
        return

    print(f"  Found {len(result.data)} states:")
    for index, state in enumerate(result.data, start=1):
        print(f"    {index:>2}. {state.name} {_DIM}(Capital: {state.capital}){_RESET}")


def show_stats(territory: VenezuelaTerritory) -> None:
    _header("TERRITORIAL STATISTICS")
    stats = territory.get_stats().unwrap()

    print(f"  Total States:          {stats.total_states}")
    print(f"  Total Municipalities:  {stats.total_municipalities}")
    print(f"  Total Parishes:        {stats.total_parishes}")
    print(f"  Last Updated:          {stats.last_updated.isoformat()}")
    if not stats.complete:
        print(f"  {_RED}Some child lists could not be loaded; totals are a lower bound{_RESET}")


def show_cache_timing(territory: VenezuelaTerritory, name: str) -> None:
    _header("CACHE TIMING")

    start = time.perf_counter()
    territory.get_state(name)
    first = (time.perf_counter() - start) * 1000

    start = time.perf_counter()
    territory.get_state(name)
    second = (time.perf_counter() - start) * 1000

    print(f"  First call ({name}):   {first:8.3f} ms")
    print(f"  Second call ({name}):  {second:8.3f} ms")
    print(f"  Cache entries:         {len(territory.cache)}")


# ─── Main ────────────────────────────────────────────────────────────


def main():
    """Run every demo section in order."""
    print(f"\n  {_BOLD}Venezuela Territory — Example Usage{_RESET}")

    settings = load_settings()
    provider = TerritoryDataProvider(path=settings.dataset_path)
    territory = VenezuelaTerritory(settings.territory_config(), provider=provider)

    show_state(territory, "Zulia")
    show_municipality(territory, "Maracaibo")
    show_search(territory, "Caracas")
    show_all_states(territory)
    show_stats(territory)
    show_cache_timing(territory, "Miranda")

    print(f"\n{'=' * _WIDTH}")
    print(f"  {_GREEN}{_BOLD}Example completed successfully{_RESET}")
    print(f"{'=' * _WIDTH}\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
