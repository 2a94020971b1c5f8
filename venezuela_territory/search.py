"""
Name search across the three entity kinds.

Not a text search: the query is probed as an exact state name, an exact
municipality name and an exact parish name, so each list in the result
holds at most one entry.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

from .models import SearchOptions, SearchResults

if TYPE_CHECKING:
    from .territory import VenezuelaTerritory

logger = logging.getLogger(__name__)


def search_territory(
    territory: "VenezuelaTerritory",
    query: str,
    options: Optional[SearchOptions] = None,
) -> SearchResults:
    """Probe ``query`` against states, municipalities and parishes.

    Failed probes are dropped. An unexpected error stops the aggregation and
    whatever was collected up to that point is returned.
    """
    results = SearchResults()

    try:
        state = territory.get_state(query, options)
        if state.success and state.data is not None:
            results.states.append(state.data)

        municipality = territory.get_municipality(query, options)
        if municipality.success and municipality.data is not None:
            results.municipalities.append(municipality.data)

        parish = territory.get_parish(query, options)
        if parish.success and parish.data is not None:
            results.parishes.append(parish.data)
    except Exception as e:
        logger.warning("Search for '%s' failed: %s", query, e)

    return results
