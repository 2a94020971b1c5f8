"""
Territorial statistics folded over the fully materialized state list.

Area and population stay at zero: the dataset carries neither.
"""

from __future__ import annotations

from typing import Iterable

from .models import TerritorialStats, VenezuelanState


def compute_stats(states: Iterable[VenezuelanState]) -> TerritorialStats:
    """Count states, municipalities and parishes.

    ``complete`` is False when any state or municipality in the walk had a
    child list the provider could not deliver, so the totals are a lower bound.
    """
    total_states = 0
    total_municipalities = 0
    total_parishes = 0
    complete = True

    for state in states:
        total_states += 1
        total_municipalities += len(state.municipalities)
        complete = complete and state.municipalities_complete
        for municipality in state.municipalities:
            total_parishes += len(municipality.parishes)
            complete = complete and municipality.parishes_complete

    return TerritorialStats(
        total_states=total_states,
        total_municipalities=total_municipalities,
        total_parishes=total_parishes,
        complete=complete,
    )
