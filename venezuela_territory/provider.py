"""
Raw territorial data provider.

Serves flat records from the bundled reference dataset
(``data/venezuela.json``): 23 states plus Distrito Capital, their
municipalities with capitals, and the parishes of each municipality.

The accessor only depends on the six lookup/listing methods below, so any
object exposing them (a database-backed provider, a test fake) can be
injected in place of ``TerritoryDataProvider``.

Matching is exact-name after normalization:
  - surrounding whitespace is trimmed
  - case is folded
  - accents are stripped ("tachira" matches "Táchira")

Municipality and parish names repeat across the country ("Sucre",
"Libertador", "Bolívar"...). Lookups by bare name return the first match in
dataset order; listings accept the parent state to disambiguate.
"""

from __future__ import annotations

import json
import logging
import unicodedata
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional, Protocol, Sequence

from .exceptions import DatasetLoadError

logger = logging.getLogger(__name__)

DEFAULT_DATASET_PATH = Path(__file__).parent / "data" / "venezuela.json"


# ─── Records ────────────────────────────────────────────────────────


@dataclass(frozen=True)
class StateRecord:
    name: str
    capital: str
    iso: Optional[str] = None


@dataclass(frozen=True)
class MunicipalityRecord:
    name: str
    state: str
    capital: Optional[str] = None


@dataclass(frozen=True)
class ParishRecord:
    name: str
    municipality: str
    state: str


class TerritoryProvider(Protocol):
    """Flat lookup surface consumed by the accessor."""

    def lookup_state(self, name: str) -> Optional[StateRecord]: ...

    def lookup_municipality(self, name: str) -> Optional[MunicipalityRecord]: ...

    def lookup_parish(self, name: str) -> Optional[ParishRecord]: ...

    def list_states(self) -> Sequence[StateRecord]: ...

    def list_municipalities(self, state_name: str) -> Optional[Sequence[MunicipalityRecord]]: ...

    def list_parishes(
        self, municipality_name: str, state_name: Optional[str] = None
    ) -> Optional[Sequence[ParishRecord]]: ...


# ─── Loading ────────────────────────────────────────────────────────


def load_dataset(path: str | Path | None = None) -> list[dict[str, Any]]:
    """Load the nested state list from the JSON dataset.

    Args:
        path: Path to the dataset file. Defaults to the bundled one.

    Raises:
        DatasetLoadError: if the file is missing, not JSON, or has no states.
    """
    resolved = DEFAULT_DATASET_PATH if path is None else Path(path)

    try:
        with resolved.open(encoding="utf-8") as f:
            raw = json.load(f)
    except FileNotFoundError as e:
        raise DatasetLoadError(
            f"Dataset file not found: {resolved}", {"path": str(resolved)}
        ) from e
    except json.JSONDecodeError as e:
        raise DatasetLoadError(
            f"Dataset file is not valid JSON: {resolved} ({e})", {"path": str(resolved)}
        ) from e

    states = raw.get("states") if isinstance(raw, dict) else None
    if not isinstance(states, list):
        raise DatasetLoadError(
            f"Dataset file has no 'states' list: {resolved}", {"path": str(resolved)}
        )

    logger.info("Loaded %d states from %s", len(states), resolved)
    return states


def normalize_name(name: str) -> str:
    """Trim, casefold and strip diacritics for exact-name comparison."""
    folded = unicodedata.normalize("NFKD", name.strip().casefold())
    return "".join(c for c in folded if not unicodedata.combining(c))


# ─── Provider ───────────────────────────────────────────────────────


class TerritoryDataProvider:
    """Flat, synchronous lookups over the nested reference dataset.

    Usage:
        provider = TerritoryDataProvider()
        provider.lookup_state("zulia")
        # StateRecord(name='Zulia', capital='Maracaibo', iso='VE-V')
    """

    def __init__(
        self,
        dataset: list[dict[str, Any]] | None = None,
        path: str | Path | None = None,
    ):
        if dataset is None:
            dataset = load_dataset(path)

        self._states: list[StateRecord] = []
        self._municipalities: dict[str, list[MunicipalityRecord]] = {}

        # Normalized name -> first record in dataset order
        self._state_index: dict[str, StateRecord] = {}
        self._municipality_index: dict[str, MunicipalityRecord] = {}
        self._parish_index: dict[str, ParishRecord] = {}
        # Normalized (state, municipality) -> parishes, and bare municipality -> first list
        self._parishes: dict[tuple[str, str], list[ParishRecord]] = {}
        self._parishes_by_municipality: dict[str, list[ParishRecord]] = {}

        for entry in dataset:
            try:
                state = StateRecord(
                    name=entry["name"],
                    capital=entry["capital"],
                    iso=entry.get("iso"),
                )
            except (KeyError, TypeError) as e:
                raise DatasetLoadError(
                    f"Malformed state entry: {entry!r}", {"entry": entry}
                ) from e

            state_key = normalize_name(state.name)
            self._states.append(state)
            self._state_index.setdefault(state_key, state)
            municipalities = self._municipalities.setdefault(state.name, [])

            for mun in entry.get("municipalities", []):
                try:
                    record = MunicipalityRecord(
                        name=mun["name"], state=state.name, capital=mun.get("capital")
                    )
                except (KeyError, TypeError) as e:
                    raise DatasetLoadError(
                        f"Malformed municipality entry in {state.name}: {mun!r}",
                        {"state": state.name, "entry": mun},
                    ) from e

                mun_key = normalize_name(record.name)
                municipalities.append(record)
                self._municipality_index.setdefault(mun_key, record)

                parishes = [
                    ParishRecord(name=p, municipality=record.name, state=state.name)
                    for p in mun.get("parishes", [])
                ]
                self._parishes.setdefault((state_key, mun_key), parishes)
                self._parishes_by_municipality.setdefault(mun_key, parishes)
                for parish in parishes:
                    self._parish_index.setdefault(normalize_name(parish.name), parish)

    # ── Single-entity lookups ───────────────────────────────────────

    def lookup_state(self, name: str) -> Optional[StateRecord]:
        return self._state_index.get(normalize_name(name))

    def lookup_municipality(self, name: str) -> Optional[MunicipalityRecord]:
        return self._municipality_index.get(normalize_name(name))

    def lookup_parish(self, name: str) -> Optional[ParishRecord]:
        return self._parish_index.get(normalize_name(name))

    # ── Bulk listings ───────────────────────────────────────────────

    def list_states(self) -> list[StateRecord]:
        return list(self._states)

    def list_municipalities(self, state_name: str) -> list[MunicipalityRecord]:
        state = self._state_index.get(normalize_name(state_name))
        if state is None:
            return []
        return list(self._municipalities[state.name])

    def list_parishes(
        self, municipality_name: str, state_name: Optional[str] = None
    ) -> list[ParishRecord]:
        """Parishes of a municipality, in dataset order.

        Without ``state_name`` the first municipality with that name wins.
        """
        mun_key = normalize_name(municipality_name)
        if state_name is None:
            parishes = self._parishes_by_municipality.get(mun_key)
        else:
            parishes = self._parishes.get((normalize_name(state_name), mun_key))
        return list(parishes) if parishes is not None else []

    # ── Introspection ───────────────────────────────────────────────

    @property
    def state_count(self) -> int:
        return len(self._states)
