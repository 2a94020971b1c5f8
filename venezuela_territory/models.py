"""
Pydantic models for Venezuelan territorial data.

Entities are read-only views: frozen models with tuple containers, so a
payload handed out from the cache cannot be mutated by the caller.
"""

from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Generic, Optional, TypeVar, cast

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .exceptions import TerritoryLookupError

T = TypeVar("T")


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


# ─── Enumerations ───────────────────────────────────────────────────


class ParishType(str, Enum):
    """Civil or ecclesiastical parish. The bundled data only has civil ones."""

    CIVIL = "civil"
    ECCLESIASTICAL = "ecclesiastical"


class Language(str, Enum):
    ES = "es"
    EN = "en"


# ─── Territorial Entities ───────────────────────────────────────────


class Parish(BaseModel):
    """A parish (parroquia), third-level division inside a municipality."""

    model_config = ConfigDict(frozen=True)

    name: str
    municipality: str  # Back-reference, not ownership
    state: str
    type: ParishType = ParishType.CIVIL
    area: Optional[float] = None  # km²
    population: Optional[int] = None


class Municipality(BaseModel):
    """A municipality (municipio), second-level division inside a state."""

    model_config = ConfigDict(frozen=True)

    name: str
    state: str
    parishes: tuple[Parish, ...] = ()
    capital: Optional[str] = None
    area: Optional[float] = None
    population: Optional[int] = None
    # False when the parish list could not be obtained from the provider
    parishes_complete: bool = True


class VenezuelanState(BaseModel):
    """A state (estado), top-level division. Distrito Capital is included."""

    model_config = ConfigDict(frozen=True)

    name: str
    capital: str
    municipalities: tuple[Municipality, ...] = ()
    iso: Optional[str] = None  # ISO 3166-2, e.g. "VE-V"
    area: Optional[float] = None
    population: Optional[int] = None
    municipalities_complete: bool = True

    @property
    def parish_count(self) -> int:
        return sum(len(m.parishes) for m in self.municipalities)


# ─── Query Options ──────────────────────────────────────────────────


class SearchOptions(BaseModel):
    """Options accepted by the lookup operations.

    None of them change the lookup itself; they only take part in the
    cache key, so differently-optioned calls are memoized separately.
    """

    model_config = ConfigDict(frozen=True)

    exact: Optional[bool] = None
    case_sensitive: Optional[bool] = None
    include_capital: Optional[bool] = None
    include_population: Optional[bool] = None
    include_area: Optional[bool] = None

    def canonical(self) -> str:
        """Order-stable serialization of the fields that were set."""
        return self.model_dump_json(exclude_none=True)


# ─── Result Envelope ────────────────────────────────────────────────


class SearchResult(BaseModel, Generic[T]):
    """Uniform success/failure wrapper returned by every accessor operation.

    Exactly one of ``data`` and ``error`` is present, depending on ``success``.
    """

    success: bool
    data: Optional[T] = None
    error: Optional[str] = None
    timestamp: datetime = Field(default_factory=_utcnow)

    @model_validator(mode="after")
    def _check_envelope(self) -> "SearchResult[T]":
        if self.success:
            if self.data is None or self.error is not None:
                raise ValueError("successful result must carry data and no error")
        elif self.data is not None or not self.error:
            raise ValueError("failed result must carry an error and no data")
        return self

    @classmethod
    def ok(cls, data: Any) -> "SearchResult[Any]":
        return cls(success=True, data=data)

    @classmethod
    def fail(cls, error: str) -> "SearchResult[Any]":
        return cls(success=False, error=error)

    def unwrap(self) -> T:
        """Return the payload, or raise TerritoryLookupError on failure."""
        if not self.success:
            raise TerritoryLookupError(self.error or "Unknown error")
        return cast(T, self.data)


class SearchResults(BaseModel):
    """Aggregate of the three single-entity probes issued by ``search``."""

    states: list[VenezuelanState] = Field(default_factory=list)
    municipalities: list[Municipality] = Field(default_factory=list)
    parishes: list[Parish] = Field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.states) + len(self.municipalities) + len(self.parishes)


# ─── Statistics ─────────────────────────────────────────────────────


class TerritorialStats(BaseModel):
    """Counts folded over the fully materialized state list."""

    model_config = ConfigDict(frozen=True)

    total_states: int
    total_municipalities: int
    total_parishes: int
    total_area: float = 0.0  # No area source
    total_population: int = 0  # No census source
    last_updated: datetime = Field(default_factory=_utcnow)
    complete: bool = True


# ─── Configuration ──────────────────────────────────────────────────


class VenezuelaConfig(BaseModel):
    """Accessor configuration. Only ``cache_enabled`` changes behavior."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    language: Language = Language.ES
    include_metadata: bool = True
    cache_enabled: bool = True
    validate_data: bool = True
