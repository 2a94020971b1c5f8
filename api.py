"""
Venezuela Territory — FastAPI Server
=====================================

Read-only HTTP surface over the territory accessor.

Endpoints:
    GET    /states                   Every state with its full hierarchy
    GET    /states/{name}            One state
    GET    /municipalities/{name}    One municipality with its parishes
    GET    /parishes/{name}          One parish
    GET    /search?q=...             Exact-name probe across all three levels
    GET    /stats                    Territorial counts
    DELETE /cache                    Drop every cached lookup
    GET    /health                   Health check / readiness probe

Run:
    uvicorn api:app --reload              # Dev (http://localhost:8000)
    uvicorn api:app --host 0.0.0.0        # Production

Docs:
    http://localhost:8000/docs             # Swagger UI (auto-generated)
"""

from __future__ import annotations

from contextlib import asynccontextmanager

from dotenv import load_dotenv
from fastapi import FastAPI, HTTPException, Query
from pydantic import BaseModel

from venezuela_territory import __version__
from venezuela_territory.config import load_settings
from venezuela_territory.models import (
    Municipality,
    Parish,
    SearchResult,
    SearchResults,
    TerritorialStats,
    VenezuelanState,
)
from venezuela_territory.provider import TerritoryDataProvider
from venezuela_territory.territory import VenezuelaTerritory

load_dotenv()


# ─── Application Lifespan (load dataset once) ───────────────────────

_territory: VenezuelaTerritory | None = None


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Load the dataset and build the accessor on startup."""
    global _territory  # noqa: PLW0603
    settings = load_settings()
    provider = TerritoryDataProvider(path=settings.dataset_path)
    _territory = VenezuelaTerritory(settings.territory_config(), provider=provider)
    yield
    _territory = None


# ─── FastAPI App ─────────────────────────────────────────────────────

app = FastAPI(
    title="Venezuela Territory API",
    description=(
        "Venezuelan states, municipalities and parishes from a bundled "
        "reference dataset, with per-process caching."
    ),
    version=__version__,
    lifespan=lifespan,
)


# ─── Response Schemas ───────────────────────────────────────────────


class HealthResponse(BaseModel):
    status: str
    version: str
    states_loaded: int
    cache_enabled: bool
    cache_entries: int


class CacheClearedResponse(BaseModel):
    cleared: int


# ─── Helpers ─────────────────────────────────────────────────────────


def _get_territory() -> VenezuelaTerritory:
    if _territory is None:
        raise HTTPException(status_code=503, detail="Territory accessor not initialised")
    return _territory


def _payload_or_404(result: SearchResult):
    if not result.success:
        raise HTTPException(status_code=404, detail=result.error)
    return result.data


# ─── Endpoints ───────────────────────────────────────────────────────


@app.get(
    "/states",
    summary="List every state",
    tags=["Territory"],
    responses={503: {"description": "Accessor not yet initialised"}},
)
def list_states() -> list[VenezuelanState]:
    result = _get_territory().get_all_states()
    if not result.success:
        raise HTTPException(status_code=500, detail=result.error)
    return list(result.data)


@app.get(
    "/states/{name}",
    summary="Get one state",
    tags=["Territory"],
    responses={404: {"description": "State not found"}},
)
def get_state(name: str) -> VenezuelanState:
    """State with all municipalities and their parishes. Accents and case are ignored."""
    return _payload_or_404(_get_territory().get_state(name))


@app.get(
    "/municipalities/{name}",
    summary="Get one municipality",
    tags=["Territory"],
    responses={404: {"description": "Municipality not found"}},
)
def get_municipality(name: str) -> Municipality:
    return _payload_or_404(_get_territory().get_municipality(name))


@app.get(
    "/parishes/{name}",
    summary="Get one parish",
    tags=["Territory"],
    responses={404: {"description": "Parish not found"}},
)
def get_parish(name: str) -> Parish:
    return _payload_or_404(_get_territory().get_parish(name))


@app.get(
    "/search",
    summary="Probe a name across states, municipalities and parishes",
    tags=["Territory"],
)
def search(q: str = Query(..., min_length=1, description="Exact name to probe")) -> SearchResults:
    """Each list holds at most one entry: this is an exact-name lookup, not a text search."""
    return _get_territory().search(q)


@app.get(
    "/stats",
    summary="Territorial statistics",
    tags=["Territory"],
    responses={500: {"description": "State list could not be materialized"}},
)
def get_stats() -> TerritorialStats:
    result = _get_territory().get_stats()
    if not result.success:
        raise HTTPException(status_code=500, detail=result.error)
    return result.data


@app.delete("/cache", summary="Clear the lookup cache", tags=["System"])
def clear_cache() -> CacheClearedResponse:
    territory = _get_territory()
    cleared = len(territory.cache)
    territory.clear_cache()
    return CacheClearedResponse(cleared=cleared)


@app.get(
    "/health",
    summary="Health check",
    tags=["System"],
    responses={503: {"description": "Accessor not yet initialised"}},
)
def health_check() -> HealthResponse:
    """Returns service status and configuration info."""
    territory = _get_territory()
    return HealthResponse(
        status="healthy",
        version=__version__,
        states_loaded=len(territory.provider.list_states()),
        cache_enabled=territory.config.cache_enabled,
        cache_entries=len(territory.cache),
    )
