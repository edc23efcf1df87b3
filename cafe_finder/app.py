from __future__ import annotations

from fastapi import Depends, FastAPI, Request
from fastapi.responses import PlainTextResponse

from .cafes.data_store import get_registry
from .cafes.errors import CafeQueryError
from .cafes.lookup import handle_query
from .cafes.models import CitiesResponse, CityOut
from .cafes.registry import CityRegistry

app = FastAPI(title="Cafe Finder API", version="1.0.0")


@app.exception_handler(CafeQueryError)
def cafe_query_error_handler(request: Request, exc: CafeQueryError) -> PlainTextResponse:
    return PlainTextResponse(exc.message, status_code=400)


# ── Public endpoints ─────────────────────────────────────────────────────


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/cities", response_model=CitiesResponse)
def cities(registry: CityRegistry = Depends(get_registry)) -> CitiesResponse:
    return CitiesResponse(
        cities=[
            CityOut(name=city, cafe_count=len(registry.lookup(city) or ()))
            for city in registry.cities()
        ]
    )


# ── Cafe lookup ──────────────────────────────────────────────────────────


@app.get("/", response_class=PlainTextResponse)
@app.get("/cafe", response_class=PlainTextResponse)
def cafes(request: Request, registry: CityRegistry = Depends(get_registry)) -> str:
    # Parameters are read raw so bad input maps to the fixed 400 bodies
    # rather than FastAPI's 422 validation errors.
    return handle_query(request.query_params, registry)
