"""Health and stats routes."""

from __future__ import annotations

from fastapi import APIRouter, Request

from termcomplete.api.schemas import StatsResponse

router = APIRouter(tags=["system"])


@router.get("/health")
def health() -> dict:
    """Simple liveness check."""
    return {"status": "ok"}


@router.get("/stats", response_model=StatsResponse)
def stats(request: Request) -> StatsResponse:
    """Return the configured backend and known vocabularies."""
    suggester = request.app.state.suggester
    return StatsResponse(
        backend=suggester.backend,
        vocabularies=suggester.available(),
        loaded=suggester.loaded,
    )
