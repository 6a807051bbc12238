"""FastAPI application factory."""

from __future__ import annotations

from pathlib import Path

from fastapi import FastAPI

from termcomplete.api.routes.autocomplete import build_router
from termcomplete.api.routes.health import router as health_router
from termcomplete.autocomplete.suggester import PrefixSuggester
from termcomplete.config.settings import Settings, get_settings


def create_app(
    settings: Settings | None = None,
    vocabularies_dir: Path | None = None,
) -> FastAPI:
    """
    Build and return a fully wired FastAPI application.

    Vocabularies are built lazily on first query and then only read,
    so requests never mutate a shared index. *vocabularies_dir* overrides
    the directory derived from the project root.
    """
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.api.title,
        version=settings.api.version,
        description="Weighted prefix autocompletion",
    )

    # Shared state — accessible via request.app.state in routes
    app.state.settings = settings
    app.state.suggester = PrefixSuggester(
        ac_settings=settings.autocomplete,
        vocabularies_dir=vocabularies_dir or settings.vocabularies_dir,
    )

    app.include_router(health_router)
    app.include_router(build_router(settings.api))

    return app
