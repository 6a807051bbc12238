"""Autocomplete API routes."""

from __future__ import annotations

from fastapi import APIRouter, Query, Request

from termcomplete.api.schemas import AutocompleteResponse, SuggestionResponse, WeightResponse
from termcomplete.config.settings import ApiSettings


def build_router(api: ApiSettings) -> APIRouter:
    """Build the autocomplete routes with query bounds taken from *api*."""
    router = APIRouter(tags=["autocomplete"])

    @router.get("/autocomplete", response_model=AutocompleteResponse)
    def autocomplete(
        request: Request,
        q: str = Query(..., min_length=1, max_length=api.max_query_length, description="Prefix to complete"),
        vocabulary: str | None = Query(None, description="Vocabulary label to query"),
        top_k: int | None = Query(None, ge=1, le=api.max_top_k, description="Max suggestions"),
    ) -> AutocompleteResponse:
        """Return the heaviest suggestions for a prefix."""
        if top_k is None:
            top_k = min(request.app.state.settings.autocomplete.max_suggestions, api.max_top_k)

        suggester = request.app.state.suggester
        suggestions = suggester.suggest(q, vocabulary=vocabulary, top_k=top_k)

        return AutocompleteResponse(
            prefix=q,
            suggestions=[
                SuggestionResponse(term=s.term, score=s.score)
                for s in suggestions
            ],
        )

    @router.get("/weight", response_model=WeightResponse)
    def weight(
        request: Request,
        term: str = Query(..., min_length=1, max_length=api.max_query_length, description="Term to look up"),
        vocabulary: str | None = Query(None, description="Vocabulary label to query"),
    ) -> WeightResponse:
        """Return the stored weight of a term."""
        suggester = request.app.state.suggester
        return WeightResponse(term=term, weight=suggester.weight_of(term, vocabulary=vocabulary))

    return router
