"""Pydantic response models for the API."""

from __future__ import annotations

from pydantic import BaseModel


class SuggestionResponse(BaseModel):
    """A single autocomplete suggestion."""

    term: str
    score: float


class AutocompleteResponse(BaseModel):
    """Autocomplete results."""

    prefix: str
    suggestions: list[SuggestionResponse]


class WeightResponse(BaseModel):
    """Weight lookup for one term; 0.0 when unknown."""

    term: str
    weight: float


class StatsResponse(BaseModel):
    """Index statistics."""

    backend: str
    vocabularies: list[str]
    loaded: list[str]
