"""API Pydantic models."""

from api.models.schemas import (
    FilterEcho,
    GameItem,
    GameListResponse,
    FacetOptionItem,
    ChoiceItem,
    FacetsResponse,
)

__all__ = [
    "FilterEcho",
    "GameItem",
    "GameListResponse",
    "FacetOptionItem",
    "ChoiceItem",
    "FacetsResponse",
]
