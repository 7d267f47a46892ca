"""Pydantic schemas for API responses."""

from pydantic import BaseModel, Field
from typing import Optional


class FilterEcho(BaseModel):
    """Normalized filters the results were computed for."""
    search: str = ""
    genres: list[str] = Field(default_factory=list)
    platforms: list[str] = Field(default_factory=list)
    publishers: list[str] = Field(default_factory=list)
    price_range: list[float] = Field(default_factory=lambda: [0, 100])
    rating: Optional[float] = None
    release_year: Optional[str] = None
    on_sale: bool = False
    sort_by: str = "relevance"


class GameItem(BaseModel):
    """A game in the listing."""
    id: str
    title: str
    description: Optional[str] = None
    price: float
    discount: int = 0
    final_price: float
    developer: Optional[str] = None
    publisher_id: Optional[str] = None
    release_date: Optional[str] = None
    rating: Optional[float] = None
    genre_ids: list[str] = Field(default_factory=list)
    platform_ids: list[str] = Field(default_factory=list)


class GameListResponse(BaseModel):
    """Filtered game listing."""
    filters: FilterEcho
    query: str = Field(description="Canonical query string for these filters")
    active_filter_count: int
    total: int
    page: int
    page_size: int
    games: list[GameItem]


class FacetOptionItem(BaseModel):
    """A selectable facet value."""
    id: str
    name: str


class ChoiceItem(BaseModel):
    """A value/label choice."""
    value: str
    label: str


class FacetsResponse(BaseModel):
    """Everything a client needs to render the filter panel."""
    genres: list[FacetOptionItem]
    platforms: list[FacetOptionItem]
    publishers: list[FacetOptionItem]
    sort_options: list[ChoiceItem]
    rating_options: list[ChoiceItem]
    release_years: list[str]
    price_min: float
    price_max: float
