"""Filter state for the storefront game listing.

A FilterState is an immutable snapshot of every facet selection. Updates never
mutate a state in place; they produce a new value (see ``src.filters.store``),
so consumers can compare snapshots by identity or equality to detect no-ops.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, Optional, Tuple
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).parent.parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from config.constants import DEFAULT_PRICE_RANGE, DEFAULT_SORT, PRICE_MAX, PRICE_MIN


@dataclass(frozen=True)
class FilterState:
    """Current facet selections for the game listing."""

    search: str = ""
    genres: FrozenSet[str] = field(default_factory=frozenset)
    platforms: FrozenSet[str] = field(default_factory=frozenset)
    publishers: FrozenSet[str] = field(default_factory=frozenset)
    price_range: Tuple[float, float] = DEFAULT_PRICE_RANGE
    rating: Optional[float] = None
    release_year: Optional[str] = None
    on_sale: bool = False
    sort_by: str = DEFAULT_SORT

    @property
    def price_filtered(self) -> bool:
        """Check if the price range is narrower than the full domain."""
        low, high = self.price_range
        return low > PRICE_MIN or high < PRICE_MAX

    @property
    def has_active_filters(self) -> bool:
        """Check if any field differs from the default state."""
        return self != DEFAULT_FILTER_STATE

    @property
    def is_empty(self) -> bool:
        """Check if all filters are at their defaults (showing all games)."""
        return not self.has_active_filters

    @property
    def active_filter_count(self) -> int:
        """Count of active facet categories (not individual values).

        Search text and sort order are not facets and are not counted.
        """
        count = 0
        if self.genres:
            count += 1
        if self.platforms:
            count += 1
        if self.publishers:
            count += 1
        if self.price_filtered:
            count += 1
        if self.rating is not None:
            count += 1
        if self.release_year is not None:
            count += 1
        if self.on_sale:
            count += 1
        return count

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON-friendly dictionary."""
        return {
            "search": self.search,
            "genres": sorted(self.genres),
            "platforms": sorted(self.platforms),
            "publishers": sorted(self.publishers),
            "price_range": [self.price_range[0], self.price_range[1]],
            "rating": self.rating,
            "release_year": self.release_year,
            "on_sale": self.on_sale,
            "sort_by": self.sort_by,
        }

    def get_summary(self, catalog: Optional[Any] = None) -> str:
        """
        Get a human-readable summary of active filters.

        Args:
            catalog: Optional FacetCatalog used to show display names instead of ids.

        Returns:
            Summary string, parts separated by " | ".
        """

        def names(facet: str, ids: FrozenSet[str]) -> str:
            ordered = sorted(ids)
            if catalog is not None:
                ordered = [catalog.name_for(facet, i) for i in ordered]
            return ", ".join(ordered)

        parts = []

        if self.search:
            parts.append(f'Search: "{self.search}"')

        if self.genres:
            if len(self.genres) <= 3:
                parts.append(f"Genres: {names('genres', self.genres)}")
            else:
                parts.append(f"Genres: {len(self.genres)} selected")

        if self.platforms:
            if len(self.platforms) <= 3:
                parts.append(f"Platforms: {names('platforms', self.platforms)}")
            else:
                parts.append(f"Platforms: {len(self.platforms)} selected")

        if self.publishers:
            if len(self.publishers) <= 2:
                parts.append(f"Publishers: {names('publishers', self.publishers)}")
            else:
                parts.append(f"Publishers: {len(self.publishers)} selected")

        if self.price_filtered:
            parts.append(f"Price: {format_price_range(self.price_range)}")

        if self.rating is not None:
            parts.append(f"Rating: {format_number(self.rating)}+")

        if self.release_year is not None:
            parts.append(f"Year: {self.release_year}")

        if self.on_sale:
            parts.append("On sale")

        return " | ".join(parts) if parts else "All games (no filters)"


DEFAULT_FILTER_STATE = FilterState()


def default_filter_state() -> FilterState:
    """Get the default filter state (no filters, relevance order)."""
    return DEFAULT_FILTER_STATE


def format_number(value: float) -> str:
    """Render a number without a trailing ``.0`` when it is integral."""
    number = float(value)
    if number.is_integer():
        return str(int(number))
    return repr(number)


def format_price_range(price_range: Tuple[float, float]) -> str:
    """Render a price range as ``$low - $high``."""
    low, high = price_range
    return f"${format_number(low)} - ${format_number(high)}"
