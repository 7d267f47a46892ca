"""Pure update operations on FilterState.

Each operation takes the current state plus a facet-specific argument and
returns a new state. None of them raises: invalid input is coerced or ignored,
because filters are driven by user input and externally editable URLs.
An operation that changes nothing returns the state it was given.
"""

import math
import re
from dataclasses import replace
from typing import Any, Callable, Dict, Optional

from config.constants import ANY_VALUE, PRICE_MAX, PRICE_MIN, RATING_MAX, SORT_OPTIONS
from config.logging_config import get_logger
from src.filters.state import DEFAULT_FILTER_STATE, FilterState

logger = get_logger("filters.store")

YEAR_PATTERN = re.compile(r"^\d{4}$")


def coerce_number(value: Any) -> Optional[float]:
    """
    Convert a value to a finite float.

    Args:
        value: Number or numeric string.

    Returns:
        The float, or None if the value is not a finite number.
    """
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        return None
    if math.isnan(number) or math.isinf(number):
        return None
    return number


def describe(value: Any) -> str:
    """Repr for log messages; ints past the str conversion limit give their type."""
    try:
        return repr(value)
    except ValueError:
        return f"<{type(value).__name__}>"


def clamp_price(value: float) -> float:
    """Clamp a price to the slider domain."""
    return min(max(value, PRICE_MIN), PRICE_MAX)


def is_valid_rating(value: Optional[float]) -> bool:
    """Check if a rating floor is within (0, RATING_MAX]."""
    return value is not None and 0 < value <= RATING_MAX


def is_valid_year(value: Any) -> bool:
    """Check if a value is a four-digit year string."""
    return isinstance(value, str) and bool(YEAR_PATTERN.match(value))


def _is_any(value: Any) -> bool:
    return value is None or (isinstance(value, str) and value.strip().lower() == ANY_VALUE)


def _update(state: FilterState, **changes: Any) -> FilterState:
    """Apply changes, returning the original object when nothing differs."""
    updated = replace(state, **changes)
    return state if updated == state else updated


def _toggle(
    state: FilterState,
    facet: str,
    option_id: Any,
    included: bool,
    catalog: Optional[Any],
) -> FilterState:
    if not isinstance(option_id, str) or not option_id:
        logger.debug(f"Ignoring invalid {facet} id: {describe(option_id)}")
        return state

    current = getattr(state, facet)
    if included:
        if catalog is not None and not catalog.is_valid(facet, option_id):
            logger.debug(f"Ignoring unknown {facet} id: {option_id}")
            return state
        return _update(state, **{facet: current | {option_id}})
    return _update(state, **{facet: current - {option_id}})


def set_genre(
    state: FilterState, genre_id: str, included: bool, catalog: Optional[Any] = None
) -> FilterState:
    """Add or remove one genre id."""
    return _toggle(state, "genres", genre_id, bool(included), catalog)


def set_platform(
    state: FilterState, platform_id: str, included: bool, catalog: Optional[Any] = None
) -> FilterState:
    """Add or remove one platform id."""
    return _toggle(state, "platforms", platform_id, bool(included), catalog)


def set_publisher(
    state: FilterState, publisher_id: str, included: bool, catalog: Optional[Any] = None
) -> FilterState:
    """Add or remove one publisher id."""
    return _toggle(state, "publishers", publisher_id, bool(included), catalog)


def set_price_range(state: FilterState, low: Any, high: Any) -> FilterState:
    """
    Set the price range.

    Bounds are swapped if inverted and clamped to the price domain, so
    ``set_price_range(s, 150, -10)`` yields ``(0, 100)``.
    """
    low_value = coerce_number(low)
    high_value = coerce_number(high)
    if low_value is None or high_value is None:
        logger.debug(f"Ignoring invalid price range: {describe(low)}, {describe(high)}")
        return state

    if low_value > high_value:
        low_value, high_value = high_value, low_value

    return _update(state, price_range=(clamp_price(low_value), clamp_price(high_value)))


def set_rating(state: FilterState, value: Any) -> FilterState:
    """Set the minimum star rating; ``"any"`` clears it."""
    if _is_any(value):
        return _update(state, rating=None)

    rating = coerce_number(value)
    if not is_valid_rating(rating):
        logger.debug(f"Ignoring invalid rating: {describe(value)}")
        return state
    return _update(state, rating=rating)


def set_release_year(state: FilterState, value: Any) -> FilterState:
    """Set the release year filter; ``"any"`` clears it."""
    if _is_any(value):
        return _update(state, release_year=None)

    year = None
    if isinstance(value, str):
        year = value.strip()
    elif isinstance(value, int) and not isinstance(value, bool) and 1000 <= value <= 9999:
        year = str(value)
    if not is_valid_year(year):
        logger.debug(f"Ignoring invalid release year: {describe(value)}")
        return state
    return _update(state, release_year=year)


def set_sort_by(state: FilterState, value: Any) -> FilterState:
    """Set the sort order; unknown values keep the prior order."""
    if not isinstance(value, str) or value not in SORT_OPTIONS:
        logger.debug(f"Ignoring unknown sort order: {describe(value)}")
        return state
    return _update(state, sort_by=value)


def set_search(state: FilterState, text: Any) -> FilterState:
    """Set the free-text search, stored verbatim."""
    if text is None:
        text = ""
    elif not isinstance(text, str):
        try:
            text = str(text)
        except ValueError:
            logger.debug(f"Ignoring unprintable search value of type {type(text).__name__}")
            return state
    return _update(state, search=text)


def set_on_sale(state: FilterState, on_sale: Any) -> FilterState:
    """Restrict (or stop restricting) to discounted items."""
    return _update(state, on_sale=bool(on_sale))


def reset(state: Optional[FilterState] = None) -> FilterState:
    """Return the default filter state, regardless of the prior state."""
    if state is not None and state == DEFAULT_FILTER_STATE:
        return state
    return DEFAULT_FILTER_STATE


# Operations whose argument is a facet id validated against the catalog
CATALOG_OPERATIONS = frozenset({"set_genre", "set_platform", "set_publisher"})

OPERATIONS: Dict[str, Callable[..., FilterState]] = {
    "set_genre": set_genre,
    "set_platform": set_platform,
    "set_publisher": set_publisher,
    "set_price_range": set_price_range,
    "set_rating": set_rating,
    "set_release_year": set_release_year,
    "set_sort_by": set_sort_by,
    "set_search": set_search,
    "set_on_sale": set_on_sale,
    "reset": reset,
}
