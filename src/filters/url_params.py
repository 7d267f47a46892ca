"""Query-string codec for FilterState.

The parameter names and multiplicity below are bookmarked and shared
externally, so they must stay stable:

    q           free-text search
    genre       repeated, one per genre id
    platform    repeated, one per platform id
    publisher   repeated, one per publisher id
    min, max    price bounds, omitted at the domain defaults
    rating      minimum star rating
    year        four-digit release year
    sale        "true" when restricted to discounted items
    sort        sort order, omitted for "relevance"

Parsing is tolerant: malformed or unknown parameters are treated as absent.
"""

from dataclasses import replace
from typing import Any, Iterable, List, Mapping, Optional, Tuple, Union
from urllib.parse import parse_qsl, urlencode

from config.constants import DEFAULT_PRICE_RANGE, DEFAULT_SORT, PRICE_MAX, PRICE_MIN, SORT_OPTIONS
from config.logging_config import get_logger
from src.filters.facets import DEFAULT_CATALOG, FacetCatalog
from src.filters.state import DEFAULT_FILTER_STATE, FilterState, format_number
from src.filters.store import (
    clamp_price,
    coerce_number,
    describe,
    is_valid_rating,
    is_valid_year,
)

logger = get_logger("filters.url_params")

QueryPairs = List[Tuple[str, str]]
QueryInput = Union[str, Mapping[str, Any], Iterable[Tuple[str, Any]], None]

# Multi-value facet parameters, in emission order
FACET_PARAMS = (
    ("genre", "genres"),
    ("platform", "platforms"),
    ("publisher", "publishers"),
)

FILTER_PARAMS = frozenset(
    ["q", "min", "max", "rating", "year", "sale", "sort"] + [p for p, _ in FACET_PARAMS]
)

TRUE_VALUES = frozenset({"true", "1", "yes"})


def to_query_params(state: FilterState) -> QueryPairs:
    """
    Convert filter state to ordered query parameters.

    Only non-default fields are emitted. Multi-value facets use repeated keys,
    sorted so the resulting string is canonical.

    Args:
        state: FilterState to serialize.

    Returns:
        List of (name, value) pairs.
    """
    params: QueryPairs = []

    if state.search:
        params.append(("q", state.search))

    for param, facet in FACET_PARAMS:
        for option_id in sorted(getattr(state, facet)):
            params.append((param, option_id))

    low, high = state.price_range
    if low > PRICE_MIN:
        params.append(("min", format_number(low)))
    if high < PRICE_MAX:
        params.append(("max", format_number(high)))

    if state.rating is not None:
        params.append(("rating", format_number(state.rating)))
    if state.release_year is not None:
        params.append(("year", state.release_year))
    if state.on_sale:
        params.append(("sale", "true"))
    if state.sort_by != DEFAULT_SORT:
        params.append(("sort", state.sort_by))

    return params


def to_query_string(state: FilterState) -> str:
    """Serialize filter state to a query string without the leading ``?``."""
    return urlencode(to_query_params(state))


def build_url(state: FilterState, path: str = "") -> str:
    """
    Build the canonical URL for a filter state.

    Args:
        state: FilterState to serialize.
        path: Page path the query string is appended to.

    Returns:
        ``path?query``, or just ``path`` when no filter is active.
    """
    query = to_query_string(state)
    return f"{path}?{query}" if query else path


def _normalize_pairs(query: QueryInput) -> QueryPairs:
    """Flatten every supported query representation into string pairs."""
    if query is None:
        return []

    if isinstance(query, str):
        return parse_qsl(query.lstrip("?"), keep_blank_values=True)

    if isinstance(query, Mapping):
        items: Iterable[Tuple[str, Any]] = query.items()
    else:
        items = query

    pairs: QueryPairs = []
    for item in items:
        if isinstance(item, (str, bytes)):
            logger.debug(f"Skipping bare string query item: {describe(item)}")
            continue
        try:
            key, value = item
        except (TypeError, ValueError):
            logger.debug(f"Skipping malformed query item: {describe(item)}")
            continue
        values = value if isinstance(value, (list, tuple)) else [value]
        for v in values:
            if v is None:
                continue
            try:
                pairs.append((str(key), str(v)))
            except ValueError:
                logger.debug(f"Skipping unprintable value for query key {describe(key)}")
    return pairs


def _first(pairs: QueryPairs, key: str) -> Optional[str]:
    for k, v in pairs:
        if k == key:
            return v
    return None


def _all(pairs: QueryPairs, key: str) -> List[str]:
    return [v for k, v in pairs if k == key]


def _parse_price(raw: Optional[str], default: float) -> float:
    number = coerce_number(raw)
    if number is None:
        if raw is not None:
            logger.debug(f"Ignoring malformed price bound: {raw!r}")
        return default
    return clamp_price(number)


def from_query(query: QueryInput, catalog: Optional[FacetCatalog] = DEFAULT_CATALOG) -> FilterState:
    """
    Create filter state from URL query parameters.

    Never raises: missing keys give defaults, unparseable values fall back to
    the field default, unknown facet ids are dropped.

    Args:
        query: Raw query string, mapping of name to value(s), or (name, value) pairs.
        catalog: Facet catalog to validate ids against; None skips validation.

    Returns:
        FilterState populated from the parameters.
    """
    pairs = _normalize_pairs(query)
    if not pairs:
        return DEFAULT_FILTER_STATE

    state = DEFAULT_FILTER_STATE
    changes = {}

    search = _first(pairs, "q")
    if search:
        changes["search"] = search

    for param, facet in FACET_PARAMS:
        ids = frozenset(v for v in _all(pairs, param) if v)
        if ids:
            changes[facet] = ids

    low = _parse_price(_first(pairs, "min"), DEFAULT_PRICE_RANGE[0])
    high = _parse_price(_first(pairs, "max"), DEFAULT_PRICE_RANGE[1])
    if low > high:
        low, high = high, low
    if (low, high) != DEFAULT_PRICE_RANGE:
        changes["price_range"] = (low, high)

    raw_rating = _first(pairs, "rating")
    if raw_rating is not None:
        rating = coerce_number(raw_rating)
        if is_valid_rating(rating):
            changes["rating"] = rating
        else:
            logger.debug(f"Ignoring malformed rating: {raw_rating!r}")

    raw_year = _first(pairs, "year")
    if raw_year is not None:
        if is_valid_year(raw_year):
            changes["release_year"] = raw_year
        else:
            logger.debug(f"Ignoring malformed year: {raw_year!r}")

    raw_sale = _first(pairs, "sale")
    if raw_sale is not None and raw_sale.strip().lower() in TRUE_VALUES:
        changes["on_sale"] = True

    raw_sort = _first(pairs, "sort")
    if raw_sort is not None:
        if raw_sort in SORT_OPTIONS:
            changes["sort_by"] = raw_sort
        else:
            logger.debug(f"Ignoring unknown sort order: {raw_sort!r}")

    if changes:
        state = replace(state, **changes)

    if catalog is not None:
        state = catalog.sanitize(state)

    return state


def has_filter_params(query: QueryInput) -> bool:
    """Check if a query carries any filter parameter at all."""
    return any(key in FILTER_PARAMS for key, _ in _normalize_pairs(query))
