"""Faceted filter state for the storefront game listing.

This package keeps the listing filters, the page URL and the result grid in
step:

Usage:
    from src.filters import FilterSession, FilterPanel

    session = FilterSession(navigate=replace_url, path="/games")
    session.on_settled(lambda state: render_grid(search_games(conn, state)))
    session.hydrate(current_query_string)

    session.set_genre("rpg", True)   # URL and grid update once the user pauses
    panel = FilterPanel(session)
    sidebar, sheet = panel.sidebar(), panel.sheet()
"""

from .state import (
    FilterState,
    DEFAULT_FILTER_STATE,
    default_filter_state,
)
from .facets import (
    FACETS,
    FacetOption,
    FacetCatalog,
    DEFAULT_CATALOG,
    load_facet_catalog,
)
from .store import (
    set_genre,
    set_platform,
    set_publisher,
    set_price_range,
    set_rating,
    set_release_year,
    set_sort_by,
    set_search,
    set_on_sale,
    reset,
    OPERATIONS,
)
from .url_params import (
    to_query_params,
    to_query_string,
    build_url,
    from_query,
)
from .debounce import Debouncer, PolledTimer
from .notifier import ResultNotifier
from .reconciler import UrlReconciler
from .session import FilterSession
from .presentation import (
    FilterPanel,
    PanelView,
    build_panel_view,
)

__all__ = [
    # State
    "FilterState",
    "DEFAULT_FILTER_STATE",
    "default_filter_state",
    # Facet catalog
    "FACETS",
    "FacetOption",
    "FacetCatalog",
    "DEFAULT_CATALOG",
    "load_facet_catalog",
    # Store operations
    "set_genre",
    "set_platform",
    "set_publisher",
    "set_price_range",
    "set_rating",
    "set_release_year",
    "set_sort_by",
    "set_search",
    "set_on_sale",
    "reset",
    "OPERATIONS",
    # URL codec
    "to_query_params",
    "to_query_string",
    "build_url",
    "from_query",
    # Reconciliation
    "Debouncer",
    "PolledTimer",
    "ResultNotifier",
    "UrlReconciler",
    "FilterSession",
    # Presentation
    "FilterPanel",
    "PanelView",
    "build_panel_view",
]
