"""Game listing page for Storefront Catalog."""

import streamlit as st
import pandas as pd
from pathlib import Path
from urllib.parse import parse_qsl, urlsplit
import sys

PROJECT_ROOT = Path(__file__).parent.parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from config import config
from config.logging_config import get_logger
from src.catalog import CatalogConnection, initialize_catalog, search_games, count_games
from src.filters import FilterPanel, FilterSession, FilterState, PolledTimer, load_facet_catalog
from app.components.filter_panel import render_filter_panel, render_sheet_toggle

logger = get_logger("app.games")

SESSION_KEY = "filter_session"
PANEL_KEY = "filter_panel"
SETTLED_KEY = "settled_filters"


@st.cache_resource
def get_catalog_connection():
    """Open the catalog once per server process, seeding it when empty."""
    conn = CatalogConnection(config.catalog.db_path).connect()
    initialize_catalog(conn)
    return conn


@st.cache_resource
def get_catalog():
    return load_facet_catalog()


def _current_query_pairs():
    """Read the page's query parameters, keeping repeated keys."""
    return [(key, value) for key in st.query_params for value in st.query_params.get_all(key)]


def replace_query_params(url: str) -> None:
    """Navigator: swap the page's query parameters for those in ``url``."""
    params = {}
    for key, value in parse_qsl(urlsplit(url).query, keep_blank_values=True):
        params.setdefault(key, []).append(value)
    st.query_params.from_dict(params)


def _store_settled(state: FilterState) -> None:
    st.session_state[SETTLED_KEY] = state


def get_filter_session() -> FilterSession:
    """Get this browser session's FilterSession, hydrating it on first use."""
    if SESSION_KEY not in st.session_state:
        session = FilterSession(
            catalog=get_catalog(),
            navigate=replace_query_params,
            timer_factory=PolledTimer,
        )
        session.on_settled(_store_settled)
        st.session_state[SETTLED_KEY] = session.hydrate(_current_query_pairs())
        st.session_state[SESSION_KEY] = session
        st.session_state[PANEL_KEY] = FilterPanel(session)
    return st.session_state[SESSION_KEY]


def _poll_interval() -> float:
    return max(config.filters.debounce_seconds / 2, 0.1)


@st.fragment(run_every=_poll_interval())
def settle_filters() -> None:
    """Settle pending filter changes once the user pauses."""
    session = st.session_state[SESSION_KEY]
    if session.reconciler.pending and session.poll():
        st.rerun()


def render_games():
    """Render the game listing page."""
    session = get_filter_session()
    panel: FilterPanel = st.session_state[PANEL_KEY]

    with st.sidebar:
        render_filter_panel(panel, panel.sidebar())

    render_sheet_toggle(panel)
    settle_filters()

    state: FilterState = st.session_state[SETTLED_KEY]
    page_size = config.catalog.default_page_size

    try:
        conn = get_catalog_connection().cursor()
        total = count_games(conn, state)
        results_df = search_games(conn, state, limit=page_size)
    except Exception as e:
        logger.error(f"Listing query failed: {e}")
        st.error(f"Error loading games: {e}")
        return

    st.subheader(f"{total:,} games")
    st.caption(state.get_summary(session.catalog))

    if results_df.empty:
        st.info("No games match these filters.")
        return

    if len(results_df) < total:
        st.caption(f"Showing {len(results_df)} of {total:,}")

    st.dataframe(
        format_results_for_display(results_df),
        use_container_width=True,
        hide_index=True,
        column_config={
            "Title": st.column_config.TextColumn(width="large"),
            "Price": st.column_config.NumberColumn(format="$%.2f"),
            "Discount": st.column_config.NumberColumn(format="%d%%"),
            "Rating": st.column_config.NumberColumn(format="%.1f"),
            "Released": st.column_config.DateColumn(),
        },
    )


def format_results_for_display(df: pd.DataFrame) -> pd.DataFrame:
    """Format results DataFrame for display."""
    display_cols = {
        "title": "Title",
        "final_price": "Price",
        "discount": "Discount",
        "rating": "Rating",
        "release_date": "Released",
        "developer": "Developer",
    }

    available_cols = [c for c in display_cols.keys() if c in df.columns]
    display_df = df[available_cols].copy()
    display_df.columns = [display_cols[c] for c in available_cols]
    return display_df
