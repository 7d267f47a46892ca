"""
Storefront Catalog - Main Streamlit Application

Run with: streamlit run app/main.py
"""

import streamlit as st
from pathlib import Path
import sys

# Add project root to path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from config import config
from config.logging_config import setup_logging

# Import page modules
from app.pages.games import render_games, get_catalog_connection
from src.catalog import get_table_counts

setup_logging(log_level=config.app.log_level)


def main():
    """Main application entry point."""
    # Page configuration
    st.set_page_config(
        page_title=config.app.name,
        page_icon="🎮",
        layout="wide",
        initial_sidebar_state="expanded",
    )

    st.title(f"🎮 {config.app.name}")

    tab_games, tab_settings = st.tabs(["Games", "Settings"])

    with tab_games:
        render_games()

    with tab_settings:
        render_settings()


def render_settings():
    """Render the settings page."""
    st.subheader("Application Settings")

    col1, col2 = st.columns(2)

    with col1:
        st.markdown("**Catalog**")
        db_path = config.catalog.db_path
        st.text_input(
            "Database Path",
            value=str(db_path) if db_path else "In-memory sample catalog",
            disabled=True,
        )
        st.text_input(
            "Page Size", value=str(config.catalog.default_page_size), disabled=True
        )

    with col2:
        st.markdown("**Filters**")
        st.text_input(
            "URL Update Delay", value=f"{config.filters.debounce_ms} ms", disabled=True
        )
        catalog_path = config.filters.facet_catalog_path
        st.text_input(
            "Facet Catalog",
            value=str(catalog_path) if catalog_path else "Built-in options",
            disabled=True,
        )

    st.divider()

    st.subheader("Catalog Statistics")
    try:
        counts = get_table_counts(get_catalog_connection().cursor())
    except Exception as e:
        st.error(f"Error loading statistics: {e}")
    else:
        col1, col2, col3 = st.columns(3)
        with col1:
            st.metric("Games", f"{counts.get('games', 0):,}")
        with col2:
            st.metric("Genre Tags", f"{counts.get('game_genres', 0):,}")
        with col3:
            st.metric("Platform Listings", f"{counts.get('game_platforms', 0):,}")

    st.divider()

    st.subheader("About")
    st.markdown(
        f"""
        **{config.app.name}** v{config.app.version}

        Browse the game catalog by genre, platform, publisher, price, rating,
        release year and discount. The filters live in the page URL, so any
        filtered listing can be bookmarked or shared.

        Built with:
        - DuckDB for catalog queries
        - Streamlit for the web interface
        - FastAPI for the listing API
        """
    )


if __name__ == "__main__":
    main()
