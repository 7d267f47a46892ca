"""Streamlit pages for Storefront Catalog."""

from .games import render_games

__all__ = [
    "render_games",
]
