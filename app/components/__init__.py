"""Reusable UI components for Storefront Catalog."""

from .filter_panel import (
    render_filter_panel,
    render_sheet_toggle,
)

__all__ = [
    "render_filter_panel",
    "render_sheet_toggle",
]
