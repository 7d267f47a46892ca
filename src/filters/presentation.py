"""Presentation adapter for the two filter surfaces.

The wide-viewport sidebar and the narrow-viewport slide-in sheet are views over
one FilterSession. Both are built by the same function from the same state and
both dispatch through the same session, so they cannot drift apart.
"""

from dataclasses import dataclass, field
from datetime import date
from typing import Dict, FrozenSet, List, Optional, Tuple

from config import config
from config.constants import (
    ANY_VALUE,
    FACET_TITLES,
    PRICE_MAX,
    PRICE_MIN,
    RATING_OPTIONS,
    SORT_OPTIONS,
    get_release_years,
)
from src.filters.facets import FACETS, FacetCatalog
from src.filters.session import FilterSession
from src.filters.state import FilterState, format_number, format_price_range

# Sections open by default on each surface
SIDEBAR_EXPANDED: Dict[str, bool] = {
    "search": True,
    "genres": True,
    "platforms": True,
    "publishers": False,
    "price": True,
    "rating": False,
    "release": False,
    "other": False,
}
SHEET_EXPANDED: FrozenSet[str] = frozenset({"search", "genres", "platforms", "price"})


@dataclass(frozen=True)
class OptionView:
    """A checkbox or radio choice."""

    value: str
    label: str
    selected: bool


@dataclass(frozen=True)
class FacetSection:
    """A checkbox group for one set-valued facet."""

    key: str
    title: str
    options: Tuple[OptionView, ...]
    expanded: bool

    @property
    def selected_count(self) -> int:
        return sum(1 for option in self.options if option.selected)


@dataclass(frozen=True)
class PriceView:
    """Price slider state."""

    low: float
    high: float
    minimum: float
    maximum: float
    label: str
    active: bool


@dataclass(frozen=True)
class PanelView:
    """Everything a filter surface needs to render."""

    surface: str
    search: str
    sections: Tuple[FacetSection, ...]
    price: PriceView
    rating_options: Tuple[OptionView, ...]
    release_year_options: Tuple[OptionView, ...]
    on_sale: bool
    sort_options: Tuple[OptionView, ...]
    active_filter_count: int
    has_active_filters: bool
    summary: str
    expanded: Dict[str, bool] = field(default_factory=dict)
    open: bool = True

    @property
    def badge(self) -> Optional[str]:
        """Badge text for the filter button, or None when nothing is active."""
        return str(self.active_filter_count) if self.active_filter_count > 0 else None

    def section(self, key: str) -> Optional[FacetSection]:
        for section in self.sections:
            if section.key == key:
                return section
        return None


def _facet_sections(
    state: FilterState, catalog: FacetCatalog, expanded: Dict[str, bool]
) -> Tuple[FacetSection, ...]:
    sections = []
    for facet in FACETS:
        selected = getattr(state, facet)
        # Only catalog ids are offered as checkboxes
        options = tuple(
            OptionView(option.id, option.name, option.id in selected)
            for option in catalog.options(facet)
        )
        sections.append(
            FacetSection(
                key=facet,
                title=FACET_TITLES.get(facet, facet.title()),
                options=options,
                expanded=expanded.get(facet, False),
            )
        )
    return tuple(sections)


def _rating_options(state: FilterState) -> Tuple[OptionView, ...]:
    current = ANY_VALUE if state.rating is None else format_number(state.rating)
    options = [OptionView(value, label, value == current) for value, label in RATING_OPTIONS.items()]
    if current not in RATING_OPTIONS:
        options.append(OptionView(current, f"{current}+ stars", True))
    return tuple(options)


def _release_year_options(state: FilterState, current_year: int) -> Tuple[OptionView, ...]:
    years = get_release_years(current_year, config.filters.release_year_window)
    # Keep an older bookmarked year selectable
    if state.release_year is not None and state.release_year not in years:
        years.append(state.release_year)

    selected = state.release_year or ANY_VALUE
    options = [OptionView(ANY_VALUE, "Any year", selected == ANY_VALUE)]
    options.extend(OptionView(year, year, year == selected) for year in years)
    return tuple(options)


def build_panel_view(
    state: FilterState,
    catalog: FacetCatalog,
    surface: str = "sidebar",
    expanded: Optional[Dict[str, bool]] = None,
    is_open: bool = True,
    current_year: Optional[int] = None,
) -> PanelView:
    """
    Build the view model for a filter surface.

    Args:
        state: Filter state to render.
        catalog: Facet catalog providing the offered options.
        surface: "sidebar" or "sheet".
        expanded: Section key to expanded flag.
        is_open: Whether the surface is visible (sheets can be closed).
        current_year: Year the release-year choices count back from.

    Returns:
        PanelView for the surface.
    """
    expanded = dict(expanded or {})
    current_year = current_year or date.today().year
    low, high = state.price_range

    return PanelView(
        surface=surface,
        search=state.search,
        sections=_facet_sections(state, catalog, expanded),
        price=PriceView(
            low=low,
            high=high,
            minimum=PRICE_MIN,
            maximum=PRICE_MAX,
            label=format_price_range(state.price_range),
            active=state.price_filtered,
        ),
        rating_options=_rating_options(state),
        release_year_options=_release_year_options(state, current_year),
        on_sale=state.on_sale,
        sort_options=tuple(
            OptionView(value, label, value == state.sort_by)
            for value, label in SORT_OPTIONS.items()
        ),
        active_filter_count=state.active_filter_count,
        has_active_filters=state.has_active_filters,
        summary=state.get_summary(catalog),
        expanded=expanded,
        open=is_open,
    )


class FilterPanel:
    """Sidebar and sheet views over a single FilterSession."""

    def __init__(self, session: FilterSession, current_year: Optional[int] = None):
        self.session = session
        self.current_year = current_year
        self.sheet_open = False

    def sidebar(self) -> PanelView:
        """View for wide viewports."""
        return build_panel_view(
            self.session.state,
            self.session.catalog,
            surface="sidebar",
            expanded=SIDEBAR_EXPANDED,
            current_year=self.current_year,
        )

    def sheet(self) -> PanelView:
        """View for narrow viewports."""
        return build_panel_view(
            self.session.state,
            self.session.catalog,
            surface="sheet",
            expanded={key: True for key in SHEET_EXPANDED},
            is_open=self.sheet_open,
            current_year=self.current_year,
        )

    def views(self) -> List[PanelView]:
        return [self.sidebar(), self.sheet()]

    def toggle_sheet(self) -> bool:
        """Open or close the sheet; presentation only, filters are untouched."""
        self.sheet_open = not self.sheet_open
        return self.sheet_open

    def close_sheet(self) -> None:
        self.sheet_open = False

    def select(self, facet: str, option_id: str, selected: bool) -> FilterState:
        """Checkbox handler shared by both surfaces."""
        operations = {
            "genres": self.session.set_genre,
            "platforms": self.session.set_platform,
            "publishers": self.session.set_publisher,
        }
        handler = operations.get(facet)
        if handler is None:
            return self.session.state
        return handler(option_id, selected)
