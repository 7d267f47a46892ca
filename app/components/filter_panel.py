"""Filter panel component for the storefront listing.

Renders a PanelView (sidebar or sheet) with Streamlit widgets. Widget values
are written into session state from the view before each widget is created,
and every widget dispatches back through the shared FilterSession, so the two
surfaces always show the same filters.
"""

import streamlit as st

from src.filters import FilterPanel, PanelView
from src.filters.presentation import FacetSection


def _key(view: PanelView, name: str) -> str:
    return f"{view.surface}_{name}"


def _sync(key: str, value) -> None:
    """Push the session's value into a widget before it is rendered."""
    st.session_state[key] = value


def _render_facet_section(panel: FilterPanel, view: PanelView, section: FacetSection) -> None:
    title = section.title
    if section.selected_count:
        title = f"{title} ({section.selected_count})"

    with st.expander(title, expanded=section.expanded):
        for option in section.options:
            key = _key(view, f"{section.key}_{option.value}")
            _sync(key, option.selected)
            st.checkbox(
                option.label,
                key=key,
                on_change=lambda k=key, f=section.key, o=option.value: panel.select(
                    f, o, st.session_state[k]
                ),
            )


def _render_price(panel: FilterPanel, view: PanelView) -> None:
    key = _key(view, "price")
    price = view.price
    _sync(key, (float(price.low), float(price.high)))

    with st.expander("Price", expanded=view.expanded.get("price", False)):
        st.slider(
            "Price range",
            min_value=float(price.minimum),
            max_value=float(price.maximum),
            step=1.0,
            format="$%d",
            key=key,
            label_visibility="collapsed",
            on_change=lambda: panel.session.set_price_range(*st.session_state[key]),
        )
        st.caption(price.label if price.active else "Any price")


def _render_choice(label: str, options, key: str, expanded: bool, on_change, radio: bool) -> None:
    labels = {option.value: option.label for option in options}
    selected = next((option.value for option in options if option.selected), None)
    _sync(key, selected)

    widget = st.radio if radio else st.selectbox
    with st.expander(label, expanded=expanded):
        widget(
            label,
            options=list(labels),
            format_func=lambda value: labels.get(value, value),
            key=key,
            label_visibility="collapsed",
            on_change=lambda: on_change(st.session_state[key]),
        )


def render_filter_panel(panel: FilterPanel, view: PanelView) -> None:
    """
    Render one filter surface.

    Args:
        panel: FilterPanel owning the session both surfaces dispatch through.
        view: View model for this surface.
    """
    session = panel.session

    # Header with active filter count and reset
    header_cols = st.columns([3, 2])
    with header_cols[0]:
        if view.active_filter_count > 0:
            st.markdown(f"**Filters** :blue-background[{view.badge}]")
        else:
            st.markdown("**Filters**")
    with header_cols[1]:
        st.button(
            "Clear all",
            key=_key(view, "reset"),
            disabled=not view.has_active_filters,
            on_click=session.reset,
        )

    # Search
    search_key = _key(view, "search")
    _sync(search_key, view.search)
    st.text_input(
        "Search",
        key=search_key,
        placeholder="Search games...",
        on_change=lambda: session.set_search(st.session_state[search_key]),
    )

    # Sort
    sort_key = _key(view, "sort")
    sort_labels = {option.value: option.label for option in view.sort_options}
    _sync(sort_key, next(o.value for o in view.sort_options if o.selected))
    st.selectbox(
        "Sort by",
        options=list(sort_labels),
        format_func=lambda value: sort_labels.get(value, value),
        key=sort_key,
        on_change=lambda: session.set_sort_by(st.session_state[sort_key]),
    )

    for section in view.sections[:2]:
        _render_facet_section(panel, view, section)

    _render_price(panel, view)

    _render_choice(
        "Rating",
        view.rating_options,
        _key(view, "rating"),
        view.expanded.get("rating", False),
        session.set_rating,
        radio=True,
    )
    _render_choice(
        "Release year",
        view.release_year_options,
        _key(view, "year"),
        view.expanded.get("release", False),
        session.set_release_year,
        radio=False,
    )

    for section in view.sections[2:]:
        _render_facet_section(panel, view, section)

    sale_key = _key(view, "sale")
    _sync(sale_key, view.on_sale)
    st.checkbox(
        "On sale only",
        key=sale_key,
        on_change=lambda: session.set_on_sale(st.session_state[sale_key]),
    )

    if view.has_active_filters:
        st.caption(view.summary)


def render_sheet_toggle(panel: FilterPanel) -> None:
    """Render the narrow-viewport filter button and, when open, the sheet."""
    view = panel.sheet()
    label = "Filters" if view.badge is None else f"Filters ({view.badge})"
    st.button(
        f"{'Hide' if view.open else 'Show'} {label}",
        key="sheet_toggle",
        on_click=panel.toggle_sheet,
    )

    if view.open:
        with st.container(border=True):
            render_filter_panel(panel, view)
            st.button("Done", key="sheet_done", on_click=panel.close_sheet)
