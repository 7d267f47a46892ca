"""Facet option catalog.

Read-only reference lists of the genre, platform and publisher ids a FilterState
may hold. Used to decide which checkboxes to offer and to drop unknown ids that
arrive from stale bookmarks or hand-edited URLs.
"""

import json
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Dict, FrozenSet, List, Mapping, Optional, Tuple

from config import config
from config.constants import FACET_OPTIONS
from config.logging_config import get_logger
from src.filters.state import FilterState

logger = get_logger("filters.facets")

FACETS: Tuple[str, ...] = ("genres", "platforms", "publishers")


@dataclass(frozen=True)
class FacetOption:
    """A selectable facet value."""

    id: str
    name: str


@dataclass(frozen=True)
class FacetCatalog:
    """Valid options for each set-valued facet."""

    genres: Tuple[FacetOption, ...] = ()
    platforms: Tuple[FacetOption, ...] = ()
    publishers: Tuple[FacetOption, ...] = ()

    def options(self, facet: str) -> Tuple[FacetOption, ...]:
        """Get the options for a facet, in display order."""
        if facet not in FACETS:
            return ()
        return getattr(self, facet)

    def ids(self, facet: str) -> FrozenSet[str]:
        """Get the set of valid ids for a facet."""
        return frozenset(option.id for option in self.options(facet))

    def is_valid(self, facet: str, option_id: str) -> bool:
        """Check if an id is a known option of a facet."""
        return any(option.id == option_id for option in self.options(facet))

    def name_for(self, facet: str, option_id: str) -> str:
        """Get the display name for an id, or the id itself if unknown."""
        for option in self.options(facet):
            if option.id == option_id:
                return option.name
        return option_id

    def sanitize(self, state: FilterState) -> FilterState:
        """
        Drop facet ids the catalog does not know.

        Args:
            state: FilterState to validate.

        Returns:
            The same state if every id is known, otherwise a new state
            without the unknown ids.
        """
        changes = {}
        for facet in FACETS:
            selected = getattr(state, facet)
            valid = self.ids(facet)
            unknown = selected - valid
            if unknown:
                logger.debug(f"Dropping unknown {facet}: {sorted(unknown)}")
                changes[facet] = selected & valid

        if not changes:
            return state
        return replace(state, **changes)

    def to_dict(self) -> Dict[str, List[Dict[str, str]]]:
        """Convert to dictionary for API responses."""
        return {
            facet: [{"id": o.id, "name": o.name} for o in self.options(facet)]
            for facet in FACETS
        }

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "FacetCatalog":
        """
        Create from a mapping of facet name to options.

        Options may be given as ``{id: name}`` dicts or as lists of
        ``{"id": ..., "name": ...}`` records. Records without an id are skipped.
        """
        facets = {}
        for facet in FACETS:
            if facet in data:
                facets[facet] = _parse_options(data[facet])
        return cls(**facets)


def _parse_options(raw: Any) -> Tuple[FacetOption, ...]:
    """Parse one facet's options from either supported layout."""
    if isinstance(raw, Mapping):
        return tuple(FacetOption(str(k), str(v)) for k, v in raw.items())

    options = []
    seen = set()
    for item in raw or []:
        if not isinstance(item, Mapping) or not item.get("id"):
            continue
        option_id = str(item["id"])
        if option_id in seen:
            continue
        seen.add(option_id)
        options.append(FacetOption(option_id, str(item.get("name", option_id))))
    return tuple(options)


def _build_default_catalog() -> FacetCatalog:
    return FacetCatalog.from_mapping(FACET_OPTIONS)


DEFAULT_CATALOG = _build_default_catalog()


def load_facet_catalog(path: Optional[Path] = None) -> FacetCatalog:
    """
    Load the facet catalog.

    Reads a JSON file when one is given (or configured through
    ``FACET_CATALOG_PATH``); facets missing from the file keep the built-in
    options.

    Args:
        path: Optional path to a JSON catalog file.

    Returns:
        FacetCatalog instance.
    """
    path = path or config.filters.facet_catalog_path
    if path is None:
        return DEFAULT_CATALOG

    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)

    loaded = FacetCatalog.from_mapping(data)
    overrides = {facet: loaded.options(facet) for facet in FACETS if facet in data}
    catalog = replace(DEFAULT_CATALOG, **overrides)

    logger.info(
        f"Loaded facet catalog from {path}: "
        + ", ".join(f"{len(catalog.options(f))} {f}" for f in FACETS)
    )
    return catalog
