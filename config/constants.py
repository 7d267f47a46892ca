"""Constants for Storefront Catalog.

Static reference data for the faceted game filters: facet option lists,
sort orders, rating floors and the price slider domain.

IMPORTANT: All filter defaults are EMPTY (all genres/platforms/publishers).
No facet value is preselected.
"""

from typing import Dict, List, Tuple


# =============================================================================
# Price Domain
# =============================================================================

PRICE_MIN: int = 0
PRICE_MAX: int = 100
DEFAULT_PRICE_RANGE: Tuple[int, int] = (PRICE_MIN, PRICE_MAX)


# =============================================================================
# Rating Domain
# =============================================================================

RATING_MAX: float = 5.0

# Minimum star rating choices offered in the filter panel ("any" = no floor)
RATING_OPTIONS: Dict[str, str] = {
    "any": "Any rating",
    "4": "4+ stars",
    "3": "3+ stars",
    "2": "2+ stars",
}

ANY_VALUE = "any"


# =============================================================================
# Sort Orders
# =============================================================================

DEFAULT_SORT = "relevance"

SORT_OPTIONS: Dict[str, str] = {
    "relevance": "Relevance",
    "price-asc": "Price: Low to High",
    "price-desc": "Price: High to Low",
    "name-asc": "Name: A to Z",
    "name-desc": "Name: Z to A",
    "rating-desc": "Highest Rated",
    "release-desc": "Newest",
    "discount-desc": "Biggest Discount",
}


# =============================================================================
# Facet Options (id -> display name)
# =============================================================================

GENRES: Dict[str, str] = {
    "action": "Action",
    "adventure": "Adventure",
    "rpg": "RPG",
    "strategy": "Strategy",
    "simulation": "Simulation",
    "sports": "Sports",
    "racing": "Racing",
    "puzzle": "Puzzle",
    "horror": "Horror",
    "shooter": "Shooter",
    "platformer": "Platformer",
    "fighting": "Fighting",
    "stealth": "Stealth",
    "survival": "Survival",
    "battle-royale": "Battle Royale",
    "mmo": "MMO",
    "moba": "MOBA",
    "card": "Card Game",
    "roguelike": "Roguelike",
    "open-world": "Open World",
    "indie": "Indie",
    "casual": "Casual",
    "sandbox": "Sandbox",
    "vr": "VR",
}

PLATFORMS: Dict[str, str] = {
    "steam": "Steam",
    "epic": "Epic Games Store",
    "gog": "GOG",
    "ubisoft": "Ubisoft Connect",
    "origin": "EA App",
    "battlenet": "Battle.net",
    "xbox": "Xbox",
    "playstation": "PlayStation",
    "nintendo": "Nintendo",
    "itch": "itch.io",
}

PUBLISHERS: Dict[str, str] = {
    "cd-projekt": "CD Projekt",
    "ubisoft": "Ubisoft",
    "ea": "Electronic Arts",
    "activision": "Activision Blizzard",
    "take-two": "Take-Two Interactive",
    "sony": "Sony Interactive Entertainment",
    "microsoft": "Xbox Game Studios",
    "nintendo": "Nintendo",
    "square-enix": "Square Enix",
    "capcom": "Capcom",
    "sega": "Sega",
    "bandai-namco": "Bandai Namco",
    "thq-nordic": "THQ Nordic",
    "devolver": "Devolver Digital",
    "annapurna": "Annapurna Interactive",
    "505": "505 Games",
    "paradox": "Paradox Interactive",
    "deep-silver": "Deep Silver",
    "focus": "Focus Entertainment",
    "team17": "Team17",
}

FACET_OPTIONS: Dict[str, Dict[str, str]] = {
    "genres": GENRES,
    "platforms": PLATFORMS,
    "publishers": PUBLISHERS,
}

# Panel section titles, shared by both filter surfaces
FACET_TITLES: Dict[str, str] = {
    "genres": "Genres",
    "platforms": "Platforms",
    "publishers": "Publishers",
}


# =============================================================================
# Helper Functions
# =============================================================================

def get_release_years(current_year: int, window: int = 10) -> List[str]:
    """Get the release year choices, newest first."""
    return [str(current_year - i) for i in range(window)]
