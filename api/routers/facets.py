"""Facet options API router."""

from datetime import date

from fastapi import APIRouter

from api.models.schemas import ChoiceItem, FacetOptionItem, FacetsResponse
from api.services.facets import get_facet_catalog
from config import config
from config.constants import PRICE_MAX, PRICE_MIN, RATING_OPTIONS, SORT_OPTIONS, get_release_years

router = APIRouter()


@router.get("", response_model=FacetsResponse)
async def list_facets():
    """Get the facet options, sort orders and choice lists for the filter panel."""
    catalog = get_facet_catalog().to_dict()

    return FacetsResponse(
        genres=[FacetOptionItem(**o) for o in catalog["genres"]],
        platforms=[FacetOptionItem(**o) for o in catalog["platforms"]],
        publishers=[FacetOptionItem(**o) for o in catalog["publishers"]],
        sort_options=[ChoiceItem(value=v, label=l) for v, l in SORT_OPTIONS.items()],
        rating_options=[ChoiceItem(value=v, label=l) for v, l in RATING_OPTIONS.items()],
        release_years=get_release_years(date.today().year, config.filters.release_year_window),
        price_min=PRICE_MIN,
        price_max=PRICE_MAX,
    )
