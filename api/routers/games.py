"""Games API router.

Accepts exactly the query parameters the storefront page writes into its URL
(``q``, repeated ``genre``/``platform``/``publisher``, ``min``, ``max``,
``rating``, ``year``, ``sale``, ``sort``), so a shared listing link can be
replayed against the API unchanged.
"""

from fastapi import APIRouter, HTTPException, Query, Request

from api.config import get_settings
from api.models.schemas import FilterEcho, GameItem, GameListResponse
from api.services.database import get_db
from api.services.facets import get_facet_catalog
from src.catalog.queries import count_games, get_game, search_games, to_records
from src.filters.url_params import from_query, to_query_string

router = APIRouter()
settings = get_settings()


@router.get("", response_model=GameListResponse)
async def list_games(
    request: Request,
    page: int = Query(1, ge=1, description="Page number"),
    page_size: int = Query(
        settings.default_page_size,
        ge=1,
        le=settings.max_page_size,
        description="Results per page",
    ),
):
    """List games matching the listing filters.

    Malformed or unknown filter parameters are ignored rather than rejected.
    """
    state = from_query(request.query_params.multi_items(), get_facet_catalog())
    conn = get_db().connect()

    total = count_games(conn, state)
    df = search_games(conn, state, limit=page_size, offset=(page - 1) * page_size)

    return GameListResponse(
        filters=FilterEcho(**state.to_dict()),
        query=to_query_string(state),
        active_filter_count=state.active_filter_count,
        total=total,
        page=page,
        page_size=page_size,
        games=[GameItem(**record) for record in to_records(df)],
    )


@router.get("/{game_id}", response_model=GameItem)
async def get_game_detail(game_id: str):
    """Get a single game by id."""
    record = get_game(get_db().connect(), game_id)
    if record is None:
        raise HTTPException(status_code=404, detail=f"Game {game_id} not found")
    return GameItem(**record)
