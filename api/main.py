"""Storefront Catalog FastAPI Application."""

import duckdb
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.base import BaseHTTPMiddleware

from api.config import get_settings
from api.routers import games, facets
from config.logging_config import get_logger

settings = get_settings()
logger = get_logger("api")

app = FastAPI(
    title=settings.app_name,
    version=settings.version,
    description="API for browsing the storefront game catalog with listing filters",
)


class CacheHeaderMiddleware(BaseHTTPMiddleware):
    """Middleware to add Cache-Control headers to responses."""

    # Endpoints that can be cached
    CACHEABLE_PATHS = {
        "/api/facets": 3600,  # 1 hour, static reference data
        "/api/games": 60,  # 1 minute
    }

    async def dispatch(self, request: Request, call_next):
        response = await call_next(request)

        # Only cache successful GET requests
        if request.method != "GET" or response.status_code != 200:
            response.headers["Cache-Control"] = "no-cache"
            return response

        path = request.url.path
        for cacheable_path, max_age in self.CACHEABLE_PATHS.items():
            if path.startswith(cacheable_path):
                response.headers["Cache-Control"] = f"public, max-age={max_age}"
                break
        else:
            # Default: no cache for other endpoints
            response.headers["Cache-Control"] = "no-cache"

        return response


# Add cache header middleware
app.add_middleware(CacheHeaderMiddleware)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["GET"],
    allow_headers=["*"],
)

# Include routers
app.include_router(games.router, prefix="/api/games", tags=["Games"])
app.include_router(facets.router, prefix="/api/facets", tags=["Facets"])


@app.get("/")
async def root():
    """Root endpoint with API info."""
    return {
        "name": settings.app_name,
        "version": settings.version,
        "docs": "/docs",
        "endpoints": {
            "games": "/api/games",
            "facets": "/api/facets",
        },
    }


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    from api.services.database import get_db

    try:
        count = get_db().fetch_one("SELECT COUNT(*) FROM games")[0]
        return {
            "status": "healthy",
            "database": "connected",
            "total_games": count,
        }
    except duckdb.Error as e:
        logger.error(f"Health check failed: {e}")
        return {
            "status": "unhealthy",
            "database": "disconnected",
            "error": str(e),
        }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="127.0.0.1", port=8000, log_level="debug" if settings.debug else "info")
