"""Web application serving the hub page, player profiles and crawler files."""

from __future__ import annotations

import logging
from typing import Any, Optional

from fastapi import FastAPI, HTTPException, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import HTMLResponse, PlainTextResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from footballstats.api.pages import render_home_page, render_not_found_page, render_player_page
from footballstats.api.schemas import PlayerDetailResponse, PlayerListResponse
from footballstats.catalog import PlayerCatalog, resolve_catalog
from footballstats.config import SiteSettings, load_settings
from footballstats.models import PlayerRecord
from footballstats.seo import (
    player_seo_metadata,
    player_structured_data,
    related_players,
    render_robots,
    render_sitemap,
)
from footballstats.stats import listing_summary, player_ratios


logger = logging.getLogger("uvicorn.error")


def create_app(
    catalog: Optional[PlayerCatalog] = None,
    settings: Optional[SiteSettings] = None,
) -> FastAPI:
    """Build the app around a catalog that is validated once, before serving.

    Without an explicit catalog the dataset comes from ``settings.data_path``
    or the built-in players; an invalid dataset raises ``CatalogIntegrityError``
    here rather than on a request.
    """

    settings = settings or load_settings()
    if catalog is None:
        catalog = resolve_catalog(settings.data_path)

    app = FastAPI(title=f"{settings.site_name} site")
    app.state.catalog = catalog
    app.state.settings = settings

    def _not_found_html() -> HTMLResponse:
        return HTMLResponse(render_not_found_page(catalog, settings), status_code=404)

    def _fetch_player_or_404(slug: str) -> PlayerRecord:
        player = catalog.find_by_slug(slug)
        if player is None:
            raise HTTPException(status_code=404, detail="Player not found")
        return player

    @app.exception_handler(StarletteHTTPException)
    async def not_found_page(request: Request, exc: StarletteHTTPException) -> Response:
        if exc.status_code == 404 and not request.url.path.startswith("/api/"):
            return _not_found_html()
        return await http_exception_handler(request, exc)

    @app.get("/health")
    async def health() -> dict[str, Any]:
        return {"status": "ok", "players": len(catalog)}

    @app.get("/", response_class=HTMLResponse)
    async def home() -> HTMLResponse:
        return HTMLResponse(render_home_page(catalog, settings))

    @app.get(f"/{settings.collection}/{{slug}}", response_class=HTMLResponse)
    async def player_page(slug: str) -> HTMLResponse:
        player = catalog.find_by_slug(slug)
        if player is None:
            logger.info("Unknown player slug requested: %s", slug)
            return _not_found_html()
        return HTMLResponse(render_player_page(player, catalog, settings))

    @app.get("/sitemap.xml")
    async def sitemap() -> Response:
        return Response(render_sitemap(catalog, settings), media_type="application/xml")

    @app.get("/robots.txt", response_class=PlainTextResponse)
    async def robots() -> PlainTextResponse:
        return PlainTextResponse(render_robots(settings))

    @app.get("/api/players", response_model=PlayerListResponse)
    async def list_players() -> PlayerListResponse:
        return PlayerListResponse(summary=listing_summary(catalog), players=list(catalog))

    @app.get("/api/players/{slug}", response_model=PlayerDetailResponse)
    async def get_player(slug: str) -> PlayerDetailResponse:
        player = _fetch_player_or_404(slug)
        return PlayerDetailResponse(
            player=player,
            url=settings.player_url(player.slug),
            ratios=player_ratios(player),
            seo=player_seo_metadata(player, settings),
            structured_data=player_structured_data(player, settings),
            related=[p.slug for p in related_players(catalog, player.slug, settings.related_limit)],
        )

    return app
