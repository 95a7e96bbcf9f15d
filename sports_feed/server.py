"""HTTP surface: landing page, RSS feed and JSON feed."""
from __future__ import annotations

import asyncio
import contextlib
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI, Query, Request
from fastapi.responses import HTMLResponse, JSONResponse, Response

from .cache import FeedCache
from .config import CONFIG
from .core import Aggregator
from .encoders import render_json, render_landing_page, render_rss
from .filters import filter_by_team, parse_team_filter
from .logging_config import create_logger
from .registry import all_sources

logger = create_logger("server")

RSS_MEDIA_TYPE = "application/rss+xml; charset=utf-8"


def get_cache(request: Request) -> FeedCache:
    return request.app.state.cache


def _base_url(request: Request) -> str:
    return str(request.base_url).rstrip("/")


def _log_warm_up_failure(task: asyncio.Task) -> None:
    if task.cancelled():
        return
    exc = task.exception()
    if exc is not None:
        logger.error(f"Warm-up fetch failed: {exc!r}")


def create_app(cache: Optional[FeedCache] = None, *, warm_up: bool = True) -> FastAPI:
    """Build the application around one FeedCache instance."""
    if cache is None:
        cache = FeedCache(Aggregator(all_sources()))

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        logger.info(f"Chicago Sports Feed running on http://localhost:{CONFIG.PORT}")
        logger.info(f"RSS feed: http://localhost:{CONFIG.PORT}/feed")
        logger.info(f"JSON API: http://localhost:{CONFIG.PORT}/feed.json")
        task = None
        if warm_up:
            task = asyncio.create_task(app.state.cache.refresh())
            task.add_done_callback(_log_warm_up_failure)
        try:
            yield
        finally:
            if task is not None and not task.done():
                task.cancel()
                with contextlib.suppress(asyncio.CancelledError):
                    await task

    app = FastAPI(title="Chicago Sports Feed", lifespan=lifespan)
    app.state.cache = cache

    @app.get("/", response_class=HTMLResponse)
    async def index(request: Request) -> HTMLResponse:
        return HTMLResponse(render_landing_page(f"{_base_url(request)}/feed"))

    @app.get("/feed")
    async def feed(
        request: Request,
        team: Optional[str] = Query(None, description="Comma-separated team labels"),
    ) -> Response:
        snapshot = await get_cache(request).get()
        items = filter_by_team(snapshot.items, parse_team_filter(team))
        body = render_rss(
            items,
            site_url=_base_url(request),
            feed_url=f"{_base_url(request)}/feed",
            ttl_minutes=CONFIG.REFRESH_INTERVAL_MINUTES,
            built_at=snapshot.fetched_at,
        )
        return Response(content=body, media_type=RSS_MEDIA_TYPE)

    @app.get("/feed.json")
    async def feed_json(
        request: Request,
        team: Optional[str] = Query(None, description="Comma-separated team labels"),
    ) -> JSONResponse:
        snapshot = await get_cache(request).get()
        items = filter_by_team(snapshot.items, parse_team_filter(team))
        return JSONResponse(render_json(items, updated=snapshot.fetched_at))

    return app
