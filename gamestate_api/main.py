from __future__ import annotations

import logging

from fastapi import FastAPI, Request, Response
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from gamestate_api.api.responses import ApiResult, ErrorKind, cors_headers, render
from gamestate_api.api.routes import ROUTES, RouteEntry, build_router
from gamestate_api.collectors.host_sampler import ResourceSampler, default_counter_source
from gamestate_api.config import settings
from gamestate_api.world.provider import GameStateProvider

logger = logging.getLogger(__name__)


async def _http_error(request: Request, exc: StarletteHTTPException) -> Response:
    if exc.status_code == 405 and (exc.headers or {}).get("Allow") != "OPTIONS":
        return render(ApiResult.error(ErrorKind.VALIDATION, "Method not allowed", status=405))
    # A path only the preflight wildcard matched is simply unknown.
    if exc.status_code in (404, 405):
        return render(ApiResult.error(ErrorKind.NOT_FOUND, "Not found"))
    if exc.status_code >= 500:
        return render(ApiResult.internal_error())
    return render(ApiResult.error(ErrorKind.VALIDATION, str(exc.detail)))


async def _validation_error(request: Request, exc: RequestValidationError) -> Response:
    return render(ApiResult.error(ErrorKind.VALIDATION, "Invalid request parameters"))


def create_app(
    provider: GameStateProvider,
    sampler: ResourceSampler | None = None,
    allowed_origin: str | None = None,
    routes: tuple[RouteEntry, ...] = ROUTES,
) -> FastAPI:
    """Build the API around a game state provider and a host sampler."""
    if sampler is None:
        sampler = ResourceSampler(default_counter_source(settings.counter_source))
    if allowed_origin is None:
        allowed_origin = settings.allowed_origin
    headers = cors_headers(allowed_origin)

    app = FastAPI(title=settings.app_name, docs_url=None, redoc_url=None, openapi_url=None)
    app.state.provider = provider
    app.state.sampler = sampler
    app.state.allowed_origin = allowed_origin

    @app.middleware("http")
    async def apply_cors_headers(request: Request, call_next) -> Response:
        response = await call_next(request)
        response.headers.update(headers)
        return response

    app.add_exception_handler(StarletteHTTPException, _http_error)
    app.add_exception_handler(RequestValidationError, _validation_error)
    app.include_router(build_router(routes))

    logger.debug("Game state API built with %d routes (origin=%s)", len(routes), allowed_origin)
    return app
