from __future__ import annotations

import functools
import logging
import time
from typing import Any, Callable, NamedTuple

from fastapi import APIRouter, Request, Response
from starlette.convertors import StringConvertor, register_url_convertor

from gamestate_api.api.responses import ApiResult, ErrorKind, render
from gamestate_api.collectors.host_sampler import ResourceSampler
from gamestate_api.world.provider import GameStateProvider

logger = logging.getLogger(__name__)

PLAYER_NAME_REQUIRED = "Player name is required"
PLAYER_NOT_FOUND = "Player not found or not online"


class PlayerNameConvertor(StringConvertor):
    """Like ``str`` but also matches an empty segment, so handlers can reject it."""

    regex = "[^/]*"


register_url_convertor("player", PlayerNameConvertor())


class RouteEntry(NamedTuple):
    method: str
    path: str
    handler: Callable[..., ApiResult]
    name: str


def _provider(request: Request) -> GameStateProvider:
    return request.app.state.provider


def _sampler(request: Request) -> ResourceSampler:
    return request.app.state.sampler


def _player_result(
    request: Request,
    name: str,
    extract: Callable[[GameStateProvider, Any], Any],
) -> ApiResult:
    if not name:
        return ApiResult.error(ErrorKind.VALIDATION, PLAYER_NAME_REQUIRED)

    provider = _provider(request)
    player = provider.find_player_by_name(name)
    if player is None or not provider.is_in_world(player):
        return ApiResult.error(ErrorKind.NOT_FOUND, PLAYER_NOT_FOUND)

    return ApiResult.ok(extract(provider, player))


# ── handlers ──────────────────────────────────────────


def health_check(request: Request) -> ApiResult:
    return ApiResult.ok(
        {
            "status": "ok",
            "timestamp": int(time.time()),
            "uptime_seconds": _provider(request).get_uptime_seconds(),
        },
        pretty=True,
    )


def server_info(request: Request) -> ApiResult:
    try:
        return ApiResult.ok(_provider(request).get_server_data(), pretty=True)
    except Exception:
        logger.exception("Error getting server info")
        return ApiResult.internal_error()


def host_info(request: Request) -> ApiResult:
    try:
        snapshot = _sampler(request).sample()
        return ApiResult.ok(snapshot.model_dump(), pretty=True)
    except Exception:
        logger.exception("Error getting host info")
        return ApiResult.internal_error()


def online_players(request: Request, equipment: str | None = None) -> ApiResult:
    include_equipment = equipment == "true"
    try:
        players = _provider(request).get_all_players_data(include_equipment)
        return ApiResult.ok({"count": len(players), "players": players}, pretty=True)
    except Exception:
        logger.exception("Error getting players list")
        return ApiResult.internal_error()


def player_info(request: Request, name: str, include: str | None = None) -> ApiResult:
    include_equipment = include is not None and "equipment" in include
    return _player_result(request, name, lambda p, player: p.get_player_data(player, include_equipment))


def player_stats(request: Request, name: str) -> ApiResult:
    return _player_result(request, name, lambda p, player: p.get_player_stats(player))


def player_equipment(request: Request, name: str) -> ApiResult:
    return _player_result(request, name, lambda p, player: p.get_player_equipment(player))


def player_skills(request: Request, name: str) -> ApiResult:
    return _player_result(request, name, lambda p, player: p.get_player_skills(player))


def player_skills_full(request: Request, name: str) -> ApiResult:
    return _player_result(request, name, lambda p, player: p.get_player_skills_full(player))


def player_quests(request: Request, name: str) -> ApiResult:
    return _player_result(request, name, lambda p, player: p.get_player_quests(player))


def preflight(path: str) -> ApiResult:
    return ApiResult.empty()


# ── route table ───────────────────────────────────────

# Evaluated in order, first match wins.
ROUTES: tuple[RouteEntry, ...] = (
    RouteEntry("GET", "/api/health", health_check, "health"),
    RouteEntry("GET", "/api/server", server_info, "server_info"),
    RouteEntry("GET", "/api/host", host_info, "host_info"),
    RouteEntry("GET", "/api/players", online_players, "online_players"),
    RouteEntry("GET", "/api/player/{name:player}", player_info, "player_info"),
    RouteEntry("GET", "/api/player/{name:player}/stats", player_stats, "player_stats"),
    RouteEntry("GET", "/api/player/{name:player}/equipment", player_equipment, "player_equipment"),
    RouteEntry("GET", "/api/player/{name:player}/skills", player_skills, "player_skills"),
    RouteEntry("GET", "/api/player/{name:player}/skills-full", player_skills_full, "player_skills_full"),
    RouteEntry("GET", "/api/player/{name:player}/quests", player_quests, "player_quests"),
    RouteEntry("OPTIONS", "/{path:path}", preflight, "preflight"),
)


def _dispatch(handler: Callable[..., ApiResult]) -> Callable[..., Response]:
    """Wrap a handler so every call ends in exactly one response."""

    @functools.wraps(handler)
    def endpoint(*args: Any, **kwargs: Any) -> Response:
        try:
            return render(handler(*args, **kwargs))
        except Exception:
            logger.exception("Unhandled error in handler %s", handler.__name__)
            return render(ApiResult.internal_error())

    return endpoint


def build_router(routes: tuple[RouteEntry, ...] = ROUTES) -> APIRouter:
    router = APIRouter()
    for entry in routes:
        router.add_api_route(
            entry.path,
            _dispatch(entry.handler),
            methods=[entry.method],
            name=entry.name,
            response_model=None,
        )
    return router
