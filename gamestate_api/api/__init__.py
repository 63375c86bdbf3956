from .responses import ApiResult, ErrorKind, cors_headers, render
from .routes import ROUTES, RouteEntry, build_router

__all__ = [
    "ApiResult",
    "ErrorKind",
    "ROUTES",
    "RouteEntry",
    "build_router",
    "cors_headers",
    "render",
]
