from __future__ import annotations

import json
import time
from enum import StrEnum
from typing import Any

from fastapi import Response
from fastapi.responses import JSONResponse
from pydantic import BaseModel

CORS_ALLOW_METHODS = "GET, POST, PUT, DELETE, OPTIONS"
CORS_ALLOW_HEADERS = "Content-Type, Authorization, X-Requested-With"
CORS_MAX_AGE = "86400"


class ErrorKind(StrEnum):
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    INTERNAL = "internal"


ERROR_STATUS: dict[ErrorKind, int] = {
    ErrorKind.VALIDATION: 400,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.INTERNAL: 500,
}


class PrettyJSONResponse(JSONResponse):
    """JSON body indented by two spaces."""

    def render(self, content: Any) -> bytes:
        return json.dumps(content, ensure_ascii=False, allow_nan=False, indent=2).encode("utf-8")


class ApiResult(BaseModel):
    """Outcome of one handler: a status plus the JSON body to send."""

    status: int = 200
    body: Any = None
    kind: ErrorKind | None = None
    pretty: bool = False

    @classmethod
    def ok(cls, body: Any, pretty: bool = False) -> ApiResult:
        return cls(status=200, body=body, pretty=pretty)

    @classmethod
    def empty(cls) -> ApiResult:
        return cls(status=200)

    @classmethod
    def error(cls, kind: ErrorKind, message: str, status: int | None = None) -> ApiResult:
        if kind is ErrorKind.INTERNAL:
            return cls.internal_error()
        return cls(
            status=status or ERROR_STATUS[kind],
            body={"error": message, "timestamp": int(time.time())},
            kind=kind,
        )

    @classmethod
    def internal_error(cls) -> ApiResult:
        return cls(
            status=500,
            body={"error": "Internal server error", "status": 500},
            kind=ErrorKind.INTERNAL,
            pretty=True,
        )

    @property
    def is_error(self) -> bool:
        return self.kind is not None


def render(result: ApiResult) -> Response:
    if result.body is None:
        return Response(status_code=result.status, media_type="application/json")
    response_class = PrettyJSONResponse if result.pretty else JSONResponse
    return response_class(content=result.body, status_code=result.status)


def cors_headers(allowed_origin: str) -> dict[str, str]:
    return {
        "Access-Control-Allow-Origin": allowed_origin,
        "Access-Control-Allow-Methods": CORS_ALLOW_METHODS,
        "Access-Control-Allow-Headers": CORS_ALLOW_HEADERS,
        "Access-Control-Max-Age": CORS_MAX_AGE,
    }
