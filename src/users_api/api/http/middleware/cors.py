"""Permissive CORS handling applied to every route."""

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from src.users_api.runtime.config.config_data import CORSConfig


class CORSMiddleware(BaseHTTPMiddleware):
    """Attach CORS headers to every response.

    OPTIONS requests are answered here with an empty 200 and never reach
    the router, whatever the path.
    """

    def __init__(self, app: ASGIApp, cors: CORSConfig) -> None:
        super().__init__(app)
        self._origins = cors.origins
        self._allow_all = "*" in cors.origins
        self._methods = ", ".join(cors.allow_methods)
        self._headers = ", ".join(cors.allow_headers)

    def _allowed_origin(self, request: Request) -> str | None:
        if self._allow_all:
            return "*"
        origin = request.headers.get("origin")
        if origin in self._origins:
            return origin
        return None

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if request.method == "OPTIONS":
            response = Response(status_code=200)
        else:
            response = await call_next(request)

        origin = self._allowed_origin(request)
        if origin is not None:
            response.headers["Access-Control-Allow-Origin"] = origin
            if not self._allow_all:
                response.headers["Vary"] = "Origin"
        response.headers["Access-Control-Allow-Methods"] = self._methods
        response.headers["Access-Control-Allow-Headers"] = self._headers
        return response
