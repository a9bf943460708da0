from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

JSON_CONTENT_TYPE = "application/json"


class JSONContentTypeMiddleware(BaseHTTPMiddleware):
    """Mark every response that reaches the router as JSON."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        response = await call_next(request)
        response.headers["Content-Type"] = JSON_CONTENT_TYPE
        return response
