"""CORS middleware for the dashboard API.

Every response is readable from any origin. OPTIONS requests are answered
directly with an empty 200, whatever the path and whether or not they are
proper CORS preflights.
"""

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}


class OpenCORSMiddleware(BaseHTTPMiddleware):
    """Attach permissive CORS headers and short-circuit OPTIONS."""

    async def dispatch(self, request: Request, call_next):
        if request.method == "OPTIONS":
            return Response(status_code=200, headers=CORS_HEADERS)

        response = await call_next(request)
        response.headers.update(CORS_HEADERS)
        return response
