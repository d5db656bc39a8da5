"""
app/api/cors.py

CORS handling for the portal front end.

Preflight responses carry the CORS headers and an empty body.
"""

from __future__ import annotations

from fastapi.middleware.cors import CORSMiddleware
from starlette.datastructures import Headers
from starlette.responses import Response

from app.config import CORSSettings

ALLOWED_METHODS: tuple[str, ...] = ("GET", "POST", "OPTIONS")


class EmptyPreflightCORSMiddleware(CORSMiddleware):
    def preflight_response(self, request_headers: Headers) -> Response:
        response = super().preflight_response(request_headers)
        headers = {
            key: value
            for key, value in response.headers.items()
            if key.lower() not in {"content-length", "content-type"}
        }
        return Response(status_code=response.status_code, headers=headers)


def cors_headers(settings: CORSSettings, origin: str | None = None) -> dict[str, str]:
    """
    Headers for responses produced outside the CORS middleware.

    Used for bare OPTIONS requests that carry no preflight headers and for
    500 responses rendered by the server error layer.
    """

    headers = {
        "Access-Control-Allow-Headers": ", ".join(settings.allow_headers),
        "Access-Control-Allow-Methods": ", ".join(ALLOWED_METHODS),
    }
    if "*" in settings.allow_origins:
        headers["Access-Control-Allow-Origin"] = "*"
    elif origin and origin in settings.allow_origins:
        headers["Access-Control-Allow-Origin"] = origin
        headers["Vary"] = "Origin"
    return headers
