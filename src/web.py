# ABOUTME: ASGI web entry point exposing the weather metrics engine over HTTP.
# ABOUTME: Creates a Starlette app with a single /api/weather route and request logging middleware.

import json
import logging

import uvicorn
from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import JSONResponse
from starlette.routing import Route

from src.config import Settings, load_settings
from src.engine import evaluate
from src.exceptions import MetricsValidationError
from src.models import ErrorResponse

logger = logging.getLogger(__name__)

WEATHER_PATH = "/api/weather"
WEATHER_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE"]


class RequestLogMiddleware:
    """ASGI middleware that logs the method and target of every HTTP request."""

    def __init__(self, app):
        self.app = app

    async def __call__(self, scope, receive, send):
        if scope["type"] == "http":
            target = scope["path"]
            if scope.get("query_string"):
                target += "?" + scope["query_string"].decode("latin-1")
            logger.info("%s %s", scope["method"], target)
        await self.app(scope, receive, send)


async def read_json_body(request: Request) -> dict:
    """Read a JSON object body, treating empty or malformed bodies as an empty mapping."""
    body = await request.body()
    if not body:
        return {}
    try:
        data = json.loads(body)
    except ValueError:
        logger.warning("Ignoring malformed JSON body on %s", request.url.path)
        return {}
    if not isinstance(data, dict):
        logger.warning("Ignoring non-object JSON body on %s", request.url.path)
        return {}
    return data


async def weather(request: Request) -> JSONResponse:
    """Compute comfort metrics from query parameters (GET, HEAD) or a JSON body (other methods)."""
    if request.method in ("GET", "HEAD"):
        data = dict(request.query_params)
    else:
        data = await read_json_body(request)

    settings: Settings = request.app.state.settings
    try:
        result = evaluate(
            data.get("temperature"),
            data.get("humidity"),
            data.get("windSpeed"),
            data.get("windDirection"),
            location=settings.location,
        )
    except MetricsValidationError as e:
        logger.warning("Rejected weather request: %s", e)
        error = ErrorResponse(error=e.summary, details=e.details)
        return JSONResponse(error.model_dump(by_alias=True, mode="json"), status_code=400)

    return JSONResponse(result.model_dump(by_alias=True, mode="json"))


def create_app(settings: Settings | None = None):
    """Build the ASGI application for the given settings."""
    settings = settings or Settings()
    inner = Starlette(routes=[Route(WEATHER_PATH, weather, methods=WEATHER_METHODS)])
    inner.state.settings = settings
    return RequestLogMiddleware(inner)


def main() -> None:
    """Run the service with uvicorn using settings from the environment."""
    settings = load_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )
    logger.info("Weather API running at http://%s:%s%s", settings.host, settings.port, WEATHER_PATH)
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port, log_level=settings.log_level.lower())


app = create_app(load_settings())


if __name__ == "__main__":
    main()
