"""Starlette application for the station catalogue API."""

from __future__ import annotations

import contextlib
import json
import logging
from collections.abc import AsyncIterator
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError
from starlette.applications import Starlette
from starlette.exceptions import HTTPException
from starlette.middleware import Middleware
from starlette.middleware.cors import CORSMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse, Response
from starlette.routing import Route

from dublin_bikes.domain.errors import ConflictError, NotFoundError

from .stations_routes import StationEndpoints, not_found_response

if TYPE_CHECKING:
    from zoneinfo import ZoneInfo

    from dublin_bikes.domain.contracts import StationSimulatorProtocol
    from dublin_bikes.domain.ports import StationCatalog

logger = logging.getLogger(__name__)

STATIONS_PREFIX = "/api/v2/stations"


async def _http_error(_request: Request, exc: HTTPException) -> Response:
    return JSONResponse({"message": exc.detail}, status_code=exc.status_code)


async def _validation_error(_request: Request, exc: ValidationError) -> Response:
    errors = json.loads(exc.json(include_url=False))
    return JSONResponse({"message": "Invalid station data", "errors": errors}, status_code=400)


async def _conflict(_request: Request, exc: ConflictError) -> Response:
    logger.warning(f"Conflict for station {exc.number}: {exc}")
    return JSONResponse({"message": str(exc), "number": exc.number}, status_code=409)


async def _not_found(_request: Request, exc: NotFoundError) -> Response:
    logger.warning(f"Station {exc.number} not found")
    return not_found_response(exc.number)


async def _unexpected_error(request: Request, exc: Exception) -> Response:
    logger.error(f"Unhandled error for {request.method} {request.url.path}: {exc}", exc_info=exc)
    return JSONResponse({"message": "An unexpected error occurred"}, status_code=500)


async def health(_request: Request) -> Response:
    """Health check endpoint for load balancers and monitoring."""
    return JSONResponse({"status": "Healthy", "timestamp": datetime.now(UTC).isoformat()})


def create_app(
    catalog: StationCatalog,
    zone: ZoneInfo,
    simulator: StationSimulatorProtocol | None = None,
) -> Starlette:
    """Build the HTTP application.

    Args:
        catalog: Catalogue serving reads and writes.
        zone: Timezone used for local last-update times.
        simulator: Optional background simulator tied to the app lifespan.

    Returns:
        The configured Starlette application.
    """
    endpoints = StationEndpoints(catalog, zone)

    @contextlib.asynccontextmanager
    async def lifespan(_app: Starlette) -> AsyncIterator[None]:
        if simulator is not None:
            await simulator.start()
        try:
            yield
        finally:
            if simulator is not None:
                await simulator.stop()

    routes = [
        Route("/health", health, methods=["GET"]),
        *endpoints.routes(STATIONS_PREFIX),
    ]
    middleware = [
        Middleware(CORSMiddleware, allow_origins=["*"], allow_methods=["*"], allow_headers=["*"]),
    ]
    exception_handlers: dict[Any, Any] = {
        HTTPException: _http_error,
        ValidationError: _validation_error,
        ConflictError: _conflict,
        NotFoundError: _not_found,
        Exception: _unexpected_error,
    }

    app = Starlette(
        routes=routes,
        middleware=middleware,
        exception_handlers=exception_handlers,
        lifespan=lifespan,
    )
    logger.info(f"Registered station routes under '{STATIONS_PREFIX}'")
    return app
