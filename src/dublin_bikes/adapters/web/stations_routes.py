"""HTTP endpoints for the station catalogue."""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from starlette.exceptions import HTTPException
from starlette.requests import Request
from starlette.responses import JSONResponse, Response
from starlette.routing import Route

from dublin_bikes.domain.models import StationDraft, StationPatch, StationQuery
from dublin_bikes.domain.models.station_query import DEFAULT_PAGE_SIZE

from .schemas import PagedStationsResponse, StationResponse, StationsSummaryResponse

if TYPE_CHECKING:
    from zoneinfo import ZoneInfo

    from dublin_bikes.domain.models import Station
    from dublin_bikes.domain.ports import StationCatalog

logger = logging.getLogger(__name__)


def not_found_response(number: int) -> JSONResponse:
    """404 response naming the missing station."""
    return JSONResponse({"message": f"Station with number {number} not found"}, status_code=404)


def _int_param(request: Request, name: str) -> int | None:
    """Read an optional integer query parameter, rejecting non-integers with 400."""
    raw = request.query_params.get(name)
    if raw is None or raw.strip() == "":
        return None
    try:
        return int(raw)
    except ValueError as e:
        raise HTTPException(
            status_code=400, detail=f"Query parameter '{name}' must be an integer"
        ) from e


def parse_station_query(request: Request) -> StationQuery:
    """Build a StationQuery from the request's query string."""
    params = request.query_params
    page = _int_param(request, "page")
    page_size = _int_param(request, "pageSize")
    return StationQuery(
        status=params.get("status"),
        min_bikes=_int_param(request, "minBikes"),
        search=params.get("q"),
        sort=params.get("sort"),
        direction=params.get("dir"),
        page=page if page is not None else 1,
        page_size=page_size if page_size is not None else DEFAULT_PAGE_SIZE,
    )


async def _read_json_body(request: Request) -> dict[str, Any]:
    """Read the request body as a JSON object, rejecting anything else with 400."""
    try:
        body = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise HTTPException(status_code=400, detail="Request body must be valid JSON") from e
    if not isinstance(body, dict):
        raise HTTPException(status_code=400, detail="Request body must be a JSON object")
    return body


class StationEndpoints:
    """Request handlers bound to a station catalogue."""

    def __init__(self, catalog: StationCatalog, zone: ZoneInfo) -> None:
        """Initialize the handlers.

        Args:
            catalog: Catalogue serving reads and writes.
            zone: Timezone used for local last-update times.
        """
        self.catalog = catalog
        self.zone = zone

    def _station_json(
        self, station: Station, status_code: int = 200, **kwargs: Any
    ) -> JSONResponse:
        body = StationResponse.from_station(station, self.zone).model_dump(
            by_alias=True, mode="json"
        )
        return JSONResponse(body, status_code=status_code, **kwargs)

    async def list_stations(self, request: Request) -> Response:
        """GET /stations with filtering, search, sorting and paging."""
        query = parse_station_query(request)
        result = self.catalog.list_stations(query)
        body = PagedStationsResponse.from_result(result, self.zone)
        return JSONResponse(body.model_dump(by_alias=True, mode="json"))

    async def get_summary(self, _request: Request) -> Response:
        """GET /stations/summary."""
        summary = self.catalog.summary()
        body = StationsSummaryResponse.from_summary(summary)
        return JSONResponse(body.model_dump(by_alias=True, mode="json"))

    async def get_station(self, request: Request) -> Response:
        """GET /stations/{number}."""
        number: int = request.path_params["number"]
        station = self.catalog.get_station(number)
        if station is None:
            return not_found_response(number)
        return self._station_json(station)

    async def create_station(self, request: Request) -> Response:
        """POST /stations."""
        draft = StationDraft.model_validate(await _read_json_body(request))
        station = self.catalog.create_station(draft)
        location = f"{request.url.path.rstrip('/')}/{station.number}"
        return self._station_json(station, status_code=201, headers={"Location": location})

    async def update_station(self, request: Request) -> Response:
        """PUT /stations/{number}."""
        number: int = request.path_params["number"]
        patch = StationPatch.model_validate(await _read_json_body(request))
        station = self.catalog.update_station(number, patch)
        return self._station_json(station)

    async def delete_station(self, request: Request) -> Response:
        """DELETE /stations/{number}."""
        number: int = request.path_params["number"]
        if not self.catalog.delete_station(number):
            return not_found_response(number)
        logger.info(f"Station {number} deleted successfully")
        return Response(status_code=204)

    def routes(self, prefix: str) -> list[Route]:
        """Routes for the stations resource under ``prefix``."""
        return [
            Route(prefix, self.list_stations, methods=["GET"]),
            Route(prefix, self.create_station, methods=["POST"]),
            Route(f"{prefix}/summary", self.get_summary, methods=["GET"]),
            Route(f"{prefix}/{{number:int}}", self.get_station, methods=["GET"]),
            Route(f"{prefix}/{{number:int}}", self.update_station, methods=["PUT"]),
            Route(f"{prefix}/{{number:int}}", self.delete_station, methods=["DELETE"]),
        ]
