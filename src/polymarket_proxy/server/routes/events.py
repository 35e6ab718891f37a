import json
import logging
import re

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse, Response

from polymarket_proxy.api.errors import GammaError
from polymarket_proxy.api.gamma import GammaClient
from polymarket_proxy.models import FetchActiveEventsOptions

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["events"])

ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]

_INT_RE = re.compile(r"[+-]?[0-9]+")
_INT64_MAX = 2**63 - 1


class InvalidLimitError(ValueError):
    pass


def parse_limit(raw: str | None) -> int:
    """Parse the ``limit`` query value; absent or empty means 0."""
    if not raw:
        return 0
    if not _INT_RE.fullmatch(raw):
        raise InvalidLimitError(raw)
    # more than 19 significant digits can never fit in int64
    if len(raw.lstrip("+-").lstrip("0")) > 19:
        raise InvalidLimitError(raw)
    limit = int(raw)
    if limit < 0 or limit > _INT64_MAX:
        raise InvalidLimitError(raw)
    return limit


def get_gamma_client(request: Request) -> GammaClient:
    settings = request.app.state.settings
    return GammaClient(settings.GAMMA_BASE_URL, timeout=settings.REQUEST_TIMEOUT)


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse({"error": message}, status_code=status_code)


@router.api_route("/events", methods=ALL_METHODS)
async def get_events(request: Request, client: GammaClient = Depends(get_gamma_client)):
    if request.method != "GET":
        return _error(405, "Method not allowed")

    values = request.query_params.getlist("limit")
    try:
        limit = parse_limit(values[0] if values else None)
    except InvalidLimitError:
        return _error(400, "Invalid limit parameter")

    try:
        events = await client.fetch_active_events(FetchActiveEventsOptions(limit=limit))
    except GammaError as exc:
        logger.error("Error fetching events: %s", exc)
        return _error(500, f"Failed to fetch events: {exc}")

    # encode up front so a failure never leaves a half-written 200
    try:
        body = json.dumps([e.to_dict() for e in events])
    except (TypeError, ValueError) as exc:
        logger.error("Error encoding response: %s", exc)
        return Response(status_code=500)
    return Response(content=body, media_type="application/json")
