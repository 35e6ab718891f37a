"""Polymarket Gamma API client — public read-only event data."""

import json
import logging
from typing import Any

import httpx

from polymarket_proxy.api.errors import (
    ConfigurationError,
    DecodeError,
    TransportError,
    UpstreamError,
)
from polymarket_proxy.models import Event, FetchActiveEventsOptions

GAMMA_BASE = "https://gamma-api.polymarket.com"

logger = logging.getLogger(__name__)


def _events_url(base_url: str) -> httpx.URL:
    try:
        url = httpx.URL(base_url.rstrip("/") + "/events")
    except httpx.InvalidURL as exc:
        raise ConfigurationError(f"failed to parse base URL: {exc}") from exc
    if url.scheme not in ("http", "https") or not url.host:
        raise ConfigurationError(f"failed to parse base URL: {base_url!r}")
    return url


def _parse_events(body: bytes) -> list[Event]:
    try:
        data: Any = json.loads(body)
    except (ValueError, RecursionError) as exc:
        raise DecodeError(f"failed to unmarshal JSON: {exc}") from exc
    if data is None:
        return []
    if not isinstance(data, list):
        raise DecodeError(
            f"failed to unmarshal JSON: expected array, got {type(data).__name__}"
        )
    return [Event.from_dict(e) for e in data]


class GammaClient:
    """Thin wrapper around the Gamma ``/events`` endpoint.

    Base URL, timeout and transport are fixed at construction, so one
    instance can be shared or thrown away after a single call.
    """

    def __init__(
        self,
        base_url: str = GAMMA_BASE,
        *,
        timeout: float = 15.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = base_url
        self.timeout = timeout
        self.transport = transport

    async def fetch_active_events(
        self,
        options: FetchActiveEventsOptions | None = None,
    ) -> list[Event]:
        """Fetch active, non-closed events in upstream order."""
        url = _events_url(self.base_url)
        params = {"active": "true", "closed": "false"}
        if options is not None and options.limit > 0:
            params["limit"] = str(options.limit)

        logger.debug("GET %s params=%s", url, params)
        async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
            try:
                async with client.stream("GET", url, params=params) as resp:
                    if resp.status_code != 200:
                        try:
                            body = (await resp.aread()).decode("utf-8", "replace")
                        except httpx.HTTPError:
                            body = ""
                        raise UpstreamError(resp.status_code, body)
                    try:
                        raw = await resp.aread()
                    except httpx.HTTPError as exc:
                        raise TransportError(f"failed to read response body: {exc}") from exc
            except httpx.HTTPError as exc:
                raise TransportError(f"failed to make request: {exc}") from exc

        events = _parse_events(raw)
        logger.debug("fetched %d events", len(events))
        return events
