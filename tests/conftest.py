from __future__ import annotations

import copy
from typing import Any, Callable

import httpx
import pytest

GAMMA_TEST_BASE = "https://gamma.test"

SAMPLE_EVENTS: list[dict[str, Any]] = [
    {
        "id": "16167",
        "slug": "fed-decision-in-december",
        "title": "Fed decision in December?",
        "active": True,
        "closed": False,
        "volume": 1234567.8,
        "tags": [
            {"id": "2", "label": "Politics", "slug": "politics"},
            {"id": "100196", "label": "Fed Rates", "slug": "fed-rates"},
        ],
        "markets": [
            {
                "id": "516710",
                "question": "Fed decreases interest rates by 25 bps after December 2025 meeting?",
                "clobTokenIds": '["1111", "2222"]',
                "outcomes": '["Yes", "No"]',
                "outcomePrices": '["0.845", "0.155"]',
                "groupItemTitle": "25 bps decrease",
            },
        ],
    },
    {
        "id": "23784",
        "slug": "super-bowl-champion-2026",
        "title": "Super Bowl Champion 2026",
        "active": True,
        "closed": False,
        "tags": [],
        "markets": [],
    },
]


@pytest.fixture
def sample_events() -> list[dict[str, Any]]:
    return copy.deepcopy(SAMPLE_EVENTS)


@pytest.fixture
def recorded() -> list[httpx.Request]:
    """Requests seen by the mock upstream, in order."""
    return []


@pytest.fixture
def upstream(recorded: list[httpx.Request]) -> Callable[..., httpx.MockTransport]:
    """Build a mock Gamma transport answering every request the same way."""

    def make(status_code: int = 200, **response_kwargs: Any) -> httpx.MockTransport:
        def handler(request: httpx.Request) -> httpx.Response:
            recorded.append(request)
            return httpx.Response(status_code, **response_kwargs)

        return httpx.MockTransport(handler)

    return make
