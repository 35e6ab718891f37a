from dataclasses import dataclass, field
from typing import Any

from polymarket_proxy.api.errors import DecodeError


def _field(raw: dict[str, Any], key: str, kind: type, default: Any) -> Any:
    value = raw.get(key)
    if value is None:
        return default
    if not isinstance(value, kind):
        raise DecodeError(
            f"failed to unmarshal JSON: field {key!r} expects "
            f"{kind.__name__}, got {type(value).__name__}"
        )
    return value


def _str(raw: dict[str, Any], key: str) -> str:
    return _field(raw, key, str, "")


def _items(raw: dict[str, Any], key: str) -> list[Any]:
    return _field(raw, key, list, [])


def _obj(value: Any, what: str) -> dict[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise DecodeError(
            f"failed to unmarshal JSON: {what} expects object, got {type(value).__name__}"
        )
    return value


@dataclass(frozen=True)
class Tag:
    id: str
    label: str
    slug: str

    @classmethod
    def from_dict(cls, raw: Any) -> "Tag":
        raw = _obj(raw, "tag")
        return cls(id=_str(raw, "id"), label=_str(raw, "label"), slug=_str(raw, "slug"))

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "label": self.label, "slug": self.slug}


@dataclass(frozen=True)
class Market:
    id: str
    question: str
    clob_token_ids: str = ""   # JSON-encoded array, passed through as-is
    outcomes: str = ""         # JSON-encoded array, passed through as-is
    outcome_prices: str = ""   # JSON-encoded array, passed through as-is

    @classmethod
    def from_dict(cls, raw: Any) -> "Market":
        raw = _obj(raw, "market")
        return cls(
            id=_str(raw, "id"),
            question=_str(raw, "question"),
            clob_token_ids=_str(raw, "clobTokenIds"),
            outcomes=_str(raw, "outcomes"),
            outcome_prices=_str(raw, "outcomePrices"),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "question": self.question,
            "clobTokenIds": self.clob_token_ids,
            "outcomes": self.outcomes,
            "outcomePrices": self.outcome_prices,
        }


@dataclass(frozen=True)
class Event:
    id: str
    slug: str
    title: str
    active: bool = False
    closed: bool = False
    tags: tuple[Tag, ...] = field(default_factory=tuple)
    markets: tuple[Market, ...] = field(default_factory=tuple)

    @classmethod
    def from_dict(cls, raw: Any) -> "Event":
        raw = _obj(raw, "event")
        return cls(
            id=_str(raw, "id"),
            slug=_str(raw, "slug"),
            title=_str(raw, "title"),
            active=_field(raw, "active", bool, False),
            closed=_field(raw, "closed", bool, False),
            tags=tuple(Tag.from_dict(t) for t in _items(raw, "tags")),
            markets=tuple(Market.from_dict(m) for m in _items(raw, "markets")),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "slug": self.slug,
            "title": self.title,
            "active": self.active,
            "closed": self.closed,
            "tags": [t.to_dict() for t in self.tags],
            "markets": [m.to_dict() for m in self.markets],
        }


@dataclass(frozen=True)
class FetchActiveEventsOptions:
    limit: int = 0   # 0 leaves the upstream default in place
