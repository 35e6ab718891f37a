"""String formatting helpers."""

from polymarket_proxy.models import Event


def fmt_flags(event: Event) -> tuple[str, str]:
    """Return (text, style) for an event's active/closed state."""
    if event.closed:
        return "closed", "red"
    if event.active:
        return "active", "green"
    return "inactive", "dim"


def fmt_tags(event: Event, width: int) -> str:
    """Comma-joined tag labels, truncated to width: Politics, Elections."""
    labels = [t.label or t.slug for t in event.tags]
    if not labels:
        return "—"
    return truncate(", ".join(labels), width)


def truncate(text: str, width: int) -> str:
    """Truncate text to width with ellipsis."""
    if len(text) <= width:
        return text
    return text[: width - 1] + "…"
