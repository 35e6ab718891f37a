"""Rich table builders for the CLI."""

from datetime import datetime

from rich import box
from rich.console import Console
from rich.rule import Rule
from rich.table import Table
from rich.text import Text

from polymarket_proxy.models import Event
from polymarket_proxy.display.format import fmt_flags, fmt_tags, truncate

console = Console()
err_console = Console(stderr=True)

_W_EVENT = 40
_W_SLUG  = 28
_W_TAGS  = 24


# ---------------------------------------------------------------------------
# Events list
# ---------------------------------------------------------------------------

def render_events(events: list[Event]) -> None:
    now = datetime.now().strftime("%b %d %H:%M")

    console.print()
    console.print(
        Rule(
            f"[bold cyan]POLYMARKET[/bold cyan]  [dim]{len(events)} events · {now}[/dim]",
            style="cyan dim",
        )
    )

    table = Table(
        box=box.SIMPLE_HEAD,
        show_header=True,
        header_style="bold dim",
        pad_edge=True,
        expand=False,
        show_edge=False,
    )

    table.add_column("#",       style="dim", width=3,  justify="right", no_wrap=True)
    table.add_column("Event",                width=_W_EVENT,            no_wrap=True)
    table.add_column("Slug",    style="dim", width=_W_SLUG,             no_wrap=True)
    table.add_column("Tags",                 width=_W_TAGS,             no_wrap=True)
    table.add_column("Markets", justify="right", width=7,               no_wrap=True)
    table.add_column("State",                width=8,                   no_wrap=True)

    for rank, event in enumerate(events, 1):
        state_text, state_style = fmt_flags(event)
        table.add_row(
            str(rank),
            truncate(event.title, _W_EVENT),
            truncate(event.slug, _W_SLUG),
            fmt_tags(event, _W_TAGS),
            str(len(event.markets)),
            Text(state_text, style=state_style),
        )

    console.print(table)
