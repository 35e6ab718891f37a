import asyncio
import json
import sys
from typing import Annotated

import typer

from polymarket_proxy.api.errors import GammaError
from polymarket_proxy.api.gamma import GammaClient
from polymarket_proxy.config import Settings
from polymarket_proxy.display.tables import render_events, console, err_console
from polymarket_proxy.models import FetchActiveEventsOptions

app = typer.Typer()


@app.callback(invoke_without_command=True)
def events(
    limit: Annotated[int, typer.Option("--limit", "-n", min=0, help="Number of events (0 = upstream default)")] = 0,
    fmt: Annotated[str, typer.Option("--format", help="Output format: table or json")] = "table",
) -> None:
    """List active, non-closed Polymarket events."""
    settings = Settings()
    client = GammaClient(settings.GAMMA_BASE_URL, timeout=settings.REQUEST_TIMEOUT)

    async def run() -> None:
        with err_console.status("[dim]Fetching events…[/dim]", spinner="dots"):
            try:
                result = await client.fetch_active_events(FetchActiveEventsOptions(limit=limit))
            except GammaError as exc:
                err_console.print(f"[red]Failed to fetch events:[/red] {exc}")
                raise typer.Exit(1)

        if fmt == "json" or not sys.stdout.isatty():
            print(json.dumps([e.to_dict() for e in result], indent=2))
        elif not result:
            console.print("[yellow]No active events.[/yellow]")
        else:
            render_events(result)

    asyncio.run(run())
