import typer

from polymarket_proxy.commands.events import events
from polymarket_proxy.commands.serve import serve

app = typer.Typer(
    name="polymarket-proxy",
    help="HTTP proxy and CLI for Polymarket active events.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

app.command("serve", help="Run the HTTP server (/, /health, /api/events)")(serve)
app.command("events", help="Fetch active events once and print them")(events)


if __name__ == "__main__":
    app()
