"""Console logging setup shared by the server and the CLI."""

import logging

from rich.logging import RichHandler

from polymarket_proxy.display.tables import err_console


def configure_logging(level: str | int = "INFO") -> None:
    """Route all log records through a single rich console handler.

    Calling this again only changes the level.
    """
    root = logging.getLogger()
    if isinstance(level, str):
        level = level.upper()
    root.setLevel(level)

    if not any(isinstance(h, RichHandler) for h in root.handlers):
        handler = RichHandler(console=err_console, rich_tracebacks=True, show_path=False)
        handler.setFormatter(logging.Formatter("%(name)s: %(message)s", datefmt="[%X]"))
        root.addHandler(handler)

    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
