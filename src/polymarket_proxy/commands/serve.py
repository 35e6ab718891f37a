import logging
from typing import Annotated, Optional

import typer
import uvicorn

from polymarket_proxy.config import Settings
from polymarket_proxy.logs import configure_logging
from polymarket_proxy.server.app import create_app

logger = logging.getLogger(__name__)

app = typer.Typer()


@app.callback(invoke_without_command=True)
def serve(
    host: Annotated[Optional[str], typer.Option("--host", help="Interface to bind (default: HOST or 0.0.0.0)")] = None,
    port: Annotated[Optional[int], typer.Option("--port", "-p", help="Port to listen on (default: PORT or 8080)")] = None,
    log_level: Annotated[Optional[str], typer.Option("--log-level", help="debug, info, warning, error")] = None,
) -> None:
    """Run the HTTP server in front of the Gamma API."""
    overrides = {"HOST": host, "PORT": port, "LOG_LEVEL": log_level}
    settings = Settings(**{k: v for k, v in overrides.items() if v is not None})

    configure_logging(settings.LOG_LEVEL)
    logger.info("Server starting on %s:%d", settings.HOST, settings.PORT)

    uvicorn.run(
        create_app(settings),
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
        log_config=None,
    )
