from fastapi import FastAPI

from polymarket_proxy.config import Settings
from polymarket_proxy.server.routes import events, root


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or Settings()

    app = FastAPI(title="Polymarket Proxy", docs_url=None, redoc_url=None, openapi_url=None)
    app.state.settings = settings

    # Routers
    app.include_router(root.router)
    app.include_router(events.router)

    return app
