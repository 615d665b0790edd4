from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from fortune_indexer import __version__
from fortune_indexer.api import create_api_router
from fortune_indexer.api.routers import websocket as websocket_router
from fortune_indexer.core.config import Settings, get_settings
from fortune_indexer.core.container import ApplicationContainer, build_container
from fortune_indexer.core.logging import configure_logging

SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "X-XSS-Protection": "1; mode=block",
}


@asynccontextmanager
async def lifespan(app: FastAPI):
    container: ApplicationContainer = app.state.container
    await container.startup()
    yield
    await container.shutdown()


def create_app(settings: Optional[Settings] = None, container: Optional[ApplicationContainer] = None) -> FastAPI:
    settings = settings or (container.settings if container else get_settings())
    configure_logging(settings)

    app = FastAPI(
        title=settings.project_name,
        description="Fortune Tickets transfer and ticket event indexer",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.container = container or build_container(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=False,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization", "Accept"],
    )

    @app.middleware("http")
    async def security_headers(request: Request, call_next):
        response = await call_next(request)
        for header, value in SECURITY_HEADERS.items():
            response.headers.setdefault(header, value)
        return response

    app.include_router(create_api_router())
    app.include_router(websocket_router.router)

    return app


app = create_app()
