"""
FastAPI Application Entry Point.
"""
import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse, RedirectResponse
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates
from starlette.status import HTTP_302_FOUND

from .api import router
from .config import Settings, settings as default_settings
from .errors import LoginRequired, StoreError
from .models.destination import DestinationCatalog
from .models.session import SessionStore
from .services.session_manager import SessionManager
from .services.user_store import UserStore, connect_user_store

logger = logging.getLogger(__name__)

PACKAGE_DIR = Path(__file__).parent
TEMPLATES_DIR = PACKAGE_DIR / "templates"
STATIC_DIR = PACKAGE_DIR / "static"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Connect to MongoDB unless a user store was injected."""
    client = None
    if getattr(app.state, "user_store", None) is None:
        # StoreUnavailableError propagates and aborts startup
        client, app.state.user_store = await connect_user_store(app.state.settings)
    try:
        yield
    finally:
        if client is not None:
            await client.close()


def create_app(
    settings: Optional[Settings] = None,
    user_store: Optional[UserStore] = None
) -> FastAPI:
    """
    Build the application.

    Args:
        settings: Configuration, defaults to the environment-loaded settings
        user_store: Pre-built store; when omitted one is connected on startup
    """
    settings = settings or default_settings
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )

    app = FastAPI(
        title="Wanderlist",
        description="Browse travel destinations and keep a want-to-go list",
        version="1.0.0",
        lifespan=lifespan
    )

    app.state.settings = settings
    app.state.user_store = user_store
    app.state.catalog = DestinationCatalog.from_mapping(settings.destinations)
    app.state.templates = Jinja2Templates(directory=str(TEMPLATES_DIR))
    app.state.session_manager = SessionManager(
        SessionStore(),
        secret=settings.session_secret,
        cookie_name=settings.session_cookie,
        max_age=settings.session_max_age
    )

    @app.exception_handler(LoginRequired)
    async def redirect_to_login(request: Request, exc: LoginRequired):
        return RedirectResponse("/", status_code=HTTP_302_FOUND)

    @app.exception_handler(StoreError)
    async def store_failure(request: Request, exc: StoreError):
        logger.error(f"Data access failed on {request.method} {request.url.path}: {exc}")
        return PlainTextResponse("Internal Server Error", status_code=500)

    app.include_router(router)
    app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")

    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        return {
            "status": "healthy",
            "catalog_size": len(app.state.catalog)
        }

    return app


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "wanderlist.main:create_app",
        factory=True,
        host=default_settings.host,
        port=default_settings.port,
        reload=default_settings.debug
    )
