import logging

import uvicorn
import yaml
from fastapi import FastAPI
from lockerapi.infrastructure.backends import build_backend
from lockerapi.infrastructure.config import Settings, settings
from lockerapi.infrastructure.logging_config import configure_logging
from lockerapi.presentation.errors import install_error_handlers
from lockerapi.presentation.routers import router

logger = logging.getLogger(__name__)


def create_app(app_settings: Settings | None = None) -> FastAPI:
    """
    Build the API around its own storage backend. The backend lives on `app.state` and is handed
    to request handlers through the `get_repositories` dependency.
    """
    app_settings = app_settings or settings
    app = FastAPI(title="Locker API")
    app.state.settings = app_settings
    app.state.backend = build_backend(app_settings)

    # Use the contractual schema
    def custom_openapi():
        with open(app_settings.openapi_path) as f:
            return yaml.safe_load(f)

    @app.on_event("startup")
    def _log_startup() -> None:
        logger.info(
            "Server started at %s:%s using %s storage",
            app_settings.host,
            app_settings.port,
            app.state.backend.name,
        )

    app.openapi = custom_openapi
    install_error_handlers(app)
    app.include_router(router)
    return app


configure_logging(settings.log_level)
app = create_app()


def run() -> None:
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())
