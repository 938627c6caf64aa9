import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from notification_service.config import get_settings
from notification_service.infrastructure.database import engine, initialize_database
from notification_service.interfaces.api.errors import register_exception_handlers
from notification_service.interfaces.api.routes import register_routes

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create missing tables on startup and release pooled connections on shutdown."""

    initialize_database()
    logger.info("Notification service started")
    yield
    engine.dispose()


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""

    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    app = FastAPI(title="Notification Service", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=[
            "Location",
            f"X-{settings.client_app_name}-alert",
            f"X-{settings.client_app_name}-error",
            f"X-{settings.client_app_name}-params",
        ],
    )

    register_exception_handlers(app)
    register_routes(app)
    return app


app = create_app()
