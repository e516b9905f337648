from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from hr_notifications.config import get_settings
from hr_notifications.infrastructure.database import engine, initialize_database
from hr_notifications.interfaces.api.routes import register_routes


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create the schema on startup and release pooled connections on shutdown."""

    initialize_database()
    yield
    engine.dispose()


def create_app() -> FastAPI:
    """Build the HR notifications FastAPI application."""

    app = FastAPI(title="HR Notifications", lifespan=lifespan)

    # The frontend links in notification emails point at this origin.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[get_settings().app_base_url],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_routes(app)
    return app


app = create_app()
