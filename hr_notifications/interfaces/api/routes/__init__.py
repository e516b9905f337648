from fastapi import FastAPI

from .notifications import router as notifications_router
from .routing_rules import router as routing_rules_router


def register_routes(app: FastAPI) -> None:
    """Register every API router on the FastAPI application."""

    app.include_router(notifications_router)
    app.include_router(routing_rules_router)
