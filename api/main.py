"""
FastAPI application factory.

This file:
1. Creates the FastAPI app
2. Registers all routers (scheduler, health)
3. Logs startup and shutdown via the lifespan context manager

The `lifespan` context manager is FastAPI's way of handling startup/shutdown.
It replaces the older @app.on_event("startup") pattern.

To run:  python -m api.main
    or:  uvicorn api.main:app --host 0.0.0.0 --port 8000 --reload
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from config.settings import settings
from api.routers import health, scheduler

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Runs on startup (before yield) and shutdown (after yield)."""
    logger.info(f"API ready, default policy: {settings.DEFAULT_SCHEDULING_POLICY}")

    yield  # app is running and serving requests between startup and shutdown

    logger.info("API shut down")


def create_app() -> FastAPI:
    """Factory function that builds and configures the FastAPI application."""
    app = FastAPI(
        title="Job Sequencer",
        description="Offline single-machine job sequencing (EDF, WSRT, Lawler greedy, random baseline)",
        version="1.0.0",
        lifespan=lifespan,
    )

    # Register routers; each one adds its endpoints to the app
    app.include_router(health.router)
    app.include_router(scheduler.router)

    return app


# This is what uvicorn imports: `uvicorn api.main:app`
app = create_app()


if __name__ == "__main__":
    uvicorn.run("api.main:app", host=settings.API_HOST, port=settings.API_PORT)
