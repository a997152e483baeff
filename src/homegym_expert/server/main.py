"""
HomeGym Expert FastAPI server main entrypoint.
Handles CORS, error handling, and API routers.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from datetime import UTC, datetime

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .. import __version__
from ..catalog import load_catalog
from ..config import SETTINGS
from ..logging_setup import setup_logging
from .routes.exercises import router as r_exercises
from .routes.recommend import router as r_recommend


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()
    catalog = load_catalog()
    logging.info("Server startup completed with %d catalog exercises", len(catalog))
    yield
    logging.info("Server shutdown completed")


app = FastAPI(
    title="HomeGym Expert API",
    description="Rule-based home workout recommendations",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=SETTINGS.allowed_origins(),
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)


@app.exception_handler(Exception)
async def global_exc_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Global exception handler: log and return a generic error response.
    """
    logging.exception("Unhandled error in %s: %s", request.url, exc)
    return JSONResponse(
        {"ok": False, "error": "internal_error", "message": "Internal server error"},
        status_code=500,
    )


@app.get("/healthz")
async def healthz() -> dict:
    catalog_size = len(load_catalog())
    return {
        "ok": catalog_size > 0,
        "status": "healthy" if catalog_size else "degraded",
        "version": __version__,
        "catalog_size": catalog_size,
        "timestamp": datetime.now(UTC).isoformat(),
    }


@app.get("/")
async def root() -> dict:
    return {
        "ok": True,
        "name": "HomeGym Expert API",
        "version": __version__,
        "description": "Personalized weekly home workout plans with an inference trace",
    }


# Routers for API endpoints
app.include_router(r_recommend, prefix=SETTINGS.API_PREFIX, tags=["recommend"])
app.include_router(r_exercises, prefix=SETTINGS.API_PREFIX, tags=["exercises"])
