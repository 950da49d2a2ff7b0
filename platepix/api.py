# -*- coding: utf-8 -*-
"""
PlatePix / MyPlates daily motivation API

Serves today's motivation and reminder, the widget timeline, and the shared
theme and preferences of the active app flavor.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from . import __version__
from .config import configure_logging, settings
from .deps import CATALOGS
from .preferences.api import router as preferences_router
from .selection.api import router as selection_router
from .widget.api import router as widget_router

logger = logging.getLogger(__name__)

app = FastAPI(
    title=f"{settings.flavor.display_name} daily motivation",
    description="Daily motivation shared between the app and its widget",
    version=__version__,
    docs_url="/api/docs",
    redoc_url="/api/redoc",
    openapi_url="/api/openapi.json",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(selection_router)
app.include_router(widget_router)
app.include_router(preferences_router)


@app.get("/api/health")
def health():
    return {
        "status": "ok",
        "flavor": settings.flavor.name,
        "app_group": settings.app_group,
        "catalogs": {name: len(c.items) for name, c in CATALOGS.items()},
    }


def run() -> None:
    """Console entry point (used by pyproject [project.scripts])."""
    import uvicorn

    configure_logging()
    logger.info("Serving %s on %s:%s", settings.app_group, settings.host, settings.port)
    uvicorn.run("platepix.api:app", host=settings.host, port=settings.port, reload=False)
