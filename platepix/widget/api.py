# -*- coding: utf-8 -*-
"""Widget — API endpoints used by the widget refresh process."""

from __future__ import annotations

import datetime as dt
from typing import Dict, Optional

from fastapi import APIRouter, Depends, Query

from ..catalog import Catalog
from ..config import settings
from ..deps import get_catalogs, get_now, get_store
from ..shared_store import KeyValueStore
from .models import WidgetEntry, WidgetTimeline
from .provider import MotivationWidgetProvider

router = APIRouter(prefix="/api/widget", tags=["Widget"])


def _provider(
    lang: Optional[str] = Query(default=None, description="Language code, e.g. en or ru"),
    store: Optional[KeyValueStore] = Depends(get_store),
    catalogs: Dict[str, Catalog] = Depends(get_catalogs),
) -> MotivationWidgetProvider:
    return MotivationWidgetProvider(
        catalogs["motivations"],
        store,
        default_theme=settings.default_theme,
        lang=lang,
    )


@router.get("/placeholder", response_model=WidgetEntry, summary="Placeholder entry")
def widget_placeholder(
    provider: MotivationWidgetProvider = Depends(_provider),
    now: dt.datetime = Depends(get_now),
):
    return provider.placeholder(now)


@router.get("/snapshot", response_model=WidgetEntry, summary="Current widget entry")
def widget_snapshot(
    provider: MotivationWidgetProvider = Depends(_provider),
    now: dt.datetime = Depends(get_now),
):
    return provider.snapshot(now)


@router.get("/timeline", response_model=WidgetTimeline, summary="Daily widget timeline")
def widget_timeline(
    provider: MotivationWidgetProvider = Depends(_provider),
    now: dt.datetime = Depends(get_now),
):
    return provider.timeline(now)
