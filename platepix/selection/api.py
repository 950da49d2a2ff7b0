# -*- coding: utf-8 -*-
"""Daily selection — API endpoints."""

from __future__ import annotations

import datetime as dt
from typing import Dict, Optional

from fastapi import APIRouter, Depends, Query

from ..catalog import Catalog
from ..deps import get_catalogs, get_now, get_store
from ..localization import localized
from ..shared_store import KeyValueStore
from .models import DailyItemResponse
from .service import MOTIVATION_KEYS, REMINDER_KEYS, DailySelectionService, SelectionKeys

router = APIRouter(prefix="/api", tags=["Daily selection"])


def _daily_item(
    catalog: Catalog,
    keys: SelectionKeys,
    store: Optional[KeyValueStore],
    now: dt.datetime,
    lang: Optional[str],
) -> DailyItemResponse:
    selection = DailySelectionService(keys).select(catalog, store, now)
    return DailyItemResponse(
        catalog=catalog.name,
        id=selection.item.id,
        text_key=selection.item.text_key,
        text=localized(selection.item.text_key, catalog.table, lang),
        date=selection.day.isoformat(),
        fallback=selection.fallback,
    )


@router.get("/motivation/today", response_model=DailyItemResponse, summary="Today's motivation")
def motivation_today(
    lang: Optional[str] = Query(default=None, description="Language code, e.g. en or ru"),
    store: Optional[KeyValueStore] = Depends(get_store),
    now: dt.datetime = Depends(get_now),
    catalogs: Dict[str, Catalog] = Depends(get_catalogs),
):
    return _daily_item(catalogs["motivations"], MOTIVATION_KEYS, store, now, lang)


@router.get("/reminders/today", response_model=DailyItemResponse, summary="Today's reminder message")
def reminder_today(
    lang: Optional[str] = Query(default=None, description="Language code, e.g. en or ru"),
    store: Optional[KeyValueStore] = Depends(get_store),
    now: dt.datetime = Depends(get_now),
    catalogs: Dict[str, Catalog] = Depends(get_catalogs),
):
    return _daily_item(catalogs["reminders"], REMINDER_KEYS, store, now, lang)
