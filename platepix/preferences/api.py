# -*- coding: utf-8 -*-
"""Preferences and color theme — API endpoints."""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException

from ..config import settings
from ..deps import get_store
from ..errors import StorageUnavailable
from ..selection.service import record_displayed_theme
from ..shared_store import KeyValueStore
from ..themes import AppColor, load_theme, parse_theme
from .models import Preferences, PreferencesUpdate, ThemeResponse, ThemeUpdateRequest
from .storage import load_preferences, update_preferences

router = APIRouter(prefix="/api", tags=["Preferences"])


def _theme_response(theme: AppColor) -> ThemeResponse:
    return ThemeResponse(
        theme_id=theme.value,
        asset_name=theme.asset_name,
        color_hex=theme.hex,
        is_default=theme.value == settings.default_theme,
    )


@router.get("/preferences", response_model=Preferences, summary="Display and reminder preferences")
def get_preferences(store: Optional[KeyValueStore] = Depends(get_store)):
    return load_preferences(store)


@router.put("/preferences", response_model=Preferences, summary="Update preferences")
def put_preferences(update: PreferencesUpdate, store: Optional[KeyValueStore] = Depends(get_store)):
    try:
        return update_preferences(store, update)
    except StorageUnavailable as exc:
        raise HTTPException(status_code=503, detail=str(exc)) from exc


@router.get("/theme", response_model=ThemeResponse, summary="Active color theme")
def get_theme(store: Optional[KeyValueStore] = Depends(get_store)):
    return _theme_response(load_theme(store, settings.default_theme))


@router.put("/theme", response_model=ThemeResponse, summary="Record the active color theme")
def put_theme(request: ThemeUpdateRequest, store: Optional[KeyValueStore] = Depends(get_store)):
    try:
        theme = parse_theme(request.theme_id)
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    record_displayed_theme(theme, store)
    return _theme_response(theme)
