# -*- coding: utf-8 -*-
"""Preferences — shared-namespace storage helpers."""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from pydantic import ValidationError

from ..errors import StorageUnavailable
from ..shared_store import KeyValueStore
from .models import Preferences, PreferencesUpdate

logger = logging.getLogger(__name__)


def _store_keys() -> list[str]:
    return [field.alias or name for name, field in Preferences.model_fields.items()]


def load_preferences(store: Optional[KeyValueStore]) -> Preferences:
    """Stored preferences; missing, invalid or unreadable values use defaults."""
    if store is None:
        return Preferences()
    try:
        raw = {key: store.get(key) for key in _store_keys()}
    except StorageUnavailable as exc:
        logger.warning("Preferences unavailable, using defaults: %s", exc)
        return Preferences()

    data: Dict[str, Any] = {k: v for k, v in raw.items() if v is not None}
    try:
        return Preferences.model_validate(data)
    except ValidationError as exc:
        bad = {str(err["loc"][0]) for err in exc.errors() if err.get("loc")}
        logger.warning("Ignoring invalid stored preferences: %s", sorted(bad))
        return Preferences.model_validate({k: v for k, v in data.items() if k not in bad})


def save_preferences(store: Optional[KeyValueStore], prefs: Preferences) -> Preferences:
    if store is None:
        raise StorageUnavailable("app group", "shared storage is not open")
    store.set_many(prefs.model_dump(by_alias=True))
    store.synchronize()
    return prefs


def update_preferences(store: Optional[KeyValueStore], update: PreferencesUpdate) -> Preferences:
    current = load_preferences(store)
    changes = update.model_dump(exclude_none=True)
    merged = current.model_copy(update=changes)
    return save_preferences(store, merged)
