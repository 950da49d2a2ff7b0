# -*- coding: utf-8 -*-
"""FastAPI dependencies: shared store, clock and catalogs."""

from __future__ import annotations

import datetime as dt
import logging
from functools import lru_cache
from pathlib import Path
from typing import Dict, Optional

from .calendar_day import now_local
from .catalog import Catalog, load_bundled_catalogs
from .config import settings
from .errors import StorageUnavailable
from .shared_store import KeyValueStore, SharedDefaults, open_shared_defaults

logger = logging.getLogger(__name__)

# Loaded once at import so a broken bundle fails at startup.
CATALOGS: Dict[str, Catalog] = load_bundled_catalogs()


@lru_cache(maxsize=None)
def _shared_defaults(suite_name: str, data_root: Path) -> SharedDefaults:
    # Failures raise and are not cached, so the next request retries.
    return open_shared_defaults(suite_name, data_root)


def get_store() -> Optional[KeyValueStore]:
    """The app-group store, or None when it cannot be opened."""
    try:
        return _shared_defaults(settings.app_group, settings.data_root)
    except StorageUnavailable as exc:
        logger.warning("Failed to access shared defaults: %s", exc)
        return None


def get_now() -> dt.datetime:
    return now_local()


def get_catalogs() -> Dict[str, Catalog]:
    return CATALOGS
