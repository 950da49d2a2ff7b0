# -*- coding: utf-8 -*-
"""Catalog loading and startup validation."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Dict, Union

from pydantic import ValidationError

from ..config import settings
from ..errors import CatalogEmpty, CatalogError
from .models import Catalog

logger = logging.getLogger(__name__)

BUNDLED_CATALOGS = ("motivations", "reminders")


def _resolve_path(source: Union[str, Path]) -> Path:
    if isinstance(source, Path):
        return source
    if source in BUNDLED_CATALOGS:
        return settings.resources_dir / f"{source}.json"
    return Path(source)


def load_catalog(source: Union[str, Path]) -> Catalog:
    """Load and validate a catalog by bundled name or file path.

    Raises CatalogEmpty for a catalog without items and CatalogError for any
    other defect (missing file, bad JSON, duplicate ids).
    """
    path = _resolve_path(source)
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as exc:
        raise CatalogError(f"Failed to locate catalog {path}") from exc
    except json.JSONDecodeError as exc:
        raise CatalogError(f"Failed to decode catalog {path}: invalid JSON") from exc

    try:
        catalog = Catalog.model_validate(raw)
    except ValidationError as exc:
        raise CatalogError(f"Failed to decode catalog {path}: {exc}") from exc

    if not catalog.items:
        raise CatalogEmpty(f"Catalog {catalog.name!r} ({path}) has no items")

    seen: set[int] = set()
    for item in catalog.items:
        if item.id in seen:
            raise CatalogError(f"Catalog {catalog.name!r} has duplicate id {item.id}")
        seen.add(item.id)

    logger.debug("Loaded catalog %s with %d items", catalog.name, len(catalog.items))
    return catalog


def load_bundled_catalogs() -> Dict[str, Catalog]:
    return {name: load_catalog(name) for name in BUNDLED_CATALOGS}
