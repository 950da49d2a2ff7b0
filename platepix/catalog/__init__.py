# -*- coding: utf-8 -*-
"""Bundled message catalogs (motivations, reminders)."""

from .loader import BUNDLED_CATALOGS, load_bundled_catalogs, load_catalog
from .models import Catalog, CatalogItem

__all__ = [
    'BUNDLED_CATALOGS',
    'Catalog',
    'CatalogItem',
    'load_bundled_catalogs',
    'load_catalog',
]
