# -*- coding: utf-8 -*-
"""Localization tables (resources/locales/<lang>/<Table>.json)."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from .config import settings

logger = logging.getLogger(__name__)

BASE_LANG = "en"


class Localizer:
    """Resolves (text_key, table) pairs, caching each table after first use."""

    def __init__(self, locales_dir: Optional[Path] = None) -> None:
        self.locales_dir = locales_dir or (settings.resources_dir / "locales")
        self._tables: Dict[Tuple[str, str], Dict[str, str]] = {}

    def _table(self, lang: str, table: str) -> Dict[str, str]:
        cache_key = (lang, table)
        if cache_key not in self._tables:
            path = self.locales_dir / lang / f"{table}.json"
            data: Dict[str, str] = {}
            if path.exists():
                try:
                    data = json.loads(path.read_text(encoding="utf-8"))
                except json.JSONDecodeError as exc:
                    logger.warning("Invalid localization table %s: %s", path, exc)
            self._tables[cache_key] = data
        return self._tables[cache_key]

    def localized(self, text_key: str, table: str, lang: Optional[str] = None) -> str:
        lang = (lang or settings.default_lang).lower()
        for candidate in (lang, BASE_LANG):
            text = self._table(candidate, table).get(text_key)
            if text:
                return text
        # Missing translations show the key itself.
        return text_key

    def available_languages(self) -> List[str]:
        if not self.locales_dir.exists():
            return []
        return sorted(p.name for p in self.locales_dir.iterdir() if p.is_dir())


default_localizer = Localizer()


def localized(text_key: str, table: str, lang: Optional[str] = None) -> str:
    return default_localizer.localized(text_key, table, lang)
