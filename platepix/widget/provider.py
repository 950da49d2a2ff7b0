# -*- coding: utf-8 -*-
"""Supplies widget entries: placeholder, snapshot and a daily timeline."""

from __future__ import annotations

import datetime as dt
from typing import Optional, Union

from ..calendar_day import next_midnight, now_local, to_local
from ..catalog.models import Catalog
from ..localization import Localizer, default_localizer
from ..selection.service import DailySelectionService
from ..shared_store import KeyValueStore
from ..themes import AppColor, load_theme, parse_theme
from .models import WidgetEntry, WidgetTimeline

PLACEHOLDER_TEXT = "Stay motivated!"


class MotivationWidgetProvider:
    def __init__(
        self,
        catalog: Catalog,
        store: Optional[KeyValueStore],
        *,
        default_theme: Union[str, AppColor],
        service: Optional[DailySelectionService] = None,
        localizer: Optional[Localizer] = None,
        lang: Optional[str] = None,
        tz: Optional[dt.tzinfo] = None,
    ) -> None:
        self.catalog = catalog
        self.store = store
        self.default_theme = parse_theme(default_theme)
        self.tz = tz
        self.service = service or DailySelectionService(tz=tz)
        self.localizer = localizer or default_localizer
        self.lang = lang

    def _entry(self, now: dt.datetime, text: str, theme: AppColor) -> WidgetEntry:
        return WidgetEntry(date=to_local(now, self.tz), text=text, theme=theme, color_hex=theme.hex)

    def placeholder(self, now: Optional[dt.datetime] = None) -> WidgetEntry:
        """Shown while widget data loads; never touches shared storage."""
        return self._entry(now or now_local(self.tz), PLACEHOLDER_TEXT, self.default_theme)

    def snapshot(self, now: Optional[dt.datetime] = None) -> WidgetEntry:
        now = now or now_local(self.tz)
        item = self.service.get_todays_selection(self.catalog, self.store, now)
        text = self.localizer.localized(item.text_key, self.catalog.table, self.lang)
        return self._entry(now, text, load_theme(self.store, self.default_theme))

    def timeline(self, now: Optional[dt.datetime] = None) -> WidgetTimeline:
        """A single entry for now, refreshed after the next local midnight."""
        now = now or now_local(self.tz)
        return WidgetTimeline(entries=[self.snapshot(now)], refresh_after=next_midnight(now, self.tz))
