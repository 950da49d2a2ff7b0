# -*- coding: utf-8 -*-

from __future__ import annotations

import datetime as dt
import random
import unittest

from platepix.catalog import load_catalog
from platepix.localization import localized
from platepix.selection.service import DailySelectionService
from platepix.shared_store import MemoryStore
from platepix.themes import THEME_KEY, AppColor
from platepix.widget import PLACEHOLDER_TEXT, MotivationWidgetProvider

TZ = dt.timezone(dt.timedelta(hours=-5))


class TestMotivationWidgetProvider(unittest.TestCase):
    def setUp(self) -> None:
        self.catalog = load_catalog("motivations")
        self.store = MemoryStore()
        self.provider = MotivationWidgetProvider(
            self.catalog,
            self.store,
            default_theme="lavenderRaf",
            service=DailySelectionService(tz=TZ, rng=random.Random(3)),
            lang="en",
            tz=TZ,
        )
        self.now = dt.datetime(2025, 2, 13, 18, 45, tzinfo=TZ)

    def test_placeholder_does_not_touch_storage(self) -> None:
        entry = self.provider.placeholder(self.now)
        self.assertEqual(entry.text, PLACEHOLDER_TEXT)
        self.assertIs(entry.theme, AppColor.LAVENDER_RAF)
        self.assertEqual(self.store.write_count, 0)

    def test_snapshot_matches_daily_selection(self) -> None:
        entry = self.provider.snapshot(self.now)
        item_id = self.store.get("lastMotivationID")
        item = next((i for i in self.catalog.items if i.id == item_id), None)
        assert item is not None
        self.assertEqual(entry.text, localized(item.text_key, "Motivations", "en"))
        self.assertEqual(self.provider.snapshot(self.now.replace(hour=23)).text, entry.text)

    def test_snapshot_uses_stored_theme(self) -> None:
        self.store.set(THEME_KEY, "coolMint")
        entry = self.provider.snapshot(self.now)
        self.assertIs(entry.theme, AppColor.COOL_MINT)
        self.assertEqual(entry.color_hex, AppColor.COOL_MINT.hex)

    def test_timeline_refreshes_at_next_local_midnight(self) -> None:
        timeline = self.provider.timeline(self.now)
        self.assertEqual(len(timeline.entries), 1)
        self.assertEqual(timeline.refresh_after, dt.datetime(2025, 2, 14, tzinfo=TZ))
        self.assertEqual(timeline.entries[0].date, self.now)

    def test_unavailable_store_shows_first_item(self) -> None:
        provider = MotivationWidgetProvider(self.catalog, None, default_theme="watermelonPink", lang="en", tz=TZ)
        entry = provider.snapshot(self.now)
        self.assertEqual(entry.text, localized(self.catalog.items[0].text_key, "Motivations", "en"))
        self.assertIs(entry.theme, AppColor.WATERMELON_PINK)


if __name__ == "__main__":
    unittest.main()
