# -*- coding: utf-8 -*-

from __future__ import annotations

import datetime as dt
import random
import unittest
from typing import Any, Mapping

from platepix.catalog.models import Catalog, CatalogItem
from platepix.errors import CatalogEmpty, StorageUnavailable
from platepix.selection.service import (
    MOTIVATION_KEYS,
    REMINDER_KEYS,
    DailySelectionService,
)
from platepix.shared_store import MemoryStore
from platepix.themes import THEME_KEY, AppColor

UTC = dt.timezone.utc
DAY_A = dt.datetime(2025, 3, 1, 9, 30, tzinfo=UTC)


def _catalog(*ids: int) -> Catalog:
    return Catalog(
        name="motivations",
        table="Motivations",
        items=[CatalogItem(id=i, text_key=f"motivation.{i}") for i in ids],
    )


class BrokenStore:
    """Every operation fails as if the app group could not be opened."""

    suite_name = "group.broken"

    def get(self, key: str) -> Any:
        raise StorageUnavailable(self.suite_name, "read failed")

    def set(self, key: str, value: Any) -> None:
        raise StorageUnavailable(self.suite_name, "write failed")

    def set_many(self, values: Mapping[str, Any]) -> None:
        raise StorageUnavailable(self.suite_name, "write failed")

    def remove(self, key: str) -> None:
        raise StorageUnavailable(self.suite_name, "write failed")

    def synchronize(self) -> bool:
        raise StorageUnavailable(self.suite_name, "flush failed")


class ReadOnlyStore(MemoryStore):
    def set_many(self, values: Mapping[str, Any]) -> None:
        raise StorageUnavailable(self.suite_name, "read-only")


class TestDailySelection(unittest.TestCase):
    def setUp(self) -> None:
        self.catalog = _catalog(1, 2, 3)
        self.store = MemoryStore()
        self.service = DailySelectionService(tz=UTC, rng=random.Random(7))

    def test_first_call_selects_and_persists(self) -> None:
        item = self.service.get_todays_selection(self.catalog, self.store, DAY_A)
        self.assertIn(item.id, {1, 2, 3})
        self.assertEqual(self.store.get("lastMotivationID"), item.id)
        self.assertEqual(self.store.get("lastMotivationDate"), dt.datetime(2025, 3, 1, tzinfo=UTC))

    def test_same_day_is_stable_without_writes(self) -> None:
        first = self.service.get_todays_selection(self.catalog, self.store, DAY_A)
        writes = self.store.write_count
        for hour in (0, 12, 23):
            later = DAY_A.replace(hour=hour, minute=59)
            self.assertEqual(self.service.get_todays_selection(self.catalog, self.store, later), first)
        self.assertEqual(self.store.write_count, writes)

    def test_other_process_sees_same_item(self) -> None:
        widget = DailySelectionService(tz=UTC, rng=random.Random(99))
        app_item = self.service.get_todays_selection(self.catalog, self.store, DAY_A)
        widget_item = widget.get_todays_selection(self.catalog, self.store, DAY_A.replace(hour=22))
        self.assertEqual(app_item, widget_item)

    def test_consecutive_days_never_repeat(self) -> None:
        previous = self.service.get_todays_selection(self.catalog, self.store, DAY_A)
        for offset in range(1, 60):
            item = self.service.get_todays_selection(self.catalog, self.store, DAY_A + dt.timedelta(days=offset))
            self.assertNotEqual(item.id, previous.id)
            previous = item

    def test_two_item_catalog_alternates(self) -> None:
        catalog = _catalog(10, 20)
        first = self.service.get_todays_selection(catalog, self.store, DAY_A)
        second = self.service.get_todays_selection(catalog, self.store, DAY_A + dt.timedelta(days=1))
        third = self.service.get_todays_selection(catalog, self.store, DAY_A + dt.timedelta(days=2))
        self.assertNotEqual(first.id, second.id)
        self.assertEqual(first.id, third.id)

    def test_single_item_catalog_repeats(self) -> None:
        catalog = _catalog(5)
        for offset in range(5):
            item = self.service.get_todays_selection(catalog, self.store, DAY_A + dt.timedelta(days=offset))
            self.assertEqual(item.id, 5)

    def test_later_day_after_gap_still_avoids_previous(self) -> None:
        for seed in range(20):
            store = MemoryStore(initial={
                "lastMotivationID": 2,
                "lastMotivationDate": dt.datetime(2025, 1, 1, tzinfo=UTC),
            })
            service = DailySelectionService(tz=UTC, rng=random.Random(seed))
            self.assertNotEqual(service.get_todays_selection(self.catalog, store, DAY_A).id, 2)

    def test_stale_reference_reselects(self) -> None:
        self.store.set_many({
            "lastMotivationID": 99,
            "lastMotivationDate": dt.datetime(2025, 3, 1, tzinfo=UTC),
        })
        item = self.service.get_todays_selection(self.catalog, self.store, DAY_A)
        self.assertIn(item.id, {1, 2, 3})
        self.assertEqual(self.store.get("lastMotivationID"), item.id)

    def test_malformed_record_is_ignored(self) -> None:
        self.store.set_many({"lastMotivationID": "two", "lastMotivationDate": "yesterday"})
        item = self.service.get_todays_selection(self.catalog, self.store, DAY_A)
        self.assertIn(item.id, {1, 2, 3})
        self.assertEqual(self.store.get("lastMotivationID"), item.id)

    def test_missing_store_returns_fallback(self) -> None:
        selection = self.service.select(self.catalog, None, DAY_A)
        self.assertTrue(selection.fallback)
        self.assertEqual(selection.item.id, 1)

    def test_broken_store_returns_fallback(self) -> None:
        item = self.service.get_todays_selection(self.catalog, BrokenStore(), DAY_A)
        self.assertEqual(item.id, 1)

    def test_write_failure_still_returns_item(self) -> None:
        selection = self.service.select(self.catalog, ReadOnlyStore(), DAY_A)
        self.assertFalse(selection.fallback)
        self.assertIn(selection.item.id, {1, 2, 3})

    def test_empty_catalog_is_rejected(self) -> None:
        with self.assertRaises(CatalogEmpty):
            self.service.get_todays_selection([], self.store, DAY_A)

    def test_plain_item_sequence_is_accepted(self) -> None:
        items = [CatalogItem(id=4, text_key="a"), CatalogItem(id=8, text_key="b")]
        self.assertIn(self.service.get_todays_selection(items, self.store, DAY_A).id, {4, 8})

    def test_catalogs_keep_separate_records(self) -> None:
        motivations = DailySelectionService(MOTIVATION_KEYS, tz=UTC)
        reminders = DailySelectionService(REMINDER_KEYS, tz=UTC)
        motivations.get_todays_selection(self.catalog, self.store, DAY_A)
        reminders.get_todays_selection(_catalog(7, 8), self.store, DAY_A)
        self.assertIn(self.store.get("lastMotivationID"), {1, 2, 3})
        self.assertIn(self.store.get("lastReminderID"), {7, 8})


class TestDayBoundary(unittest.TestCase):
    def test_local_midnight_rolls_over(self) -> None:
        tz = dt.timezone(dt.timedelta(hours=3))
        service = DailySelectionService(tz=tz, rng=random.Random(1))
        store = MemoryStore()
        catalog = _catalog(1, 2, 3)
        # 20:59 UTC is 23:59 local, 21:00 UTC is the next local day.
        before = service.get_todays_selection(catalog, store, dt.datetime(2025, 3, 1, 20, 59, tzinfo=UTC))
        after = service.get_todays_selection(catalog, store, dt.datetime(2025, 3, 1, 21, 0, tzinfo=UTC))
        self.assertNotEqual(before.id, after.id)
        self.assertEqual(store.get("lastMotivationDate"), dt.datetime(2025, 3, 2, tzinfo=tz))

    def test_naive_now_is_local_time(self) -> None:
        service = DailySelectionService(tz=UTC, rng=random.Random(1))
        store = MemoryStore()
        catalog = _catalog(1, 2, 3)
        first = service.get_todays_selection(catalog, store, dt.datetime(2025, 3, 1, 0, 0))
        again = service.get_todays_selection(catalog, store, dt.datetime(2025, 3, 1, 23, 59, tzinfo=UTC))
        self.assertEqual(first, again)


class TestRecordDisplayedTheme(unittest.TestCase):
    def test_records_theme_and_exposes_it_in_record(self) -> None:
        store = MemoryStore()
        service = DailySelectionService(tz=UTC)
        service.record_displayed_theme(AppColor.COOL_MINT, store)
        self.assertEqual(store.get(THEME_KEY), "coolMint")

        service.get_todays_selection(_catalog(1, 2), store, DAY_A)
        record = service.load_record(store)
        assert record is not None
        self.assertEqual(record.theme_id, "coolMint")

    def test_failures_are_ignored(self) -> None:
        service = DailySelectionService()
        service.record_displayed_theme("coolMint", None)
        service.record_displayed_theme("coolMint", BrokenStore())


if __name__ == "__main__":
    unittest.main()
