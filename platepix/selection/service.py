# -*- coding: utf-8 -*-
"""Daily selection service.

Picks one catalog item per local calendar day and persists the choice in the
app-group namespace, so the app and the independently scheduled widget
process show the same item all day. The next day's pick never repeats the
previous one when the catalog has more than one item.
"""

from __future__ import annotations

import datetime as dt
import logging
import random
from dataclasses import dataclass
from typing import Optional, Sequence, Union

from ..calendar_day import is_same_day, local_date, now_local, start_of_day
from ..catalog.models import Catalog, CatalogItem
from ..errors import CatalogEmpty, StorageUnavailable
from ..shared_store import KeyValueStore
from ..themes import THEME_KEY, AppColor
from .models import SelectionRecord

logger = logging.getLogger(__name__)

CatalogLike = Union[Catalog, Sequence[CatalogItem]]


@dataclass(frozen=True)
class SelectionKeys:
    """Shared-namespace keys holding one catalog's daily record."""

    id_key: str
    date_key: str


MOTIVATION_KEYS = SelectionKeys("lastMotivationID", "lastMotivationDate")
REMINDER_KEYS = SelectionKeys("lastReminderID", "lastReminderDate")


@dataclass(frozen=True)
class DailySelection:
    item: CatalogItem
    day: dt.date
    fallback: bool = False


def _suite(store: KeyValueStore) -> str:
    return getattr(store, "suite_name", "?")


class DailySelectionService:
    def __init__(
        self,
        keys: SelectionKeys = MOTIVATION_KEYS,
        *,
        tz: Optional[dt.tzinfo] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.keys = keys
        self.tz = tz
        self._rng = rng or random.Random()

    def load_record(self, store: KeyValueStore) -> Optional[SelectionRecord]:
        """Read the persisted record, or None when absent or malformed.

        Raises StorageUnavailable if the store cannot be read.
        """
        raw_id = store.get(self.keys.id_key)
        raw_date = store.get(self.keys.date_key)
        if raw_id is None and raw_date is None:
            return None
        if isinstance(raw_id, bool) or not isinstance(raw_id, int) or not isinstance(raw_date, dt.datetime):
            logger.warning(
                "Ignoring malformed selection record in %s: %s=%r %s=%r",
                _suite(store), self.keys.id_key, raw_id, self.keys.date_key, raw_date,
            )
            return None
        theme = store.get(THEME_KEY)
        return SelectionRecord(
            selected_id=raw_id,
            selected_date=raw_date,
            theme_id=theme if isinstance(theme, str) else None,
        )

    def select(
        self,
        catalog: CatalogLike,
        store: Optional[KeyValueStore],
        now: Optional[dt.datetime] = None,
    ) -> DailySelection:
        items = list(catalog.items) if isinstance(catalog, Catalog) else list(catalog)
        if not items:
            raise CatalogEmpty("Cannot select from an empty catalog")
        now = now or now_local(self.tz)
        today = local_date(now, self.tz)

        if store is None:
            logger.warning("Shared storage unavailable, showing fallback item %s", items[0].id)
            return DailySelection(items[0], today, fallback=True)

        try:
            record = self.load_record(store)
        except StorageUnavailable as exc:
            logger.warning("Failed to read daily selection, showing fallback item: %s", exc)
            return DailySelection(items[0], today, fallback=True)

        previous_id: Optional[int] = None
        if record is not None:
            previous_id = record.selected_id
            if is_same_day(record.selected_date, now, self.tz):
                for item in items:
                    if item.id == record.selected_id:
                        return DailySelection(item, today)
                logger.warning(
                    "Stored %s=%s is not in the catalog, selecting again",
                    self.keys.id_key, record.selected_id,
                )

        item = self._pick(items, exclude=previous_id)
        self._persist(store, item, now)
        return DailySelection(item, today)

    def get_todays_selection(
        self,
        catalog: CatalogLike,
        store: Optional[KeyValueStore],
        now: Optional[dt.datetime] = None,
    ) -> CatalogItem:
        return self.select(catalog, store, now).item

    def record_displayed_theme(
        self, theme_id: Union[str, AppColor], store: Optional[KeyValueStore]
    ) -> None:
        """Best-effort write of the active theme for the other process to mirror."""
        value = theme_id.value if isinstance(theme_id, AppColor) else str(theme_id)
        if store is None:
            logger.debug("No shared storage, theme %s not recorded", value)
            return
        try:
            store.set(THEME_KEY, value)
            store.synchronize()
        except StorageUnavailable as exc:
            logger.debug("Theme %s not recorded: %s", value, exc)

    def _pick(self, items: Sequence[CatalogItem], exclude: Optional[int]) -> CatalogItem:
        candidates = [item for item in items if item.id != exclude] or list(items)
        return self._rng.choice(candidates)

    def _persist(self, store: KeyValueStore, item: CatalogItem, now: dt.datetime) -> None:
        try:
            store.set_many({
                self.keys.id_key: item.id,
                self.keys.date_key: start_of_day(now, self.tz),
            })
            store.synchronize()
        except StorageUnavailable as exc:
            logger.warning("Selected %s=%s but could not persist it: %s", self.keys.id_key, item.id, exc)
            return
        logger.info("New daily selection %s=%s in %s", self.keys.id_key, item.id, _suite(store))


_default_service = DailySelectionService()


def get_todays_selection(
    catalog: CatalogLike,
    store: Optional[KeyValueStore],
    now: Optional[dt.datetime] = None,
) -> CatalogItem:
    return _default_service.get_todays_selection(catalog, store, now)


def record_displayed_theme(theme_id: Union[str, AppColor], store: Optional[KeyValueStore]) -> None:
    _default_service.record_displayed_theme(theme_id, store)
