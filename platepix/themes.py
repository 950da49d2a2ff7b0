# -*- coding: utf-8 -*-
"""App color themes shared between the app and the widget."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Optional, Union

from .errors import StorageUnavailable
from .shared_store import KeyValueStore

logger = logging.getLogger(__name__)

THEME_KEY = "selectedColor"


class AppColor(str, Enum):
    RED_BERRY = "redBerry"
    WATERMELON_PINK = "watermelonPink"
    ORANGE_FRUIT = "orangeFruit"
    SUNNY_YELLOW = "sunnyYellow"
    APPLE_GREEN = "appleGreen"
    COOL_MINT = "coolMint"
    BLUE_SKY = "blueSky"
    APPLE_BLUE = "appleBlue"
    COLD_BLUE = "coldBlue"
    LAVENDER_RAF = "lavenderRaf"
    GIRLS_PINK = "girlsPink"
    BRIGHT_PINK = "brightPink"

    @property
    def asset_name(self) -> str:
        """Name of the color set in the app asset catalog."""
        return self.value[0].upper() + self.value[1:]

    @property
    def hex(self) -> str:
        return _HEX[self]


_HEX = {
    AppColor.RED_BERRY: "#C0243B",
    AppColor.WATERMELON_PINK: "#F25C78",
    AppColor.ORANGE_FRUIT: "#F7903A",
    AppColor.SUNNY_YELLOW: "#F5C400",
    AppColor.APPLE_GREEN: "#6CBF3F",
    AppColor.COOL_MINT: "#4CC9A6",
    AppColor.BLUE_SKY: "#5AB8F0",
    AppColor.APPLE_BLUE: "#007AFF",
    AppColor.COLD_BLUE: "#3D5A98",
    AppColor.LAVENDER_RAF: "#9F8AD8",
    AppColor.GIRLS_PINK: "#F7A1C4",
    AppColor.BRIGHT_PINK: "#E8308C",
}


def parse_theme(value: Union[str, AppColor]) -> AppColor:
    """Strict parse; raises ValueError for unknown theme ids."""
    if isinstance(value, AppColor):
        return value
    try:
        return AppColor(value)
    except ValueError:
        raise ValueError(f"Unknown theme id: {value!r}") from None


def load_theme(store: Optional[KeyValueStore], default: Union[str, AppColor]) -> AppColor:
    """Theme last recorded in the shared namespace, or ``default``."""
    fallback = parse_theme(default)
    if store is None:
        return fallback
    try:
        raw = store.get(THEME_KEY)
    except StorageUnavailable as exc:
        logger.warning("Theme lookup failed, using %s: %s", fallback.value, exc)
        return fallback
    if not isinstance(raw, str):
        return fallback
    try:
        return AppColor(raw)
    except ValueError:
        logger.debug("Ignoring unknown stored theme %r", raw)
        return fallback
