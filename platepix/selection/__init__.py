# -*- coding: utf-8 -*-
"""Daily selection of one catalog item, shared between app and widget."""

from .models import DailyItemResponse, SelectionRecord
from .service import (
    MOTIVATION_KEYS,
    REMINDER_KEYS,
    DailySelectionService,
    SelectionKeys,
    get_todays_selection,
    record_displayed_theme,
)

__all__ = [
    'DailyItemResponse',
    'DailySelectionService',
    'MOTIVATION_KEYS',
    'REMINDER_KEYS',
    'SelectionKeys',
    'SelectionRecord',
    'get_todays_selection',
    'record_displayed_theme',
]
