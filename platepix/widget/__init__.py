# -*- coding: utf-8 -*-
"""Motivation-of-the-day widget timeline."""

from .models import WidgetEntry, WidgetTimeline
from .provider import PLACEHOLDER_TEXT, MotivationWidgetProvider

__all__ = [
    'MotivationWidgetProvider',
    'PLACEHOLDER_TEXT',
    'WidgetEntry',
    'WidgetTimeline',
]
