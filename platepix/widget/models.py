# -*- coding: utf-8 -*-
"""Widget — Pydantic models."""

from __future__ import annotations

from datetime import datetime
from typing import List

from pydantic import BaseModel, Field

from ..themes import AppColor


class WidgetEntry(BaseModel):
    date: datetime
    text: str
    theme: AppColor
    color_hex: str = Field(..., description="#RRGGBB of the theme")


class WidgetTimeline(BaseModel):
    entries: List[WidgetEntry]
    refresh_after: datetime = Field(..., description="Next local midnight")
