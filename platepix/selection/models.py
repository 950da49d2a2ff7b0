# -*- coding: utf-8 -*-
"""Daily selection — Pydantic models."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class SelectionRecord(BaseModel):
    selected_id: int
    selected_date: datetime = Field(..., description="Start of the local calendar day of the selection")
    theme_id: Optional[str] = Field(None, description="Last displayed color theme")


class DailyItemResponse(BaseModel):
    catalog: str
    id: int
    text_key: str
    text: str
    date: str = Field(..., description="YYYY-MM-DD (local)")
    fallback: bool = Field(False, description="True when shared storage was unavailable")
