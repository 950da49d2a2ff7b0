# -*- coding: utf-8 -*-
"""Preferences — Pydantic models.

Field aliases are the shared-namespace keys the apps use.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

_TIME_PATTERN = r"^([01]\d|2[0-3]):[0-5]\d$"


class Preferences(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    show_meal_time: bool = Field(False, alias="showMealTime")
    show_quality: bool = Field(False, alias="showQuality")
    show_tags: bool = Field(False, alias="showTags")
    show_notes: bool = Field(False, alias="showNotes")
    reminders_enabled: bool = Field(False, alias="remindersEnabled")
    reminder_time: str = Field("20:00", alias="reminderTime", pattern=_TIME_PATTERN, description="HH:MM")


class PreferencesUpdate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    show_meal_time: Optional[bool] = Field(None, alias="showMealTime")
    show_quality: Optional[bool] = Field(None, alias="showQuality")
    show_tags: Optional[bool] = Field(None, alias="showTags")
    show_notes: Optional[bool] = Field(None, alias="showNotes")
    reminders_enabled: Optional[bool] = Field(None, alias="remindersEnabled")
    reminder_time: Optional[str] = Field(None, alias="reminderTime", pattern=_TIME_PATTERN)


class ThemeUpdateRequest(BaseModel):
    theme_id: str = Field(..., min_length=1)


class ThemeResponse(BaseModel):
    theme_id: str
    asset_name: str
    color_hex: str
    is_default: bool
