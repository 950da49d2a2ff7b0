# -*- coding: utf-8 -*-
"""Catalog — Pydantic models."""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict, Field


class CatalogItem(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int = Field(..., description="Stable id, unique within its catalog")
    text_key: str = Field(..., min_length=1, description="Localization key")


class Catalog(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="motivations | reminders")
    table: str = Field(..., description="Localization table name")
    items: List[CatalogItem] = Field(default_factory=list)
