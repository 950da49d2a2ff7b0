# -*- coding: utf-8 -*-
"""Error types shared across the package."""

from __future__ import annotations


class PlatePixError(Exception):
    """Base class for all package errors."""


class StorageUnavailable(PlatePixError):
    """The shared app-group namespace cannot be opened, read or written."""

    def __init__(self, suite_name: str, reason: str = "") -> None:
        self.suite_name = suite_name
        self.reason = reason
        msg = f"Shared storage {suite_name!r} unavailable"
        if reason:
            msg += f": {reason}"
        super().__init__(msg)


class CatalogError(PlatePixError):
    """A bundled catalog is missing or malformed."""


class CatalogEmpty(CatalogError):
    """A bundled catalog has no items."""
