# -*- coding: utf-8 -*-
"""
Command-line access to the shared daily selection.

Usage:
    platepix-cli today [--catalog reminders] [--lang ru] [--at 2025-03-01T09:00]
    platepix-cli timeline
    platepix-cli theme [THEME_ID]
    platepix-cli record
"""

from __future__ import annotations

import argparse
import datetime as dt
import json
import sys
from pathlib import Path
from typing import List, Optional

from .calendar_day import now_local
from .catalog import BUNDLED_CATALOGS, load_catalog
from .config import configure_logging, settings
from .errors import StorageUnavailable
from .localization import localized
from .selection.service import MOTIVATION_KEYS, REMINDER_KEYS, DailySelectionService
from .shared_store import try_open_shared_defaults
from .themes import load_theme, parse_theme
from .widget.provider import MotivationWidgetProvider

_KEYS = {"motivations": MOTIVATION_KEYS, "reminders": REMINDER_KEYS}


def _open_store(args: argparse.Namespace):
    data_root = Path(args.data_root) if args.data_root else settings.data_root
    return try_open_shared_defaults(args.suite or settings.app_group, data_root)


def _now(args: argparse.Namespace) -> dt.datetime:
    return getattr(args, "now", None) or now_local()


def cmd_today(args: argparse.Namespace) -> int:
    """Print today's item of a catalog."""
    catalog = load_catalog(args.catalog)
    store = _open_store(args)
    selection = DailySelectionService(_KEYS[args.catalog]).select(catalog, store, _now(args))
    text = localized(selection.item.text_key, catalog.table, args.lang)
    if args.json:
        print(json.dumps({
            "catalog": catalog.name,
            "id": selection.item.id,
            "text_key": selection.item.text_key,
            "text": text,
            "date": selection.day.isoformat(),
            "fallback": selection.fallback,
        }, ensure_ascii=False))
    else:
        print(text)
    return 0


def cmd_timeline(args: argparse.Namespace) -> int:
    """Print the widget timeline as JSON."""
    provider = MotivationWidgetProvider(
        load_catalog("motivations"),
        _open_store(args),
        default_theme=settings.default_theme,
        lang=args.lang,
    )
    print(provider.timeline(_now(args)).model_dump_json(indent=2))
    return 0


def cmd_theme(args: argparse.Namespace) -> int:
    """Show or record the active color theme."""
    store = _open_store(args)
    if args.theme_id:
        try:
            theme = parse_theme(args.theme_id)
        except ValueError as exc:
            print(f"Error: {exc}")
            return 2
        DailySelectionService().record_displayed_theme(theme, store)
    else:
        theme = load_theme(store, settings.default_theme)
    print(f"{theme.value} {theme.hex}")
    return 0


def cmd_record(args: argparse.Namespace) -> int:
    """Show the persisted daily records."""
    store = _open_store(args)
    if store is None:
        print("Error: shared storage unavailable")
        return 1
    for name in BUNDLED_CATALOGS:
        try:
            record = DailySelectionService(_KEYS[name]).load_record(store)
        except StorageUnavailable as exc:
            print(f"Error: {exc}")
            return 1
        print(f"{name}: {record.model_dump_json() if record else 'no record'}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Daily motivation shared between the app and its widget",
    )
    parser.add_argument("--suite", help=f"App-group suite (default: {settings.app_group})")
    parser.add_argument("--data-root", help="Directory holding shared storage")
    parser.add_argument("--log-level", default=None, help="Logging level (default: PLATEPIX_LOG_LEVEL)")

    subparsers = parser.add_subparsers(dest="command", help="Command")

    # today command
    today_parser = subparsers.add_parser("today", help="Show today's item")
    today_parser.add_argument("--catalog", choices=BUNDLED_CATALOGS, default="motivations")
    today_parser.add_argument("--lang", default=None, help="Language code")
    today_parser.add_argument("--at", default=None, help="ISO timestamp to use as now")
    today_parser.add_argument("--json", action="store_true", help="Print JSON")

    # timeline command
    timeline_parser = subparsers.add_parser("timeline", help="Show the widget timeline")
    timeline_parser.add_argument("--lang", default=None, help="Language code")
    timeline_parser.add_argument("--at", default=None, help="ISO timestamp to use as now")

    # theme command
    theme_parser = subparsers.add_parser("theme", help="Show or set the color theme")
    theme_parser.add_argument("theme_id", nargs="?", help="Theme to record, e.g. coolMint")

    # record command
    subparsers.add_parser("record", help="Show persisted daily records")

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    args.now = None
    if getattr(args, "at", None):
        try:
            args.now = dt.datetime.fromisoformat(args.at)
        except ValueError:
            print(f"Error: --at expects an ISO 8601 timestamp, got {args.at!r}")
            return 1

    configure_logging(args.log_level)

    commands = {
        "today": cmd_today,
        "timeline": cmd_timeline,
        "theme": cmd_theme,
        "record": cmd_record,
    }

    return commands[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
