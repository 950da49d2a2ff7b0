# -*- coding: utf-8 -*-
"""Calendar-day helpers. A day runs from local midnight to local midnight."""

from __future__ import annotations

import datetime as dt
from typing import Optional

from .config import settings


def to_local(moment: dt.datetime, tz: Optional[dt.tzinfo] = None) -> dt.datetime:
    """Return ``moment`` as an aware datetime in ``tz``.

    Naive datetimes are taken to already be local wall-clock time.
    """
    tz = tz or settings.tz
    if moment.tzinfo is None:
        return moment.replace(tzinfo=tz)
    return moment.astimezone(tz)


def local_date(moment: dt.datetime, tz: Optional[dt.tzinfo] = None) -> dt.date:
    return to_local(moment, tz).date()


def start_of_day(moment: dt.datetime, tz: Optional[dt.tzinfo] = None) -> dt.datetime:
    tz = tz or settings.tz
    d = local_date(moment, tz)
    return dt.datetime(d.year, d.month, d.day, tzinfo=tz)


def next_midnight(moment: dt.datetime, tz: Optional[dt.tzinfo] = None) -> dt.datetime:
    tz = tz or settings.tz
    d = local_date(moment, tz) + dt.timedelta(days=1)
    return dt.datetime(d.year, d.month, d.day, tzinfo=tz)


def is_same_day(a: dt.datetime, b: dt.datetime, tz: Optional[dt.tzinfo] = None) -> bool:
    return local_date(a, tz) == local_date(b, tz)


def now_local(tz: Optional[dt.tzinfo] = None) -> dt.datetime:
    return dt.datetime.now(tz or settings.tz)
