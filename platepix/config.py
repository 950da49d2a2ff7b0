from __future__ import annotations

import datetime as dt
import logging
import os
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional
from zoneinfo import ZoneInfo

from dateutil import tz as dateutil_tz


@dataclass(frozen=True)
class AppFlavor:
    """One of the two apps built from this code base."""

    name: str
    app_group: str
    default_theme: str
    display_name: str


FLAVORS: Dict[str, AppFlavor] = {
    "platepix": AppFlavor(
        name="platepix",
        app_group="group.com.platepix.PlatePix",
        default_theme="lavenderRaf",
        display_name="PlatePix",
    ),
    "myplates": AppFlavor(
        name="myplates",
        app_group="group.com.platepix.MyPlates",
        default_theme="watermelonPink",
        display_name="MyPlates",
    ),
}

_OFFSET_RE = re.compile(r"^([+-])(\d{2}):?(\d{2})$")


def resolve_tz(name: Optional[str]) -> dt.tzinfo:
    """Resolve a timezone name into a tzinfo.

    Accepts "local" (or empty), "UTC", IANA names and fixed offsets such as
    "+02:00". Raises ValueError for anything else.

    "local" follows the system zone per moment, so its offset changes with
    daylight saving time.
    """
    s = (name or "").strip()
    low = s.lower()
    if not s or low in {"local", "system"}:
        return dateutil_tz.tzlocal()
    if low in {"utc", "z", "gmt"}:
        return dt.timezone.utc

    m = _OFFSET_RE.match(s)
    if m:
        sign_s, hh_s, mm_s = m.groups()
        hh, mm = int(hh_s), int(mm_s)
        if hh > 23 or mm > 59:
            raise ValueError(f"Invalid timezone offset: {s!r}")
        sign = 1 if sign_s == "+" else -1
        return dt.timezone(dt.timedelta(minutes=sign * (hh * 60 + mm)))

    try:
        return ZoneInfo(s)
    except Exception as ex:
        raise ValueError(f"Invalid timezone identifier: {s!r}") from ex


class Settings:
    """Centralized configuration for the daily motivation backend."""

    def __init__(self) -> None:
        base_dir = Path(__file__).resolve().parent
        repo_root = base_dir.parent

        self.resources_dir: Path = base_dir / "resources"
        self.data_root: Path = Path(
            os.environ.get("PLATEPIX_DATA_ROOT") or (repo_root / "data")
        ).expanduser()

        flavor_name = (os.environ.get("PLATEPIX_FLAVOR") or "platepix").strip().lower()
        if flavor_name not in FLAVORS:
            raise ValueError(
                f"Unknown PLATEPIX_FLAVOR {flavor_name!r}; expected one of {sorted(FLAVORS)}"
            )
        self.flavor: AppFlavor = FLAVORS[flavor_name]
        self.app_group: str = os.environ.get("PLATEPIX_APP_GROUP") or self.flavor.app_group
        self.default_theme: str = (
            os.environ.get("PLATEPIX_DEFAULT_THEME") or self.flavor.default_theme
        )

        self.timezone_name: str = os.environ.get("PLATEPIX_TIMEZONE", "local")
        self.tz: dt.tzinfo = resolve_tz(self.timezone_name)
        self.default_lang: str = os.environ.get("PLATEPIX_LANG", "en")

        self.log_level: str = (os.environ.get("PLATEPIX_LOG_LEVEL") or "INFO").upper()
        self.host: str = os.environ.get("PLATEPIX_HOST") or "127.0.0.1"
        self.port: int = int(os.environ.get("PLATEPIX_PORT") or "8000")

        cors = os.environ.get("PLATEPIX_CORS_ORIGINS", "*")
        if cors.strip() == "*":
            self.cors_origins: List[str] = ["*"]
        else:
            self.cors_origins = [
                origin.strip() for origin in cors.split(",") if origin.strip()
            ]


def configure_logging(level: Optional[str] = None) -> None:
    logging.basicConfig(
        level=(level or settings.log_level).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


settings = Settings()
